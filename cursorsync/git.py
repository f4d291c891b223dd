"""Shallow cloning of a remote repository with the ``git`` command."""

from __future__ import annotations

import shutil
import subprocess
import sys
import tempfile

from cursorsync.errors import CursorSyncError


def _stderr_target():
    try:
        return sys.stderr.fileno()
    except (AttributeError, OSError, ValueError):
        return None


def shallow_clone(url: str, branch: str) -> str:
    """Clone ``url`` at depth 1 into a fresh temp directory and return its path.

    The caller removes the directory when done.
    """
    if shutil.which("git") is None:
        raise CursorSyncError("`git` not found on PATH: install Git to use cursor-sync")

    tmp = tempfile.mkdtemp(prefix="cursor-sync-")
    args = ["git", "clone", "--depth", "1"]
    if branch:
        args += ["--branch", branch]
    args += [url, tmp]

    target = _stderr_target()
    try:
        result = subprocess.run(args, stdout=target, stderr=target, check=False)
    except OSError as exc:
        shutil.rmtree(tmp, ignore_errors=True)
        raise CursorSyncError(f"git clone failed: {exc}") from exc
    if result.returncode != 0:
        shutil.rmtree(tmp, ignore_errors=True)
        raise CursorSyncError(f"git clone failed: exit status {result.returncode}")
    return tmp