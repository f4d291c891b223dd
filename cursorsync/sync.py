"""Locating the remote source folder and copying entries into ``.cursor/``."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable
from enum import Enum, auto

from cursorsync import fsutil, prompts
from cursorsync.errors import CursorSyncError
from cursorsync.fsutil import Entry
from cursorsync.prompts import OverwriteDecision


class _Mode(Enum):
    PROMPT = auto()
    FORCE_ALL = auto()
    SKIP_ALL = auto()


def resolve_or_detect_cursor_root(repo_root: str | os.PathLike, folder: str) -> str:
    """Use ``folder`` strictly when given, otherwise auto-detect the source root."""
    if folder:
        return fsutil.resolve_cursor_root(repo_root, folder)
    root = fsutil.detect_cursor_root(repo_root)
    if root is None:
        raise CursorSyncError(
            "remote repo has no .cursor/, cursor/, or root-level rules/skills/commands "
            "directories; pass --folder <path> to point at the directory containing them"
        )
    return root


def _report(action: str, rel: str) -> None:
    sys.stderr.write(f"  {action:<6} {rel}\n")


def copy_entries(
    src_cursor_root: str | os.PathLike,
    dst_cursor_root: str | os.PathLike,
    entries: Iterable[Entry],
    assume_yes: bool = False,
) -> list[str]:
    """Copy ``entries`` across, asking on conflicts unless ``assume_yes``.

    Returns the paths (relative to ``.cursor/``) that were written, kept or
    found identical, for recording in the manifest.
    """
    written: list[str] = []
    mode = _Mode.FORCE_ALL if assume_yes else _Mode.PROMPT

    for entry in entries:
        for rel in fsutil.collect_files(src_cursor_root, entry):
            src = os.path.join(src_cursor_root, rel)
            dst = os.path.join(dst_cursor_root, rel)

            if fsutil.exists(dst):
                if fsutil.files_equal(src, dst):
                    written.append(rel)
                    continue
                if mode is _Mode.PROMPT:
                    decision = prompts.confirm_overwrite(rel)
                    if decision is OverwriteDecision.SKIP_ALL:
                        mode = _Mode.SKIP_ALL
                    elif decision is OverwriteDecision.ALL:
                        mode = _Mode.FORCE_ALL
                    elif decision is OverwriteDecision.NO:
                        _report("skip", rel)
                        written.append(rel)
                        continue
                if mode is _Mode.SKIP_ALL:
                    _report("skip", rel)
                    written.append(rel)
                    continue

            try:
                fsutil.copy_file(src, dst)
            except OSError as exc:
                raise CursorSyncError(f"copy {rel}: {exc}") from exc
            _report("write", rel)
            written.append(rel)

    return written