"""The ``clone`` command: import selected entries from a remote repo."""

from __future__ import annotations

import os
import shutil
import sys

from cursorsync import config, fsutil, git, prompts
from cursorsync.errors import CursorSyncError
from cursorsync.sync import copy_entries, resolve_or_detect_cursor_root

_URL_PREFIXES = ("http://", "https://", "ssh://", "git://", "file://", "git@")
_FALLBACK_BRANCHES = ("main", "master")


def looks_like_repo_url(s: str) -> bool:
    """Whether ``s`` has one of the URL forms git accepts."""
    return s.startswith(_URL_PREFIXES) or s.endswith(".git")


def clone_with_branch_fallback(repo_url: str, branch: str) -> tuple[str, str]:
    """Shallow-clone ``repo_url``; without a branch try ``main`` then ``master``.

    Returns the temp directory and the branch that was cloned.
    """
    if branch:
        sys.stderr.write(f"Cloning {repo_url} (branch {branch})...\n")
        return git.shallow_clone(repo_url, branch), branch

    for index, candidate in enumerate(_FALLBACK_BRANCHES):
        sys.stderr.write(f"Cloning {repo_url} (branch {candidate})...\n")
        try:
            return git.shallow_clone(repo_url, candidate), candidate
        except CursorSyncError:
            if index + 1 < len(_FALLBACK_BRANCHES):
                sys.stderr.write(
                    f"branch {candidate} not found, trying {_FALLBACK_BRANCHES[index + 1]}...\n"
                )
    raise CursorSyncError(
        "could not find branch main or master on remote; "
        "pass --branch <name> to use a different one"
    )


def run_clone(
    repo_url: str,
    target_dir: str | os.PathLike = ".",
    select_all: bool = False,
    branch: str = "",
    folder: str = "",
) -> list[str]:
    """Clone the remote's entries into ``target_dir/.cursor`` and record them.

    Returns the files written (relative to ``.cursor/``); empty when the user
    selected nothing.
    """
    if not looks_like_repo_url(repo_url):
        raise CursorSyncError(f'first argument must be a repo URL (got "{repo_url}")')

    abs_target = os.path.abspath(target_dir)
    try:
        os.makedirs(abs_target, exist_ok=True)
    except OSError as exc:
        raise CursorSyncError(f"create target dir: {exc}") from exc

    tmp, used_branch = clone_with_branch_fallback(repo_url, branch)
    try:
        src_cursor = resolve_or_detect_cursor_root(tmp, folder)
        entries = fsutil.list_cursor_entries(src_cursor)
        if not entries:
            raise CursorSyncError("remote has no rules/skills/commands to sync")

        if select_all:
            selected = entries
        else:
            selected = prompts.select_entries(entries)
            if not selected:
                sys.stderr.write("Nothing selected; aborting.\n")
                return []

        dst_cursor = os.path.join(abs_target, config.CURSOR_DIR)
        written = copy_entries(src_cursor, dst_cursor, selected, False)
    finally:
        shutil.rmtree(tmp, ignore_errors=True)

    config.save(abs_target, config.Config(remote=repo_url, branch=used_branch, folder=folder))
    config.save_manifest(abs_target, config.Manifest(entries=written))

    sys.stderr.write(f"\nDone. Wrote {len(written)} file(s) to {dst_cursor}\n")
    return written