"""The ``pull`` command: re-sync the entries already tracked in the manifest."""

from __future__ import annotations

import os
import shutil
import sys
from collections.abc import Iterable

from cursorsync import config, fsutil, git
from cursorsync.errors import CursorSyncError
from cursorsync.fsutil import Entry
from cursorsync.sync import copy_entries, resolve_or_detect_cursor_root


def top_level_entries_from_manifest(entries: Iterable[str]) -> set[str]:
    """Derive ``group/name`` keys (e.g. ``skills/deslop``) from manifest file paths."""
    keys: set[str] = set()
    for entry in entries:
        parts = entry.replace(os.sep, "/").split("/", 2)
        if len(parts) < 2:
            continue
        keys.add(f"{parts[0]}/{parts[1]}")
    return keys


def _entry_key(entry: Entry) -> str:
    return f"{entry.group}/{entry.name}"


def run_pull(
    project_dir: str | os.PathLike = ".",
    assume_yes: bool = False,
    folder: str = "",
) -> list[str]:
    """Pull the latest versions of the tracked entries into ``project_dir/.cursor``.

    ``folder`` overrides the remote source folder recorded in the config and
    is written back when it differs. Returns the files recorded in the new
    manifest (relative to ``.cursor/``).
    """
    project = os.fspath(project_dir)
    cfg = config.load(project)
    manifest = config.load_manifest(project)
    if not manifest.entries:
        raise CursorSyncError(
            "manifest is empty: nothing to pull. Run `cursor-sync clone` first."
        )

    tracked = top_level_entries_from_manifest(manifest.entries)
    if not tracked:
        raise CursorSyncError("manifest contains no recognizable entries")

    source_folder = folder or cfg.folder

    sys.stderr.write(f"Pulling {cfg.remote} (branch {cfg.branch})...\n")
    tmp = git.shallow_clone(cfg.remote, cfg.branch)
    try:
        src_cursor = resolve_or_detect_cursor_root(tmp, source_folder)

        if source_folder != cfg.folder:
            cfg.folder = source_folder
            config.save(project, cfg)

        remote_by_key = {_entry_key(e): e for e in fsutil.list_cursor_entries(src_cursor)}
        to_sync: list[Entry] = []
        for key in sorted(tracked):
            found = remote_by_key.get(key)
            if found is None:
                sys.stderr.write(f"  warn   {key} no longer exists on remote (kept locally)\n")
            else:
                to_sync.append(found)

        if not to_sync:
            sys.stderr.write("Nothing to pull.\n")
            return []

        dst_cursor = os.path.join(project, config.CURSOR_DIR)
        written = copy_entries(src_cursor, dst_cursor, to_sync, assume_yes)
    finally:
        shutil.rmtree(tmp, ignore_errors=True)

    config.save_manifest(project, config.Manifest(entries=written))
    sys.stderr.write(f"\nDone. Synced {len(written)} file(s).\n")
    return written