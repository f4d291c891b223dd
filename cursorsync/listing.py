"""The ``list`` command: show local entries tagged as remote or local."""

from __future__ import annotations

import os
import sys
from itertools import groupby
from operator import attrgetter

from cursorsync import config, fsutil
from cursorsync.errors import CursorSyncError
from cursorsync.pull import top_level_entries_from_manifest

_EMPTY_MESSAGE = "(no entries under .cursor/)"


def format_listing(project_dir: str | os.PathLike = ".") -> str:
    """Render the entries under ``project_dir/.cursor`` grouped by kind.

    Entries recorded in the manifest are tagged ``[remote]``, the others
    ``[local]``.
    """
    project = os.fspath(project_dir)
    cursor_root = os.path.join(project, config.CURSOR_DIR)
    if not fsutil.exists(cursor_root):
        raise CursorSyncError(f"no {config.CURSOR_DIR}/ directory in {project}")

    tracked = top_level_entries_from_manifest(config.load_manifest(project).entries)
    entries = fsutil.list_cursor_entries(cursor_root)
    if not entries:
        return f"{_EMPTY_MESSAGE}\n"

    lines: list[str] = []
    for group, items in groupby(entries, key=attrgetter("group")):
        lines.append(f"\n{group}/")
        for entry in items:
            tag = "[remote]" if f"{entry.group}/{entry.name}" in tracked else "[local]"
            suffix = "/" if entry.is_dir else ""
            lines.append(f"  {tag:<9} {entry.name}{suffix}")
    return "\n".join(lines) + "\n"


def run_list(project_dir: str | os.PathLike = ".") -> None:
    """Print the listing for ``project_dir`` to standard output."""
    sys.stdout.write(format_listing(project_dir))