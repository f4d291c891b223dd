"""The ``config`` command: read or change fields of ``.cursor-sync/config.yaml``."""

from __future__ import annotations

import os
import sys

from cursorsync.config import Config, load, save
from cursorsync.errors import CursorSyncError

FIELDS = ("remote", "branch", "folder")


def _check_field(field: str) -> None:
    if field not in FIELDS:
        raise CursorSyncError(
            f'unknown field "{field}" (supported: {", ".join(FIELDS)})'
        )


def get_field(config: Config, field: str) -> str:
    """Value of ``field`` in ``config``."""
    _check_field(field)
    return getattr(config, field)


def set_field(config: Config, field: str, value: str) -> None:
    """Set ``field`` of ``config`` to ``value``."""
    _check_field(field)
    setattr(config, field, value)


def show_field(project_dir: str | os.PathLike, field: str) -> str:
    """Value of ``field`` in the project's saved config."""
    return get_field(load(project_dir), field)


def update_field(project_dir: str | os.PathLike, field: str, value: str) -> None:
    """Change ``field`` in the project's saved config and write it back."""
    cfg = load(project_dir)
    set_field(cfg, field, value)
    save(project_dir, cfg)
    sys.stderr.write(f"Updated {field} = {value}\n")