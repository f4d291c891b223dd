"""Reading and writing ``.cursor-sync/config.yaml`` and ``manifest.yaml``."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any

import yaml

from cursorsync.errors import CursorSyncError

DIR = ".cursor-sync"
CURSOR_DIR = ".cursor"

CONFIG_FILE = "config.yaml"
MANIFEST_FILE = "manifest.yaml"
DEFAULT_BRANCH = "master"


@dataclass
class Config:
    """Contents of ``.cursor-sync/config.yaml``."""

    remote: str = ""
    branch: str = ""
    folder: str = ""


@dataclass
class Manifest:
    """Contents of ``.cursor-sync/manifest.yaml``.

    Entries are paths relative to ``.cursor/``, e.g. ``rules/foo.mdc``.
    """

    entries: list[str] = field(default_factory=list)


def config_path(project_dir: str | os.PathLike) -> str:
    """Path of the config file under ``project_dir``."""
    return os.path.join(project_dir, DIR, CONFIG_FILE)


def manifest_path(project_dir: str | os.PathLike) -> str:
    """Path of the manifest file under ``project_dir``."""
    return os.path.join(project_dir, DIR, MANIFEST_FILE)


def _parse_mapping(path: str, text: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise CursorSyncError(f"parse {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise CursorSyncError(f"parse {path}: expected a mapping at the top level")
    return data


def _as_str(value: Any) -> str:
    return "" if value is None else str(value)


def load(project_dir: str | os.PathLike) -> Config:
    """Read the project's config; the branch defaults to ``master``."""
    path = config_path(project_dir)
    try:
        with open(path, encoding="utf-8") as fh:
            text = fh.read()
    except FileNotFoundError as exc:
        raise CursorSyncError(
            f"no {os.path.join(DIR, CONFIG_FILE)} found in {project_dir}: "
            "run `cursor-sync clone` first"
        ) from exc
    data = _parse_mapping(path, text)
    config = Config(
        remote=_as_str(data.get("remote")),
        branch=_as_str(data.get("branch")),
        folder=_as_str(data.get("folder")),
    )
    if not config.branch:
        config.branch = DEFAULT_BRANCH
    return config


def save(project_dir: str | os.PathLike, config: Config) -> None:
    """Write the project's config, creating ``.cursor-sync/`` if needed."""
    os.makedirs(os.path.join(project_dir, DIR), exist_ok=True)
    data = {"remote": config.remote, "branch": config.branch, "folder": config.folder}
    with open(config_path(project_dir), "w", encoding="utf-8") as fh:
        yaml.safe_dump(data, fh, sort_keys=False, default_flow_style=False)


def load_manifest(project_dir: str | os.PathLike) -> Manifest:
    """Read the manifest; a missing file yields an empty manifest."""
    path = manifest_path(project_dir)
    try:
        with open(path, encoding="utf-8") as fh:
            text = fh.read()
    except FileNotFoundError:
        return Manifest()
    data = _parse_mapping(path, text)
    entries = data.get("entries") or []
    if not isinstance(entries, list):
        raise CursorSyncError(f"parse {path}: entries must be a list")
    return Manifest(entries=[_as_str(e) for e in entries])


def save_manifest(project_dir: str | os.PathLike, manifest: Manifest) -> None:
    """Write the manifest with entries deduplicated and sorted."""
    os.makedirs(os.path.join(project_dir, DIR), exist_ok=True)
    entries = sorted(set(manifest.entries))
    with open(manifest_path(project_dir), "w", encoding="utf-8") as fh:
        yaml.safe_dump({"entries": entries}, fh, sort_keys=False, default_flow_style=False)