"""Filesystem helpers for discovering and copying ``.cursor`` entries."""

from __future__ import annotations

import hashlib
import os
import shutil
from collections.abc import Iterator
from dataclasses import dataclass

from cursorsync.errors import CursorSyncError

CURSOR_SUBDIRS = ("rules", "skills", "commands")

# Probed in this order; the empty string means the repo root itself.
CURSOR_ROOT_CANDIDATES = (".cursor", "cursor", "")

_TMP_SUFFIX = ".tmp-cursor-sync"


def _join(base: str | os.PathLike, part: str) -> str:
    return os.path.normpath(os.path.join(base, part)) if part else os.path.normpath(base)


def exists(path: str | os.PathLike) -> bool:
    """Whether ``path`` exists (file or directory)."""
    try:
        os.stat(path)
    except OSError:
        return False
    return True


def _has_subdir(root: str) -> bool:
    return any(exists(os.path.join(root, sub)) for sub in CURSOR_SUBDIRS)


def detect_cursor_root(repo_root: str | os.PathLike) -> str | None:
    """Find the directory in ``repo_root`` holding rules/skills/commands, or None."""
    for candidate in CURSOR_ROOT_CANDIDATES:
        root = _join(repo_root, candidate)
        if exists(root) and _has_subdir(root):
            return root
    return None


def resolve_cursor_root(repo_root: str | os.PathLike, folder: str) -> str:
    """Return ``repo_root/folder``, checking it holds rules/skills/commands."""
    root = _join(repo_root, folder)
    if not exists(root):
        raise CursorSyncError(f'folder "{folder}" not found in remote repo')
    if not _has_subdir(root):
        raise CursorSyncError(f'folder "{folder}" has no rules/, skills/, or commands/ subdirectory')
    return root


@dataclass(frozen=True)
class Entry:
    """A top-level item under ``.cursor/<group>/``: a file or a folder."""

    group: str
    name: str
    is_dir: bool = False

    def rel_path(self) -> str:
        """Path relative to ``.cursor/``, e.g. ``rules/foo.mdc``."""
        return os.path.join(self.group, self.name)


def list_cursor_entries(cursor_root: str | os.PathLike) -> list[Entry]:
    """List top-level entries under each group; missing groups are skipped."""
    out: list[Entry] = []
    for group in CURSOR_SUBDIRS:
        directory = os.path.join(cursor_root, group)
        try:
            with os.scandir(directory) as it:
                items = sorted(it, key=lambda d: d.name)
        except FileNotFoundError:
            continue
        except OSError as exc:
            raise CursorSyncError(f"read {directory}: {exc}") from exc
        out.extend(Entry(group, item.name, item.is_dir(follow_symlinks=False)) for item in items)
    return out


def _walk_files(directory: str) -> Iterator[str]:
    with os.scandir(directory) as it:
        items = sorted(it, key=lambda d: d.name)
    for item in items:
        if item.is_dir(follow_symlinks=False):
            yield from _walk_files(item.path)
        else:
            yield item.path


def collect_files(cursor_root: str | os.PathLike, entry: Entry) -> list[str]:
    """Files of ``entry`` as paths relative to ``cursor_root``."""
    root = os.path.join(cursor_root, entry.rel_path())
    if not os.path.isdir(os.stat(root) and root):
        return [entry.rel_path()]
    return [os.path.relpath(path, cursor_root) for path in _walk_files(root)]


def copy_file(src: str | os.PathLike, dst: str | os.PathLike) -> None:
    """Copy ``src`` over ``dst`` via a temporary file, creating parents."""
    os.makedirs(os.path.dirname(os.path.abspath(dst)), exist_ok=True)
    tmp = f"{os.fspath(dst)}{_TMP_SUFFIX}"
    with open(src, "rb") as fin:
        try:
            with open(tmp, "wb") as fout:
                shutil.copyfileobj(fin, fout)
        except BaseException:
            try:
                os.remove(tmp)
            except OSError:
                pass
            raise
    os.replace(tmp, dst)


def _hash_file(path: str | os.PathLike) -> bytes:
    digest = hashlib.sha256()
    with open(path, "rb") as fh:
        for chunk in iter(lambda: fh.read(65536), b""):
            digest.update(chunk)
    return digest.digest()


def files_equal(a: str | os.PathLike, b: str | os.PathLike) -> bool:
    """Whether two files have the same SHA-256; False if either is missing."""
    try:
        return _hash_file(a) == _hash_file(b)
    except FileNotFoundError:
        return False