import os
import shutil
import subprocess
from unittest import mock

import pytest

from cursorsync import git
from cursorsync.errors import CursorSyncError


def test_missing_git_raises():
    with mock.patch("cursorsync.git.shutil.which", return_value=None):
        with pytest.raises(CursorSyncError, match="`git` not found on PATH"):
            git.shallow_clone("https://example.com/repo.git", "main")


def _fake_run(returncode, calls):
    def run(args, **kwargs):
        calls.append(list(args))
        return subprocess.CompletedProcess(args, returncode)

    return run


def test_successful_clone_passes_branch_and_returns_dir():
    calls = []
    with mock.patch("cursorsync.git.shutil.which", return_value="/usr/bin/git"), mock.patch(
        "cursorsync.git.subprocess.run", side_effect=_fake_run(0, calls)
    ):
        tmp = git.shallow_clone("https://example.com/repo.git", "dev")
    try:
        assert os.path.isdir(tmp)
        assert calls == [
            ["git", "clone", "--depth", "1", "--branch", "dev", "https://example.com/repo.git", tmp]
        ]
        assert os.path.basename(tmp).startswith("cursor-sync-")
    finally:
        shutil.rmtree(tmp, ignore_errors=True)


def test_empty_branch_is_omitted():
    calls = []
    with mock.patch("cursorsync.git.shutil.which", return_value="/usr/bin/git"), mock.patch(
        "cursorsync.git.subprocess.run", side_effect=_fake_run(0, calls)
    ):
        tmp = git.shallow_clone("git@example.com:repo.git", "")
    try:
        assert "--branch" not in calls[0]
        assert calls[0][-2:] == ["git@example.com:repo.git", tmp]
    finally:
        shutil.rmtree(tmp, ignore_errors=True)


def test_failed_clone_raises_and_removes_temp_dir():
    calls = []
    with mock.patch("cursorsync.git.shutil.which", return_value="/usr/bin/git"), mock.patch(
        "cursorsync.git.subprocess.run", side_effect=_fake_run(128, calls)
    ):
        with pytest.raises(CursorSyncError, match="git clone failed"):
            git.shallow_clone("https://example.com/repo.git", "main")
    tmp = calls[0][-1]
    assert not os.path.exists(tmp)