import os
import subprocess
from pathlib import Path

import pytest

from cursorsync import config
from cursorsync.errors import CursorSyncError
from cursorsync.pull import run_pull, top_level_entries_from_manifest


def _git(repo: Path, *args: str) -> None:
    subprocess.run(
        [
            "git",
            "-c", "user.name=tester",
            "-c", "user.email=tester@example.com",
            "-c", "commit.gpgsign=false",
            *args,
        ],
        cwd=repo,
        check=True,
        capture_output=True,
    )


def _make_remote(tmp_path: Path, files: dict[str, str]) -> str:
    repo = tmp_path / "remote"
    repo.mkdir()
    _git(repo, "init")
    _git(repo, "symbolic-ref", "HEAD", "refs/heads/main")
    for rel, content in files.items():
        path = repo / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    _git(repo, "add", "-A")
    _git(repo, "commit", "-m", "initial")
    return repo.as_uri()


def _make_project(tmp_path: Path, remote: str, entries: list[str], folder: str = "") -> Path:
    project = tmp_path / "project"
    project.mkdir()
    config.save(project, config.Config(remote=remote, branch="main", folder=folder))
    config.save_manifest(project, config.Manifest(entries=entries))
    return project


def test_top_level_entries_from_manifest_groups_files():
    keys = top_level_entries_from_manifest(
        ["rules/a.mdc", "skills/deslop/SKILL.md", "skills/deslop/ref/x.md", "stray"]
    )
    assert keys == {"rules/a.mdc", "skills/deslop"}


def test_top_level_entries_from_manifest_empty():
    assert top_level_entries_from_manifest([]) == set()


def test_run_pull_without_config_fails(tmp_path):
    with pytest.raises(CursorSyncError, match="run `cursor-sync clone` first"):
        run_pull(tmp_path)


def test_run_pull_with_empty_manifest_fails(tmp_path):
    config.save(tmp_path, config.Config(remote="file:///nowhere.git", branch="main"))
    with pytest.raises(CursorSyncError, match="manifest is empty"):
        run_pull(tmp_path)


def test_run_pull_with_unrecognizable_manifest_fails(tmp_path):
    config.save(tmp_path, config.Config(remote="file:///nowhere.git", branch="main"))
    config.save_manifest(tmp_path, config.Manifest(entries=["toplevel"]))
    with pytest.raises(CursorSyncError, match="no recognizable entries"):
        run_pull(tmp_path)


def test_run_pull_overwrites_tracked_file_with_yes(tmp_path):
    remote = _make_remote(
        tmp_path, {".cursor/rules/a.mdc": "fresh", ".cursor/rules/b.mdc": "other"}
    )
    project = _make_project(tmp_path, remote, ["rules/a.mdc"])
    local = project / ".cursor" / "rules" / "a.mdc"
    local.parent.mkdir(parents=True)
    local.write_text("stale", encoding="utf-8")

    written = run_pull(project, assume_yes=True)

    assert written == [os.path.join("rules", "a.mdc")]
    assert local.read_text(encoding="utf-8") == "fresh"
    assert not (project / ".cursor" / "rules" / "b.mdc").exists()
    assert config.load_manifest(project).entries == [os.path.join("rules", "a.mdc")]


def test_run_pull_syncs_skill_folder(tmp_path):
    remote = _make_remote(tmp_path, {".cursor/skills/deslop/SKILL.md": "skill body"})
    project = _make_project(tmp_path, remote, ["skills/deslop/SKILL.md"])

    written = run_pull(project, assume_yes=True)

    assert written == [os.path.join("skills", "deslop", "SKILL.md")]
    target = project / ".cursor" / "skills" / "deslop" / "SKILL.md"
    assert target.read_text(encoding="utf-8") == "skill body"


def test_run_pull_warns_about_entries_missing_on_remote(tmp_path, capsys):
    remote = _make_remote(tmp_path, {".cursor/rules/a.mdc": "fresh"})
    project = _make_project(tmp_path, remote, ["rules/a.mdc", "rules/gone.mdc"])

    written = run_pull(project, assume_yes=True)

    err = capsys.readouterr().err
    assert "rules/gone.mdc no longer exists on remote (kept locally)" in err
    assert written == [os.path.join("rules", "a.mdc")]
    assert config.load_manifest(project).entries == written


def test_run_pull_nothing_to_pull(tmp_path, capsys):
    remote = _make_remote(tmp_path, {".cursor/rules/a.mdc": "fresh"})
    project = _make_project(tmp_path, remote, ["rules/gone.mdc"])

    assert run_pull(project, assume_yes=True) == []
    assert "Nothing to pull." in capsys.readouterr().err
    assert config.load_manifest(project).entries == ["rules/gone.mdc"]


def test_run_pull_folder_override_is_saved(tmp_path):
    remote = _make_remote(tmp_path, {"configs/cursor/rules/a.mdc": "fresh"})
    project = _make_project(tmp_path, remote, ["rules/a.mdc"])

    run_pull(project, assume_yes=True, folder="configs/cursor")

    assert config.load(project).folder == "configs/cursor"
    assert (project / ".cursor" / "rules" / "a.mdc").read_text(encoding="utf-8") == "fresh"


def test_run_pull_uses_folder_recorded_in_config(tmp_path):
    remote = _make_remote(
        tmp_path,
        {"configs/cursor/rules/a.mdc": "from folder", ".cursor/rules/a.mdc": "from default"},
    )
    project = _make_project(tmp_path, remote, ["rules/a.mdc"], folder="configs/cursor")

    run_pull(project, assume_yes=True)

    assert (project / ".cursor" / "rules" / "a.mdc").read_text(encoding="utf-8") == "from folder"