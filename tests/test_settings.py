import pytest

from cursorsync import config
from cursorsync.config import Config
from cursorsync.errors import CursorSyncError
from cursorsync.settings import get_field, set_field, show_field, update_field


@pytest.mark.parametrize("field", ["remote", "branch", "folder"])
def test_set_then_get_round_trip(field):
    cfg = Config()
    set_field(cfg, field, "value-1")
    assert get_field(cfg, field) == "value-1"


def test_get_field_reads_each_attribute():
    cfg = Config(remote="git@example.com:o/r.git", branch="dev", folder="configs/cursor")
    assert [get_field(cfg, f) for f in ("remote", "branch", "folder")] == [
        "git@example.com:o/r.git",
        "dev",
        "configs/cursor",
    ]


def test_get_unknown_field_raises():
    with pytest.raises(CursorSyncError, match=r'unknown field "color" \(supported: remote, branch, folder\)'):
        get_field(Config(), "color")


def test_set_unknown_field_raises_and_leaves_config():
    cfg = Config(remote="r")
    with pytest.raises(CursorSyncError, match="unknown field"):
        set_field(cfg, "url", "x")
    assert cfg == Config(remote="r")


def test_show_field_from_saved_config(tmp_path):
    config.save(tmp_path, Config(remote="https://example.com/r.git", branch="dev"))
    assert show_field(tmp_path, "remote") == "https://example.com/r.git"


def test_show_field_branch_defaults_to_master(tmp_path):
    config.save(tmp_path, Config(remote="https://example.com/r.git"))
    assert show_field(tmp_path, "branch") == "master"


def test_show_field_without_config_raises(tmp_path):
    with pytest.raises(CursorSyncError, match="run `cursor-sync clone` first"):
        show_field(tmp_path, "remote")


def test_update_field_persists(tmp_path, capsys):
    config.save(tmp_path, Config(remote="https://example.com/r.git", branch="main"))
    update_field(tmp_path, "folder", "configs/cursor")
    saved = config.load(tmp_path)
    assert saved.folder == "configs/cursor"
    assert saved.branch == "main"
    assert "Updated folder = configs/cursor" in capsys.readouterr().err


def test_update_unknown_field_does_not_write(tmp_path):
    config.save(tmp_path, Config(remote="https://example.com/r.git", branch="main"))
    with pytest.raises(CursorSyncError):
        update_field(tmp_path, "nope", "x")
    assert config.load(tmp_path) == Config(remote="https://example.com/r.git", branch="main")