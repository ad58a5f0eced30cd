"""Tests for dev-mode data paths."""
from pathlib import Path

from gpa_toolkit.gui.utils.paths import (
    COURSES_FILE_NAME,
    ensure_directories,
    get_courses_path,
    get_settings_path,
    is_frozen,
)


def test_dev_mode_uses_workspace(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    assert not is_frozen()
    assert get_courses_path() == tmp_path / "workspace" / COURSES_FILE_NAME
    assert get_settings_path().parent == tmp_path / "workspace"


def test_ensure_directories_creates_workspace(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    ensure_directories()

    assert (tmp_path / "workspace").is_dir()
