"""Tests for courseplatform.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from courseplatform import config


class TestPaths:
    """Tests for the path helpers."""

    def test_project_dir_defaults_to_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("COURSE_PROJECT_DIR", raising=False)
        monkeypatch.chdir(tmp_path)

        assert config.get_project_dir().resolve() == tmp_path.resolve()
        assert config.get_lessons_dir().resolve() == (tmp_path / "lessons").resolve()

    def test_progress_path_under_project(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COURSE_PROJECT_DIR", str(tmp_path))
        monkeypatch.delenv("COURSE_PROGRESS_PATH", raising=False)

        assert config.get_progress_json_path() == tmp_path / "data" / "progress.json"

    def test_progress_path_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COURSE_PROGRESS_PATH", str(tmp_path / "mine.json"))

        assert config.get_progress_json_path() == tmp_path / "mine.json"

    def test_progress_schema_is_bundled(self) -> None:
        assert config.get_progress_schema_path().is_file()
