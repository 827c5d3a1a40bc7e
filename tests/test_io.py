"""Tests for courseplatform.io module."""

from __future__ import annotations

import json
from pathlib import Path

from courseplatform.io import (
    ensure_parent_dir,
    read_file,
    read_json,
    write_file,
    write_json,
)


class TestEnsureParentDir:
    """Tests for ensure_parent_dir function."""

    def test_creates_nested_directories(self, tmp_path: Path) -> None:
        """Should create all parent directories."""
        target = tmp_path / "a" / "b" / "c" / "progress.json"
        result = ensure_parent_dir(target)

        assert result == target
        assert target.parent.is_dir()

    def test_accepts_string_path(self, tmp_path: Path) -> None:
        """Should accept string paths."""
        target = str(tmp_path / "nested" / "file.txt")
        result = ensure_parent_dir(target)
        assert isinstance(result, Path)
        assert result.parent.exists()


class TestReadFile:
    """Tests for read_file function."""

    def test_reads_existing_file(self, tmp_path: Path) -> None:
        file = tmp_path / "lesson.md"
        file.write_text("# Hello", encoding="utf-8")

        assert read_file(file) == "# Hello"

    def test_returns_default_for_missing_file(self, tmp_path: Path) -> None:
        """Should return default when file doesn't exist."""
        file = tmp_path / "nonexistent.txt"

        assert read_file(file) is None
        assert read_file(file, default="fallback") == "fallback"

    def test_returns_default_for_undecodable_file(self, tmp_path: Path) -> None:
        """Should treat non-UTF-8 content as unreadable."""
        file = tmp_path / "binary.txt"
        file.write_bytes(b"\xff\xfe\xfa")

        assert read_file(file, default="fallback") == "fallback"


class TestReadJson:
    """Tests for read_json function."""

    def test_reads_valid_json(self, tmp_path: Path) -> None:
        file = tmp_path / "data.json"
        file.write_text('{"completed_lessons": ["01-01"]}', encoding="utf-8")

        assert read_json(file) == {"completed_lessons": ["01-01"]}

    def test_returns_default_for_invalid_json(self, tmp_path: Path) -> None:
        """Should return default when JSON is invalid."""
        file = tmp_path / "bad.json"
        file.write_text("not valid json {", encoding="utf-8")

        assert read_json(file) is None
        assert read_json(file, default={"fallback": True}) == {"fallback": True}


class TestWriteFile:
    """Tests for write_file function."""

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        """Should create parent directories if needed."""
        file = tmp_path / "data" / "progress.json"

        assert write_file(file, "{}") is True
        assert file.read_text(encoding="utf-8") == "{}"

    def test_overwrites_existing_file(self, tmp_path: Path) -> None:
        file = tmp_path / "overwrite.txt"
        file.write_text("old content", encoding="utf-8")

        write_file(file, "new content")

        assert file.read_text(encoding="utf-8") == "new content"

    def test_no_temp_file_left_behind(self, tmp_path: Path) -> None:
        """Should not leave temp files after successful write."""
        write_file(tmp_path / "clean.txt", "content")

        assert list(tmp_path.glob("*.tmp")) == []

    def test_returns_false_when_parent_is_a_file(self, tmp_path: Path) -> None:
        """Should report failure instead of raising."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")

        assert write_file(blocker / "progress.json", "{}") is False


class TestWriteJson:
    """Tests for write_json function."""

    def test_writes_json_with_trailing_newline(self, tmp_path: Path) -> None:
        file = tmp_path / "data.json"
        data = {"current_lesson_id": "00-01", "completed_lessons": []}

        assert write_json(file, data) is True

        content = file.read_text(encoding="utf-8")
        assert json.loads(content) == data
        assert content.endswith("\n")

    def test_returns_false_for_unserializable(self, tmp_path: Path) -> None:
        """Sets are not JSON serializable."""
        file = tmp_path / "bad.json"

        assert write_json(file, {"items": {1, 2, 3}}) is False
        assert not file.exists()

    def test_unicode_content(self, tmp_path: Path) -> None:
        """Should not escape unicode."""
        file = tmp_path / "unicode.json"
        data = {"title": "Café ✓"}

        write_json(file, data)

        content = file.read_text(encoding="utf-8")
        assert json.loads(content) == data
        assert "Café ✓" in content
