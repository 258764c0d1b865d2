"""Tests for JSON resource access.

Every failure must surface as a BASE kind ContextualError; raw OSError never
escapes.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from contexterror import ContextualError, ErrorKind
from contexterror.resources import (
    is_json_extension,
    open_json_file,
    read_json_text,
    write_json_text,
)

# ============================================================================
# EXTENSION CHECK
# ============================================================================


class TestIsJsonExtension:
    """Test the suffix check."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("config.json", True),
            ("dir/nested/config.json", True),
            (".json", True),
            ("config.JSON", False),
            ("config.json.bak", False),
            ("json", False),
            ("", False),
        ],
    )
    def test_suffix(self, path: str, expected: bool) -> None:
        assert is_json_extension(path) is expected

    def test_accepts_path_objects(self, tmp_path: Path) -> None:
        assert is_json_extension(tmp_path / "data.json")


# ============================================================================
# OPEN
# ============================================================================


class TestOpenJsonFile:
    """Test opening with failure translation."""

    def test_wrong_extension(self, tmp_path: Path) -> None:
        """Non-JSON path is rejected before touching the filesystem."""
        path = tmp_path / "data.txt"
        path.write_text("{}", encoding="utf-8")

        with pytest.raises(ContextualError) as exc_info:
            open_json_file(path)

        err = exc_info.value
        assert err.kind is ErrorKind.BASE
        assert err.location == "contexterror.resources.open_json_file"
        assert "The extension is not '.json'" in err.problem

    def test_missing_file(self, tmp_path: Path) -> None:
        """Missing file becomes a ContextualError chained to the OSError."""
        with pytest.raises(ContextualError) as exc_info:
            open_json_file(tmp_path / "missing.json")

        assert "Does it exist?" in exc_info.value.problem
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_open_existing(self, tmp_path: Path) -> None:
        path = tmp_path / "data.json"
        path.write_text('{"a": 1}', encoding="utf-8")

        with open_json_file(path) as stream:
            assert stream.read() == '{"a": 1}'

    def test_rendered_message_has_no_context_marking(self, tmp_path: Path) -> None:
        """Collaborator failures render as the base kind."""
        with pytest.raises(ContextualError) as exc_info:
            open_json_file(tmp_path / "missing.json")

        rendered = str(exc_info.value)
        assert rendered.startswith("\ncontexterror.error\n")
        assert " > " not in rendered


# ============================================================================
# READ
# ============================================================================


class TestReadJsonText:
    """Test reading with a size limit."""

    def test_read(self, tmp_path: Path) -> None:
        path = tmp_path / "data.json"
        path.write_text('{"key": "value"}', encoding="utf-8")

        assert read_json_text(path) == '{"key": "value"}'

    def test_exactly_at_limit(self, tmp_path: Path) -> None:
        """Content equal to max_size is accepted."""
        path = tmp_path / "data.json"
        path.write_text("x" * 10, encoding="utf-8")

        assert read_json_text(path, max_size=10) == "x" * 10

    def test_too_large(self, tmp_path: Path) -> None:
        """Content over max_size is rejected."""
        path = tmp_path / "data.json"
        path.write_text("x" * 11, encoding="utf-8")

        with pytest.raises(ContextualError) as exc_info:
            read_json_text(path, max_size=10)

        err = exc_info.value
        assert err.kind is ErrorKind.BASE
        assert err.location == "contexterror.resources.read_json_text"
        assert err.problem == (
            "The JSON object is too large. The current maximum string size is 10"
        )

    def test_too_large_localized(self, tmp_path: Path) -> None:
        """With a locale, the limit is rendered with locale grouping."""
        pytest.importorskip("babel")
        path = tmp_path / "data.json"
        path.write_text("x" * 1001, encoding="utf-8")

        with pytest.raises(ContextualError) as exc_info:
            read_json_text(path, max_size=1000, locale="en_US")

        assert exc_info.value.problem.endswith("maximum string size is 1,000")

    def test_undecodable(self, tmp_path: Path) -> None:
        """Invalid UTF-8 becomes a ContextualError."""
        path = tmp_path / "data.json"
        path.write_bytes(b"\xff\xfe\xfa")

        with pytest.raises(ContextualError) as exc_info:
            read_json_text(path)

        assert exc_info.value.problem.startswith("Couldn't read json file:")
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_missing(self, tmp_path: Path) -> None:
        with pytest.raises(ContextualError, match="Does it exist"):
            read_json_text(tmp_path / "missing.json")


# ============================================================================
# WRITE
# ============================================================================


class TestWriteJsonText:
    """Test writing."""

    def test_write_then_read(self, tmp_path: Path) -> None:
        path = tmp_path / "out.json"
        write_json_text(path, "[1, 2, 3]")

        assert read_json_text(path) == "[1, 2, 3]"

    def test_write_truncates(self, tmp_path: Path) -> None:
        path = tmp_path / "out.json"
        path.write_text("a much longer previous content", encoding="utf-8")
        write_json_text(path, "{}")

        assert path.read_text(encoding="utf-8") == "{}"

    def test_empty_path_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        """Empty path logs a warning and writes nothing."""
        with caplog.at_level(logging.WARNING, logger="contexterror.resources"):
            write_json_text("", "{}")

        assert "empty path" in caplog.text

    def test_wrong_extension(self, tmp_path: Path) -> None:
        with pytest.raises(ContextualError, match="extension is not"):
            write_json_text(tmp_path / "out.txt", "{}")

        assert not (tmp_path / "out.txt").exists()

    def test_missing_directory(self, tmp_path: Path) -> None:
        """Unwritable location reports a write failure."""
        with pytest.raises(ContextualError) as exc_info:
            write_json_text(tmp_path / "no" / "such" / "dir.json", "{}")

        assert "for writing" in exc_info.value.problem
