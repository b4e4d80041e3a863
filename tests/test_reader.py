"""Tests for file reading."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest

from linesieve.reader import is_pipe, read_file, read_stdin, validate_regular_file

if TYPE_CHECKING:
    from pathlib import Path


class TestValidateRegularFile:
    def test_regular_file(self, sample_text_file: Path) -> None:
        validate_regular_file(sample_text_file)

    def test_missing(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            validate_regular_file(tmp_path / "missing.log")

    def test_directory(self, tmp_path: Path) -> None:
        with pytest.raises(IsADirectoryError):
            validate_regular_file(tmp_path)

    def test_unreadable(self, sample_text_file: Path) -> None:
        with patch("linesieve.reader.os.access", return_value=False), pytest.raises(PermissionError):
            validate_regular_file(sample_text_file)


class TestReadFile:
    def test_read_sample_file(self, sample_text_file: Path) -> None:
        lines = read_file(sample_text_file)
        assert len(lines) == 6
        assert lines[0] == "2024-01-15 ERROR: Connection failed"

    def test_empty_file(self, tmp_path: Path) -> None:
        empty_file = tmp_path / "empty.log"
        empty_file.write_text("")
        assert read_file(empty_file) == []

    def test_keeps_blank_lines(self, tmp_path: Path) -> None:
        log_file = tmp_path / "blank.log"
        log_file.write_text("one\n\nthree\n")
        assert read_file(log_file) == ["one", "", "three"]


class TestReadStdin:
    def test_read_stdin(self) -> None:
        with patch("linesieve.reader.sys.stdin", StringIO("first\nsecond\n")):
            lines = read_stdin()
        assert lines == ["first", "second"]

    def test_read_stdin_empty(self) -> None:
        with patch("linesieve.reader.sys.stdin", StringIO("")):
            assert read_stdin() == []


class TestIsPipe:
    def test_is_pipe_true(self) -> None:
        with patch("linesieve.reader.sys.stdin") as mock_stdin:
            mock_stdin.isatty.return_value = False
            assert is_pipe() is True

    def test_is_pipe_false(self) -> None:
        with patch("linesieve.reader.sys.stdin") as mock_stdin:
            mock_stdin.isatty.return_value = True
            assert is_pipe() is False
