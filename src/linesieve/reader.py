"""Text file reading and validation."""

from __future__ import annotations

import errno
import os
import sys
from pathlib import Path


def validate_regular_file(path: Path) -> None:
    """Raise OSError unless path is an existing, readable regular file."""
    if not path.exists():
        msg = f"No such file: {path}"
        raise FileNotFoundError(errno.ENOENT, msg, str(path))
    if path.is_dir():
        msg = f"Is a directory: {path}"
        raise IsADirectoryError(errno.EISDIR, msg, str(path))
    if not path.is_file():
        msg = f"Not a regular file: {path}"
        raise OSError(errno.EINVAL, msg, str(path))
    if not os.access(path, os.R_OK):
        msg = f"File is not readable: {path}"
        raise PermissionError(errno.EACCES, msg, str(path))


def read_file(path: Path) -> list[str]:
    """Read all lines from a file, without line terminators."""
    validate_regular_file(path)
    with path.open(encoding="utf-8", errors="replace") as f:
        return [raw_line.rstrip("\n") for raw_line in f]


def is_pipe() -> bool:
    """Check if stdin is a pipe (not a terminal)."""
    return not sys.stdin.isatty()


def read_stdin() -> list[str]:
    """Read all lines from stdin."""
    return [raw_line.rstrip("\n") for raw_line in sys.stdin]
