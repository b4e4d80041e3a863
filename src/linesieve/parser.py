"""Filter-definition line parsing: ``<sigil><pattern>``, one filter per line."""

from __future__ import annotations

from linesieve.errors import FilterTooShortError, UnknownFilterTypeError
from linesieve.filters import Filter, new_filter
from linesieve.models import CASE_SENSITIVE, FilterAction

_FILTER_LINE_MIN_LENGTH = 2

_SIGILS: dict[str, FilterAction] = {action.value: action for action in FilterAction}


def parse_filter_line(line: str) -> Filter | None:
    """Parse one line of a filter file.

    Leading whitespace is ignored and a blank line gives None. The first
    character picks the action; the rest of the line, verbatim, is a
    case-sensitive pattern.
    """
    stripped = line.lstrip()
    if not stripped:
        return None
    if len(stripped) < _FILTER_LINE_MIN_LENGTH:
        msg = f"Filter is too short: {stripped}"
        raise FilterTooShortError(msg)

    sigil, pattern = stripped[0], stripped[1:]
    action = _SIGILS.get(sigil)
    if action is None:
        msg = f'Unknown filter type "{sigil}"'
        raise UnknownFilterTypeError(msg)
    return new_filter(pattern, action, CASE_SENSITIVE)


def format_filter_line(f: Filter) -> str:
    """Serialize a filter back to its definition line."""
    return f"{f.action.value}{f.pattern}"
