"""Search engine for finding match spans in lines, for highlighting."""

from __future__ import annotations

from typing import TYPE_CHECKING

from linesieve.models import MatchSpan

if TYPE_CHECKING:
    from collections.abc import Sequence

    from linesieve.matchers import Matcher


def locate_all(matcher: Matcher, line: str) -> list[MatchSpan]:
    """Find all non-overlapping matches in a line, left to right.

    The matcher is applied to the unscanned remainder of the line; each scan
    resumes exactly where the previous match ended. Empty matches are never
    reported: the scan steps one character past them and carries on, so an
    empty pattern yields no spans while ``o*`` still finds the ``oo`` in
    ``foo``.
    """
    spans: list[MatchSpan] = []
    offset = 0
    while offset < len(line):
        found = matcher(line[offset:])
        if found is None:
            break
        if found.start == found.end:
            offset += found.start + 1
            continue
        span = MatchSpan(found.start + offset, found.end + offset)
        spans.append(span)
        offset = span.end
    return spans


def find_matches(lines: Sequence[str], matcher: Matcher) -> list[tuple[int, int, int]]:
    """Find all matches in lines, returning (line_index, start, end) tuples."""
    results: list[tuple[int, int, int]] = []
    for i, line in enumerate(lines):
        results.extend((i, span.start, span.end) for span in locate_all(matcher, line))
    return results
