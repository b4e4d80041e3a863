"""Match functions for each registered search type."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from linesieve.errors import BadFilterDefinitionError
from linesieve.models import CASE_SENSITIVE, REGEX, MatchSpan, SearchType

logger = logging.getLogger(__name__)

# Returns the span of the first match in a line, or None.
Matcher = Callable[[str], MatchSpan | None]


def _substring_matcher(pattern: str) -> Matcher:
    pattern_len = len(pattern)

    def match(text: str) -> MatchSpan | None:
        i = text.find(pattern)
        if i == -1:
            return None
        return MatchSpan(i, i + pattern_len)

    return match


def _regex_matcher(pattern: str) -> Matcher:
    try:
        compiled = re.compile(pattern)
    except re.error as e:
        msg = f"Bad filter definition: invalid regular expression {pattern!r}: {e}"
        raise BadFilterDefinitionError(msg) from e

    def match(text: str) -> MatchSpan | None:
        m = compiled.search(text)
        if m is None:
            return None
        return MatchSpan(m.start(), m.end())

    return match


_FACTORIES: dict[SearchType, Callable[[str], Matcher]] = {
    CASE_SENSITIVE: _substring_matcher,
    REGEX: _regex_matcher,
}


def compile_matcher(search_type: SearchType | None, pattern: str) -> Matcher:
    """Build a pure matcher for pattern using the given search type.

    Raises BadFilterDefinitionError for an unregistered search type or a
    regular expression that does not compile.
    """
    if not isinstance(search_type, SearchType) or search_type not in _FACTORIES:
        msg = f"Bad filter definition: unknown search type {search_type!r}"
        raise BadFilterDefinitionError(msg)
    logger.debug("Compiling %s matcher for %r", search_type.name, pattern)
    return _FACTORIES[search_type](pattern)
