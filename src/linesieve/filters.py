"""Filter engine: combinators and the per-line decision fold."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import NamedTuple

from linesieve.errors import BadFilterDefinitionError
from linesieve.matchers import Matcher, compile_matcher
from linesieve.models import CASE_SENSITIVE, Decision, FilterAction, FilterSpec, SearchType, search_type_by_id

logger = logging.getLogger(__name__)

Combinator = Callable[[str, Decision], Decision]


class _Rule(NamedTuple):
    short_circuit: Decision
    on_match: Decision
    on_miss: Decision


# Each action returns short_circuit unchanged when it arrives as input, without
# running the matcher. NO_ACTION never short-circuits.
_RULES: dict[FilterAction, _Rule] = {
    FilterAction.UNION: _Rule(Decision.INCLUDED, Decision.INCLUDED, Decision.EXCLUDED),
    FilterAction.INTERSECT: _Rule(Decision.EXCLUDED, Decision.INCLUDED, Decision.EXCLUDED),
    FilterAction.EXCLUDE: _Rule(Decision.EXCLUDED, Decision.EXCLUDED, Decision.INCLUDED),
}


def build_combinator(action: FilterAction, matcher: Matcher) -> Combinator:
    """Build the function folding matcher's result into the incoming decision."""
    rule = _RULES.get(action)
    if rule is None:
        msg = f"Bad filter definition: unknown filter action {action!r}"
        raise BadFilterDefinitionError(msg)

    def combine(line: str, decision: Decision) -> Decision:
        if decision == rule.short_circuit:
            return decision
        return rule.on_match if matcher(line) is not None else rule.on_miss

    return combine


@dataclass(frozen=True, slots=True)
class Filter:
    """A compiled filter: pattern, search type and action plus their functions."""

    pattern: str
    search_type: SearchType
    action: FilterAction
    matcher: Matcher
    combinator: Combinator

    def take_action(self, line: str, decision: Decision) -> Decision:
        """Fold this filter into the decision carried from previous filters."""
        return self.combinator(line, decision)

    def to_spec(self) -> FilterSpec:
        """Serializable description of this filter."""
        return FilterSpec(pattern=self.pattern, action=self.action, search_type=self.search_type.id)


def new_filter(pattern: str, action: FilterAction, search_type: SearchType = CASE_SENSITIVE) -> Filter:
    """Compile a filter. Raises BadFilterDefinitionError on any invalid part."""
    matcher = compile_matcher(search_type, pattern)
    combinator = build_combinator(action, matcher)
    return Filter(
        pattern=pattern,
        search_type=search_type,
        action=action,
        matcher=matcher,
        combinator=combinator,
    )


def filter_from_spec(spec: FilterSpec) -> Filter:
    """Compile a filter from its serialized description."""
    return new_filter(spec.pattern, spec.action, search_type_by_id(spec.search_type))


def fold_decision(line: str, filters: Iterable[Filter]) -> Decision:
    """Fold the filters over a line, in order, starting from NO_ACTION."""
    decision = Decision.NO_ACTION
    for f in filters:
        decision = f.take_action(line, decision)
    return decision


def check_line(line: str, filters: Iterable[Filter]) -> bool:
    """Check if a single line is visible under the filters."""
    return fold_decision(line, filters) != Decision.EXCLUDED


def apply_filters(lines: Sequence[str], filters: Sequence[Filter]) -> list[int]:
    """Apply filters to lines, returning indices of visible lines.

    Filter order matters: UNION keeps a line once it is included, INTERSECT
    and EXCLUDE drop it for good once it is excluded. No filters means every
    line is visible.
    """
    if not filters:
        return list(range(len(lines)))
    result = [i for i, line in enumerate(lines) if check_line(line, filters)]
    logger.debug("%d of %d lines visible under %d filters", len(result), len(lines), len(filters))
    return result
