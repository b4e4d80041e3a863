"""Ordered line filters and match locating for text viewers."""

from linesieve.errors import (
    BadFilterDefinitionError,
    FilterDefinitionError,
    FilterTooShortError,
    UnknownFilterTypeError,
)
from linesieve.filters import Filter, apply_filters, build_combinator, check_line, fold_decision, new_filter
from linesieve.loader import load_filters, save_filters
from linesieve.matchers import compile_matcher
from linesieve.models import CASE_SENSITIVE, REGEX, SEARCH_TYPES, Decision, FilterAction, MatchSpan, SearchType
from linesieve.parser import format_filter_line, parse_filter_line
from linesieve.search import find_matches, locate_all

__all__ = [
    "CASE_SENSITIVE",
    "REGEX",
    "SEARCH_TYPES",
    "BadFilterDefinitionError",
    "Decision",
    "Filter",
    "FilterAction",
    "FilterDefinitionError",
    "FilterTooShortError",
    "MatchSpan",
    "SearchType",
    "UnknownFilterTypeError",
    "apply_filters",
    "build_combinator",
    "check_line",
    "compile_matcher",
    "find_matches",
    "fold_decision",
    "format_filter_line",
    "load_filters",
    "locate_all",
    "new_filter",
    "parse_filter_line",
    "save_filters",
]
