"""Errors raised while building filters."""

from __future__ import annotations


class FilterDefinitionError(ValueError):
    """Base class for every problem with a filter definition."""


class BadFilterDefinitionError(FilterDefinitionError):
    """Unknown search type, unknown action or a pattern that does not compile."""


class FilterTooShortError(FilterDefinitionError):
    """A filter line has a sigil but no pattern."""


class UnknownFilterTypeError(FilterDefinitionError):
    """A filter line starts with something other than an action sigil."""
