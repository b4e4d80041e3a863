"""Pydantic models and enums for linesieve."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - Pydantic needs this at runtime for model field resolution
from enum import StrEnum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

from linesieve.errors import BadFilterDefinitionError


class SearchType(BaseModel):
    """A matching strategy with a stable numeric id and display attributes."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    color: str


def _build_search_types(*specs: tuple[str, str]) -> tuple[SearchType, ...]:
    """Assign ids by declaration order."""
    return tuple(SearchType(id=i, name=name, color=color) for i, (name, color) in enumerate(specs))


# Order is persisted in saved sessions. Append only, never reorder.
SEARCH_TYPES: tuple[SearchType, ...] = _build_search_types(
    ("CaseS", "yellow"),
    ("RegEx", "red"),
)
CASE_SENSITIVE, REGEX = SEARCH_TYPES


def search_type_by_id(type_id: int) -> SearchType:
    """Look up a registered search type by its stable id."""
    if isinstance(type_id, int) and not isinstance(type_id, bool) and 0 <= type_id < len(SEARCH_TYPES):
        return SEARCH_TYPES[type_id]
    msg = f"Bad filter definition: unknown search type id {type_id}"
    raise BadFilterDefinitionError(msg)


def search_type_by_name(name: str) -> SearchType:
    """Look up a registered search type by display name (case-insensitive)."""
    for search_type in SEARCH_TYPES:
        if search_type.name.lower() == name.lower():
            return search_type
    msg = f"Bad filter definition: unknown search type {name!r}"
    raise BadFilterDefinitionError(msg)


class FilterAction(StrEnum):
    """Boolean combinator of a filter. The value is its sigil in filter files."""

    INTERSECT = "&"
    UNION = "+"
    EXCLUDE = "-"


class Decision(StrEnum):
    """Per-line filter decision carried from one filter to the next."""

    NO_ACTION = "no_action"
    INCLUDED = "included"
    EXCLUDED = "excluded"


class MatchSpan(NamedTuple):
    """Half-open [start, end) character offsets of a match within a line."""

    start: int
    end: int


class FilterSpec(BaseModel):
    """Serializable description of a filter, as stored in sessions."""

    pattern: str
    action: FilterAction
    search_type: int = CASE_SENSITIVE.id


class AppConfig(BaseModel):
    """Application configuration persisted to disk."""

    default_search_type: str = CASE_SENSITIVE.name
    log_level: str = "WARNING"


class Session(BaseModel):
    """A named, ordered set of filters."""

    name: str
    filters: list[FilterSpec] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
