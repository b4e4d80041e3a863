"""Active filter sets and session save/load."""

from __future__ import annotations

import logging
import tomllib
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

import tomli_w

from linesieve.config import get_sessions_dir
from linesieve.filters import Filter, apply_filters, check_line, filter_from_spec
from linesieve.loader import load_filters
from linesieve.models import FilterAction, FilterSpec, Session

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from pathlib import Path

logger = logging.getLogger(__name__)


class FilterSet:
    """The ordered filters active in a viewing session.

    Replacing the set is all-or-nothing: a failed load keeps the previous
    filters in place.
    """

    def __init__(self, filters: Sequence[Filter] | None = None) -> None:
        self._filters: tuple[Filter, ...] = tuple(filters or ())

    @property
    def filters(self) -> tuple[Filter, ...]:
        """Current filters, in application order."""
        return self._filters

    def __len__(self) -> int:
        return len(self._filters)

    def __iter__(self) -> Iterator[Filter]:
        return iter(self._filters)

    def add(self, f: Filter) -> None:
        """Append a filter; it is applied after all existing ones."""
        self._filters = (*self._filters, f)

    def remove_last(self) -> Filter | None:
        """Pop the last filter (stack-style). Returns removed filter or None if empty."""
        if not self._filters:
            return None
        *rest, last = self._filters
        self._filters = tuple(rest)
        return last

    def replace(self, filters: Sequence[Filter]) -> None:
        """Swap in a new filter list."""
        self._filters = tuple(filters)

    def clear(self) -> None:
        """Remove all filters; every line becomes visible."""
        self._filters = ()

    def load_file(self, path: Path) -> None:
        """Replace the filters with those in a filter file.

        On error the previous filters stay active and the error is re-raised.
        """
        try:
            loaded = load_filters(path)
        except (OSError, ValueError):
            logger.warning("Could not load filters from %s, keeping %d active filters", path, len(self._filters))
            raise
        self.replace(loaded)

    def is_visible(self, line: str) -> bool:
        """Check if a single line passes the active filters."""
        return check_line(line, self._filters)

    def visible_indices(self, lines: Sequence[str]) -> list[int]:
        """Indices of lines passing the active filters."""
        return apply_filters(lines, self._filters)


def create_session(name: str, filters: Sequence[Filter]) -> Session:
    """Create a new Session with current timestamp."""
    now = datetime.now(tz=UTC)
    return Session(name=name, filters=[f.to_spec() for f in filters], created_at=now, updated_at=now)


def session_filters(session: Session) -> list[Filter]:
    """Compile the filters stored in a session."""
    return [filter_from_spec(spec) for spec in session.filters]


def save_session(session: Session) -> Path:
    """Save a session to a TOML file. Returns the file path."""
    sessions_dir = get_sessions_dir()
    path = sessions_dir / f"{session.name}.toml"

    data: dict[str, Any] = {
        "name": session.name,
        "created_at": session.created_at.isoformat(),
        "updated_at": session.updated_at.isoformat(),
        "filters": [_spec_to_dict(spec) for spec in session.filters],
    }

    path.write_bytes(tomli_w.dumps(data).encode())
    return path


def load_session(name: str) -> Session:
    """Load a session from a TOML file."""
    sessions_dir = get_sessions_dir()
    path = sessions_dir / f"{name}.toml"

    if not path.exists():
        msg = f"Session '{name}' not found"
        raise FileNotFoundError(msg)

    data = tomllib.loads(path.read_text())
    return Session(
        name=data["name"],
        filters=[_dict_to_spec(d) for d in data.get("filters", [])],
        created_at=datetime.fromisoformat(data["created_at"]),
        updated_at=datetime.fromisoformat(data["updated_at"]),
    )


def list_sessions() -> list[str]:
    """List the names of all saved filter sessions, sorted."""
    return sorted(p.stem for p in get_sessions_dir().glob("*.toml"))


def delete_session(name: str) -> None:
    """Delete a saved filter session; a missing one raises FileNotFoundError."""
    path = get_sessions_dir() / f"{name}.toml"
    if not path.is_file():
        msg = f"Session '{name}' not found"
        raise FileNotFoundError(msg)
    path.unlink()
    logger.debug("Deleted session %s", path)


def _spec_to_dict(spec: FilterSpec) -> dict[str, Any]:
    return {
        "pattern": spec.pattern,
        "action": spec.action.value,
        "search_type": spec.search_type,
    }


def _dict_to_spec(d: dict[str, Any]) -> FilterSpec:
    return FilterSpec(
        pattern=d["pattern"],
        action=FilterAction(d["action"]),
        search_type=d.get("search_type", 0),
    )
