"""Filter file loading and saving."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from linesieve.errors import BadFilterDefinitionError
from linesieve.models import CASE_SENSITIVE
from linesieve.parser import format_filter_line, parse_filter_line
from linesieve.reader import validate_regular_file

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from linesieve.filters import Filter

logger = logging.getLogger(__name__)


def load_filters(path: Path) -> list[Filter]:
    """Load an ordered list of filters from a filter file.

    Blank lines are skipped. The first invalid line aborts the load: its
    error is raised with the line number attached and no filters are returned.
    """
    validate_regular_file(path)
    filters: list[Filter] = []
    with path.open(encoding="utf-8", newline="\n") as f:
        for line_number, raw_line in enumerate(f, start=1):
            try:
                parsed = parse_filter_line(raw_line.removesuffix("\n").removesuffix("\r"))
            except ValueError as e:
                e.add_note(f"{path}:{line_number}")
                raise
            if parsed is None:
                continue
            filters.append(parsed)
    logger.debug("Loaded %d filters from %s", len(filters), path)
    return filters


def save_filters(path: Path, filters: Iterable[Filter]) -> int:
    """Write filters to a filter file, one per line. Returns the number written.

    The line syntax only expresses case-sensitive filters, so any other search
    type is rejected before the file is touched.
    """
    filters = list(filters)
    for f in filters:
        if f.search_type != CASE_SENSITIVE:
            msg = f"Bad filter definition: {f.search_type.name} filter {f.pattern!r} has no filter-file syntax"
            raise BadFilterDefinitionError(msg)
    lines = [format_filter_line(f) for f in filters]
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return len(lines)
