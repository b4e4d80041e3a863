"""Highlight styles per search type and match highlighting."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.style import Style
from rich.text import Text

from linesieve.search import locate_all

if TYPE_CHECKING:
    from linesieve.matchers import Matcher
    from linesieve.models import SearchType


def search_match_style(search_type: SearchType) -> Style:
    """Return the highlight style for matches of a search type."""
    return Style(bgcolor=search_type.color, color="black")


def search_label_style(search_type: SearchType) -> Style:
    """Return the style used to show a search type's name."""
    return Style(color=search_type.color, bold=True)


def highlight_line(line: str, matcher: Matcher | None, search_type: SearchType) -> Text:
    """Render a line with every match of matcher highlighted."""
    text = Text(line)
    if matcher is None:
        return text
    style = search_match_style(search_type)
    for span in locate_all(matcher, line):
        text.stylize(style, span.start, span.end)
    return text
