"""CLI entry point for linesieve."""

from __future__ import annotations

import logging
from pathlib import Path  # noqa: TC003 - typer needs this at runtime for argument parsing
from typing import Annotated

import typer
from rich.console import Console
from rich.text import Text

from linesieve.colors import highlight_line, search_label_style
from linesieve.config import configured_search_type, load_config
from linesieve.errors import FilterDefinitionError
from linesieve.loader import load_filters
from linesieve.logging_config import configure_logging
from linesieve.matchers import Matcher, compile_matcher
from linesieve.models import CASE_SENSITIVE, REGEX, AppConfig, SearchType
from linesieve.parser import format_filter_line
from linesieve.reader import is_pipe, read_file, read_stdin
from linesieve.session import (
    FilterSet,
    create_session,
    delete_session,
    list_sessions,
    load_session,
    save_session,
    session_filters,
)

app = typer.Typer(add_completion=False)

logger = logging.getLogger(__name__)


def _error(e: Exception) -> str:
    notes = getattr(e, "__notes__", None)
    where = f" ({', '.join(notes)})" if notes else ""
    return f"Error: {e}{where}"


def _build_filter_set(filters_path: Path | None, session: str | None) -> FilterSet:
    filter_set = FilterSet()
    if session is not None:
        try:
            filter_set.replace(session_filters(load_session(session)))
        except FileNotFoundError:
            typer.echo(f"Error: session '{session}' not found")
            raise typer.Exit(1)  # noqa: B904
        except FilterDefinitionError as e:
            typer.echo(_error(e))
            raise typer.Exit(1)  # noqa: B904
    if filters_path is not None:
        try:
            filter_set.load_file(filters_path)
        except (OSError, ValueError) as e:
            typer.echo(_error(e))
            raise typer.Exit(1)  # noqa: B904
    return filter_set


def _build_search(pattern: str, *, regex: bool, config: AppConfig) -> tuple[Matcher, SearchType]:
    try:
        search_type = REGEX if regex else configured_search_type(config)
        return compile_matcher(search_type, pattern), search_type
    except FilterDefinitionError as e:
        typer.echo(_error(e))
        raise typer.Exit(1)  # noqa: B904


@app.command()
def view(  # noqa: PLR0913
    file: Annotated[Path | None, typer.Argument(help="Text file to view (default: stdin)")] = None,
    filters: Annotated[Path | None, typer.Option("--filters", "-f", help="Filter file to apply")] = None,
    session: Annotated[str | None, typer.Option("--session", help="Load filters from a saved session")] = None,
    save_as: Annotated[str | None, typer.Option("--save-session", help="Save the active filters as a session")] = None,
    search: Annotated[str | None, typer.Option("--search", "-s", help="Highlight matches of this text")] = None,
    regex: Annotated[bool, typer.Option("--regex", "-r", help="Treat --search as a regular expression")] = False,  # noqa: FBT002
    line_numbers: Annotated[bool, typer.Option("--line-numbers", "-n", help="Show line numbers")] = False,  # noqa: FBT002
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")] = False,  # noqa: FBT002
) -> None:
    """Print the lines that pass the filters, highlighting search matches."""
    config = load_config()
    configure_logging("DEBUG" if verbose else config.log_level)

    if file is not None:
        try:
            lines = read_file(file)
        except OSError as e:
            typer.echo(_error(e))
            raise typer.Exit(1)  # noqa: B904
    elif is_pipe():
        lines = read_stdin()
    else:
        typer.echo("Error: provide a file or pipe input")
        raise typer.Exit(1)

    filter_set = _build_filter_set(filters, session)
    if save_as is not None:
        path = save_session(create_session(save_as, filter_set.filters))
        logger.info("Saved %d filters to %s", len(filter_set), path)

    matcher: Matcher | None = None
    search_type = CASE_SENSITIVE
    if search:
        matcher, search_type = _build_search(search, regex=regex, config=config)

    console = Console(highlight=False)
    width = len(str(len(lines)))
    for i in filter_set.visible_indices(lines):
        text = highlight_line(lines[i], matcher, search_type)
        if line_numbers:
            text = Text.assemble((f"{i + 1:>{width}} ", "dim"), text)
        console.print(text, soft_wrap=True)


@app.command()
def check(
    path: Annotated[Path, typer.Argument(help="Filter file to validate")],
) -> None:
    """Validate a filter file and list its filters in application order."""
    try:
        loaded = load_filters(path)
    except (OSError, ValueError) as e:
        typer.echo(_error(e))
        raise typer.Exit(1)  # noqa: B904

    console = Console(highlight=False)
    for i, f in enumerate(loaded, start=1):
        console.print(
            Text.assemble(
                f"{i:>3} ",
                (f"{f.search_type.name:<6}", search_label_style(f.search_type)),
                f" {f.action.name.lower():<9} ",
                format_filter_line(f),
            ),
            soft_wrap=True,
        )
    typer.echo(f"{len(loaded)} filters OK")


@app.command()
def sessions(
    delete: Annotated[str | None, typer.Option("--delete", "-d", help="Delete the named session")] = None,
) -> None:
    """List saved filter sessions, or delete one."""
    if delete is not None:
        try:
            delete_session(delete)
        except FileNotFoundError:
            typer.echo(f"Error: session '{delete}' not found")
            raise typer.Exit(1)  # noqa: B904
        typer.echo(f"Deleted session '{delete}'")
        return

    names = list_sessions()
    if not names:
        typer.echo("No saved sessions")
        return
    for name in names:
        typer.echo(name)


def main() -> None:
    """Entry point for the CLI."""
    app()
