"""
Command-line interface for searchable-multiselect.

Inspect how an option file filters and highlights under a search string, or
pick options interactively.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.text import Text

from sm_common.errors import SMError, error_to_payload
from sm_common.logging import configure_logging
from sm_core.config import SelectorConfig
from sm_core.highlight import partition
from sm_core.models import NO_MATCH
from sm_ui.headless import HeadlessSelector
from sm_ui.presenters import theme
from sm_ui.presenters.rich_view import build_options_table, highlighted_text, render_chips
from sm_ui.services.options_file import load_options
from sm_ui.tui.selector_screen import SelectorScreen

console = Console()

app = typer.Typer(help="Filter, highlight and pick options the way the selector does.", no_args_is_help=True)


def _error(message: str) -> None:
    console.print(theme.presenter_message("error", escape(message)))


def _report(exc: SMError) -> None:
    payload = error_to_payload(exc)
    details = ", ".join(f"{key}={value}" for key, value in payload["error_context"].items())
    message = f"{payload['error_type']}: {payload['error']}"
    _error(f"{message} ({details})" if details else message)


def _parse_indices(raw: Optional[str]) -> list[int]:
    if not raw:
        return []
    indices: list[int] = []
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            indices.append(int(token))
        except ValueError:
            raise typer.BadParameter(f"Not an option index: {token!r}", param_hint="--selected")
    return indices


@app.callback()
def entry(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level (overrides SM_LOG_LEVEL)."),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """Global options shared by every command."""
    configure_logging(level=log_level, debug=debug, force=True)


@app.command("filter")
def filter_command(
    options_file: Path = typer.Argument(..., help="YAML or JSON file describing the options."),
    search: str = typer.Option("", "--search", "-s", help="Search text to filter by."),
    selected: Optional[str] = typer.Option(None, "--selected", help="Comma-separated selected indices."),
    visible_only: bool = typer.Option(False, "--visible-only", help="Hide rows that do not match."),
) -> None:
    """Show visibility, highlighting and selection chips for a search."""
    try:
        tree = load_options(options_file)
        config = SelectorConfig.from_env(selected_indices=_parse_indices(selected))
    except SMError as exc:
        _report(exc)
        raise typer.Exit(1)

    host = HeadlessSelector(tree, config=config)
    output = host.search(search)
    view = host.view

    console.print(build_options_table(view, show_hidden=not visible_only))
    chips = render_chips(view)
    if chips.plain:
        console.print(chips)
    if output.first_visible_index == NO_MATCH:
        console.print(theme.presenter_message("warning", view.no_results.message if view.no_results else "No match"))
    else:
        console.print(theme.presenter_message("info", f"First visible index: {output.first_visible_index}"))


@app.command("highlight")
def highlight_command(
    text: str = typer.Argument(..., help="Text to partition."),
    search: str = typer.Argument("", help="Search text to highlight."),
) -> None:
    """Print the prefix/match/suffix partition of TEXT for SEARCH."""
    parts = partition(text, search)
    console.print(highlighted_text(parts))
    console.print(Text(f"prefix={parts.prefix!r} match={parts.match!r} suffix={parts.suffix!r}"))


@app.command("pick")
def pick_command(
    options_file: Path = typer.Argument(..., help="YAML or JSON file describing the options."),
    title: str = typer.Option("Select options", "--title", help="Frame title."),
    search: str = typer.Option("", "--search", "-s", help="Initial search text."),
    selected: Optional[str] = typer.Option(None, "--selected", help="Comma-separated selected indices."),
) -> None:
    """Pick options interactively and print the selected indices."""
    if not sys.stdin.isatty() or not sys.stdout.isatty():
        _error("Interactive selection requires a TTY.")
        raise typer.Exit(1)
    try:
        tree = load_options(options_file)
        config = SelectorConfig.from_env(
            search_text=search, selected_indices=_parse_indices(selected)
        )
    except SMError as exc:
        _report(exc)
        raise typer.Exit(1)

    result = SelectorScreen(tree, title=title, config=config).run()
    if result is None:
        console.print(theme.presenter_message("warning", "Selection cancelled."))
        raise typer.Exit(1)
    console.print(",".join(str(index) for index in result))


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
