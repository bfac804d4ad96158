from __future__ import annotations

RICH_ACCENT = "blue"
RICH_ACCENT_BOLD = f"bold {RICH_ACCENT}"
RICH_BORDER_STYLE = RICH_ACCENT

RICH_MATCH_STYLE = "bold black on yellow"
RICH_DISABLED_STYLE = "dim"
RICH_HIDDEN_STYLE = "dim italic"
RICH_SELECTED_STYLE = "bold green"
RICH_CHIP_STYLE = "bold white on blue"
RICH_ORPHAN_CHIP_STYLE = "dim white on blue"

PRESENTER_TEMPLATES: dict[str, str] = {
    "info": "[blue]ℹ[/blue] {message}",
    "warning": "[yellow]⚠ {message}[/yellow]",
    "error": "[red]✖ {message}[/red]",
    "success": "[green]✔ {message}[/green]",
}

# prompt_toolkit style classes used by the selector screen.
PT_STYLES: dict[str, str] = {
    "cursor": "bg:#0000aa fg:white bold",
    "checked": "fg:#00aa00 bold",
    "selected": "fg:#00aa00",
    "match": "bg:#ffff00 fg:#000000 bold",
    "disabled": "fg:#888888",
    "group": "fg:#0000aa bold",
    "noresults": "fg:#888888 italic",
    "chip": "bg:#0000aa fg:white",
    "separator": "fg:#0000aa",
    "search": "bg:#eeeeee fg:#000000",
    "frame.border": "fg:#0000aa",
    "frame.label": "fg:#0000aa bold",
}


def presenter_message(level: str, message: str) -> str:
    template = PRESENTER_TEMPLATES.get(level, "{message}")
    return template.format(message=message)


def yes_no(value: bool) -> str:
    return "[green]yes[/green]" if value else "[dim]no[/dim]"
