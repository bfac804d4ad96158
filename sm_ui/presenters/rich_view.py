"""Rich renderables for selector views."""

from __future__ import annotations

from rich.console import RenderableType
from rich.protocol import is_renderable
from rich.table import Table
from rich.text import Text

from sm_core.highlight import PartitionedText
from sm_core.view import OptionRow, SelectionChip, SelectorView
from sm_ui.presenters import theme


def highlighted_text(segments: PartitionedText, *, base_style: str = "") -> Text:
    """Build a Text from non-empty segments, styling only the match."""
    text = Text(style=base_style)
    for role, value in segments.segments():
        text.append(value, style=theme.RICH_MATCH_STYLE if role == "match" else None)
    return text


def row_label(row: OptionRow) -> RenderableType:
    base_style = theme.RICH_DISABLED_STYLE if row.is_disabled else ""
    if row.is_highlighted:
        base_style = f"{base_style} {theme.RICH_SELECTED_STYLE}".strip()
    if row.segments is not None:
        return highlighted_text(row.segments, base_style=base_style)
    content = row.record.content
    if isinstance(content, str):
        return Text(content, style=f"{base_style} {theme.RICH_HIDDEN_STYLE}".strip())
    if is_renderable(content):
        return content
    return Text(str(content), style=base_style)


def chip_label(chip: SelectionChip) -> Text:
    if chip.is_orphaned:
        return Text(f" #{chip.index} ", style=theme.RICH_ORPHAN_CHIP_STYLE)
    label = chip.label if isinstance(chip.label, str) else f"#{chip.index}"
    return Text(f" {label} ", style=theme.RICH_CHIP_STYLE)


def render_chips(view: SelectorView) -> Text:
    """One line of chips; empty when nothing is selected."""
    line = Text()
    if not view.show_selection_panel:
        return line
    line.append("Selected: ", style=theme.RICH_ACCENT_BOLD)
    for position, chip in enumerate(view.chips):
        if position:
            line.append(" ")
        line.append_text(chip_label(chip))
    return line


def build_options_table(view: SelectorView, *, show_hidden: bool = True) -> Table:
    table = Table(
        title=f'Options matching "{view.search_text}"' if view.search_text else "Options",
        show_lines=False,
        border_style=theme.RICH_BORDER_STYLE,
        header_style=theme.RICH_ACCENT_BOLD,
        title_style=theme.RICH_ACCENT_BOLD,
    )
    table.add_column("#", justify="right")
    table.add_column("Group")
    table.add_column("Option")
    table.add_column("Visible", justify="center")
    table.add_column("Selected", justify="center")

    for row in view.rows:
        if row.is_hidden and not show_hidden:
            continue
        table.add_row(
            str(row.index),
            " / ".join(label for label in row.record.group_path if label),
            row_label(row),
            theme.yes_no(not row.is_hidden),
            theme.yes_no(row.is_selected),
        )
    if view.no_results is not None:
        table.add_row("", "", Text(view.no_results.message, style=theme.RICH_HIDDEN_STYLE), "", "")
    return table
