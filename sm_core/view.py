"""Render-ready snapshot of the selector for a given config and option set."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from sm_core.config import SelectorConfig
from sm_core.highlight import PartitionedText, partition
from sm_core.matching import compute_visibility
from sm_core.models import OptionRecord
from sm_core.store import has_no_results, no_results_message


@dataclass(frozen=True)
class OptionRow:
    record: OptionRecord
    is_hidden: bool
    is_selected: bool
    segments: PartitionedText | None = None
    is_highlighted: bool = False

    @property
    def index(self) -> int:
        return self.record.index

    @property
    def is_disabled(self) -> bool:
        return self.record.is_disabled


@dataclass(frozen=True)
class NoResultsEntry:
    message: str
    is_disabled: bool = True


@dataclass(frozen=True)
class SelectionChip:
    index: int
    label: Any
    is_orphaned: bool = False


@dataclass(frozen=True)
class SelectorView:
    rows: tuple[OptionRow, ...]
    chips: tuple[SelectionChip, ...]
    no_results: NoResultsEntry | None
    search_text: str
    has_reset: bool
    is_small: bool
    is_disabled: bool
    is_loading: bool
    is_selection_highlighted: bool
    max_menu_height: int | str | None

    @property
    def visible_rows(self) -> list[OptionRow]:
        return [row for row in self.rows if not row.is_hidden]

    @property
    def visible_count(self) -> int:
        return len(self.visible_rows)

    @property
    def show_selection_panel(self) -> bool:
        return bool(self.chips)


def _chips(records: Sequence[OptionRecord], selected: Sequence[int]) -> tuple[SelectionChip, ...]:
    chips: list[SelectionChip] = []
    for index in selected:
        if 0 <= index < len(records):
            chips.append(SelectionChip(index=index, label=records[index].content))
        else:
            chips.append(SelectionChip(index=index, label="", is_orphaned=True))
    return tuple(chips)


def build_view(
    config: SelectorConfig,
    records: Sequence[OptionRecord],
    visibility: Sequence[bool] | None = None,
) -> SelectorView:
    """Assemble rows, chips and the no-results entry.

    Highlight partitions are computed only for visible string options.
    Selected indices without a matching record degrade to blank orphaned
    chips; hidden options stay selected.
    """
    search_text = config.search_state.search_text
    selection = config.selection_state
    if visibility is None:
        visibility = compute_visibility(records, search_text, config.option_filter)

    rows: list[OptionRow] = []
    for record, visible in zip(records, visibility):
        segments = None
        if visible and record.is_text:
            segments = partition(record.content, search_text)
        is_selected = selection.contains(record.index)
        rows.append(
            OptionRow(
                record=record,
                is_hidden=not visible,
                is_selected=is_selected,
                segments=segments,
                is_highlighted=is_selected and config.is_selection_highlighted,
            )
        )

    no_results = None
    if has_no_results(visibility):
        no_results = NoResultsEntry(message=no_results_message(search_text))

    return SelectorView(
        rows=tuple(rows),
        chips=_chips(records, selection.selected_indices),
        no_results=no_results,
        search_text=search_text,
        has_reset=config.has_reset,
        is_small=config.responsive_mode == "small",
        is_disabled=config.is_disabled,
        is_loading=config.is_loading,
        is_selection_highlighted=config.is_selection_highlighted,
        max_menu_height=config.max_menu_height,
    )
