"""Scriptable selector host for CI, the CLI and tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from sm_core.config import SelectorConfig
from sm_core.dispatcher import CallbackMeta, EventDispatcher, SelectorCallbacks
from sm_core.models import OptionTree
from sm_core.store import SelectionStore, StoreOutput
from sm_core.view import SelectorView, build_view
from sm_ui.services.selection_policy import clear_selection, toggle_index


@dataclass
class RecordedIntent:
    kind: str
    index: int | None = None
    search_text: str | None = None
    first_visible_index: int | None = None
    event: Any = None


@dataclass
class HeadlessMenu:
    timeline: list[str] = field(default_factory=list)
    is_expanded: bool = False

    def expand(self) -> None:
        self.is_expanded = True
        self.timeline.append("menu.expand")

    def collapse(self) -> None:
        self.is_expanded = False
        self.timeline.append("menu.collapse")


@dataclass
class HeadlessSelector:
    """Owns a selection and drives the core like an interactive host would.

    Interactions toggle the selection through :func:`toggle_index`; the core
    itself only reports them.
    """

    options: OptionTree
    config: SelectorConfig = field(default_factory=SelectorConfig)
    recorded_intents: list[RecordedIntent] = field(default_factory=list)
    timeline: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.menu = HeadlessMenu(timeline=self.timeline)
        self.store = SelectionStore(self.config, options=self.options, menu=self.menu)
        self.dispatcher = EventDispatcher(
            self.store,
            SelectorCallbacks(
                on_search=self._on_search,
                on_select=self._on_select,
                on_remove_all=self._on_remove_all,
            ),
        )

    @property
    def selected_indices(self) -> tuple[int, ...]:
        return self.config.selected_indices

    @property
    def view(self) -> SelectorView:
        return build_view(self.config, self.store.records)

    def _apply(self, config: SelectorConfig) -> None:
        self.config = config
        self.store.config = config

    def _on_search(self, search_text: str, first_visible_index: int, meta: CallbackMeta) -> None:
        self.timeline.append("on_search")
        self.recorded_intents.append(
            RecordedIntent(
                kind="search",
                search_text=search_text,
                first_visible_index=first_visible_index,
                event=meta.event,
            )
        )
        self._apply(self.config.with_state(search_text=search_text))

    def _on_select(self, index: int | None, meta: CallbackMeta) -> None:
        self.timeline.append("on_select")
        self.recorded_intents.append(RecordedIntent(kind="select", index=index, event=meta.event))
        self._apply(
            self.config.with_state(selected_indices=toggle_index(self.config.selected_indices, index))
        )

    def _on_remove_all(self, meta: CallbackMeta) -> None:
        self.timeline.append("on_remove_all")
        self.recorded_intents.append(RecordedIntent(kind="remove_all", event=meta.event))
        self._apply(self.config.with_state(selected_indices=clear_selection()))

    def search(self, search_text: str, event: Any = None) -> StoreOutput:
        return self.dispatcher.handle_search(search_text, event)

    def activate(self, index: int | None, event: Any = None) -> StoreOutput:
        return self.dispatcher.handle_menu_select(index, event)

    def toggle(self, index: int, event: Any = None) -> StoreOutput:
        is_selected = index in self.config.selected_indices
        return self.dispatcher.handle_checkbox_select(not is_selected, index, event)

    def remove_chip(self, index: int, event: Any = None) -> StoreOutput:
        return self.dispatcher.handle_selection_remove(index, event)

    def remove_all(self, event: Any = None) -> StoreOutput:
        return self.dispatcher.handle_remove_all(event)
