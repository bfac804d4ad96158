"""Adapt raw menu, checkbox and chip events onto store intents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Protocol

from sm_core.config import SelectorConfig
from sm_core.intents import Interact, InteractionSource, RemoveAll, Search
from sm_core.store import SelectionStore, StoreOutput


@dataclass(frozen=True)
class CallbackMeta:
    """Context handed to every outbound callback.

    ``event`` is whatever object the collaborator produced; it is never
    inspected here.
    """

    event: Any
    config: SelectorConfig


class SearchCallback(Protocol):
    def __call__(self, search_text: str, first_visible_index: int, meta: CallbackMeta) -> Any: ...


class SelectCallback(Protocol):
    def __call__(self, index: int | None, meta: CallbackMeta) -> Any: ...


def _noop(*_args: Any, **_kwargs: Any) -> None:
    return None


@dataclass
class SelectorCallbacks:
    on_search: SearchCallback = field(default=_noop)
    on_select: SelectCallback = field(default=_noop)
    on_remove_all: Callable[[CallbackMeta], Any] = field(default=_noop)


class EventDispatcher:
    """One handler per collaborator gesture.

    Menu activation, checkbox toggle and chip removal all become the same
    ``Interact`` intent and reach ``on_select``; the caller decides whether
    that adds or removes the index.
    """

    def __init__(self, store: SelectionStore, callbacks: SelectorCallbacks | None = None) -> None:
        self.store = store
        self.callbacks = callbacks or SelectorCallbacks()

    def _meta(self, event: Any) -> CallbackMeta:
        return CallbackMeta(event=event, config=self.store.config)

    def _interact(self, index: int | None, event: Any, source: InteractionSource) -> StoreOutput:
        output = self.store.reduce(Interact(index=index, event=event, source=source))
        self.callbacks.on_select(index, self._meta(event))
        return output

    def handle_menu_select(self, option_index: int | None, event: Any = None) -> StoreOutput:
        return self._interact(option_index, event, InteractionSource.MENU)

    def handle_checkbox_select(
        self, is_selected: bool, callback_id: int | None, event: Any = None
    ) -> StoreOutput:
        # The checkbox's own state is not used to infer add/remove.
        _ = is_selected
        return self._interact(callback_id, event, InteractionSource.CHECKBOX)

    def handle_selection_remove(self, callback_id: int | None, event: Any = None) -> StoreOutput:
        return self._interact(callback_id, event, InteractionSource.CHIP)

    def handle_remove_all(self, event: Any = None) -> StoreOutput:
        output = self.store.reduce(RemoveAll(event=event))
        self.callbacks.on_remove_all(self._meta(event))
        return output

    def handle_search(self, search_text: str, event: Any = None) -> StoreOutput:
        output = self.store.reduce(Search(search_text=search_text, event=event))
        self.callbacks.on_search(search_text, output.first_visible_index, self._meta(event))
        return output
