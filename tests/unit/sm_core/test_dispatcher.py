"""Tests for mapping collaborator events onto intents and callbacks."""

from __future__ import annotations

import pytest

from sm_core.config import SelectorConfig
from sm_core.dispatcher import EventDispatcher, SelectorCallbacks
from sm_core.intents import Interact, InteractionSource, RemoveAll
from sm_core.models import NO_MATCH
from sm_core.store import SelectionStore


pytestmark = pytest.mark.unit_core


class Timeline:
    def __init__(self) -> None:
        self.entries: list[tuple] = []

    def expand(self) -> None:
        self.entries.append(("expand",))

    def collapse(self) -> None:
        self.entries.append(("collapse",))

    def on_search(self, search_text, first_visible_index, meta) -> None:
        self.entries.append(("search", search_text, first_visible_index, meta.event))

    def on_select(self, index, meta) -> None:
        self.entries.append(("select", index, meta.event))

    def on_remove_all(self, meta) -> None:
        self.entries.append(("remove_all", meta.event))


@pytest.fixture
def timeline() -> Timeline:
    return Timeline()


@pytest.fixture
def dispatcher(timeline: Timeline) -> EventDispatcher:
    store = SelectionStore(
        SelectorConfig(selected_indices=[2]),
        options=["Apple", "Banana", "Cherry"],
        menu=timeline,
    )
    return EventDispatcher(
        store,
        SelectorCallbacks(
            on_search=timeline.on_search,
            on_select=timeline.on_select,
            on_remove_all=timeline.on_remove_all,
        ),
    )


def test_search_expands_menu_before_reporting(dispatcher, timeline) -> None:
    event = object()
    output = dispatcher.handle_search("an", event)

    assert timeline.entries == [("expand",), ("search", "an", 1, event)]
    assert output.first_visible_index == 1


def test_search_reports_sentinel(dispatcher, timeline) -> None:
    dispatcher.handle_search("zzz")
    assert timeline.entries[-1] == ("search", "zzz", NO_MATCH, None)


@pytest.mark.parametrize(
    ("method", "args", "source"),
    [
        ("handle_menu_select", (1,), InteractionSource.MENU),
        ("handle_checkbox_select", (True, 1), InteractionSource.CHECKBOX),
        ("handle_checkbox_select", (False, 1), InteractionSource.CHECKBOX),
        ("handle_selection_remove", (1,), InteractionSource.CHIP),
    ],
)
def test_every_gesture_becomes_interact(dispatcher, timeline, method, args, source) -> None:
    event = {"raw": method}
    output = getattr(dispatcher, method)(*args, event=event)

    assert isinstance(output.intent, Interact)
    assert output.intent.index == 1
    assert output.intent.source is source
    assert output.intent.event is event
    assert timeline.entries == [("select", 1, event)]


def test_interact_does_not_change_selection(dispatcher) -> None:
    dispatcher.handle_selection_remove(2)
    assert dispatcher.store.config.selected_indices == (2,)


def test_menu_select_passes_none_through(dispatcher, timeline) -> None:
    dispatcher.handle_menu_select(None)
    assert timeline.entries == [("select", None, None)]


def test_remove_all(dispatcher, timeline) -> None:
    output = dispatcher.handle_remove_all("click")

    assert isinstance(output.intent, RemoveAll)
    assert timeline.entries == [("remove_all", "click")]


def test_meta_carries_current_config() -> None:
    seen = []
    config = SelectorConfig(search_text="b")
    store = SelectionStore(config, options=["a", "b"])
    dispatcher = EventDispatcher(store, SelectorCallbacks(on_select=lambda index, meta: seen.append(meta)))

    dispatcher.handle_menu_select(0, event="evt")

    assert seen[0].config is config
    assert seen[0].event == "evt"


def test_default_callbacks_are_noops() -> None:
    dispatcher = EventDispatcher(SelectionStore(options=["a"]))
    assert dispatcher.handle_search("a").first_visible_index == 0
    assert dispatcher.handle_remove_all().intent == RemoveAll()
