"""Interactive prompt_toolkit host for the searchable multi-select."""

from __future__ import annotations

from typing import Any

from prompt_toolkit.application import Application
from prompt_toolkit.filters import Condition
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.containers import ConditionalContainer
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import Frame, TextArea

from sm_core.config import SelectorConfig
from sm_core.dispatcher import CallbackMeta, EventDispatcher, SelectorCallbacks
from sm_core.models import NO_MATCH, OptionTree
from sm_core.store import SelectionStore
from sm_core.view import OptionRow, SelectorView, build_view
from sm_ui.presenters import theme
from sm_ui.services.selection_policy import clear_selection, toggle_index

Fragment = tuple[str, str]


class ScreenMenu:
    """Menu collaborator: the option list pane is shown only while expanded."""

    def __init__(self, expanded: bool = True) -> None:
        self.is_expanded = expanded

    def expand(self) -> None:
        self.is_expanded = True

    def collapse(self) -> None:
        self.is_expanded = False


class SelectorScreenState:
    """Everything the screen does, minus prompt_toolkit.

    Owns the host side of the contract: the cursor and the add/remove policy
    applied to whatever index the core reports.
    """

    def __init__(self, options: OptionTree, config: SelectorConfig | None = None) -> None:
        self.config = config or SelectorConfig()
        self.menu = ScreenMenu()
        self.cursor = 0
        self.store = SelectionStore(self.config, options=options, menu=self.menu)
        self.dispatcher = EventDispatcher(
            self.store,
            SelectorCallbacks(
                on_search=self._on_search,
                on_select=self._on_select,
                on_remove_all=self._on_remove_all,
            ),
        )

    @property
    def view(self) -> SelectorView:
        return build_view(self.config, self.store.records)

    def _apply(self, config: SelectorConfig) -> None:
        self.config = config
        self.store.config = config

    def _on_search(self, search_text: str, first_visible_index: int, meta: CallbackMeta) -> None:
        self._apply(self.config.with_state(search_text=search_text))
        # The first visible option is always the top visible row.
        self.cursor = 0 if first_visible_index != NO_MATCH else -1

    def _on_select(self, index: int | None, meta: CallbackMeta) -> None:
        self._apply(
            self.config.with_state(selected_indices=toggle_index(self.config.selected_indices, index))
        )

    def _on_remove_all(self, meta: CallbackMeta) -> None:
        self._apply(self.config.with_state(selected_indices=clear_selection()))

    def current_row(self) -> OptionRow | None:
        rows = self.view.visible_rows
        if not rows or self.cursor < 0:
            return None
        return rows[min(self.cursor, len(rows) - 1)]

    def move(self, delta: int) -> None:
        count = self.view.visible_count
        if count == 0:
            self.cursor = -1
            return
        self.cursor = max(0, min(max(self.cursor, 0) + delta, count - 1))

    def _actionable_row(self) -> OptionRow | None:
        if self.config.is_disabled:
            return None
        row = self.current_row()
        if row is None or row.is_disabled:
            return None
        return row

    def search(self, text: str, event: Any = None) -> None:
        if self.config.is_disabled:
            return
        self.dispatcher.handle_search(text, event)

    def activate_current(self, event: Any = None) -> None:
        row = self._actionable_row()
        if row is not None:
            self.dispatcher.handle_menu_select(row.index, event)

    def toggle_current(self, event: Any = None) -> None:
        row = self._actionable_row()
        if row is not None:
            self.dispatcher.handle_checkbox_select(not row.is_selected, row.index, event)

    def remove_last_chip(self, event: Any = None) -> None:
        if self.config.is_disabled or not self.config.selected_indices:
            return
        self.dispatcher.handle_selection_remove(self.config.selected_indices[-1], event)

    def remove_all(self, event: Any = None) -> None:
        if self.config.is_disabled or not self.config.has_reset:
            return
        if self.config.selected_indices:
            self.dispatcher.handle_remove_all(event)

    def option_fragments(self) -> list[Fragment]:
        view = self.view
        if view.is_loading:
            return [("class:noresults", "  Loading...\n")]
        if view.no_results is not None:
            return [("class:noresults", f"  {view.no_results.message}\n")]

        fragments: list[Fragment] = []
        current = self.current_row()
        last_group: tuple[str, ...] = ()
        for row in view.visible_rows:
            group = row.record.group_path
            if group and group != last_group:
                fragments.append(("class:group", f" {' / '.join(group)}\n"))
            last_group = group

            is_cursor = current is not None and row.index == current.index
            row_style = "class:cursor" if is_cursor else ""
            if row.is_highlighted and not is_cursor:
                row_style = "class:selected"
            if row.is_disabled:
                row_style = f"{row_style} class:disabled".strip()
            marker = "[x]" if row.is_selected else "[ ]"
            if row.is_disabled:
                marker = "[-]"
            marker_style = "class:checked" if row.is_selected and not is_cursor else row_style
            fragments.append((row_style, " > " if is_cursor else "   "))
            fragments.append((marker_style, f"{marker} "))
            if row.segments is None:
                fragments.append((row_style, str(row.record.content)))
            else:
                for role, value in row.segments.segments():
                    style = f"{row_style} class:match".strip() if role == "match" else row_style
                    fragments.append((style, value))
            fragments.append(("", "\n"))
        return fragments

    def chip_fragments(self) -> list[Fragment]:
        view = self.view
        if not view.show_selection_panel:
            return [("class:noresults", "Nothing selected")]
        fragments: list[Fragment] = [("class:group", "Selected: ")]
        for chip in view.chips:
            label = chip.label if isinstance(chip.label, str) and chip.label else f"#{chip.index}"
            fragments.append(("class:chip", f" {label} x "))
            fragments.append(("", " "))
        if view.has_reset:
            fragments.append(("class:disabled", "(Ctrl-R clears)"))
        return fragments


class SelectorScreen:
    """Full-screen application wrapping :class:`SelectorScreenState`.

    ``run`` returns the selected indices, or None when cancelled.
    """

    def __init__(self, options: OptionTree, *, title: str, config: SelectorConfig | None = None) -> None:
        self.state = SelectorScreenState(options, config)
        self.search = TextArea(
            height=1,
            prompt="Search: ",
            multiline=False,
            style="class:search",
            text=self.state.config.search_text,
        )
        self.list_control = FormattedTextControl(self.state.option_fragments, focusable=True)
        self.chips_control = FormattedTextControl(self.state.chip_fragments)
        self._kb = self._bindings()

        max_height = self.state.config.max_menu_height
        list_height = Dimension(max=max_height) if isinstance(max_height, int) else None

        inner_layout = HSplit(
            [
                self.search,
                Window(height=1, char="-", style="class:separator"),
                ConditionalContainer(
                    Window(self.list_control, height=list_height),
                    filter=Condition(lambda: self.state.menu.is_expanded),
                ),
                Window(height=1, char="-", style="class:separator"),
                Window(self.chips_control, height=1 if self.state.view.is_small else 2),
            ]
        )

        self._app: Application = Application(
            layout=Layout(Frame(inner_layout, title=title), focused_element=self.search),
            key_bindings=self._kb,
            style=Style.from_dict(theme.PT_STYLES),
            full_screen=True,
        )

        self.search.buffer.on_text_changed += self._on_text_changed

    def _on_text_changed(self, buffer: Any) -> None:
        self.state.search(buffer.text, event=buffer)
        self._app.invalidate()

    def run(self) -> list[int] | None:
        return self._app.run()

    def _bindings(self) -> KeyBindings:
        kb = KeyBindings()

        @kb.add("down")
        def _(event: Any) -> None:
            self.state.move(1)

        @kb.add("up")
        def _(event: Any) -> None:
            self.state.move(-1)

        @kb.add("space")
        def _(event: Any) -> None:
            self.state.toggle_current(event)

        @kb.add("enter")
        def _(event: Any) -> None:
            self.state.activate_current(event)

        @kb.add("c-x")
        def _(event: Any) -> None:
            self.state.remove_last_chip(event)

        @kb.add("c-r")
        def _(event: Any) -> None:
            self.state.remove_all(event)

        @kb.add("c-e")
        def _(event: Any) -> None:
            if self.state.menu.is_expanded:
                self.state.menu.collapse()
            else:
                self.state.menu.expand()

        @kb.add("c-s")
        def _(event: Any) -> None:
            event.app.exit(result=list(self.state.config.selected_indices))

        @kb.add("escape")
        @kb.add("c-c")
        def _(event: Any) -> None:
            event.app.exit(result=None)

        return kb
