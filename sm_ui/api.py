"""Stable UI API surface."""

from __future__ import annotations

from sm_ui.cli import app, main
from sm_ui.headless import HeadlessMenu, HeadlessSelector, RecordedIntent
from sm_ui.presenters.rich_view import build_options_table, highlighted_text, render_chips
from sm_ui.services.options_file import load_options, parse_options
from sm_ui.services.selection_policy import clear_selection, toggle_index
from sm_ui.tui.selector_screen import ScreenMenu, SelectorScreen, SelectorScreenState

__all__ = [
    "app",
    "main",
    "HeadlessMenu",
    "HeadlessSelector",
    "RecordedIntent",
    "ScreenMenu",
    "SelectorScreen",
    "SelectorScreenState",
    "build_options_table",
    "clear_selection",
    "highlighted_text",
    "load_options",
    "parse_options",
    "render_chips",
    "toggle_index",
]
