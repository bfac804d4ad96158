"""Host-side services: option loading and selection policy."""

from sm_ui.services.options_file import load_options, parse_options
from sm_ui.services.selection_policy import clear_selection, toggle_index

__all__ = ["clear_selection", "load_options", "parse_options", "toggle_index"]
