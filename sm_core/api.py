"""Public API surface for sm_core."""

from sm_core.config import SelectorConfig
from sm_core.dispatcher import CallbackMeta, EventDispatcher, SelectorCallbacks
from sm_core.highlight import PartitionedText, partition
from sm_core.intents import Interact, InteractionSource, RemoveAll, Search
from sm_core.matching import OptionFilter, compute_visibility, default_option_filter
from sm_core.models import (
    NO_MATCH,
    OptionDescriptor,
    OptionGroup,
    OptionRecord,
    SearchState,
    SelectionState,
)
from sm_core.registry import OptionRegistry, flatten
from sm_core.store import MenuCollaborator, SelectionStore, StoreOutput, no_results_message
from sm_core.view import NoResultsEntry, OptionRow, SelectionChip, SelectorView, build_view

__all__ = [
    "NO_MATCH",
    "CallbackMeta",
    "EventDispatcher",
    "Interact",
    "InteractionSource",
    "MenuCollaborator",
    "NoResultsEntry",
    "OptionDescriptor",
    "OptionFilter",
    "OptionGroup",
    "OptionRecord",
    "OptionRegistry",
    "OptionRow",
    "PartitionedText",
    "RemoveAll",
    "Search",
    "SearchState",
    "SelectionChip",
    "SelectionState",
    "SelectionStore",
    "SelectorCallbacks",
    "SelectorConfig",
    "SelectorView",
    "StoreOutput",
    "build_view",
    "compute_visibility",
    "default_option_filter",
    "flatten",
    "no_results_message",
    "partition",
]
