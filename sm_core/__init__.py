"""Logic core of the searchable multi-select control."""

from sm_core.api import (
    NO_MATCH,
    EventDispatcher,
    SelectionStore,
    SelectorCallbacks,
    SelectorConfig,
    build_view,
    flatten,
    partition,
)

__all__ = [
    "NO_MATCH",
    "EventDispatcher",
    "SelectionStore",
    "SelectorCallbacks",
    "SelectorConfig",
    "build_view",
    "flatten",
    "partition",
]
