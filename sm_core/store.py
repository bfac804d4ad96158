"""Stateless reducer computing derived selector values for each intent."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, Sequence

from sm_common.errors import UnsupportedIntentError
from sm_core.config import SelectorConfig
from sm_core.intents import Intent, Interact, RemoveAll, Search
from sm_core.matching import compute_visibility, first_match
from sm_core.models import NO_MATCH, OptionRecord, OptionTree, VisibilityVector
from sm_core.registry import OptionRegistry

logger = logging.getLogger(__name__)

NO_RESULTS_TEMPLATE = 'No results match "{search_text}"'


class MenuCollaborator(Protocol):
    """The overlay menu driven by the selector."""

    def expand(self) -> None: ...

    def collapse(self) -> None: ...


@dataclass(frozen=True)
class StoreOutput:
    intent: Intent
    visibility: VisibilityVector
    first_visible_index: int

    @property
    def has_no_results(self) -> bool:
        return not any(self.visibility)


def no_results_message(search_text: str) -> str:
    return NO_RESULTS_TEMPLATE.format(search_text=search_text)


def has_no_results(visibility: Sequence[bool]) -> bool:
    """True iff every option is hidden (also true when there are none)."""
    return not any(visibility)


class SelectionStore:
    """Computes visibility, first-visible-index and surfaced intents.

    Besides the registry cache nothing is retained between calls: the
    search text and selection always come from the supplied config.
    """

    def __init__(
        self,
        config: SelectorConfig | None = None,
        *,
        options: OptionTree | None = None,
        registry: OptionRegistry | None = None,
        menu: MenuCollaborator | None = None,
    ) -> None:
        self.config = config or SelectorConfig()
        self.registry = registry or OptionRegistry()
        self.menu = menu
        self._options = options

    @property
    def options(self) -> OptionTree | None:
        return self._options

    @options.setter
    def options(self, value: OptionTree | None) -> None:
        self._options = value

    @property
    def records(self) -> list[OptionRecord]:
        return self.registry.records(self._options)

    def visibility(self, search_text: str | None = None) -> VisibilityVector:
        text = self.config.search_state.search_text if search_text is None else search_text
        return compute_visibility(self.records, text, self.config.option_filter)

    def first_visible_index(self, search_text: str | None = None) -> int:
        text = self.config.search_state.search_text if search_text is None else search_text
        found = first_match(self.records, text, self.config.option_filter)
        return NO_MATCH if found is None else found

    def no_results_message(self, search_text: str | None = None) -> str:
        text = self.config.search_state.search_text if search_text is None else search_text
        return no_results_message(text)

    def reduce(self, intent: Intent) -> StoreOutput:
        """Compute the observable output for ``intent``.

        For :class:`Search` the menu is expanded before this method returns,
        so it always happens before the caller sees the result.
        """
        if isinstance(intent, Search):
            visibility = self.visibility(intent.search_text)
            first_index = next(
                (idx for idx, visible in enumerate(visibility) if visible), NO_MATCH
            )
            if self.menu is not None:
                self.menu.expand()
            logger.debug(
                "Search %r matched %d of %d options (first=%d)",
                intent.search_text,
                sum(visibility),
                len(visibility),
                first_index,
            )
            return StoreOutput(intent, visibility, first_index)
        if isinstance(intent, (Interact, RemoveAll)):
            visibility = self.visibility()
            first_index = next(
                (idx for idx, visible in enumerate(visibility) if visible), NO_MATCH
            )
            return StoreOutput(intent, visibility, first_index)
        raise UnsupportedIntentError(
            "Selection store received an unknown intent",
            context={"intent_type": type(intent).__name__},
        )
