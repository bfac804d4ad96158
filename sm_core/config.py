"""Selector configuration with its defaults declared in one place."""

from __future__ import annotations

import os
from typing import Any, Callable, Literal, Sequence

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError, field_validator

from sm_common.config.env import parse_bool_env, parse_choice_env, parse_int_env
from sm_common.errors import ConfigurationError
from sm_core.matching import default_option_filter
from sm_core.models import OptionRecord, SearchState, SelectionState

ResponsiveMode = Literal["small", "medium", "large"]
_RESPONSIVE_MODES = {"small", "medium", "large"}

_UNSET: Any = object()


class SelectorConfig(BaseModel):
    """Controlled inputs of the selector.

    Hosts never mutate an instance; they derive the next one with
    :meth:`with_state` after deciding how an intent changes their selection.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    has_reset: bool = True
    is_disabled: bool = False
    is_loading: bool = False
    is_selection_highlighted: bool = True
    search_text: str = ""
    selected_indices: tuple[StrictInt, ...] = ()
    responsive_mode: ResponsiveMode = "large"
    max_menu_height: int | str | None = None
    option_filter: Callable[[str, OptionRecord], bool] = Field(
        default=default_option_filter,
        description="Predicate deciding whether an option is visible for a search text",
    )

    @field_validator("search_text", mode="before")
    @classmethod
    def _none_search_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("selected_indices", mode="before")
    @classmethod
    def _none_selection_is_empty(cls, value: Any) -> Any:
        return () if value is None else value

    @property
    def search_state(self) -> SearchState:
        return SearchState(search_text=self.search_text)

    @property
    def selection_state(self) -> SelectionState:
        return SelectionState(selected_indices=self.selected_indices)

    @classmethod
    def build(cls, **values: Any) -> "SelectorConfig":
        """Validate ``values`` and raise ConfigurationError on bad input."""
        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigurationError(
                "Invalid selector configuration",
                context={"fields": sorted(str(err["loc"][0]) for err in exc.errors() if err["loc"])},
                cause=exc,
            ) from exc

    @classmethod
    def from_env(cls, **overrides: Any) -> "SelectorConfig":
        """Build a config seeded from ``SM_*`` environment variables."""
        values: dict[str, Any] = {}
        mode = parse_choice_env(os.environ.get("SM_RESPONSIVE_MODE"), _RESPONSIVE_MODES)
        if mode is not None:
            values["responsive_mode"] = mode
        height = parse_int_env(os.environ.get("SM_MAX_MENU_HEIGHT"))
        if height is not None:
            values["max_menu_height"] = height
        has_reset = parse_bool_env(os.environ.get("SM_HAS_RESET"))
        if has_reset is not None:
            values["has_reset"] = has_reset
        values.update(overrides)
        return cls.build(**values)

    def with_state(
        self,
        *,
        search_text: str = _UNSET,
        selected_indices: Sequence[int] = _UNSET,
    ) -> "SelectorConfig":
        """Return a copy carrying the caller's next search text and/or selection."""
        update: dict[str, Any] = {}
        if search_text is not _UNSET:
            update["search_text"] = search_text or ""
        if selected_indices is not _UNSET:
            update["selected_indices"] = tuple(selected_indices or ())
        return self.model_copy(update=update)
