"""Outward-reported user actions.

The store never decides what an intent does to the caller's selection. The
raw interaction event that produced an intent rides along untouched so the
caller can inspect it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class InteractionSource(str, Enum):
    MENU = "menu"
    CHECKBOX = "checkbox"
    CHIP = "chip"


@dataclass(frozen=True)
class Interact:
    """Activate, toggle or remove a single option; the caller picks the policy."""

    index: int | None
    event: Any = None
    source: InteractionSource = InteractionSource.MENU


@dataclass(frozen=True)
class RemoveAll:
    event: Any = None


@dataclass(frozen=True)
class Search:
    search_text: str
    event: Any = None


Intent = Union[Interact, RemoveAll, Search]
