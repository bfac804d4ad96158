"""Data model shared by every sm_core component."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence, TypeAlias, Union

NO_MATCH = -1
"""First-visible-index sentinel used when no option matches."""


@dataclass(frozen=True)
class OptionDescriptor:
    """A caller-declared leaf option.

    ``content`` is usually a string; any other object is treated as an opaque
    renderable that the default matcher never matches. ``None`` marks a
    malformed option which still occupies an index.
    """

    content: Any = None
    is_disabled: bool = False
    props: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class OptionGroup:
    """Rendering-only grouping of options; contributes no index."""

    label: str = ""
    children: Sequence["OptionNode"] = ()


OptionNode: TypeAlias = Union[OptionDescriptor, OptionGroup, str, Mapping[str, Any]]
OptionTree: TypeAlias = Sequence[OptionNode]


@dataclass(frozen=True)
class OptionRecord:
    """One flattened, indexed, selectable entry."""

    index: int
    content: Any
    is_disabled: bool = False
    group_path: tuple[str, ...] = ()
    props: Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_text(self) -> bool:
        return isinstance(self.content, str)


@dataclass(frozen=True)
class SearchState:
    search_text: str = ""


@dataclass(frozen=True)
class SelectionState:
    """Caller-owned selection; duplicates and stale indices are allowed."""

    selected_indices: tuple[int, ...] = ()

    def contains(self, index: int) -> bool:
        return index in self.selected_indices


VisibilityVector: TypeAlias = list[bool]
