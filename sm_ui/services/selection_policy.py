"""Add/remove policy used by the bundled hosts.

The core only reports which index the user interacted with; these helpers are
the host's decision of what that means for its own selection.
"""

from __future__ import annotations

from typing import Sequence


def toggle_index(selected: Sequence[int], index: int | None) -> list[int]:
    """Add ``index`` when absent, drop every occurrence when present."""
    current = list(selected)
    if index is None:
        return current
    if index in current:
        return [value for value in current if value != index]
    current.append(index)
    return current


def clear_selection() -> list[int]:
    return []
