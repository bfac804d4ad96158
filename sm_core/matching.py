"""Boolean option matching against search text."""

from __future__ import annotations

from typing import Callable, Sequence, TypeAlias

from sm_core.models import OptionRecord, VisibilityVector

OptionFilter: TypeAlias = Callable[[str, OptionRecord], bool]


def default_option_filter(search_text: str, option: OptionRecord) -> bool:
    """Case-insensitive substring match on textual content.

    Non-textual content never matches, whatever the search text. The empty
    search text matches every textual option.
    """
    content = option.content
    if not isinstance(content, str):
        return False
    if not search_text:
        return True
    return search_text.lower() in content.lower()


def compute_visibility(
    records: Sequence[OptionRecord],
    search_text: str,
    option_filter: OptionFilter = default_option_filter,
) -> VisibilityVector:
    """Evaluate ``option_filter`` for every record, in index order.

    Errors raised by a caller-supplied filter propagate unchanged.
    """
    return [bool(option_filter(search_text, record)) for record in records]


def first_match(
    records: Sequence[OptionRecord],
    search_text: str,
    option_filter: OptionFilter = default_option_filter,
) -> int | None:
    """Return the smallest matching record index, stopping at the first hit."""
    for record in records:
        if option_filter(search_text, record):
            return record.index
    return None
