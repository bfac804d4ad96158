"""Split option text around the first case-insensitive match of a search string."""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple


class PartitionedText(NamedTuple):
    prefix: str
    match: str
    suffix: str

    @property
    def text(self) -> str:
        return f"{self.prefix}{self.match}{self.suffix}"

    @property
    def has_match(self) -> bool:
        return bool(self.match)

    def segments(self) -> Iterator[tuple[str, str]]:
        """Yield ``(role, text)`` for the non-empty segments only."""
        for role, value in (("pre", self.prefix), ("match", self.match), ("post", self.suffix)):
            if value:
                yield role, value


def partition(text: str, search_text: str) -> PartitionedText:
    """Partition ``text`` into (prefix, match, suffix).

    The search string is matched literally (``re.escape``) and without regard
    to case; only the first occurrence is returned. Concatenating the three
    parts always reproduces ``text``.
    """
    if not search_text:
        return PartitionedText(text, "", "")
    found = re.search(re.escape(search_text), text, flags=re.IGNORECASE)
    if found is None:
        return PartitionedText(text, "", "")
    start = found.start()
    end = start + len(search_text)
    return PartitionedText(text[:start], text[start:end], text[end:])
