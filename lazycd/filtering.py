"""Query filtering over a directory listing."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .fuzzy import fuzzy_match_positions
from .listing import Entry


@dataclass(frozen=True)
class VisibleEntry:
    """A listing entry that survived the current query.

    ``highlights`` are the matched character offsets in ``name`` and
    ``source_index`` is the entry's position in the unfiltered listing.
    """

    name: str
    highlights: tuple[int, ...]
    source_index: int
    is_dir: bool = False


def filter_entries(entries: Sequence[Entry], query: str) -> list[VisibleEntry]:
    """Keep entries whose names fuzzy-match ``query``, in listing order."""
    visible: list[VisibleEntry] = []
    for idx, entry in enumerate(entries):
        positions = fuzzy_match_positions(query, entry.name)
        if positions is None:
            continue
        visible.append(
            VisibleEntry(
                name=entry.name,
                highlights=tuple(positions),
                source_index=idx,
                is_dir=entry.is_dir,
            )
        )
    return visible


__all__ = [
    "VisibleEntry",
    "filter_entries",
]
