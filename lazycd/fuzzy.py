"""Greedy subsequence matching for entry names.

Matching is case-insensitive and reports the character offsets that matched
so renderers can highlight them. There is no scoring: a candidate either
matches or it does not.
"""

from __future__ import annotations


def fuzzy_match_positions(query: str, candidate: str) -> list[int] | None:
    """Return matched offsets of ``query`` inside ``candidate`` or ``None``.

    Each query character is matched at the earliest candidate position after
    the previous match. An empty query matches everything with no offsets.
    """
    if not query:
        return []

    positions: list[int] = []
    idx = 0
    n = len(candidate)
    for needle in query:
        needle_folded = needle.casefold()
        while idx < n and candidate[idx].casefold() != needle_folded:
            idx += 1
        if idx >= n:
            return None
        positions.append(idx)
        idx += 1
    return positions


__all__ = [
    "fuzzy_match_positions",
]
