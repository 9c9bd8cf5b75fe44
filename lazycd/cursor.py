"""Selection cursor arithmetic for the visible entry list.

A cursor is an index into the visible list, or ``None`` when the list is
empty. Movement saturates at both ends; there is no wraparound.
"""

from __future__ import annotations


def clamp_cursor(cursor: int | None, length: int) -> int | None:
    """Bring ``cursor`` back into ``[0, length)`` after the list changed."""
    if length <= 0:
        return None
    if cursor is None or cursor < 0:
        return 0
    if cursor >= length:
        return length - 1
    return cursor


def move_cursor(cursor: int | None, delta: int, length: int) -> int | None:
    """Move ``cursor`` by ``delta`` rows, stopping at the first/last row."""
    current = clamp_cursor(cursor, length)
    if current is None:
        return None
    return max(0, min(length - 1, current + delta))


__all__ = [
    "clamp_cursor",
    "move_cursor",
]
