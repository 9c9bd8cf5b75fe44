"""Directory listing for the navigator.

Reads the immediate children of one directory into a stable, sorted list of
``Entry`` rows. Scan failures are raised as ``ListingError`` instead of being
folded into an empty result, so callers can decide how to surface them.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Entry:
    """One child of the listed directory."""

    name: str
    is_dir: bool


class ListingError(OSError):
    """Raised when a directory cannot be scanned."""

    def __init__(self, path: Path, cause: OSError) -> None:
        reason = cause.strerror or str(cause)
        super().__init__(cause.errno, reason, str(path))
        self.path = path
        self.cause = cause

    def __str__(self) -> str:
        return f"cannot read {self.path}: {self.strerror}"


def _entry_is_dir(child: os.DirEntry[str]) -> bool:
    """Return whether ``child`` can be entered; symlinks are followed."""
    try:
        return child.is_dir(follow_symlinks=True)
    except OSError:
        return False


def entry_sort_key(entry: Entry) -> tuple[bool, str, str]:
    """Directories first, then case-insensitive name, then exact name."""
    return (not entry.is_dir, entry.name.casefold(), entry.name)


def list_entries(directory: Path, show_hidden: bool = True) -> list[Entry]:
    """List the visible children of ``directory`` in display order.

    Raises ``ListingError`` when the directory is missing or unreadable.
    """
    entries: list[Entry] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                name = child.name
                if not show_hidden and name.startswith("."):
                    continue
                entries.append(Entry(name=name, is_dir=_entry_is_dir(child)))
    except OSError as exc:
        logger.warning("listing %s failed: %s", directory, exc)
        raise ListingError(directory, exc) from exc

    entries.sort(key=entry_sort_key)
    logger.debug("listed %d entries in %s", len(entries), directory)
    return entries


__all__ = [
    "Entry",
    "ListingError",
    "entry_sort_key",
    "list_entries",
]
