"""Public package surface for lazycd.

Exports the navigation engine and ``main`` for programmatic CLI invocation.
"""

from __future__ import annotations

from .filtering import VisibleEntry, filter_entries
from .fuzzy import fuzzy_match_positions
from .listing import Entry, ListingError, list_entries
from .navigation import Intent, NavigationState


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "Entry",
    "Intent",
    "ListingError",
    "NavigationState",
    "VisibleEntry",
    "filter_entries",
    "fuzzy_match_positions",
    "list_entries",
    "main",
]
