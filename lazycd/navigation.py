"""Navigation state machine for the directory browser.

``NavigationState`` owns the current directory, its listing, the search
query and the selection cursor. Every change arrives as an ``Intent`` through
``update``; the visible list and cursor are recomputed before it returns.
"""

from __future__ import annotations

import logging
import os
from enum import Enum
from pathlib import Path

from .cursor import clamp_cursor, move_cursor
from .filtering import VisibleEntry, filter_entries
from .listing import Entry, ListingError, list_entries

logger = logging.getLogger(__name__)


class Intent(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    SEARCH = "search"
    ENTER = "enter"


class NavigationState:
    """Current directory, listing, query and cursor of one browsing session.

    ``search`` and ``search_mode`` are plain attributes edited by the input
    layer; after changing ``search`` callers apply ``Intent.SEARCH``.
    A directory that cannot be read yields an empty listing and records the
    error in ``last_error`` instead of raising.
    """

    def __init__(self, start_path: Path | None = None, show_hidden: bool = True) -> None:
        if start_path is None:
            start_path = Path.cwd()
        self.show_hidden = show_hidden
        self.search = ""
        self.search_mode = True
        self.cursor: int | None = None
        self.last_error: ListingError | None = None
        self._current_path = Path(os.path.abspath(start_path))
        self._entries: list[Entry] = []
        self._files: list[VisibleEntry] = []
        self._load(self._current_path)

    @classmethod
    def new(cls, show_hidden: bool = True) -> NavigationState:
        """Create a navigator rooted at the process working directory."""
        return cls(Path.cwd(), show_hidden=show_hidden)

    @property
    def current_dir(self) -> Path:
        return self._current_path

    @property
    def entries(self) -> tuple[Entry, ...]:
        return tuple(self._entries)

    @property
    def files(self) -> tuple[VisibleEntry, ...]:
        return tuple(self._files)

    def get_current_dir(self) -> Path:
        return self._current_path

    def get_files(self) -> tuple[VisibleEntry, ...]:
        return self.files

    @property
    def selected(self) -> VisibleEntry | None:
        """Return the entry under the cursor, if any."""
        if self.cursor is None:
            return None
        return self._files[self.cursor]

    def update(self, intent: Intent) -> bool:
        """Apply one intent; return ``True`` when the session should finish."""
        logger.debug("intent %s in %s", intent.value, self._current_path)
        if intent is Intent.DOWN:
            self.cursor = move_cursor(self.cursor, 1, len(self._files))
        elif intent is Intent.UP:
            self.cursor = move_cursor(self.cursor, -1, len(self._files))
        elif intent is Intent.RIGHT:
            self._enter_selected()
        elif intent is Intent.LEFT:
            self._leave_directory()
        elif intent is Intent.SEARCH:
            self._refilter()
        elif intent is Intent.ENTER:
            self._enter_selected()
            return True
        return False

    def push_search(self, text: str) -> None:
        """Append ``text`` to the query and refilter."""
        if not text:
            return
        self.search += text
        self.update(Intent.SEARCH)

    def pop_search(self) -> bool:
        """Drop the last query character; return ``False`` if it was empty."""
        if not self.search:
            return False
        self.search = self.search[:-1]
        self.update(Intent.SEARCH)
        return True

    def toggle_hidden(self) -> None:
        """Flip dot-file visibility and reload the current directory."""
        self.show_hidden = not self.show_hidden
        self._reload(self._current_path, reset_query=False)

    def _enter_selected(self) -> None:
        entry = self.selected
        if entry is None or not entry.is_dir:
            return
        self._change_directory(self._current_path / entry.name)

    def _leave_directory(self) -> None:
        parent = self._current_path.parent
        if parent == self._current_path:
            return
        self._change_directory(parent)

    def _change_directory(self, target: Path) -> None:
        logger.info("changing directory to %s", target)
        self._current_path = target
        self._reload(target, reset_query=True)

    def _reload(self, directory: Path, reset_query: bool) -> None:
        if reset_query:
            self.search = ""
            self.cursor = None
        self._load(directory)

    def _load(self, directory: Path) -> None:
        try:
            self._entries = list_entries(directory, show_hidden=self.show_hidden)
        except ListingError as exc:
            self._entries = []
            self.last_error = exc
        else:
            self.last_error = None
        self._refilter()

    def _refilter(self) -> None:
        self._files = filter_entries(self._entries, self.search)
        self.cursor = clamp_cursor(self.cursor, len(self._files))


__all__ = [
    "Intent",
    "NavigationState",
]
