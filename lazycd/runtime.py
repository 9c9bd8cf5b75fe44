"""Interactive event loop for the navigator.

The loop draws a frame, reads one key, dispatches it and repeats until the
user commits a directory or cancels. It talks to the terminal only through a
``Backend`` so tests can drive it with scripted keys.
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from .input import read_key
from .keys import CANCEL, COMMIT, handle_key
from .navigation import NavigationState
from .render import Frame, frame_to_ansi, render_frame
from .terminal import TerminalController
from .ui_theme import DEFAULT_THEME, UITheme

logger = logging.getLogger(__name__)

KEY_POLL_TIMEOUT_MS = 250


class Backend(Protocol):
    """Capabilities the loop needs from a terminal."""

    def session(self) -> AbstractContextManager[None]: ...

    def size(self) -> tuple[int, int]: ...

    def draw(self, frame: Frame) -> None: ...

    def read_key(self, timeout_ms: int | None) -> str: ...


class TerminalBackend:
    """``Backend`` on top of a raw-mode ``TerminalController``."""

    def __init__(self, terminal: TerminalController) -> None:
        self.terminal = terminal

    @contextmanager
    def session(self) -> Iterator[None]:
        with self.terminal.raw_mode():
            yield

    def size(self) -> tuple[int, int]:
        try:
            term = os.get_terminal_size(self.terminal.stdout_fd)
        except OSError:
            term = shutil.get_terminal_size((80, 24))
        return term.columns, term.lines

    def draw(self, frame: Frame) -> None:
        self.terminal.write(frame_to_ansi(frame))

    def read_key(self, timeout_ms: int | None) -> str:
        return read_key(self.terminal.stdin_fd, timeout_ms)


@dataclass(frozen=True)
class NavigatorResult:
    """Outcome of one session: the committed directory, or ``None`` on cancel."""

    directory: Path | None

    @property
    def committed(self) -> bool:
        return self.directory is not None


def run_navigator(
    state: NavigationState,
    backend: Backend,
    theme: UITheme = DEFAULT_THEME,
    poll_timeout_ms: int = KEY_POLL_TIMEOUT_MS,
) -> NavigatorResult:
    """Run the interactive loop until the user commits or cancels.

    The terminal session is always closed before this returns, including when
    an exception escapes the loop.
    """
    list_start = 0
    last_size: tuple[int, int] | None = None
    dirty = True
    with backend.session():
        while True:
            size = backend.size()
            if size != last_size:
                last_size = size
                dirty = True
            if dirty:
                columns, rows = size
                frame = render_frame(state, columns, rows, list_start, theme)
                list_start = frame.list_start
                backend.draw(frame)
                dirty = False

            key = backend.read_key(poll_timeout_ms)
            if not key:
                continue
            outcome = handle_key(key, state)
            if outcome == COMMIT:
                directory = state.get_current_dir()
                logger.info("committed %s", directory)
                return NavigatorResult(directory=directory)
            if outcome == CANCEL:
                logger.info("cancelled in %s", state.get_current_dir())
                return NavigatorResult(directory=None)
            dirty = True


__all__ = [
    "Backend",
    "KEY_POLL_TIMEOUT_MS",
    "NavigatorResult",
    "TerminalBackend",
    "run_navigator",
]
