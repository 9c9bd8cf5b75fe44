"""Terminal control helpers for the navigator session.

Owns raw-mode lifecycle and alternate-screen switching. Failures to read or
change tty state are raised as ``TerminalError``.
"""

from __future__ import annotations

import contextlib
import logging
import os
import termios
import tty

logger = logging.getLogger(__name__)

ENTER_SCREEN = b"\x1b[?1049h\x1b[?25l"
LEAVE_SCREEN = b"\x1b[?25h\x1b[?1049l"


class TerminalError(RuntimeError):
    """Raised when raw mode or the alternate screen cannot be set up or torn down."""


class TerminalController:
    """Manage terminal mode transitions for one interactive session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise TerminalError(f"cannot read terminal state: {exc}") from exc

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        try:
            tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
            os.write(self.stdout_fd, ENTER_SCREEN)
        except (termios.error, OSError) as exc:
            raise TerminalError(f"cannot enter raw mode: {exc}") from exc

    def disable_tui_mode(self) -> None:
        """Restore normal terminal state and the main screen buffer.

        Both steps are always attempted; the first failure is reported.
        """
        failure: Exception | None = None
        try:
            os.write(self.stdout_fd, LEAVE_SCREEN)
        except OSError as exc:
            failure = exc
        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        except termios.error as exc:
            failure = failure or exc
        if failure is not None:
            raise TerminalError(f"cannot restore terminal: {failure}") from failure

    def write(self, data: str) -> None:
        """Write one rendered frame to the terminal."""
        os.write(self.stdout_fd, data.encode("utf-8", errors="replace"))

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls.

        The saved tty state is restored even when entering raw mode fails
        halfway.
        """
        try:
            self.enable_tui_mode()
            yield
        finally:
            try:
                self.disable_tui_mode()
            except TerminalError:
                logger.exception("terminal restore failed")
                raise
