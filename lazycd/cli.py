"""Command-line front door for lazycd.

Parses CLI options, resolves the start directory and runs the interactive
navigator. On commit the chosen directory either replaces this process with a
shell rooted there or, with ``--print``, is written to stdout.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .config import load_shell, load_show_hidden, load_theme_name, save_show_hidden
from .log import configure_logging
from .navigation import NavigationState
from .runtime import TerminalBackend, run_navigator
from .shell import ShellLaunchError, launch_shell, resolve_shell
from .terminal import TerminalController, TerminalError
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)

TTY_PATH = "/dev/tty"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazycd",
        description="Browse directories with fuzzy search and open a shell in the chosen one.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Start directory. Defaults to current directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    hidden = parser.add_mutually_exclusive_group()
    hidden.add_argument(
        "--show-hidden",
        dest="show_hidden",
        action="store_const",
        const=True,
        default=None,
        help="List dot-files and dot-directories.",
    )
    hidden.add_argument(
        "--hide-hidden",
        dest="show_hidden",
        action="store_const",
        const=False,
        help="Skip dot-files and dot-directories.",
    )
    parser.add_argument("--shell", default=None, help="Shell to launch in the chosen directory.")
    parser.add_argument(
        "--print",
        dest="print_only",
        action="store_true",
        help="Print the chosen directory instead of launching a shell.",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Append debug logs to this file.")
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["debug", "info", "warning", "error"],
        help="Log level used with --log-file.",
    )
    return parser


def _output_fd(print_only: bool) -> tuple[int, bool]:
    """Return the fd the UI draws on and whether it must be closed afterwards.

    With ``--print`` stdout usually is a pipe, so the UI goes to the
    controlling terminal instead.
    """
    stdout_fd = sys.stdout.fileno()
    if os.isatty(stdout_fd) or not print_only:
        return stdout_fd, False
    try:
        return os.open(TTY_PATH, os.O_WRONLY), True
    except OSError as exc:
        raise SystemExit(f"lazycd: cannot open {TTY_PATH}: {exc.strerror or exc}") from exc


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and run the navigator.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = _build_parser().parse_args()
    try:
        configure_logging(args.log_file, args.log_level)
    except OSError as exc:
        raise SystemExit(f"lazycd: cannot open log file: {exc}") from exc

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path).expanduser()
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    stdin_fd = sys.stdin.fileno()
    if not os.isatty(stdin_fd):
        raise SystemExit("lazycd: stdin is not a terminal")

    show_hidden = load_show_hidden() if args.show_hidden is None else args.show_hidden
    no_color = args.no_color or bool(os.environ.get("NO_COLOR"))
    theme = resolve_theme(args.theme or load_theme_name(), no_color=no_color)
    state = NavigationState(path, show_hidden=show_hidden)

    out_fd, close_out = _output_fd(args.print_only)
    try:
        terminal = TerminalController(stdin_fd, out_fd)
        result = run_navigator(state, TerminalBackend(terminal), theme)
    except TerminalError as exc:
        logger.error("terminal failure: %s", exc)
        raise SystemExit(f"lazycd: {exc}") from exc
    finally:
        if close_out:
            os.close(out_fd)

    if args.show_hidden is None and state.show_hidden != show_hidden:
        save_show_hidden(state.show_hidden)

    if result.directory is None:
        if args.print_only:
            raise SystemExit(1)
        return

    if args.print_only:
        sys.stdout.write(f"{result.directory}\n")
        return

    shell = resolve_shell(args.shell, load_shell())
    try:
        launch_shell(result.directory, shell)
    except ShellLaunchError as exc:
        raise SystemExit(f"lazycd: {exc}") from exc


if __name__ == "__main__":
    main()
