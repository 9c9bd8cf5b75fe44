"""Shell selection and process replacement after a directory is chosen."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

SHELL_ENV_VARS = ("LAZYCD_SHELL", "CS_SHELL")
PLATFORM_DEFAULT_SHELLS = {
    "linux": "bash",
    "darwin": "zsh",
}
FALLBACK_SHELL = "/bin/sh"


class ShellLaunchError(RuntimeError):
    """Raised when the shell cannot be started in the chosen directory."""


def resolve_shell(
    explicit: str | None = None,
    configured: str | None = None,
    environ: dict[str, str] | None = None,
    platform: str | None = None,
) -> str:
    """Pick the shell command to launch.

    Order: ``explicit`` (CLI flag), ``LAZYCD_SHELL`` / ``CS_SHELL``,
    ``configured`` (config file), the platform default, ``$SHELL`` and
    finally ``/bin/sh``.
    """
    env = os.environ if environ is None else environ
    if explicit:
        return explicit
    for name in SHELL_ENV_VARS:
        value = env.get(name, "").strip()
        if value:
            return value
    if configured:
        return configured
    platform = sys.platform if platform is None else platform
    for prefix, shell in PLATFORM_DEFAULT_SHELLS.items():
        if platform.startswith(prefix):
            return shell
    return env.get("SHELL", "").strip() or FALLBACK_SHELL


def launch_shell(directory: Path, shell: str) -> None:
    """Change into ``directory`` and replace this process with ``shell``.

    Only returns by raising ``ShellLaunchError``.
    """
    try:
        os.chdir(directory)
    except OSError as exc:
        raise ShellLaunchError(f"cannot change directory to {directory}: {exc.strerror or exc}") from exc
    logger.info("launching %s in %s", shell, directory)
    try:
        os.execvp(shell, [shell])
    except OSError as exc:
        raise ShellLaunchError(f"cannot launch shell {shell!r}: {exc.strerror or exc}") from exc


__all__ = [
    "ShellLaunchError",
    "resolve_shell",
    "launch_shell",
]
