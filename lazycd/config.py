"""Persistent JSON config helpers.

Stores the hidden-file preference, UI theme and shell command.
Malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazycd"
CONFIG_FILENAME = "config.json"
CONFIG_PATH_ENV = "LAZYCD_CONFIG"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def config_path() -> Path:
    """Return the config file location, honoring ``LAZYCD_CONFIG``."""
    override = os.environ.get(CONFIG_PATH_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(config_path().read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so a read-only config directory never
    interrupts a session.
    """
    path = config_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def load_show_hidden() -> bool:
    """Return persisted hidden-file visibility preference.

    Only explicit boolean values are accepted; anything else falls back to
    ``True``.
    """
    value = load_config().get("show_hidden")
    return value if isinstance(value, bool) else True


def save_show_hidden(show_hidden: bool) -> None:
    """Persist hidden-file visibility preference as a boolean."""
    config = load_config()
    config["show_hidden"] = bool(show_hidden)
    save_config(config)


def _load_string(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def load_theme_name() -> str | None:
    """Return the configured UI theme name, if any."""
    return _load_string("theme")


def load_shell() -> str | None:
    """Return the configured shell command, if any."""
    return _load_string("shell")


__all__ = [
    "APP_NAME",
    "CONFIG_PATH_ENV",
    "DEFAULT_CONFIG_PATH",
    "config_path",
    "load_config",
    "save_config",
    "load_show_hidden",
    "save_show_hidden",
    "load_theme_name",
    "load_shell",
]
