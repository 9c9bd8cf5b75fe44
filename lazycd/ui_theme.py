"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the search box, entry list and help row.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    reset: str
    border: str
    search_title: str
    search_query: str
    header: str
    entry_dir: str
    entry_file: str
    match_highlight: str
    selected: str
    selected_marker: str
    help_text: str
    help_key: str
    error: str
    empty: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    border="\033[38;5;245m",
    search_title="\033[1;38;5;81m",
    search_query="\033[1;38;5;255m",
    header="\033[2;38;5;250m",
    entry_dir="\033[1;34m",
    entry_file="\033[38;5;252m",
    match_highlight="\033[1;91m",
    selected="\033[1;104m",
    selected_marker="\033[1;38;5;81m",
    help_text="\033[2;38;5;250m",
    help_key="\033[1;38;5;229m",
    error="\033[1;38;5;203m",
    empty="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    border="\033[2;38;5;31m",
    search_title="\033[1;38;5;45m",
    search_query="\033[1;38;5;153m",
    header="\033[2;38;5;110m",
    entry_dir="\033[1;38;5;45m",
    entry_file="\033[38;5;252m",
    match_highlight="\033[1;38;5;215m",
    selected="\033[1;48;5;24m",
    selected_marker="\033[1;38;5;39m",
    help_text="\033[2;38;5;110m",
    help_key="\033[1;38;5;153m",
    error="\033[1;38;5;209m",
    empty="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    border="",
    search_title="",
    search_query="",
    header="",
    entry_dir="",
    entry_file="",
    match_highlight="",
    selected="",
    selected_marker="",
    help_text="",
    help_key="",
    error="",
    empty="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
