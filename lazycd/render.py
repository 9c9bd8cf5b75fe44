"""Frame rendering for the navigator screen.

The screen is a bordered search box, a header row with the current directory,
the filtered entry list and one help/status row. Rendering is pure: it turns a
``NavigationState`` snapshot into text rows plus a cursor position, and
``frame_to_ansi`` serializes that into one terminal write.
"""

from __future__ import annotations

from dataclasses import dataclass

from .ansi import char_display_width, clip_ansi_line, display_width, sanitize_name
from .filtering import VisibleEntry
from .navigation import NavigationState
from .ui_theme import DEFAULT_THEME, UITheme

SEARCH_BOX_ROWS = 3
HEADER_ROWS = 1
HELP_ROWS = 1
SELECTED_SYMBOL = ">> "
UNSELECTED_SYMBOL = "   "


@dataclass(frozen=True)
class Frame:
    """One rendered screen.

    ``cursor`` is the 1-based ``(row, col)`` where the terminal cursor should
    sit, or ``None`` to keep it hidden.
    """

    lines: list[str]
    list_start: int
    cursor: tuple[int, int] | None


def list_rows(total_rows: int) -> int:
    """Return how many entry rows fit below the search box and header."""
    return max(0, total_rows - SEARCH_BOX_ROWS - HEADER_ROWS - HELP_ROWS)


def scroll_start(cursor: int | None, list_start: int, visible_rows: int, total: int) -> int:
    """Adjust the first visible row so ``cursor`` stays in view.

    The window only moves when the cursor leaves it, like a list widget with
    natural scrolling.
    """
    visible_rows = max(1, visible_rows)
    start = list_start
    if cursor is not None:
        if cursor < start:
            start = cursor
        elif cursor >= start + visible_rows:
            start = cursor - visible_rows + 1
    return max(0, min(start, max(0, total - visible_rows)))


def _tail_to_width(text: str, max_cols: int) -> str:
    """Keep the end of ``text`` that fits in ``max_cols`` columns."""
    if max_cols <= 0:
        return ""
    out: list[str] = []
    col = 0
    for ch in reversed(text):
        w = char_display_width(ch)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
    return "".join(reversed(out))


def _search_box(query: str, columns: int, theme: UITheme) -> tuple[list[str], int]:
    """Return the three search-box rows and the query's display width."""
    inner = max(0, columns - 2)
    title = "Search"
    top_fill = max(0, inner - len(title) - 1)
    top = (
        f"{theme.border}┌─{theme.reset}{theme.search_title}{title}{theme.reset}"
        f"{theme.border}{'─' * top_fill}┐{theme.reset}"
    )
    shown = _tail_to_width(sanitize_name(query), max(0, inner - 1))
    pad = max(0, inner - display_width(shown))
    middle = (
        f"{theme.border}│{theme.reset}{theme.search_query}{shown}{theme.reset}"
        f"{' ' * pad}{theme.border}│{theme.reset}"
    )
    bottom = f"{theme.border}└{'─' * inner}┘{theme.reset}"
    rows = [clip_ansi_line(row, columns) + theme.reset for row in (top, middle, bottom)]
    return rows, display_width(shown)


def highlight_name(entry: VisibleEntry, base_style: str, theme: UITheme) -> str:
    """Style ``entry.name`` with matched characters emphasized."""
    name = sanitize_name(entry.name)
    if not entry.highlights:
        return f"{base_style}{name}"
    highlights = set(entry.highlights)
    out: list[str] = [base_style]
    for idx, ch in enumerate(name):
        if idx in highlights:
            out.append(f"{theme.reset}{base_style}{theme.match_highlight}{ch}{theme.reset}{base_style}")
        else:
            out.append(ch)
    return "".join(out)


def _entry_row(entry: VisibleEntry, selected: bool, columns: int, theme: UITheme) -> str:
    if selected:
        base_style = theme.selected
        prefix = f"{theme.selected_marker}{SELECTED_SYMBOL}{theme.reset}"
    else:
        base_style = theme.entry_dir if entry.is_dir else theme.entry_file
        prefix = UNSELECTED_SYMBOL
    text = highlight_name(entry, base_style, theme)
    if entry.is_dir:
        text += "/"
    return clip_ansi_line(prefix + text + theme.reset, columns) + theme.reset


def _help_row(state: NavigationState, theme: UITheme) -> str:
    if state.last_error is not None:
        return f"{theme.error}{state.last_error}{theme.reset}"

    def key(label: str) -> str:
        return f"{theme.reset}{theme.help_key}{label}{theme.reset}{theme.help_text}"

    if state.search_mode:
        parts = [
            "Press ", key("Esc"), " to exit, ",
            key("Enter"), " to enter the selected dir, ",
            key("Tab"), " for keys.",
        ]
    else:
        parts = [
            "Press ", key("q"), " to exit, ",
            key("e"), " to start editing, ",
            key("h/j/k/l"), " to move, ",
            key("."), " to toggle hidden.",
        ]
    return theme.help_text + "".join(parts) + theme.reset


def render_frame(
    state: NavigationState,
    columns: int,
    rows: int,
    list_start: int = 0,
    theme: UITheme = DEFAULT_THEME,
) -> Frame:
    """Render ``state`` into a screen of ``columns`` x ``rows`` cells.

    Screens shorter than the fixed chrome keep the top rows only.
    """
    columns = max(1, columns)
    rows = max(1, rows)
    files = state.get_files()
    visible_rows = list_rows(rows)
    start = scroll_start(state.cursor, list_start, visible_rows, len(files))

    lines, query_width = _search_box(state.search, columns, theme)
    header = f"{theme.header}{sanitize_name(str(state.get_current_dir()))}{theme.reset}"
    lines.append(clip_ansi_line(header, columns) + theme.reset)

    list_lines: list[str] = []
    for offset, entry in enumerate(files[start : start + visible_rows]):
        list_lines.append(_entry_row(entry, start + offset == state.cursor, columns, theme))
    if not files and visible_rows:
        message = "no matches" if state.search else "empty directory"
        list_lines.append(clip_ansi_line(f"{theme.empty}{UNSELECTED_SYMBOL}{message}{theme.reset}", columns))
    lines.extend(list_lines)
    lines.extend("" for _ in range(visible_rows - len(list_lines)))

    lines.append(clip_ansi_line(_help_row(state, theme), columns) + theme.reset)
    del lines[rows:]

    cursor = None
    if state.search_mode:
        cursor = (min(2, len(lines)), min(columns, 2 + query_width))
    return Frame(lines=lines, list_start=start, cursor=cursor)


def frame_to_ansi(frame: Frame) -> str:
    """Serialize ``frame`` into a full-screen redraw sequence."""
    out: list[str] = ["\033[H\033[J"]
    out.append("\r\n".join(frame.lines))
    if frame.cursor is None:
        out.append("\033[?25l")
    else:
        row, col = frame.cursor
        out.append(f"\033[{row};{col}H\033[?25h")
    return "".join(out)


__all__ = [
    "Frame",
    "frame_to_ansi",
    "highlight_name",
    "list_rows",
    "render_frame",
    "scroll_start",
]
