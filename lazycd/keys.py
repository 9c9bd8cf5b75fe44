"""Key-token dispatch onto navigation intents.

``handle_key`` is the only place that maps keys to state changes. It returns
one of ``CONTINUE``, ``COMMIT`` or ``CANCEL`` so the loop knows whether to
keep running.
"""

from __future__ import annotations

from .navigation import Intent, NavigationState

CONTINUE = "continue"
COMMIT = "commit"
CANCEL = "cancel"

ARROW_INTENTS: dict[str, Intent] = {
    "UP": Intent.UP,
    "DOWN": Intent.DOWN,
    "LEFT": Intent.LEFT,
    "RIGHT": Intent.RIGHT,
}

NORMAL_MODE_INTENTS: dict[str, Intent] = {
    "h": Intent.LEFT,
    "j": Intent.DOWN,
    "k": Intent.UP,
    "l": Intent.RIGHT,
}

CANCEL_KEYS = frozenset({"ESC", "CTRL_C", "CTRL_D"})


def _handle_normal_key(key: str, state: NavigationState) -> str:
    intent = NORMAL_MODE_INTENTS.get(key)
    if intent is not None:
        state.update(intent)
        return CONTINUE
    if key == "q":
        return CANCEL
    if key in {"e", "/"}:
        state.search_mode = True
    elif key == ".":
        state.toggle_hidden()
    elif key == "BACKSPACE":
        state.update(Intent.LEFT)
    return CONTINUE


def _handle_search_key(key: str, state: NavigationState) -> str:
    if key == "BACKSPACE":
        state.pop_search()
    elif len(key) == 1 and key.isprintable():
        state.push_search(key)
    return CONTINUE


def handle_key(key: str, state: NavigationState) -> str:
    """Apply one key token to ``state`` and report what the loop should do."""
    if not key:
        return CONTINUE
    if key in CANCEL_KEYS:
        return CANCEL
    if key == "ENTER":
        return COMMIT if state.update(Intent.ENTER) else CONTINUE
    if key == "TAB":
        state.search_mode = not state.search_mode
        return CONTINUE
    intent = ARROW_INTENTS.get(key)
    if intent is not None:
        state.update(intent)
        return CONTINUE
    if state.search_mode:
        return _handle_search_key(key, state)
    return _handle_normal_key(key, state)


__all__ = [
    "CANCEL",
    "COMMIT",
    "CONTINUE",
    "handle_key",
]
