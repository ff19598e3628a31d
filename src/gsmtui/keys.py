"""Translate terminal key presses into controller actions.

Two modes exist: command mode, where letters are shortcuts, and text-input
mode, where printable characters are captured verbatim.  Key names follow
textual's conventions (``"up"``, ``"ctrl+c"``, ``"escape"``...).
"""

from __future__ import annotations

from gsmtui.actions import Action, Char

_COMMAND_KEYS = {
    "ctrl+c": Action.QUIT,
    "up": Action.UP,
    "down": Action.DOWN,
    "home": Action.TOP,
    "end": Action.BOTTOM,
    "enter": Action.ENTER,
    "escape": Action.BACK,
    "backspace": Action.BACK,
    "f1": Action.HELP,
}

_COMMAND_CHARS = {
    "k": Action.UP,
    "j": Action.DOWN,
    "g": Action.TOP,
    "G": Action.BOTTOM,
    "b": Action.BACK,
    "q": Action.QUIT,
    "r": Action.REFRESH,
    "n": Action.NEW_SECRET,
    "a": Action.NEW_VERSION,
    "d": Action.DELETE,
    "c": Action.COPY,
    "s": Action.TOGGLE_REVEAL,
    "?": Action.HELP,
    "e": Action.ENABLE,
    "x": Action.DISABLE,
    "p": Action.OPEN_PROJECT_SELECTOR,
}

_INPUT_KEYS = {
    "ctrl+c": Action.QUIT,
    "enter": Action.ENTER,
    "escape": Action.BACK,
    "backspace": Action.BACKSPACE,
    "left": Action.CURSOR_LEFT,
    "right": Action.CURSOR_RIGHT,
}


def decode_command(key: str, character: str | None = None) -> Action | None:
    """Map a key press to a command action, or ``None`` if it means nothing."""
    if key in _COMMAND_KEYS:
        return _COMMAND_KEYS[key]
    if character:
        return _COMMAND_CHARS.get(character)
    return None


def decode_input(key: str, character: str | None = None) -> Action | Char | None:
    """Map a key press while a text input is open."""
    if key in _INPUT_KEYS:
        return _INPUT_KEYS[key]
    if character and character.isprintable():
        return Char(character)
    return None
