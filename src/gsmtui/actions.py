"""Actions fed to the controller and signals it hands back."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Action(Enum):
    """One decoded key press."""

    QUIT = "quit"
    UP = "up"
    DOWN = "down"
    TOP = "top"
    BOTTOM = "bottom"
    ENTER = "enter"
    BACK = "back"
    REFRESH = "refresh"
    NEW_SECRET = "new_secret"
    NEW_VERSION = "new_version"
    DELETE = "delete"
    COPY = "copy"
    TOGGLE_REVEAL = "toggle_reveal"
    HELP = "help"
    ENABLE = "enable"
    DISABLE = "disable"
    OPEN_PROJECT_SELECTOR = "open_project_selector"
    BACKSPACE = "backspace"
    CURSOR_LEFT = "cursor_left"
    CURSOR_RIGHT = "cursor_right"


@dataclass(frozen=True)
class Char:
    """A typed character while a text input is active."""

    char: str


class Signal(Enum):
    """Requests the controller cannot fulfil itself."""

    QUIT = "quit"
    RUN_AUTH = "run_auth"
