"""Best-effort clipboard access."""

from __future__ import annotations

import logging

import pyperclip
from pyperclip import PyperclipException

logger = logging.getLogger(__name__)


def copy_to_clipboard(text: str) -> bool:
    """Copy *text* to the system clipboard.

    Returns:
        ``False`` when no clipboard mechanism is available (headless or remote
        sessions), ``True`` otherwise.
    """
    try:
        pyperclip.copy(text)
    except PyperclipException as exc:
        logger.info("Clipboard unavailable: %s", exc)
        return False
    return True
