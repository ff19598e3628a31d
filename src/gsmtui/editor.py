"""Single-line text buffer with a character cursor."""

from __future__ import annotations


class TextEditor:
    """Mutable text with a cursor in ``[0, len(text)]``.

    Python strings index by code point, so a multi-byte character moves and
    deletes as one unit.
    """

    def __init__(self, text: str = "", cursor: int | None = None) -> None:
        self._text = text
        self._cursor = len(text) if cursor is None else max(0, min(cursor, len(text)))

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        return self._cursor

    def __len__(self) -> int:
        return len(self._text)

    def insert(self, char: str) -> None:
        self._text = self._text[: self._cursor] + char + self._text[self._cursor :]
        self._cursor += len(char)

    def backspace(self) -> None:
        if self._cursor == 0:
            return
        self._text = self._text[: self._cursor - 1] + self._text[self._cursor :]
        self._cursor -= 1

    def move_left(self) -> None:
        if self._cursor > 0:
            self._cursor -= 1

    def move_right(self) -> None:
        if self._cursor < len(self._text):
            self._cursor += 1

    def reset(self) -> None:
        self._text = ""
        self._cursor = 0

    def take(self) -> str:
        """Return the current text and reset the buffer."""
        text = self._text
        self.reset()
        return text
