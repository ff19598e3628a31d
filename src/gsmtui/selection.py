"""A cursor over an ordered sequence, with wraparound navigation."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")


class SelectableList(Generic[T]):
    """Items plus an optional selected index.

    ``next``/``previous``/``first``/``last`` are no-ops on an empty list.
    *on_select* is called after any of them moves the cursor.
    """

    def __init__(
        self,
        items: Sequence[T] = (),
        on_select: Callable[[], None] | None = None,
    ) -> None:
        self._items: list[T] = list(items)
        self._selected: int | None = 0 if self._items else None
        self._on_select = on_select

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    @property
    def items(self) -> list[T]:
        return list(self._items)

    @property
    def selected(self) -> int | None:
        return self._selected

    @property
    def selected_item(self) -> T | None:
        if self._selected is None or self._selected >= len(self._items):
            return None
        return self._items[self._selected]

    def replace(self, items: Sequence[T]) -> None:
        """Swap in a freshly loaded sequence and select its first item."""
        self._items = list(items)
        self._selected = 0 if self._items else None

    def clear(self) -> None:
        self._items = []
        self._selected = None

    def select(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"selection {index} out of range for {len(self._items)} items")
        self._move(index)

    def select_where(self, predicate: Callable[[T], bool]) -> bool:
        """Select the first item matching *predicate*; return whether one did."""
        for index, item in enumerate(self._items):
            if predicate(item):
                self._move(index)
                return True
        return False

    def next(self) -> None:
        n = len(self._items)
        if n == 0:
            return
        current = self._selected if self._selected is not None else 0
        self._move(0 if current >= n - 1 else current + 1)

    def previous(self) -> None:
        n = len(self._items)
        if n == 0:
            return
        current = self._selected if self._selected is not None else 0
        self._move(n - 1 if current == 0 else current - 1)

    def first(self) -> None:
        if self._items:
            self._move(0)

    def last(self) -> None:
        if self._items:
            self._move(len(self._items) - 1)

    def _move(self, index: int) -> None:
        self._selected = index
        if self._on_select is not None:
            self._on_select()
