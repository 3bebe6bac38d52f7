"""Ordered list of items with a single optional highlighted index."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")


class SelectionList(Generic[T]):
    """A fixed-length sequence plus a cursor that wraps around at both ends.

    ``selected`` is always ``None`` or a valid index into ``items``.
    """

    def __init__(self, items: Iterable[T]):
        self._items: tuple[T, ...] = tuple(items)
        self._selected: int | None = None

    @property
    def items(self) -> Sequence[T]:
        return self._items

    @property
    def selected(self) -> int | None:
        return self._selected

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def next(self) -> None:
        """Move the cursor down, wrapping from the last item to the first."""
        if not self._items:
            return
        if self._selected is None:
            self._selected = 0
        else:
            self._selected = (self._selected + 1) % len(self._items)

    def previous(self) -> None:
        """Move the cursor up, wrapping from the first item to the last."""
        if not self._items:
            return
        if self._selected is None:
            self._selected = 0
        else:
            self._selected = (self._selected - 1 + len(self._items)) % len(self._items)

    def unselect(self) -> None:
        self._selected = None

    def selected_item(self) -> T | None:
        """Return the highlighted item, or None when nothing is selected."""
        if self._selected is None:
            return None
        return self._items[self._selected]
