"""A bounded list with positional operations and duplicate handling."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from dstructs.search_tree import DuplicateItemError

DEFAULT_MAX_SIZE = 100


class ListFullError(OverflowError):
    """Raised when adding to a list that has reached its maximum size."""


class ArrayList:
    """A list holding at most ``max_size`` items."""

    def __init__(self, max_size: int = DEFAULT_MAX_SIZE) -> None:
        if max_size < 0:
            raise ValueError("the list size must not be negative")
        self._max_size = max_size
        self._items: list[Any] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, max_size={self._max_size})"

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._max_size

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def _check_location(self, location: int, action: str) -> None:
        if not 0 <= location < len(self._items):
            raise IndexError(f"the location of the item {action} is out of range")

    def __getitem__(self, location: int) -> Any:
        self._check_location(location, "to be retrieved")
        return self._items[location]

    def __setitem__(self, location: int, item: Any) -> None:
        self._check_location(location, "to be replaced")
        self._items[location] = item

    def max_size(self) -> int:
        return self._max_size

    def is_item_at_equal(self, location: int, item: Any) -> bool:
        """Whether the item at ``location`` equals ``item``."""
        self._check_location(location, "to compare")
        return self._items[location] == item

    def _ensure_room(self) -> None:
        if self.is_full():
            raise ListFullError("cannot insert in a full list")

    def insert_at(self, location: int, item: Any) -> None:
        """Insert ``item`` at ``location``, shifting later items back."""
        if not 0 <= location <= len(self._items):
            raise IndexError("the position of the item to be inserted is out of range")
        self._ensure_room()
        self._items.insert(location, item)

    def append(self, item: Any) -> None:
        self._ensure_room()
        self._items.append(item)

    def remove_at(self, location: int) -> None:
        self._check_location(location, "to be removed")
        del self._items[location]

    def clear(self) -> None:
        self._items.clear()

    def find(self, item: Any) -> int:
        """Index of the first item equal to ``item``, or -1 when absent."""
        for location, candidate in enumerate(self._items):
            if candidate == item:
                return location
        return -1

    def insert(self, item: Any) -> None:
        """Append ``item`` unless an equal item is already present."""
        self._ensure_room()
        if self.find(item) != -1:
            raise DuplicateItemError(
                f"{item!r} is already in the list; duplicates are not allowed"
            )
        self._items.append(item)

    def remove(self, item: Any) -> None:
        """Remove the first item equal to ``item``."""
        if not self._items:
            raise ValueError("cannot delete from an empty list")
        location = self.find(item)
        if location == -1:
            raise ValueError(f"{item!r} is not in the list")
        del self._items[location]

    def remove_duplicates(self) -> None:
        """Keep only the first occurrence of each value, preserving order."""
        unique: list[Any] = []
        for item in self._items:
            if item not in unique:
                unique.append(item)
        self._items = unique

    def copy(self) -> "ArrayList":
        duplicate = type(self)(self._max_size)
        duplicate._items = list(self._items)
        return duplicate