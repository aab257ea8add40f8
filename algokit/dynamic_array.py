"""A growable array that doubles its storage when full."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class DynamicArray:
    """An array whose capacity starts at zero and doubles whenever it fills up."""

    def __init__(self) -> None:
        self._data: list[Any] = []
        self._size = 0

    def _grow(self) -> None:
        new_capacity = 1 if not self._data else len(self._data) * 2
        self._data = self._data[: self._size] + [None] * (new_capacity - self._size)

    def append(self, value: Any) -> None:
        if self._size == len(self._data):
            self._grow()
        self._data[self._size] = value
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the last element."""
        if self._size == 0:
            raise IndexError("pop from empty array")
        self._size -= 1
        value = self._data[self._size]
        self._data[self._size] = None
        return value

    def clear(self) -> None:
        """Drop every element while keeping the allocated capacity."""
        self._data = [None] * len(self._data)
        self._size = 0

    def capacity(self) -> int:
        """Return how many elements fit before the storage must grow."""
        return len(self._data)

    def __len__(self) -> int:
        return self._size

    def _index(self, index: int) -> int:
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("array index out of range")
        return index

    def __getitem__(self, index: int) -> Any:
        return self._data[self._index(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._data[self._index(index)] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data[: self._size])