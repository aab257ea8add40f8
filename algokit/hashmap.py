"""A hash map that resolves collisions by chaining entries inside fixed buckets."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any


@dataclass
class _Entry:
    key: Hashable
    value: Any


class ChainedHashMap:
    """A map with a fixed number of buckets, each holding a chain of entries.

    New keys go to the front of their bucket's chain. Inserting an existing
    key replaces its value.
    """

    def __init__(self, bucket_count: int) -> None:
        if bucket_count < 1:
            raise ValueError("bucket count must be at least 1")
        self._buckets: list[list[_Entry]] = [[] for _ in range(bucket_count)]
        self._size = 0

    @property
    def bucket_count(self) -> int:
        return len(self._buckets)

    def bucket_of(self, key: Hashable) -> int:
        """Return the index of the bucket that ``key`` hashes to."""
        return hash(key) % len(self._buckets)

    def _find(self, key: Hashable) -> _Entry | None:
        for entry in self._buckets[self.bucket_of(key)]:
            if entry.key == key:
                return entry
        return None

    def insert(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any value already there."""
        entry = self._find(key)
        if entry is not None:
            entry.value = value
            return
        self._buckets[self.bucket_of(key)].insert(0, _Entry(key, value))
        self._size += 1

    def get(self, key: Hashable) -> Any:
        """Return the value stored under ``key``; raise KeyError if there is none."""
        entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __contains__(self, key: object) -> bool:
        try:
            return self._find(key) is not None  # type: ignore[arg-type]
        except TypeError:
            return False

    def __len__(self) -> int:
        return self._size

    def render(self) -> str:
        """Describe every bucket and its chain, one line per bucket."""
        lines = []
        for index, chain in enumerate(self._buckets):
            body = "".join(f"<--->{entry.key},{entry.value}" for entry in chain) or "NULL"
            lines.append(f"Bucket{index}------>{body}\n")
        return "".join(lines)