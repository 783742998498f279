"""Append-only memoization store shared by the reconciliation stages."""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class MemoCache(Generic[K, V]):
    """Process-local memo that never replaces an entry once it is written.

    Reads and writes go through single ``dict`` operations, so concurrent callers
    need no lock: two threads may both compute a missing value, but ``setdefault``
    keeps whichever landed first and both receive that value.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: dict[K, V] = {}

    def get(self, key: K) -> V | None:
        return self._entries.get(key)

    def store(self, key: K, value: V) -> V:
        """Record ``value`` unless ``key`` is already present; return the stored value."""

        return self._entries.setdefault(key, value)

    def get_or_compute(self, key: K, compute: Callable[[], V]) -> V:
        existing = self._entries.get(key)
        if existing is not None:
            return existing
        return self._entries.setdefault(key, compute())

    def clear(self) -> None:
        """Drop every entry. Intended for test isolation only."""

        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
