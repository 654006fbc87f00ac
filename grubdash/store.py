"""
In-memory collections backing the API, plus the id generator used to populate them.

A Store performs no locking; callers must serialize mutations (the API runs every
handler on the event-loop thread).
"""
import secrets
from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar("T")


class IdGenerator:
    """Random 128-bit hex ids."""

    def next(self) -> str:
        return secrets.token_hex(16)


class Store(Generic[T]):
    def __init__(self, items: Iterable[T] = ()):
        self._items: list[T] = list(items)

    def find(self, predicate: Callable[[T], bool]) -> T | None:
        for item in self._items:
            if predicate(item):
                return item
        return None

    def find_index(self, predicate: Callable[[T], bool]) -> int:
        """Position of the first matching item, or -1."""
        for index, item in enumerate(self._items):
            if predicate(item):
                return index
        return -1

    def append(self, item: T) -> None:
        self._items.append(item)

    def remove_at(self, index: int) -> T:
        return self._items.pop(index)

    def all(self) -> list[T]:
        return self._items

    def __len__(self) -> int:
        return len(self._items)
