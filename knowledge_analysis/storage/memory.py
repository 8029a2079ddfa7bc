"""
In-memory repository for testing and development.
"""

from typing import List, Sequence

from .base import Repository, T


class InMemoryRepository(Repository[T]):
    """
    Keeps items in a list.

    Loads return a copy so callers cannot alter the stored list.
    """

    def __init__(self, items: Sequence[T] | None = None) -> None:
        self._items: List[T] = list(items or [])

    def load(self) -> List[T]:
        return list(self._items)

    def save(self, items: Sequence[T]) -> None:
        self._items = list(items)
