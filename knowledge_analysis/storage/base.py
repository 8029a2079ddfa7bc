"""
Base storage interface for Knowledge Analysis.

The analysis services never read storage themselves; stores only hold
the collections a caller loads and passes in.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Sequence, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """
    A whole-collection store.

    Items are loaded and saved as one list; saving replaces everything
    previously stored.
    """

    @abstractmethod
    def load(self) -> List[T]:
        """Return all stored items."""
        pass

    @abstractmethod
    def save(self, items: Sequence[T]) -> None:
        """Replace the stored items."""
        pass
