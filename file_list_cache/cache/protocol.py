"""Protocol for list caches."""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Protocol
from typing import TypeVar

if TYPE_CHECKING:
    from file_list_cache.models import CacheResult

E = TypeVar("E")


class ListCacheProtocol(Protocol[E]):
    """Protocol for a persistent, ordered list of elements of one type.

    FileCache keeps the whole list in one file.
    Apps needing another backend may implement this protocol.
    """

    def add(self, element: E) -> CacheResult:
        """Append an element to the end of the list.

        Args:
            element: Element to store.

        Returns:
            Successful result, or a failed result carrying the error kind.
        """
        ...

    def get(self) -> list[E] | None:
        """Read the whole list.

        Returns:
            Elements in insertion order, or None if nothing is stored.
        """
        ...

    def remove(self, index: int) -> CacheResult:
        """Remove the element at index, shifting later elements down.

        Args:
            index: Zero-based position of the element.

        Returns:
            Successful result, or a failed result carrying the error kind.
        """
        ...

    def remove_all(self) -> CacheResult:
        """Drop every stored element."""
        ...

    def is_empty(self) -> bool:
        """Check whether no elements are stored."""
        ...
