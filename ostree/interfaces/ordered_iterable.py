"""
OrderedIterable protocol for data structures that iterate their values in order.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from typing import Any


class OrderedIterable(ABC):
    """
    Protocol for data structures that yield their values in ascending order.

    Every call returns a fresh iterator, so a walk can always be restarted.

    Implementations must support:
    - Full iteration via __iter__
    - Bounded iteration via iterator(start, end)
    - Async iteration via __aiter__
    - Async bounded iteration via async_iterator(start, end)
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Return an iterator over all values in ascending order."""
        pass

    @abstractmethod
    def iterator(self, start: Any | None = None, end: Any | None = None) -> Iterator[Any]:
        """
        Return an iterator over values in the specified range.

        Args:
            start: Lower bound (inclusive). If None, starts from the smallest value.
            end: Upper bound (exclusive). If None, iterates to the largest value.

        Returns:
            Iterator yielding values in ascending order.
        """
        pass

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[Any]:
        """Return an async iterator over all values in ascending order."""
        pass

    @abstractmethod
    def async_iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> AsyncIterator[Any]:
        """
        Return an async iterator over values in the specified range.

        Args:
            start: Lower bound (inclusive). If None, starts from the smallest value.
            end: Upper bound (exclusive). If None, iterates to the largest value.

        Returns:
            AsyncIterator yielding values in ascending order.
        """
        pass
