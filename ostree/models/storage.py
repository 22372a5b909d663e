"""
Storage - string store addressed by sorted position, backed by a ranked container.
"""

from collections.abc import AsyncIterator, Iterator
from typing import Any

from ostree.interfaces.ordered_iterable import OrderedIterable
from ostree.interfaces.ranked_container import RankedContainer


class Storage(OrderedIterable):
    """
    Pass-through store used by the benchmark harness.

    Supports:
    - insert with sorting
    - erase by 0-based position
    - get by 0-based position
    """

    def __init__(self, container: RankedContainer) -> None:
        """
        Initialize Storage.

        Args:
            container: The backing rank-addressable data structure.
        """
        self._container = container

    @property
    def container(self) -> RankedContainer:
        return self._container

    def insert(self, value: Any) -> None:
        """
        Insert a value at its sorted position.

        Args:
            value: The value to insert.
        """
        self._container.insert(value)

    def erase(self, index: int) -> Any:
        """
        Remove the value at the given position.

        Args:
            index: 0-based position in sorted order.

        Returns:
            The removed value.
        """
        return self._container.remove_by_rank(index)

    def get(self, index: int) -> Any:
        """
        Retrieve the value at the given position.

        Args:
            index: 0-based position in sorted order.

        Returns:
            The stored value.
        """
        return self._container.get_by_rank(index)

    def size(self) -> int:
        return self._container.size()

    def __len__(self) -> int:
        return self._container.size()

    def print(self) -> None:
        """Write the container's diagnostic dump to stdout."""
        render = getattr(self._container, "render", None)
        if self._container.size() == 0:
            print("Empty")
        elif render is not None:
            print(render())
        else:
            print("\n".join(repr(value) for value in self._container))

    def __iter__(self) -> Iterator[Any]:
        return self._container.__iter__()

    def iterator(self, start: Any | None = None, end: Any | None = None) -> Iterator[Any]:
        return self._container.iterator(start, end)

    def __aiter__(self) -> AsyncIterator[Any]:
        return self._container.__aiter__()

    def async_iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> AsyncIterator[Any]:
        return self._container.async_iterator(start, end)
