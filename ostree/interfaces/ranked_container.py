"""
RankedContainer abstract base class for containers addressed by rank.
"""

from abc import abstractmethod
from typing import Any

from ostree.interfaces.ordered_iterable import OrderedIterable


class RankedContainer(OrderedIterable):
    """
    Abstract base class for sorted containers addressed by 0-based rank.

    Rank 0 is the smallest value held. Values are unique.

    Implementations:
    - OrderStatisticTree: unbalanced BST augmented with subtree sizes
    """

    @abstractmethod
    def insert(self, value: Any) -> None:
        """
        Insert a value, keeping the container sorted.

        Args:
            value: The value to insert. Must be comparable with held values.

        Time complexity: O(h)
        """
        pass

    @abstractmethod
    def remove_by_rank(self, index: int) -> Any:
        """
        Remove the value at the given rank.

        Args:
            index: 0-based rank of the value to remove.

        Returns:
            The removed value.

        Raises:
            IndexOutOfRangeError: If index is not in [0, size()).

        Time complexity: O(h)
        """
        pass

    @abstractmethod
    def get_by_rank(self, index: int) -> Any:
        """
        Retrieve the value at the given rank.

        Args:
            index: 0-based rank of the value.

        Returns:
            The stored value.

        Raises:
            IndexOutOfRangeError: If index is not in [0, size()).

        Time complexity: O(h)
        """
        pass

    @abstractmethod
    def has(self, value: Any) -> bool:
        """
        Check if a value is held.

        Args:
            value: The value to look for.

        Returns:
            True if the value exists, False otherwise.

        Time complexity: O(h)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of values held.

        Time complexity: O(1)
        """
        pass

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, value: Any) -> bool:
        return self.has(value)
