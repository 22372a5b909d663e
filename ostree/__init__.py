"""
Order-statistic binary search tree.

This package provides an in-memory sorted container addressable by rank:
- insert(value) - O(h) descent, duplicates ignored
- remove_by_rank(index) - O(h), returns the removed value
- get_by_rank(index) - O(h), returns the stored value
- size() - O(1)

where h is the height of the (unbalanced) tree.
"""

from ostree.models.exceptions import (
    DuplicateValueError,
    IndexOutOfRangeError,
    InvariantViolationError,
)
from ostree.models.sortedcontainers import OrderStatisticTree
from ostree.models.storage import Storage

__all__ = [
    "OrderStatisticTree",
    "Storage",
    "IndexOutOfRangeError",
    "DuplicateValueError",
    "InvariantViolationError",
]
