"""
Custom exceptions for the order-statistic tree and its benchmark harness.
"""

from typing import Any


class IndexOutOfRangeError(IndexError):
    """
    Raised when a rank lookup or removal targets a rank that is not held.

    The check runs before any mutation, so the container is left untouched.
    """

    def __init__(self, index: int, size: int):
        """
        Initialize range error.

        Args:
            index: The rejected 0-based rank.
            size: Number of values held when the call was made.
        """
        self.index = index
        self.size = size
        if size == 0:
            message = f"rank {index} requested from an empty tree"
        else:
            message = f"rank {index} out of range for tree of size {size} (valid: 0..{size - 1})"
        super().__init__(message)


class DuplicateValueError(ValueError):
    """Raised on insert of a value that is already held, when duplicates are rejected."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"value already present: {value!r}")


class InvariantViolationError(AssertionError):
    """
    Raised when the tree structure is found to be inconsistent.

    This is a programming fault, not a recoverable condition.
    """

    def __init__(self, detail: str, value: Any = None):
        """
        Initialize invariant error.

        Args:
            detail: Description of the broken invariant.
            value: Value of the node where the violation was detected, if any.
        """
        self.detail = detail
        self.value = value
        if value is None:
            super().__init__(detail)
        else:
            super().__init__(f"{detail} at node {value!r}")


class WorkloadFormatError(ValueError):
    """Raised when a benchmark fixture line cannot be parsed."""

    def __init__(self, path: str, line_no: int, line: str):
        self.path = path
        self.line_no = line_no
        self.line = line
        super().__init__(f"{path}:{line_no}: expected '<index> <token>', got {line!r}")
