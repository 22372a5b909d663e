"""
Data models: the rank-addressed containers, their storage wrapper and errors.
"""

from ostree.models.exceptions import (
    DuplicateValueError,
    IndexOutOfRangeError,
    InvariantViolationError,
    WorkloadFormatError,
)
from ostree.models.storage import Storage

__all__ = [
    "Storage",
    "IndexOutOfRangeError",
    "DuplicateValueError",
    "InvariantViolationError",
    "WorkloadFormatError",
]
