"""
Abstract base classes for rank-addressable containers.
"""

from ostree.interfaces.ordered_iterable import OrderedIterable
from ostree.interfaces.ranked_container import RankedContainer

__all__ = ["OrderedIterable", "RankedContainer"]
