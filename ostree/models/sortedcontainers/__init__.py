"""
Sorted container implementations.
"""

from ostree.models.sortedcontainers.order_statistic_tree import OrderStatisticTree

__all__ = ["OrderStatisticTree"]
