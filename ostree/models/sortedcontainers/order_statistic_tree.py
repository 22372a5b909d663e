"""
Order-Statistic Tree implementation for rank-addressed sorted storage.

Unbalanced binary search tree where every node carries the size of its
subtree, so the k-th smallest value is found by one root-to-leaf descent.
"""

import operator
from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass
from typing import Any

from ostree.interfaces.ranked_container import RankedContainer
from ostree.models.exceptions import (
    DuplicateValueError,
    IndexOutOfRangeError,
    InvariantViolationError,
)


@dataclass
class Node:
    """Node in the Order-Statistic Tree."""

    value: Any
    size: int = 1
    left: "Node | None" = None
    right: "Node | None" = None


def _size(node: Node | None) -> int:
    return node.size if node is not None else 0


class OrderStatisticTree(RankedContainer):
    """
    Order-Statistic Tree implementation of RankedContainer.

    Properties maintained:
    1. size(n) == 1 + size(n.left) + size(n.right) for every node
    2. Left subtree values < node value < right subtree values
    3. Values are unique

    No rebalancing is done: inserting in sorted order produces a linked
    list of height N. All walks are iterative so deep trees are safe.

    Not thread-safe. Callers sharing an instance must serialize access.
    """

    def __init__(self, reject_duplicates: bool = False) -> None:
        """
        Initialize an empty tree.

        Args:
            reject_duplicates: Raise DuplicateValueError on insert of a held
                value instead of silently ignoring it.
        """
        self._root: Node | None = None
        self._reject_duplicates = reject_duplicates

    @property
    def reject_duplicates(self) -> bool:
        return self._reject_duplicates

    def insert(self, value: Any) -> None:
        """Insert a value. Duplicates are ignored or rejected. O(h)"""
        if self._root is None:
            self._root = Node(value=value)
            return

        # Sizes along the path are only bumped once a node is really linked
        path: list[Node] = []
        current = self._root

        while True:
            path.append(current)
            if value < current.value:
                if current.left is None:
                    current.left = Node(value=value)
                    break
                current = current.left
            elif value > current.value:
                if current.right is None:
                    current.right = Node(value=value)
                    break
                current = current.right
            else:
                if self._reject_duplicates:
                    raise DuplicateValueError(value)
                return

        for node in path:
            node.size += 1

    def remove_by_rank(self, index: int) -> Any:
        """Remove and return the value at 0-based rank. O(h)"""
        rank = self._check_rank(index) + 1

        # Rank is valid, so every node on the way loses exactly one descendant
        parent = None
        node = self._root
        while True:
            p = _size(node.left) + 1
            if rank < p:
                node.size -= 1
                parent, node = node, node.left
            elif rank > p:
                node.size -= 1
                rank -= p
                parent, node = node, node.right
            else:
                break

        removed = node.value

        if node.left is not None and node.right is not None:
            # Node has two children - take the successor's value and
            # unlink the successor (minimum of right subtree) instead
            node.size -= 1
            parent, successor = node, node.right
            while successor.left is not None:
                successor.size -= 1
                parent, successor = successor, successor.left

            node.value = successor.value
            node = successor

        # Node has at most one child
        child = node.left if node.left is not None else node.right
        self._replace_node(parent, node, child)
        return removed

    def get_by_rank(self, index: int) -> Any:
        """Return the value at 0-based rank. O(h)"""
        return self._find_by_rank(self._check_rank(index) + 1).value

    def has(self, value: Any) -> bool:
        current = self._root
        while current is not None:
            if value < current.value:
                current = current.left
            elif value > current.value:
                current = current.right
            else:
                return True
        return False

    def size(self) -> int:
        return _size(self._root)

    def clear(self) -> None:
        """Drop every node."""
        self._root = None

    def __iter__(self) -> Iterator[Any]:
        return self.iterator()

    def iterator(self, start: Any | None = None, end: Any | None = None) -> Iterator[Any]:
        return _RangeIterator(self._root, start, end)

    def __aiter__(self) -> AsyncIterator[Any]:
        return self.async_iterator()

    def async_iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> AsyncIterator[Any]:
        return _AsyncRangeIterator(self._root, start, end)

    def render(self) -> str:
        """
        Return a diagnostic dump of the tree, one node per line in order.

        Each line reads ``|{/\\} size:  3 data:'b'|`` where ``/`` and ``\\``
        mark a present left and right child and ``_`` an absent one.
        """
        lines = []
        for node in _walk_nodes(self._root):
            left = "/" if node.left is not None else "_"
            right = "\\" if node.right is not None else "_"
            lines.append(f"|{{{left}{right}}} size:{node.size:>3} data:{node.value!r}|")
        return "\n".join(lines)

    def validate(self) -> None:
        """
        Check the size and ordering invariants of every node.

        Raises:
            InvariantViolationError: On the first inconsistency found.
        """
        previous: Node | None = None
        for node in _walk_nodes(self._root):
            expected = 1 + _size(node.left) + _size(node.right)
            if node.size != expected:
                raise InvariantViolationError(
                    f"subtree size {node.size} != {expected}", node.value
                )
            if previous is not None and not previous.value < node.value:
                raise InvariantViolationError(
                    f"in-order sequence not ascending after {previous.value!r}", node.value
                )
            previous = node

    def _check_rank(self, index: int) -> int:
        """Validate a 0-based rank against the current size."""
        index = operator.index(index)
        size = self.size()
        if index < 0 or index >= size:
            raise IndexOutOfRangeError(index, size)
        return index

    def _find_by_rank(self, rank: int) -> Node:
        """Find node by 1-based rank."""
        current = self._root
        while current is not None:
            p = _size(current.left) + 1
            if rank == p:
                return current
            if rank < p:
                current = current.left
            else:
                rank -= p
                current = current.right

        raise InvariantViolationError(f"descent for rank ran off the tree with {rank} left")

    def _replace_node(self, parent: Node | None, node: Node, child: Node | None) -> None:
        """Splice child into the slot parent holds for node."""
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child


def _walk_nodes(root: Node | None) -> Iterator[Node]:
    """Yield nodes in order using an explicit stack."""
    stack: list[Node] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        node = stack.pop()
        yield node
        current = node.right


class _RangeIterator(Iterator[Any]):
    """Iterator for range queries on Order-Statistic Tree."""

    def __init__(self, root: Node | None, start: Any | None, end: Any | None) -> None:
        self._stack: list[Node] = []
        self._end = end

        # Initialize stack with nodes >= start
        self._push_left_path(root, start)

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()

        # Check end bound
        if self._end is not None and not node.value < self._end:
            self._stack.clear()
            raise StopIteration

        self._push_left_path(node.right, None)

        return node.value

    def _push_left_path(self, node: Node | None, start: Any | None) -> None:
        """Push leftmost path to stack, respecting start bound."""
        while node:
            if start is not None and node.value < start:
                node = node.right
            else:
                self._stack.append(node)
                node = node.left


class _AsyncRangeIterator(AsyncIterator[Any]):
    """Async iterator for range queries on Order-Statistic Tree (in-memory, no I/O)."""

    def __init__(self, root: Node | None, start: Any | None, end: Any | None) -> None:
        self._inner = _RangeIterator(root, start, end)

    def __aiter__(self) -> "_AsyncRangeIterator":
        return self

    async def __anext__(self) -> Any:
        try:
            return next(self._inner)
        except StopIteration:
            raise StopAsyncIteration from None
