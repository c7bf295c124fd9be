"""Ordered key-value container backed by a self-balancing AVL tree.

``AVLTree`` keeps keys unique and sorted while guaranteeing ``O(log n)``
lookup, insertion and deletion.  The class owns three pieces of state: the
root node, the element count and the cached overall height.  All three are
refreshed together at the end of each mutating call, and every precondition
is checked before the structure is touched, so a failed call never leaves the
tree partially modified.

Failures are reported through the exceptions in :mod:`avl_tree.errors`:

* :class:`EmptyTreeError` when an operation needs at least one element.
* :class:`KeyNotFoundError` when an operation needs an existing key.

Inserting an existing key is not an error.  :meth:`AVLTree.insert` reports it
by returning :attr:`InsertOutcome.DUPLICATE_KEY` and keeps the stored value.

Two query families do not follow sorted order and are kept that way on
purpose for compatibility with existing callers:

* ``keys``/``values``/``entries`` enumerate breadth-first (level order).
  Iterating the tree itself, or calling :meth:`AVLTree.in_order_keys`, yields
  sorted keys.
* ``lower_key``/``higher_key`` return the located node's direct left/right
  child rather than the in-order predecessor/successor.
"""

from __future__ import annotations

import logging
from typing import Generic, Iterator, List, NamedTuple, Optional

from .balance import copy_subtree, insert_node, remove_node
from .errors import EmptyTreeError, InsertOutcome, KeyNotFoundError
from .node import AVLNode, K, V, height_of
from .queries import (
    contains_key,
    find_node,
    iter_in_order,
    iter_level_order,
    level_order_groups,
    max_node,
    min_node,
)
from .validation import is_balanced

logger = logging.getLogger(__name__)

__all__ = ["AVLTree", "Entry"]


class Entry(NamedTuple):
    """Immutable key-value pair returned by entry queries."""

    key: object
    value: object


def _entry(node: AVLNode[K, V]) -> Entry:
    return Entry(node.key, node.value)


class AVLTree(Generic[K, V]):
    """Self-balancing binary search tree mapping unique keys to values."""

    __slots__ = ("_root", "_size", "_height")

    def __init__(self, other: Optional["AVLTree[K, V]"] = None) -> None:
        self._root: Optional[AVLNode[K, V]] = None
        self._size = 0
        self._height = -1
        if other is not None:
            if not isinstance(other, AVLTree):
                raise TypeError("AVLTree can only be copied from another AVLTree")
            self._root = copy_subtree(other._root)
            self._size = other._size
            self._height = other._height

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def insert(self, key: K, value: V) -> InsertOutcome:
        """Insert ``key -> value`` and rebalance.

        Returns :attr:`InsertOutcome.DUPLICATE_KEY` without touching the tree
        when *key* is already stored.
        """

        if contains_key(self._root, key):
            logger.debug("Ignoring insert of duplicate key %r", key)
            return InsertOutcome.DUPLICATE_KEY
        self._root = insert_node(self._root, key, value)
        self._size += 1
        self._height = height_of(self._root)
        return InsertOutcome.INSERTED

    def remove(self, key: K) -> V:
        """Remove *key* and return the value it was mapped to."""

        node = self._require_node(key, "remove")
        old_value = node.value
        self._root = remove_node(self._root, key)
        self._size -= 1
        self._height = height_of(self._root)
        logger.debug("Removed key %r; %d entries remain", key, self._size)
        return old_value

    def modify_value(self, key: K, new_value: V) -> None:
        """Replace the value stored for *key* without changing the shape."""

        self._require_node(key, "modify value").value = new_value

    def clear(self) -> None:
        self._root = None
        self._size = 0
        self._height = -1

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def find(self, key: K) -> V:
        """Return the value stored for *key*."""

        return self._require_node(key, "find").value

    def contains(self, key: K) -> bool:
        return contains_key(self._root, key)

    def is_empty(self) -> bool:
        return self._root is None

    def size(self) -> int:
        return self._size

    def height(self) -> int:
        """Height of the tree in edges; ``-1`` when empty."""

        return self._height

    def is_balanced(self) -> bool:
        return is_balanced(self._root)

    @property
    def root(self) -> Optional[AVLNode[K, V]]:
        """Root node for read-only inspection, e.g. by the renderer."""

        return self._root

    # ------------------------------------------------------------------
    # Ordered queries
    # ------------------------------------------------------------------
    def min_key(self) -> K:
        return self._min("find min key").key

    def max_key(self) -> K:
        return self._max("find max key").key

    def min_entry(self) -> Entry:
        return _entry(self._min("find min entry"))

    def max_entry(self) -> Entry:
        return _entry(self._max("find max entry"))

    def lower_key(self, key: K) -> Optional[K]:
        """Return the key of *key*'s left child, or ``None`` without one."""

        child = self._require_node(key, "find lower key").left
        return None if child is None else child.key

    def higher_key(self, key: K) -> Optional[K]:
        """Return the key of *key*'s right child, or ``None`` without one."""

        child = self._require_node(key, "find higher key").right
        return None if child is None else child.key

    def lower_entry(self, key: K) -> Optional[Entry]:
        child = self._require_node(key, "find lower entry").left
        return None if child is None else _entry(child)

    def higher_entry(self, key: K) -> Optional[Entry]:
        child = self._require_node(key, "find higher entry").right
        return None if child is None else _entry(child)

    # ------------------------------------------------------------------
    # Enumeration
    # ------------------------------------------------------------------
    def keys(self) -> List[K]:
        """Return all keys in level order.

        An empty tree yields ``[]`` rather than raising :class:`EmptyTreeError`;
        the same holds for the other enumeration methods.
        """

        return [node.key for node in iter_level_order(self._root)]

    def values(self) -> List[V]:
        """Return all values in level order of their keys."""

        return [node.value for node in iter_level_order(self._root)]

    def entries(self) -> List[Entry]:
        """Return all entries in level order."""

        return [_entry(node) for node in iter_level_order(self._root)]

    def level_order_keys(self) -> List[List[K]]:
        """Return keys grouped per depth, root level first."""

        return [[node.key for node in level] for level in level_order_groups(self._root)]

    def level_order_entries(self) -> List[List[Entry]]:
        return [[_entry(node) for node in level] for level in level_order_groups(self._root)]

    def in_order_keys(self) -> List[K]:
        """Return all keys in ascending order."""

        return list(self)

    # ------------------------------------------------------------------
    # Copying and Python protocols
    # ------------------------------------------------------------------
    def copy(self) -> "AVLTree[K, V]":
        """Return a deep copy that shares no nodes with this tree."""

        return AVLTree(self)

    def __copy__(self) -> "AVLTree[K, V]":
        return self.copy()

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return contains_key(self._root, key)

    def __iter__(self) -> Iterator[K]:
        for node in iter_in_order(self._root):
            yield node.key

    def __repr__(self) -> str:
        return f"AVLTree(size={self._size}, height={self._height})"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _require_node(self, key: K, operation: str) -> AVLNode[K, V]:
        if self._root is None:
            raise EmptyTreeError(operation)
        node = find_node(self._root, key)
        if node is None:
            raise KeyNotFoundError(key)
        return node

    def _min(self, operation: str) -> AVLNode[K, V]:
        node = min_node(self._root)
        if node is None:
            raise EmptyTreeError(operation)
        return node

    def _max(self, operation: str) -> AVLNode[K, V]:
        node = max_node(self._root)
        if node is None:
            raise EmptyTreeError(operation)
        return node
