"""Read-only traversals over AVL node structures.

Nothing in this module mutates a node.  Lookups return ``None`` for a missing
key; translating that into :class:`~avl_tree.errors.KeyNotFoundError` is the
container's job.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, List, Optional

from .node import AVLNode, K, V

__all__ = [
    "contains_key",
    "find_node",
    "iter_in_order",
    "iter_level_order",
    "iter_padded_levels",
    "level_order_groups",
    "max_node",
    "min_node",
]


def find_node(node: Optional[AVLNode[K, V]], key: K) -> Optional[AVLNode[K, V]]:
    """Return the node holding *key* below *node*, or ``None``."""

    current = node
    while current is not None:
        if key < current.key:
            current = current.left
        elif current.key < key:
            current = current.right
        else:
            return current
    return None


def contains_key(node: Optional[AVLNode[K, V]], key: K) -> bool:
    return find_node(node, key) is not None


def min_node(node: Optional[AVLNode[K, V]]) -> Optional[AVLNode[K, V]]:
    """Return the leftmost node below *node*."""

    if node is None:
        return None
    while node.left is not None:
        node = node.left
    return node


def max_node(node: Optional[AVLNode[K, V]]) -> Optional[AVLNode[K, V]]:
    """Return the rightmost node below *node*."""

    if node is None:
        return None
    while node.right is not None:
        node = node.right
    return node


def iter_level_order(node: Optional[AVLNode[K, V]]) -> Iterator[AVLNode[K, V]]:
    """Yield nodes breadth-first, left child before right child."""

    if node is None:
        return
    queue: Deque[AVLNode[K, V]] = deque([node])
    while queue:
        current = queue.popleft()
        yield current
        if current.left is not None:
            queue.append(current.left)
        if current.right is not None:
            queue.append(current.right)


def level_order_groups(node: Optional[AVLNode[K, V]]) -> List[List[AVLNode[K, V]]]:
    """Return the breadth-first traversal grouped by depth, root level first."""

    if node is None:
        return []
    levels: List[List[AVLNode[K, V]]] = []
    queue: Deque[AVLNode[K, V]] = deque([node])
    while queue:
        level_count = len(queue)
        level: List[AVLNode[K, V]] = []
        for _ in range(level_count):
            current = queue.popleft()
            level.append(current)
            if current.left is not None:
                queue.append(current.left)
            if current.right is not None:
                queue.append(current.right)
        levels.append(level)
    return levels


def iter_padded_levels(
    node: Optional[AVLNode[K, V]],
) -> Iterator[List[Optional[AVLNode[K, V]]]]:
    """Yield each level as a complete row, ``None`` standing in for missing nodes.

    Level ``d`` always holds ``2**d`` slots.  Iteration ends before the first
    level made only of placeholders.
    """

    level: List[Optional[AVLNode[K, V]]] = [node]
    while any(current is not None for current in level):
        yield level
        level = [
            child
            for current in level
            for child in ((None, None) if current is None else (current.left, current.right))
        ]


def iter_in_order(node: Optional[AVLNode[K, V]]) -> Iterator[AVLNode[K, V]]:
    """Yield nodes in ascending key order.

    Uses an explicit stack so generators are not nested once per level.
    """

    stack: List[AVLNode[K, V]] = []
    current = node
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current
        current = current.right
