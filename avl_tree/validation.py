"""Structural invariant checks for AVL trees.

The helpers recompute heights from scratch instead of trusting the cached
``AVLNode.height`` values, so they catch both balance violations and stale
height bookkeeping.  They run in ``O(n)`` and short-circuit as soon as an
imbalance is detected.
"""

from __future__ import annotations

from typing import Optional

from .errors import TreeInvariantError
from .node import AVLNode, K, V
from .queries import iter_in_order

__all__ = [
    "check_invariants",
    "count_nodes",
    "is_balanced",
    "is_ordered",
]

BalanceResult = tuple[bool, int]


def _check_height(node: Optional[AVLNode[K, V]]) -> BalanceResult:
    """Return whether *node* is AVL balanced and its recomputed height."""

    if node is None:
        return True, -1

    left_balanced, left_height = _check_height(node.left)
    if not left_balanced:
        return False, left_height + 1

    right_balanced, right_height = _check_height(node.right)
    if not right_balanced:
        return False, right_height + 1

    balanced = abs(left_height - right_height) <= 1
    height = max(left_height, right_height) + 1
    return balanced, height


def is_balanced(root: Optional[AVLNode[K, V]]) -> bool:
    """Return ``True`` when every node below *root* satisfies the AVL property."""

    balanced, _ = _check_height(root)
    return balanced


def is_ordered(root: Optional[AVLNode[K, V]]) -> bool:
    """Return ``True`` when an in-order walk yields strictly increasing keys."""

    previous: Optional[AVLNode[K, V]] = None
    for node in iter_in_order(root):
        if previous is not None and not previous.key < node.key:
            return False
        previous = node
    return True


def count_nodes(root: Optional[AVLNode[K, V]]) -> int:
    return sum(1 for _ in iter_in_order(root))


def _check_cached_heights(node: Optional[AVLNode[K, V]]) -> int:
    if node is None:
        return -1
    expected = 1 + max(_check_cached_heights(node.left), _check_cached_heights(node.right))
    if node.height != expected:
        raise TreeInvariantError(
            f"Node {node.key!r} caches height {node.height} but its subtree has height {expected}"
        )
    return expected


def check_invariants(
    root: Optional[AVLNode[K, V]], *, expected_size: Optional[int] = None
) -> None:
    """Raise :class:`TreeInvariantError` unless *root* is a valid AVL tree.

    Args:
        root: Root node of the tree to inspect, ``None`` for an empty tree.
        expected_size: When given, the number of nodes must match it exactly.
    """

    if not is_ordered(root):
        raise TreeInvariantError("In-order traversal is not strictly increasing")
    _check_cached_heights(root)
    if not is_balanced(root):
        raise TreeInvariantError("A node has subtrees whose heights differ by more than one")
    if expected_size is not None:
        actual = count_nodes(root)
        if actual != expected_size:
            raise TreeInvariantError(
                f"Tree holds {actual} nodes but reports size {expected_size}"
            )
