"""Recursive insert, remove and rotation logic for AVL subtrees.

Every structural edit follows the same pattern: a function receives the root of
a subtree, performs the edit in the appropriate child, and returns the
(possibly different) node that now roots the subtree after rebalancing.  The
caller re-links that node in place of the subtree it passed in, so heights and
balance factors are repaired on the way back up the modification path.

These helpers are deliberately free functions over :class:`AVLNode` so they can
be exercised directly in tests.  :class:`avl_tree.tree.AVLTree` is the only
caller in the package and it performs all emptiness and membership checks
before delegating here.
"""

from __future__ import annotations

import logging
from typing import Optional

from .node import AVLNode, K, V, height_of

logger = logging.getLogger(__name__)

__all__ = [
    "LEFT_HEAVY",
    "RIGHT_HEAVY",
    "balance_factor",
    "copy_subtree",
    "insert_node",
    "rebalance",
    "remove_node",
    "rotate_left",
    "rotate_left_right",
    "rotate_right",
    "rotate_right_left",
    "update_height",
]

LEFT_HEAVY = 2
RIGHT_HEAVY = -2


def balance_factor(node: Optional[AVLNode[K, V]]) -> int:
    """Return ``height(left) - height(right)`` for *node* (``0`` for ``None``)."""

    if node is None:
        return 0
    return height_of(node.left) - height_of(node.right)


def update_height(node: AVLNode[K, V]) -> None:
    node.height = 1 + max(height_of(node.left), height_of(node.right))


# ----------------------------------------------------------------------
# Rotations
# ----------------------------------------------------------------------
def rotate_left(node: AVLNode[K, V]) -> AVLNode[K, V]:
    """Rotate *node* left and return the new subtree root.

    The right child becomes the root, ``node`` adopts the pivot's former left
    subtree as its right child and becomes the pivot's left child.  Heights are
    refreshed child first because the pivot's height depends on ``node``.
    A node without a right child is returned unchanged.
    """

    pivot = node.right
    if pivot is None:
        return node
    logger.debug("Rotating left at key %r", node.key)
    node.right = pivot.left
    pivot.left = node
    update_height(node)
    update_height(pivot)
    return pivot


def rotate_right(node: AVLNode[K, V]) -> AVLNode[K, V]:
    """Mirror image of :func:`rotate_left`."""

    pivot = node.left
    if pivot is None:
        return node
    logger.debug("Rotating right at key %r", node.key)
    node.left = pivot.right
    pivot.right = node
    update_height(node)
    update_height(pivot)
    return pivot


def rotate_left_right(node: AVLNode[K, V]) -> AVLNode[K, V]:
    if node.left is not None:
        node.left = rotate_left(node.left)
    return rotate_right(node)


def rotate_right_left(node: AVLNode[K, V]) -> AVLNode[K, V]:
    if node.right is not None:
        node.right = rotate_right(node.right)
    return rotate_left(node)


def rebalance(node: Optional[AVLNode[K, V]]) -> Optional[AVLNode[K, V]]:
    """Restore the AVL property at *node* and return the subtree root.

    A child whose balance factor is ``0`` is treated as leaning towards the
    heavy side, so it takes the single rotation.  That case only appears after
    a deletion, where a double rotation would leave the rotated child
    unbalanced.
    """

    if node is None:
        return None

    factor = balance_factor(node)
    if factor >= LEFT_HEAVY:
        if balance_factor(node.left) >= 0:
            node = rotate_right(node)
        else:
            node = rotate_left_right(node)
    elif factor <= RIGHT_HEAVY:
        if balance_factor(node.right) <= 0:
            node = rotate_left(node)
        else:
            node = rotate_right_left(node)

    update_height(node)
    return node


# ----------------------------------------------------------------------
# Structural edits
# ----------------------------------------------------------------------
def insert_node(
    node: Optional[AVLNode[K, V]], key: K, value: V
) -> AVLNode[K, V]:
    """Insert ``key -> value`` below *node* and return the rebalanced root.

    An existing ``key`` is left untouched, including its value.
    """

    if node is None:
        return AVLNode(key, value)
    if key < node.key:
        node.left = insert_node(node.left, key, value)
    elif node.key < key:
        node.right = insert_node(node.right, key, value)
    else:
        return node

    balanced = rebalance(node)
    assert balanced is not None
    return balanced


def remove_node(
    node: Optional[AVLNode[K, V]], key: K
) -> Optional[AVLNode[K, V]]:
    """Remove ``key`` from the subtree rooted at *node*.

    A node with two children takes over the key and value of its in-order
    successor, then the successor is removed from the right subtree by its
    (now promoted) key.  Exactly one physical node leaves the tree.  A missing
    key leaves the subtree unchanged.
    """

    if node is None:
        return None

    if key < node.key:
        node.left = remove_node(node.left, key)
    elif node.key < key:
        node.right = remove_node(node.right, key)
    elif node.left is not None and node.right is not None:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        logger.debug("Promoting successor %r into position of %r", successor.key, key)
        node.key = successor.key
        node.value = successor.value
        node.right = remove_node(node.right, node.key)
    elif node.left is not None:
        node = node.left
    elif node.right is not None:
        node = node.right
    else:
        return None

    return rebalance(node)


def copy_subtree(node: Optional[AVLNode[K, V]]) -> Optional[AVLNode[K, V]]:
    """Return an independent deep copy of the subtree rooted at *node*.

    Keys and values are shared by reference, nodes never are.
    """

    if node is None:
        return None
    clone: AVLNode[K, V] = AVLNode(node.key, node.value)
    clone.left = copy_subtree(node.left)
    clone.right = copy_subtree(node.right)
    update_height(clone)
    return clone
