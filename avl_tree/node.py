"""Storage node for the AVL tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")

__all__ = ["AVLNode", "K", "V", "height_of"]


@dataclass(slots=True)
class AVLNode(Generic[K, V]):
    """A node owning a key, its value and up to two child subtrees.

    ``height`` is the height of the subtree rooted at this node measured in
    edges, so a freshly created leaf has height ``0``.
    """

    key: K
    value: V
    height: int = 0
    left: Optional["AVLNode[K, V]"] = None
    right: Optional["AVLNode[K, V]"] = None

    @property
    def has_left(self) -> bool:
        return self.left is not None

    @property
    def has_right(self) -> bool:
        return self.right is not None

    @property
    def has_both(self) -> bool:
        return self.left is not None and self.right is not None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def height_of(node: Optional[AVLNode[K, V]]) -> int:
    """Return the cached height of *node*, treating ``None`` as ``-1``."""

    if node is None:
        return -1
    return node.height
