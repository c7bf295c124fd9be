"""ASCII renderers for AVL tree shapes.

Two layouts are offered:

* ``render_tree`` draws every key at its horizontal position with ``/`` and
  ``\\`` branches underneath, in the style of a textbook diagram.  Each level
  occupies two text rows and the canvas is ``CHARS_PER_NODE * 2**height - 1``
  columns wide, so every key must fit in ``CHARS_PER_NODE - 1`` characters.
* ``render_levels`` prints one row per level with ``·`` marking missing
  children, which stays readable for wide keys and deep trees.

Both accept either an :class:`~avl_tree.tree.AVLTree` or a bare root node and
only read the structure.
"""

from __future__ import annotations

from typing import List, Optional, Union

from .errors import RenderError
from .node import AVLNode
from .queries import iter_padded_levels
from .tree import AVLTree

__all__ = ["CHARS_PER_NODE", "render_levels", "render_tree"]

CHARS_PER_NODE = 4

Renderable = Union[AVLTree, AVLNode, None]


def _root_of(subject: Renderable) -> Optional[AVLNode]:
    if isinstance(subject, AVLTree):
        return subject.root
    return subject


def render_tree(subject: Renderable) -> str:
    """Render *subject* as a branch diagram.

    Raises:
        RenderError: when a key is wider than ``CHARS_PER_NODE - 1`` characters.
    """

    root = _root_of(subject)
    if root is None:
        return "(empty)"

    width = (CHARS_PER_NODE << root.height) - 1
    canvas: List[List[str]] = [[" "] * width for _ in range(2 * root.height + 1)]
    _draw(root, canvas, 0, 0, width)
    return "\n".join("".join(row).rstrip() for row in canvas)


def _draw(node: AVLNode, canvas: List[List[str]], left: int, top: int, width: int) -> None:
    half = width // 2
    center = left + half
    left_center = left + half // 2
    right_center = center + half // 2 + 1

    label = str(node.key)
    if len(label) > CHARS_PER_NODE - 1:
        raise RenderError(
            f"Key {label!r} is wider than {CHARS_PER_NODE - 1} characters"
        )
    start = center if len(label) == 1 else center - 1
    for offset, char in enumerate(label):
        canvas[top][start + offset] = char

    if node.left is not None:
        for column in range(left_center + 2, center - 1):
            canvas[top][column] = "_"
        canvas[top + 1][left_center + 1] = "/"
        _draw(node.left, canvas, left, top + 2, half)

    if node.right is not None:
        for column in range(center + 2, right_center - 1):
            canvas[top][column] = "_"
        canvas[top + 1][right_center - 1] = "\\"
        _draw(node.right, canvas, center + 1, top + 2, half)


def render_levels(subject: Renderable) -> str:
    """Render *subject* one row per level, marking missing nodes with ``·``.

    Rows stop at the deepest level that still holds a real node.
    """

    root = _root_of(subject)
    if root is None:
        return "<empty>"
    return "\n".join(
        " ".join("·" if node is None else str(node.key) for node in level)
        for level in iter_padded_levels(root)
    )
