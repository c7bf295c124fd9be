"""Self-balancing AVL tree container and supporting tools."""

from .errors import (
    AVLTreeError,
    EmptyTreeError,
    InsertOutcome,
    KeyNotFoundError,
    ProfilingError,
    RenderError,
    TreeInvariantError,
)
from .node import AVLNode
from .render import CHARS_PER_NODE, render_levels, render_tree
from .tree import AVLTree, Entry
from .validation import check_invariants, is_balanced, is_ordered

__all__ = [
    "AVLNode",
    "AVLTree",
    "AVLTreeError",
    "CHARS_PER_NODE",
    "EmptyTreeError",
    "Entry",
    "InsertOutcome",
    "KeyNotFoundError",
    "ProfilingError",
    "RenderError",
    "TreeInvariantError",
    "check_invariants",
    "is_balanced",
    "is_ordered",
    "render_levels",
    "render_tree",
]
