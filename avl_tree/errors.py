"""Error taxonomy and outcome tags for the AVL tree package."""

from __future__ import annotations

from enum import Enum
from typing import Any

__all__ = [
    "AVLTreeError",
    "EmptyTreeError",
    "InsertOutcome",
    "KeyNotFoundError",
    "ProfilingError",
    "RenderError",
    "TreeInvariantError",
]


class AVLTreeError(Exception):
    """Base class for every error raised by :mod:`avl_tree`."""


class EmptyTreeError(AVLTreeError, LookupError):
    """Raised when an operation requires at least one element."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Cannot {operation}: tree is empty")
        self.operation = operation


class KeyNotFoundError(AVLTreeError, KeyError):
    """Raised when an operation requires a key that is not stored."""

    def __init__(self, key: Any) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Tree does not contain key {self.key!r}"


class TreeInvariantError(AVLTreeError, AssertionError):
    """Raised when a structural invariant of the tree is violated."""


class RenderError(AVLTreeError, ValueError):
    """Raised when a tree cannot be laid out by the ASCII renderer."""


class ProfilingError(AVLTreeError, RuntimeError):
    """Raised when a height profile breaks the AVL worst-case bound."""


class InsertOutcome(Enum):
    """Result tag returned by :meth:`avl_tree.AVLTree.insert`."""

    INSERTED = "inserted"
    DUPLICATE_KEY = "duplicate_key"

    def __bool__(self) -> bool:
        return self is InsertOutcome.INSERTED
