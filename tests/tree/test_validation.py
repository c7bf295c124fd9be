"""Tests for the structural invariant checks."""

from __future__ import annotations

import pytest

from avl_tree import AVLNode, AVLTree, TreeInvariantError, check_invariants, is_balanced, is_ordered
from avl_tree.validation import count_nodes


def test_valid_tree_passes_all_checks() -> None:
    tree: AVLTree[int, int] = AVLTree()
    for key in range(31):
        tree.insert(key, key)

    check_invariants(tree.root, expected_size=31)
    assert is_balanced(tree.root)
    assert is_ordered(tree.root)
    assert count_nodes(tree.root) == 31


def test_empty_tree_is_valid() -> None:
    check_invariants(None, expected_size=0)
    assert is_balanced(None)
    assert is_ordered(None)


def test_detects_unbalanced_chain() -> None:
    root = AVLNode(1, "a", height=2, right=AVLNode(2, "b", height=1, right=AVLNode(3, "c")))

    assert not is_balanced(root)
    with pytest.raises(TreeInvariantError, match="differ by more than one"):
        check_invariants(root)


def test_detects_out_of_order_keys() -> None:
    root = AVLNode(2, "b", height=1, left=AVLNode(3, "c"), right=AVLNode(4, "d"))

    assert not is_ordered(root)
    with pytest.raises(TreeInvariantError, match="strictly increasing"):
        check_invariants(root)


def test_detects_stale_cached_height() -> None:
    root = AVLNode(2, "b", height=0, left=AVLNode(1, "a"))

    with pytest.raises(TreeInvariantError, match="caches height 0"):
        check_invariants(root)


def test_detects_size_mismatch() -> None:
    root = AVLNode(1, "a")

    with pytest.raises(TreeInvariantError, match="reports size 2"):
        check_invariants(root, expected_size=2)


def test_invariant_error_is_an_assertion_error() -> None:
    with pytest.raises(AssertionError):
        check_invariants(AVLNode(1, "a"), expected_size=5)
