"""Tests for the ``AVLTree`` container API."""

from __future__ import annotations

import copy
import logging
import math
import random

import pytest

from avl_tree import (
    AVLTree,
    EmptyTreeError,
    InsertOutcome,
    KeyNotFoundError,
    check_invariants,
)

SCENARIO_KEYS = [5, 2, 8, 1, 3, 7, 9]


def _tree_from(keys: list[int]) -> AVLTree[int, str]:
    tree: AVLTree[int, str] = AVLTree()
    for key in keys:
        tree.insert(key, f"v{key}")
    return tree


def test_new_tree_is_empty() -> None:
    tree: AVLTree[int, str] = AVLTree()

    assert tree.is_empty()
    assert tree.size() == 0
    assert len(tree) == 0
    assert tree.height() == -1
    assert tree.root is None
    assert not tree.contains(0)
    assert 0 not in tree


def test_scenario_builds_perfect_tree() -> None:
    tree = _tree_from(SCENARIO_KEYS)

    assert tree.size() == 7
    assert tree.height() == 2
    assert tree.min_key() == 1
    assert tree.max_key() == 9
    assert tree.keys() == SCENARIO_KEYS
    check_invariants(tree.root, expected_size=7)


def test_removing_two_child_root_promotes_successor() -> None:
    tree = _tree_from(SCENARIO_KEYS)

    removed = tree.remove(5)

    assert removed == "v5"
    assert tree.root is not None
    assert tree.root.key == 7
    assert tree.root.value == "v7"
    assert tree.size() == 6
    assert not tree.contains(5)
    assert tree.is_balanced()
    check_invariants(tree.root, expected_size=6)


def test_insert_then_find_round_trip() -> None:
    tree: AVLTree[str, int] = AVLTree()

    outcome = tree.insert("alpha", 1)

    assert outcome is InsertOutcome.INSERTED
    assert outcome
    assert tree.find("alpha") == 1
    assert "alpha" in tree


def test_duplicate_insert_is_reported_and_ignored(caplog: pytest.LogCaptureFixture) -> None:
    tree = _tree_from(SCENARIO_KEYS)
    caplog.set_level(logging.DEBUG, logger="avl_tree.tree")

    outcome = tree.insert(3, "replacement")

    assert outcome is InsertOutcome.DUPLICATE_KEY
    assert not outcome
    assert tree.size() == 7
    assert tree.height() == 2
    assert tree.find(3) == "v3"
    assert "duplicate key 3" in caplog.text


def test_remove_then_contains_is_false() -> None:
    tree = _tree_from([4, 2, 6])

    assert tree.remove(2) == "v2"
    assert not tree.contains(2)
    assert tree.keys() == [4, 6]


def test_remove_last_element_resets_height() -> None:
    tree = _tree_from([1])

    tree.remove(1)

    assert tree.is_empty()
    assert tree.height() == -1
    assert tree.size() == 0


def test_remove_missing_key_leaves_tree_unchanged() -> None:
    tree = _tree_from(SCENARIO_KEYS)

    with pytest.raises(KeyNotFoundError) as excinfo:
        tree.remove(42)

    assert excinfo.value.key == 42
    assert "does not contain key 42" in str(excinfo.value)
    assert tree.size() == 7
    assert tree.keys() == SCENARIO_KEYS


def test_key_not_found_is_a_key_error() -> None:
    tree = _tree_from([1])
    with pytest.raises(KeyError):
        tree.find(2)


@pytest.mark.parametrize(
    "operation",
    [
        lambda tree: tree.find(1),
        lambda tree: tree.remove(1),
        lambda tree: tree.modify_value(1, "x"),
        lambda tree: tree.min_key(),
        lambda tree: tree.max_key(),
        lambda tree: tree.min_entry(),
        lambda tree: tree.max_entry(),
        lambda tree: tree.lower_key(1),
        lambda tree: tree.higher_entry(1),
    ],
)
def test_operations_on_empty_tree_raise(operation) -> None:
    tree: AVLTree[int, str] = AVLTree()
    with pytest.raises(EmptyTreeError):
        operation(tree)
    assert tree.is_empty()


def test_modify_value_keeps_shape() -> None:
    tree = _tree_from(SCENARIO_KEYS)

    tree.modify_value(8, "eight")

    assert tree.find(8) == "eight"
    assert tree.keys() == SCENARIO_KEYS
    assert tree.height() == 2
    with pytest.raises(KeyNotFoundError):
        tree.modify_value(10, "ten")


def test_clear_discards_everything() -> None:
    tree = _tree_from(SCENARIO_KEYS)

    tree.clear()

    assert tree.is_empty()
    assert tree.size() == 0
    assert tree.height() == -1
    assert tree.keys() == []


def test_ascending_inserts_stay_logarithmic() -> None:
    tree = _tree_from([1, 2, 3, 4, 5, 6, 7])

    assert tree.height() == 2
    assert tree.level_order_keys() == [[4], [2, 6], [1, 3, 5, 7]]


@pytest.mark.parametrize("size", [1, 2, 10, 100, 1000])
def test_height_respects_avl_bound(size: int) -> None:
    tree = _tree_from(list(range(size)))

    assert tree.height() <= 1.44 * math.log2(size + 2) - 1
    check_invariants(tree.root, expected_size=size)


def test_copy_is_independent() -> None:
    original = _tree_from(SCENARIO_KEYS)
    duplicate = original.copy()

    duplicate.remove(duplicate.min_key())
    duplicate.insert(100, "v100")

    assert original.size() == 7
    assert original.min_key() == 1
    assert not original.contains(100)
    assert duplicate.size() == 7
    assert duplicate.min_key() == 2


def test_copy_constructor_preserves_metadata() -> None:
    original = _tree_from(list(range(20)))
    duplicate = AVLTree(original)

    assert duplicate.size() == original.size()
    assert duplicate.height() == original.height()
    assert duplicate.keys() == original.keys()
    assert duplicate.root is not original.root


def test_copy_module_protocols_produce_independent_trees() -> None:
    original = _tree_from(SCENARIO_KEYS)

    for duplicate in (copy.copy(original), copy.deepcopy(original)):
        duplicate.clear()
        assert original.size() == 7
        assert original.find(5) == "v5"


def test_copy_constructor_rejects_other_types() -> None:
    with pytest.raises(TypeError):
        AVLTree({1: "a"})  # type: ignore[arg-type]


def test_iteration_yields_sorted_keys() -> None:
    tree = _tree_from([50, 20, 80, 10, 30, 70, 90, 60])

    assert list(tree) == [10, 20, 30, 50, 60, 70, 80, 90]
    assert tree.in_order_keys() == sorted(tree.keys())
    assert repr(tree) == "AVLTree(size=8, height=3)"


def test_random_operations_preserve_invariants() -> None:
    rng = random.Random(2024)
    tree: AVLTree[int, int] = AVLTree()
    model: dict[int, int] = {}

    for step in range(2000):
        key = rng.randrange(200)
        if rng.random() < 0.6:
            outcome = tree.insert(key, step)
            if key in model:
                assert outcome is InsertOutcome.DUPLICATE_KEY
            else:
                assert outcome is InsertOutcome.INSERTED
                model[key] = step
        elif key in model:
            assert tree.remove(key) == model.pop(key)
        else:
            if model:
                with pytest.raises(KeyNotFoundError):
                    tree.remove(key)
            else:
                with pytest.raises(EmptyTreeError):
                    tree.remove(key)

        assert tree.size() == len(model)
        check_invariants(tree.root, expected_size=len(model))

    assert list(tree) == sorted(model)
    for key, value in model.items():
        assert tree.find(key) == value
