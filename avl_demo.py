"""Command line demonstration of the ``avl_tree`` container.

The script walks through the full public API on shuffled integer keys: empty
tree behaviour, insertion with a rendering after every step, lookups,
removals, the ordered queries, and copy independence.  Each step checks its
own expectations and raises :class:`DemoExpectationError` on a mismatch, so
the demo doubles as a smoke test.

The heavy lifting lives in :mod:`avl_tree`; here we only orchestrate the
steps and emit human-readable report lines.
"""

from __future__ import annotations

from dataclasses import dataclass
import argparse
import logging
from typing import Callable, Iterator, List, Sequence

import numpy as np

from avl_tree import (
    AVLTree,
    AVLTreeError,
    EmptyTreeError,
    RenderError,
    check_invariants,
    render_levels,
    render_tree,
)

logger = logging.getLogger(__name__)

DEFAULT_NODES = 10


class DemoExpectationError(RuntimeError):
    """Raised when a demonstration step observes unexpected tree state."""


@dataclass(frozen=True)
class DemoStep:
    """A titled demonstration step producing report lines."""

    title: str
    run: Callable[[], List[str]]


def shuffled_keys(count: int, seed: int) -> List[int]:
    """Return ``range(count)`` shuffled with a seeded generator."""

    if count < 0:
        raise ValueError("count must be non-negative")
    rng = np.random.default_rng(seed)
    return rng.permutation(count).tolist()


def _expect(condition: bool, message: str) -> None:
    if not condition:
        raise DemoExpectationError(message)


def _balance_line(tree: AVLTree[int, int]) -> str:
    return "balanced? " + ("yes" if tree.is_balanced() else "no")


def _render(tree: AVLTree[int, int]) -> str:
    """Draw *tree* as a branch diagram, or level by level when keys are too wide."""

    try:
        return render_tree(tree)
    except RenderError as exc:
        logger.debug("Falling back to level rendering: %s", exc)
        return render_levels(tree)


def demo_empty_tree() -> List[str]:
    tree: AVLTree[int, int] = AVLTree()
    lines = [_render(tree)]
    _expect(tree.is_empty(), "new tree should be empty")
    _expect(tree.size() == 0, "new tree should have size 0")
    _expect(tree.height() == -1, "new tree should have height -1")
    _expect(not tree.contains(0), "new tree should not contain 0")
    for name, operation in (("find", tree.find), ("remove", tree.remove)):
        try:
            operation(0)
        except EmptyTreeError as exc:
            lines.append(f"{name}(0) -> {exc}")
        else:
            raise DemoExpectationError(f"{name} on an empty tree should fail")
    return lines


def demo_insert(tree: AVLTree[int, int], keys: Sequence[int]) -> List[str]:
    lines: List[str] = []
    for key in keys:
        tree.insert(key, key)
        lines.append(f"Inserted key {key}")
        lines.append(_render(tree))
        lines.append(_balance_line(tree))
        _expect(tree.is_balanced(), f"tree unbalanced after inserting {key}")
    check_invariants(tree.root, expected_size=len(keys))
    return lines


def demo_find(tree: AVLTree[int, int], count: int) -> List[str]:
    lines: List[str] = []
    for key in range(count):
        value = tree.find(key)
        lines.append(f"Found node with key {key}. Its value is {value}")
    return lines


def demo_remove(tree: AVLTree[int, int], count: int) -> List[str]:
    lines: List[str] = []
    for key in range(count):
        value = tree.remove(key)
        _expect(not tree.contains(key), f"key {key} still present after removal")
        check_invariants(tree.root, expected_size=count - key - 1)
        lines.append(f"Removed node with key {key}. Its value was {value}")
        lines.append(_render(tree))
    _expect(tree.is_empty(), "tree should be empty after removing every key")
    return lines


def demo_other_operations(keys: Sequence[int]) -> List[str]:
    tree: AVLTree[int, int] = AVLTree()
    for key in keys:
        tree.insert(key, 2 * key)
    pairs = " ".join(f"({key},{2 * key})" for key in keys)
    lines = [
        f"Inserting {pairs} to tree",
        _render(tree),
        f"Size of tree is {tree.size()}",
        f"Height of tree is {tree.height()}",
        f"Keys for this tree: {tree.keys()}",
        f"Values for this tree: {tree.values()}",
        f"Key-Value entries for this tree: {[tuple(entry) for entry in tree.entries()]}",
        f"Level-order key groupings for this tree: {tree.level_order_keys()}",
        "Level-order key-value entries for this tree: "
        f"{[[tuple(entry) for entry in level] for level in tree.level_order_entries()]}",
    ]
    if keys:
        middle = len(keys) // 2
        lines.extend(
            [
                f"Next lower key to {middle} is {tree.lower_key(middle)}",
                f"Next higher key to {middle} is {tree.higher_key(middle)}",
                f"Min key is {tree.min_key()}",
                f"Max key is {tree.max_key()}",
            ]
        )
    return lines


def demo_copy(keys: Sequence[int]) -> List[str]:
    original: AVLTree[int, int] = AVLTree()
    for key in keys:
        original.insert(key, key)
    lines = ["Original Tree:", _render(original)]

    duplicate = AVLTree(original)
    lines.extend(["Copied Tree:", _render(duplicate)])
    if duplicate.size() >= 2:
        lines.append("Removing min and max from copied tree...")
        duplicate.remove(duplicate.min_key())
        duplicate.remove(duplicate.max_key())
        lines.extend(["Copied Tree:", _render(duplicate)])

    lines.extend(["Original Tree:", _render(original)])
    _expect(original.size() == len(keys), "original size changed by copy mutation")
    if keys:
        _expect(original.min_key() == min(keys), "original min changed by copy mutation")
    return lines


def _iter_demo_steps(count: int, seed: int) -> Iterator[DemoStep]:
    """Yield the demonstration steps in execution order."""

    shared: AVLTree[int, int] = AVLTree()
    yield DemoStep("Testing empty tree...", demo_empty_tree)
    yield DemoStep(
        "Testing insert operation...",
        lambda: demo_insert(shared, shuffled_keys(count, seed)),
    )
    yield DemoStep("Testing find operation...", lambda: demo_find(shared, count))
    yield DemoStep("Testing remove operation...", lambda: demo_remove(shared, count))
    yield DemoStep(
        "Testing other operations...",
        lambda: demo_other_operations(shuffled_keys(count, seed + 1)),
    )
    yield DemoStep(
        "Testing copy constructor...",
        lambda: demo_copy(shuffled_keys(count, seed + 2)),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Execute every demonstration step and print the report."""

    parser = argparse.ArgumentParser(description="Demonstrate the AVL tree container")
    parser.add_argument(
        "--nodes",
        type=int,
        default=DEFAULT_NODES,
        help="Number of shuffled integer keys to insert",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Seed for the shuffling generator",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    if args.nodes < 0:
        parser.error("--nodes must be non-negative")

    for step in _iter_demo_steps(args.nodes, args.seed):
        print(step.title)
        try:
            output_lines = step.run()
        except (DemoExpectationError, AVLTreeError) as exc:
            logger.error("Demo step %r failed: %s", step.title, exc)
            return 1
        for line in output_lines:
            print(line)
        print()  # Spacer between steps
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
