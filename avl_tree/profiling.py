"""Height profiling for AVL trees built from random insertion orders.

The profiler inserts random permutations of ``range(n)`` for several sizes,
records the resulting tree heights and compares them against the AVL
worst-case bound ``1.44 * log2(n + 2) - 1``.  Every generated tree is also run
through :func:`avl_tree.validation.check_invariants`, which makes the profiler
a cheap end-to-end regression check for the balance engine.

The public API covers the following capabilities:

* ``avl_height_bound`` – the worst-case height for ``n`` elements.
* ``profile_heights`` – build and measure trees for each requested size.
* ``write_profiles_to_csv`` – persist collected metrics for regression analysis.
* ``main`` – CLI entry point (``python -m avl_tree.profiling``).
"""

from __future__ import annotations

from dataclasses import dataclass
import argparse
import csv
import logging
import time
from pathlib import Path
from typing import Iterable, List, Sequence

import numpy as np

from .errors import ProfilingError, TreeInvariantError
from .tree import AVLTree
from .validation import check_invariants

logger = logging.getLogger(__name__)

AVL_HEIGHT_FACTOR = 1.44
DEFAULT_SIZES: tuple[int, ...] = (10, 100, 1_000, 10_000)
DEFAULT_TRIALS = 5

__all__ = [
    "AVL_HEIGHT_FACTOR",
    "DEFAULT_SIZES",
    "DEFAULT_TRIALS",
    "HeightProfile",
    "avl_height_bound",
    "build_random_tree",
    "main",
    "profile_heights",
    "write_profiles_to_csv",
]


@dataclass(frozen=True)
class HeightProfile:
    """Height statistics collected for trees of one size."""

    size: int
    trials: int
    min_height: int
    mean_height: float
    max_height: int
    bound: float
    insert_seconds: float

    def to_row(self) -> List[str]:
        """Serialise the profile for CSV persistence."""

        return [
            str(self.size),
            str(self.trials),
            str(self.min_height),
            f"{self.mean_height:.3f}",
            str(self.max_height),
            f"{self.bound:.3f}",
            f"{self.insert_seconds:.9f}",
        ]


def avl_height_bound(size: int) -> float:
    """Return the worst-case AVL height (in edges) for *size* elements."""

    if size < 0:
        raise ValueError("size must be non-negative")
    return AVL_HEIGHT_FACTOR * float(np.log2(size + 2)) - 1


def build_random_tree(size: int, rng: np.random.Generator) -> AVLTree[int, int]:
    """Insert a random permutation of ``range(size)`` into a new tree."""

    tree: AVLTree[int, int] = AVLTree()
    for key in rng.permutation(size).tolist():
        tree.insert(key, key)
    return tree


def profile_heights(
    sizes: Iterable[int] = DEFAULT_SIZES,
    *,
    trials: int = DEFAULT_TRIALS,
    seed: int = 0,
) -> List[HeightProfile]:
    """Build ``trials`` random trees per size and summarise their heights.

    Raises:
        ValueError: for negative sizes or a non-positive trial count.
        ProfilingError: when a tree exceeds the AVL bound or fails its
            invariant check.
    """

    if trials <= 0:
        raise ValueError("trials must be positive")
    rng = np.random.default_rng(seed)
    profiles: List[HeightProfile] = []

    for size in sizes:
        bound = avl_height_bound(size)
        heights = np.empty(trials, dtype=np.int64)
        elapsed = 0.0
        for trial in range(trials):
            start = time.perf_counter()
            tree = build_random_tree(size, rng)
            elapsed += time.perf_counter() - start
            try:
                check_invariants(tree.root, expected_size=size)
            except TreeInvariantError as exc:
                raise ProfilingError(
                    f"Tree of size {size} failed its invariant check: {exc}"
                ) from exc
            heights[trial] = tree.height()

        worst = int(heights.max())
        if size > 0 and worst > bound:
            raise ProfilingError(
                f"Tree of size {size} reached height {worst}, above the AVL bound {bound:.3f}"
            )
        profile = HeightProfile(
            size=size,
            trials=trials,
            min_height=int(heights.min()),
            mean_height=float(heights.mean()),
            max_height=worst,
            bound=bound,
            insert_seconds=elapsed / trials,
        )
        logger.debug("Profiled %s", profile)
        profiles.append(profile)

    return profiles


def write_profiles_to_csv(
    path: Path, profiles: Iterable[HeightProfile], *, newline: str = ""
) -> None:
    """Persist profiling results to ``path`` using a deterministic header."""

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline=newline) as handle:
        writer = csv.writer(handle)
        writer.writerow(
            [
                "size",
                "trials",
                "min_height",
                "mean_height",
                "max_height",
                "bound",
                "insert_seconds",
            ]
        )
        for profile in profiles:
            writer.writerow(profile.to_row())


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for profiling AVL tree heights."""

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--sizes",
        type=str,
        default=None,
        help="Comma separated list of tree sizes. Defaults to 10,100,1000,10000.",
    )
    parser.add_argument(
        "--trials",
        type=int,
        default=DEFAULT_TRIALS,
        help="Number of random insertion orders per size.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Seed for the permutation generator.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("avl_height_profiles.csv"),
        help="Destination CSV file for profiling results.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    if args.sizes is not None:
        try:
            sizes = [int(item) for item in args.sizes.split(",") if item]
        except ValueError as exc:
            parser.error(f"Failed to parse sizes: {exc}")
    else:
        sizes = list(DEFAULT_SIZES)

    try:
        profiles = profile_heights(sizes, trials=args.trials, seed=args.seed)
    except (ValueError, ProfilingError) as exc:
        logger.error("Failed to profile tree heights: %s", exc)
        return 1

    write_profiles_to_csv(args.output, profiles)
    logger.info("Profiles written to %s", args.output)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
