"""Pruning-free reference checks for AAPs.

These scan every k-subset of a color class and every 2-coloring of
{0..n-1}. Only practical for small inputs; used to cross-check the
incremental detector and the backtracking oracle.
"""
from __future__ import annotations

from itertools import combinations, product
from typing import Iterable, Optional, Sequence, Tuple

from aaptools.aap.detect import BLUE, RED

MAX_BRUTEFORCE_N = 20


def is_aap(points: Sequence[int]) -> bool:
    """True iff *points* is strictly increasing with exactly two distinct gaps."""
    if len(points) < 3:
        return False
    gaps = set()
    for x, y in zip(points, points[1:]):
        if y <= x:
            return False
        gaps.add(y - x)
    return len(gaps) == 2


def contains_aap(points: Iterable[int], k: int) -> bool:
    """True iff some k-subset of *points* forms an AAP."""
    if k <= 2:
        return False
    pts = sorted(points)
    return any(is_aap(sub) for sub in combinations(pts, k))


def coloring_has_violation(coloring: Sequence[int], k1: int, k2: int) -> bool:
    """True iff the coloring has a red k1-AAP or a blue k2-AAP."""
    red = [i for i, c in enumerate(coloring) if c == RED]
    blue = [i for i, c in enumerate(coloring) if c == BLUE]
    return contains_aap(red, k1) or contains_aap(blue, k2)


def find_counterexample_bruteforce(n: int, k1: int, k2: int) -> Optional[Tuple[int, ...]]:
    """First coloring of {0..n-1} (in product order) avoiding both patterns.

    Raises ValueError for n > MAX_BRUTEFORCE_N.
    """
    if n > MAX_BRUTEFORCE_N:
        raise ValueError(
            f"Brute-force enumeration is impractical for n={n} "
            f"(limit {MAX_BRUTEFORCE_N}). Use exists_counterexample() instead."
        )
    if n <= 0:
        return ()
    for coloring in product((RED, BLUE), repeat=n):
        if not coloring_has_violation(coloring, k1, k2):
            return coloring
    return None


def exists_counterexample_bruteforce(n: int, k1: int, k2: int) -> bool:
    """Exhaustive version of exists_counterexample over all 2^n colorings."""
    return find_counterexample_bruteforce(n, k1, k2) is not None
