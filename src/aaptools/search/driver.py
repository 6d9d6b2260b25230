"""Two-stage computation of B(k, l) anchored on the symmetric value B(k, k)."""
from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional

from aaptools.search.oracle import DEFAULT_MAX_NODES, BranchOrder, balanced_order
from aaptools.search.threshold import (
    ThresholdOracle,
    binary_search_min_n,
    check_parameters,
    expand_and_bisect,
    minimal_threshold,
)


@dataclass(frozen=True)
class ThresholdResult:
    """
    Outcome of one two-stage run.

    value:        B(k, l), or None if unresolved within n_max
    anchor:       B(k, k) from stage 1, or None
    direction:    "down" | "up" | "unresolved" (where stage 2 searched)
    evaluations:  distinct oracle runs across both stages
    """

    k: int
    l: int
    n_max: int
    value: Optional[int]
    anchor: Optional[int]
    direction: str
    evaluations: int


def compute_threshold_result(
    k: int,
    l: int,
    n_max: int,
    *,
    order: BranchOrder = balanced_order,
    memo: bool = True,
    max_nodes: Optional[int] = DEFAULT_MAX_NODES,
    verbose: bool = False,
) -> ThresholdResult:
    """Compute B(k, l) and report how the search went.

    Stage 1 finds the anchor B = B(k, k). Stage 2 tests (k, l) at B:
    if it already holds, bisect [1, B]; otherwise double upwards from B
    (capped at n_max) and bisect the bracket.
    """
    check_parameters(k, l, n_max)

    sym = ThresholdOracle(k, k, n_max, order=order, memo=memo, max_nodes=max_nodes, verbose=verbose)
    anchor = minimal_threshold(k, k, n_max, oracle=sym)

    if anchor is None:
        if verbose:
            print(f"[B({k},{k})] unresolved up to Nmax={n_max}", file=sys.stderr)
        return ThresholdResult(k, l, n_max, None, None, "unresolved", sym.evaluations)

    if verbose:
        print(f"[B({k},{k})] anchor = {anchor}", file=sys.stderr)

    if l == k:
        return ThresholdResult(k, l, n_max, anchor, anchor, "down", sym.evaluations)

    asym = ThresholdOracle(k, l, n_max, order=order, memo=memo, max_nodes=max_nodes, verbose=verbose)
    if asym(anchor):
        value: Optional[int] = binary_search_min_n(1, anchor, asym)
        direction = "down"
    else:
        value = expand_and_bisect(asym, anchor + 1, 2 * anchor)
        direction = "up" if value is not None else "unresolved"

    return ThresholdResult(k, l, n_max, value, anchor, direction, sym.evaluations + asym.evaluations)


def compute_threshold(
    k: int,
    l: int,
    n_max: int,
    *,
    order: BranchOrder = balanced_order,
    memo: bool = True,
    max_nodes: Optional[int] = DEFAULT_MAX_NODES,
    verbose: bool = False,
) -> Optional[int]:
    """
    Minimal N <= n_max such that every 2-coloring of {0..N-1} has a red
    k-AAP or a blue l-AAP. Returns None if no such N <= n_max exists.

    Raises ValueError for k, l or n_max <= 0, and SearchExhausted if an
    oracle call exceeds max_nodes.
    """
    return compute_threshold_result(
        k, l, n_max, order=order, memo=memo, max_nodes=max_nodes, verbose=verbose
    ).value
