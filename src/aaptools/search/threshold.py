"""Minimal-threshold search over the monotone predicate "no counterexample at N"."""
from __future__ import annotations

import sys
from typing import Dict, Optional

from aaptools.search.memo import DeadPrefixTable
from aaptools.search.oracle import (
    DEFAULT_MAX_NODES,
    BranchOrder,
    balanced_order,
    exists_counterexample,
    fixed_order,
)


class ThresholdOracle:
    """Predicate P(N) = "every 2-coloring of {0..N-1} forces a pattern".

    Wraps exists_counterexample() for one (k1, k2) pair:
      - answers are cached per N (a search may probe the same N twice),
      - `evaluations` counts real oracle runs,
      - N > n_max is never evaluated,
      - with memo=True, one DeadPrefixTable is shared by every N.
    """

    def __init__(
        self,
        k1: int,
        k2: int,
        n_max: int,
        *,
        order: BranchOrder = balanced_order,
        memo: bool = True,
        symmetry: Optional[bool] = None,
        max_nodes: Optional[int] = DEFAULT_MAX_NODES,
        verbose: bool = False,
    ) -> None:
        self.k1 = k1
        self.k2 = k2
        self.n_max = n_max
        self.order = order
        self.table = DeadPrefixTable(k1, k2) if memo else None
        self.symmetry = symmetry
        self.max_nodes = max_nodes
        self.verbose = verbose
        self.evaluations = 0
        self._cache: Dict[int, bool] = {}

    def forces(self, n: int) -> bool:
        """True iff no counterexample exists at n."""
        if n > self.n_max:
            raise ValueError(f"refusing to evaluate N={n} above n_max={self.n_max}")
        if n in self._cache:
            return self._cache[n]

        found = exists_counterexample(
            n,
            self.k1,
            self.k2,
            order=self.order,
            memo=self.table if self.table is not None else False,
            symmetry=self.symmetry,
            max_nodes=self.max_nodes,
        )
        self.evaluations += 1
        result = not found
        self._cache[n] = result

        if self.verbose:
            verdict = "forced" if result else "counterexample found"
            print(f"[B({self.k1},{self.k2}) N={n}] {verdict}", file=sys.stderr)
        return result

    __call__ = forces


def binary_search_min_n(lo: int, hi: int, oracle: ThresholdOracle) -> int:
    """Smallest N in [lo, hi] with oracle(N) true, given oracle(hi) is true."""
    ans = hi
    while lo <= hi:
        mid = (lo + hi) // 2
        if oracle(mid):
            ans = mid
            hi = mid - 1
        else:
            lo = mid + 1
    return ans


def expand_and_bisect(oracle: ThresholdOracle, lo: int, hi: int) -> Optional[int]:
    """Double *hi* until the predicate holds, then bisect [lo, hi].

    The predicate is assumed false below *lo*; *hi* is the first probe.
    Returns None when it stays false up to oracle.n_max.
    """
    n_max = oracle.n_max
    if lo > n_max:
        return None

    hi = min(max(hi, lo), n_max)
    while not oracle(hi):
        if hi >= n_max:
            return None
        lo = hi + 1
        hi = min(2 * hi, n_max)
    return binary_search_min_n(lo, hi, oracle)


def minimal_threshold(
    k1: int,
    k2: int,
    n_max: int,
    *,
    oracle: Optional[ThresholdOracle] = None,
    order: BranchOrder = balanced_order,
    memo: bool = True,
    max_nodes: Optional[int] = DEFAULT_MAX_NODES,
    verbose: bool = False,
) -> Optional[int]:
    """Least N in [1, n_max] where no counterexample exists, or None.

    Exponential bound-finding from N=1 followed by binary search, so the
    oracle runs O(log n_max) times. Pass *oracle* to reuse its cache and
    dead-prefix table; it must be built for the same (k1, k2).
    """
    if k1 <= 0 or k2 <= 0:
        raise ValueError(f"AAP lengths must be positive, got ({k1}, {k2})")
    if n_max < 1:
        return None
    if oracle is None:
        oracle = ThresholdOracle(
            k1, k2, n_max, order=order, memo=memo, max_nodes=max_nodes, verbose=verbose
        )
    elif (oracle.k1, oracle.k2, oracle.n_max) != (k1, k2, n_max):
        raise ValueError(
            f"oracle built for ({oracle.k1}, {oracle.k2}) up to {oracle.n_max}, "
            f"not ({k1}, {k2}) up to {n_max}"
        )
    return expand_and_bisect(oracle, 1, 1)


def linear_threshold(
    k1: int,
    k2: int,
    n_max: int,
    *,
    max_nodes: Optional[int] = DEFAULT_MAX_NODES,
    verbose: bool = False,
) -> Optional[int]:
    """Basic variant: scan N = 1, 2, ... with red-then-blue order and no memo."""
    check_parameters(k1, k2, n_max)
    for n in range(1, n_max + 1):
        found = exists_counterexample(
            n, k1, k2, order=fixed_order, memo=False, symmetry=False, max_nodes=max_nodes
        )
        if verbose:
            print(f"[B({k1},{k2}) N={n}] {'counterexample found' if found else 'forced'}",
                  file=sys.stderr)
        if not found:
            return n
    return None


def check_parameters(k1: int, k2: int, n_max: int) -> None:
    if k1 <= 0 or k2 <= 0:
        raise ValueError(f"AAP lengths must be positive, got ({k1}, {k2})")
    if n_max <= 0:
        raise ValueError(f"n_max must be positive, got {n_max}")
