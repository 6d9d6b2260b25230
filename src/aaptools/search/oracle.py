"""Counterexample oracle: does some 2-coloring of {0..n-1} avoid both patterns?

Backtracking runs on an explicit frame stack, one frame per index, so the
Python recursion limit never depends on n.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple, Union

from aaptools.aap.detect import BLUE, RED, UNCOLORED, creates_aap
from aaptools.search.memo import DeadPrefixTable, prefix_key


_env_max_nodes = os.environ.get("AAPTOOLS_MAX_NODES")
DEFAULT_MAX_NODES: Optional[int] = int(_env_max_nodes) if _env_max_nodes else None

BranchOrder = Callable[[int, int], Tuple[int, int]]
MemoOption = Union[bool, DeadPrefixTable]


class SearchExhausted(RuntimeError):
    """Raised when the oracle explores more than max_nodes assignments.

    Distinct from an unresolved threshold: the question was not answered.
    """

    def __init__(self, n: int, k1: int, k2: int, max_nodes: int) -> None:
        super().__init__(
            f"search space exhausted for n={n}, (k1, k2)=({k1}, {k2}) "
            f"after {max_nodes} assignments"
        )
        self.n = n
        self.k1 = k1
        self.k2 = k2
        self.max_nodes = max_nodes

    def __reduce__(self):
        # pool workers send exceptions back pickled
        return (type(self), (self.n, self.k1, self.k2, self.max_nodes))


def fixed_order(red_count: int, blue_count: int) -> Tuple[int, int]:
    """Always red, then blue."""
    return (RED, BLUE)


def balanced_order(red_count: int, blue_count: int) -> Tuple[int, int]:
    """Try the color used less so far first; ties go to red."""
    if blue_count < red_count:
        return (BLUE, RED)
    return (RED, BLUE)


BRANCH_ORDERS: Dict[str, BranchOrder] = {
    "fixed": fixed_order,
    "balanced": balanced_order,
}


@dataclass
class _Frame:
    index: int
    key: int
    choices: Tuple[int, int]
    next_choice: int = 0


def _resolve_memo(memo: MemoOption, k1: int, k2: int) -> Optional[DeadPrefixTable]:
    if isinstance(memo, DeadPrefixTable):
        memo.check_lengths(k1, k2)
        return memo
    if memo:
        return DeadPrefixTable(k1, k2)
    return None


def _resolve_symmetry(symmetry: Optional[bool], k1: int, k2: int) -> bool:
    if symmetry is None:
        return k1 == k2
    if symmetry and k1 != k2:
        # swapping colors maps a (k1, k2) counterexample to a (k2, k1) one
        raise ValueError(
            f"fixing index 0 is only sound for k1 == k2, got ({k1}, {k2})"
        )
    return symmetry


def find_counterexample(
    n: int,
    k1: int,
    k2: int,
    *,
    order: BranchOrder = balanced_order,
    memo: MemoOption = True,
    symmetry: Optional[bool] = None,
    max_nodes: Optional[int] = DEFAULT_MAX_NODES,
) -> Optional[List[int]]:
    """Search for a coloring of {0..n-1} with no red k1-AAP and no blue k2-AAP.

    Parameters
    ----------
    n : int
        Size of the ground set. n <= 0 yields the empty coloring.
    k1, k2 : int
        Forbidden AAP lengths for red and blue. Lengths <= 2 never trigger.
    order : callable
        Branch-order policy (red_count, blue_count) -> (first, second).
    memo : bool or DeadPrefixTable
        True for a fresh per-call table, False for none, or a caller-owned
        table bound to (k1, k2) that persists across calls.
    symmetry : bool, optional
        Fix index 0 to red. Defaults to doing so exactly when k1 == k2.
    max_nodes : int, optional
        Cap on successful assignments; SearchExhausted is raised past it.

    Returns
    -------
    list[int] or None
        A counterexample coloring, or None if none exists.
    """
    if n <= 0:
        return []

    table = _resolve_memo(memo, k1, k2)
    fix_first = _resolve_symmetry(symmetry, k1, k2)
    lengths = (k1, k2)

    coloring = [UNCOLORED] * n
    counts = [0, 0]
    blue_mask = 0
    start = 0

    if fix_first:
        coloring[0] = RED
        counts[RED] = 1
        start = 1
        if n == 1:
            return coloring

    root_key = prefix_key(blue_mask, start)
    if table is not None and table.is_dead(root_key, n):
        return None

    stack: List[_Frame] = [_Frame(start, root_key, order(counts[RED], counts[BLUE]))]
    nodes = 0

    while stack:
        frame = stack[-1]
        idx = frame.index

        # the previous choice at this index had its whole subtree fail
        prev = coloring[idx]
        if prev != UNCOLORED:
            counts[prev] -= 1
            if prev == BLUE:
                blue_mask &= ~(1 << idx)
            coloring[idx] = UNCOLORED

        if frame.next_choice >= len(frame.choices):
            if table is not None:
                table.mark_dead(frame.key, n)
            stack.pop()
            continue

        c = frame.choices[frame.next_choice]
        frame.next_choice += 1

        coloring[idx] = c
        if creates_aap(coloring, idx, lengths[c], c):
            coloring[idx] = UNCOLORED
            continue

        counts[c] += 1
        if c == BLUE:
            blue_mask |= 1 << idx

        nodes += 1
        if max_nodes is not None and nodes > max_nodes:
            raise SearchExhausted(n, k1, k2, max_nodes)

        nxt = idx + 1
        if nxt == n:
            return list(coloring)

        key = prefix_key(blue_mask, nxt)
        if table is not None and table.is_dead(key, n):
            continue
        stack.append(_Frame(nxt, key, order(counts[RED], counts[BLUE])))

    return None


def exists_counterexample(
    n: int,
    k1: int,
    k2: int,
    *,
    order: BranchOrder = balanced_order,
    memo: MemoOption = True,
    symmetry: Optional[bool] = None,
    max_nodes: Optional[int] = DEFAULT_MAX_NODES,
) -> bool:
    """True iff some 2-coloring of {0..n-1} has no red k1-AAP and no blue k2-AAP."""
    witness = find_counterexample(
        n, k1, k2, order=order, memo=memo, symmetry=symmetry, max_nodes=max_nodes
    )
    return witness is not None
