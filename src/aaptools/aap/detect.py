"""Incremental AAP detection on a coloring prefix.

Indices are colored in increasing order, so any new almost-arithmetic
progression must end at the index that was just assigned. Every detector
here only looks backwards from that index.
"""
from __future__ import annotations

from typing import Optional, Sequence, Tuple

RED = 0
BLUE = 1
UNCOLORED = -1

Chain = Tuple[int, ...]


def _find_aap3(coloring: Sequence[int], idx: int, color: int) -> Optional[Chain]:
    """Fast path for length 3: j < m < idx with (m - j) != (idx - m)."""
    for m in range(1, idx):
        if coloring[m] != color:
            continue
        j_ap = 2 * m - idx  # only partner giving equal gaps
        for j in range(m):
            if coloring[j] == color and j != j_ap:
                return (j, m, idx)
    return None


def _walk(
    coloring: Sequence[int],
    pos: int,
    color: int,
    need: int,
    a: int,
    b: int,
    used_a: bool,
    used_b: bool,
) -> Optional[list[int]]:
    """Backward walk of *need* steps of length a or b, both used at least once."""
    if need == 0:
        return [pos] if (used_a and used_b) else None

    p = pos - a
    if p >= 0 and coloring[p] == color:
        tail = _walk(coloring, p, color, need - 1, a, b, True, used_b)
        if tail is not None:
            tail.append(pos)
            return tail

    p = pos - b
    if p >= 0 and coloring[p] == color:
        tail = _walk(coloring, p, color, need - 1, a, b, used_a, True)
        if tail is not None:
            tail.append(pos)
            return tail

    return None


def _find_aap_general(coloring: Sequence[int], idx: int, length: int, color: int) -> Optional[Chain]:
    need = length - 1
    max_a = idx // need
    for a in range(1, max_a + 1):
        # at least one b > a must fit: (need - 1) * a + b <= idx
        b_max = idx - (need - 1) * a
        if b_max <= a:
            continue
        for b in range(a + 1, b_max + 1):
            chain = _walk(coloring, idx, color, need, a, b, False, False)
            if chain is not None:
                return tuple(chain)
    return None


def find_aap_ending_at(
    coloring: Sequence[int],
    idx: int,
    length: int,
    color: int,
) -> Optional[Chain]:
    """Return an AAP of *color* with *length* points ending exactly at *idx*.

    Parameters
    ----------
    coloring : sequence of int
        Entries 0..idx must be assigned; entries past idx are ignored.
    idx : int
        Most recently colored index. It is expected to hold *color*.
    length : int
        Target AAP length. Lengths <= 2 never form an AAP.
    color : int
        RED or BLUE.

    Returns
    -------
    tuple[int, ...] or None
        The increasing indices of one such AAP, or None.
    """
    if length <= 2:
        return None
    if coloring[idx] != color:
        return None
    if length == 3:
        return _find_aap3(coloring, idx, color)
    return _find_aap_general(coloring, idx, length, color)


def creates_aap(coloring: Sequence[int], idx: int, length: int, color: int) -> bool:
    """True iff coloring *idx* with *color* completes a *length*-AAP ending there."""
    return find_aap_ending_at(coloring, idx, length, color) is not None
