"""Dead-prefix memoization for the counterexample oracle."""
from __future__ import annotations

from typing import Dict, Sequence, Tuple

from aaptools.aap.detect import BLUE


def prefix_key(blue_mask: int, length: int) -> int:
    """Exact fingerprint of a coloring prefix.

    Bit i of *blue_mask* is set iff index i is blue. The sentinel bit at
    position *length* encodes the prefix length, so distinct prefixes
    always get distinct keys.
    """
    return (1 << length) | blue_mask


def prefix_key_from_coloring(coloring: Sequence[int], length: int) -> int:
    """prefix_key() computed from the first *length* entries of a coloring."""
    mask = 0
    for i in range(length):
        if coloring[i] == BLUE:
            mask |= 1 << i
    return prefix_key(mask, length)


class DeadPrefixTable:
    """Prefixes known to admit no completion avoiding both patterns.

    Bound to one (k1, k2) pair. For every prefix the smallest N at which it
    was proven dead is stored: a prefix dead at N is dead at every N' >= N,
    but says nothing about smaller N. That makes one table safe to share
    across oracle calls in any order (binary search probes N downwards).
    """

    def __init__(self, k1: int, k2: int) -> None:
        self.k1 = k1
        self.k2 = k2
        self._dead: Dict[int, int] = {}

    @property
    def lengths(self) -> Tuple[int, int]:
        return (self.k1, self.k2)

    def check_lengths(self, k1: int, k2: int) -> None:
        if (k1, k2) != (self.k1, self.k2):
            raise ValueError(
                f"DeadPrefixTable built for (k1, k2)=({self.k1}, {self.k2}) "
                f"cannot be used for ({k1}, {k2})."
            )

    def is_dead(self, key: int, n: int) -> bool:
        proven = self._dead.get(key)
        return proven is not None and proven <= n

    def mark_dead(self, key: int, n: int) -> None:
        proven = self._dead.get(key)
        if proven is None or n < proven:
            self._dead[key] = n

    def clear(self) -> None:
        self._dead.clear()

    def __len__(self) -> int:
        return len(self._dead)

    def __repr__(self) -> str:
        return f"DeadPrefixTable(k1={self.k1}, k2={self.k2}, size={len(self)})"
