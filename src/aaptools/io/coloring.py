from __future__ import annotations

from typing import List, Sequence, Tuple

from aaptools.aap.detect import BLUE, RED, UNCOLORED

_TO_CHAR = {RED: "R", BLUE: "B", UNCOLORED: "."}
_FROM_CHAR = {"R": RED, "B": BLUE, ".": UNCOLORED}


def coloring_to_str(coloring: Sequence[int]) -> str:
    """
    Render a coloring as a string: 'R' red, 'B' blue, '.' unassigned.
    """
    try:
        return "".join(_TO_CHAR[c] for c in coloring)
    except KeyError as exc:
        raise ValueError(f"not a color: {exc.args[0]!r}") from None


def str_to_coloring(s: str) -> List[int]:
    """
    Parse the coloring_to_str() format. Case-insensitive; whitespace is ignored.
    """
    out: List[int] = []
    for ch in s:
        if ch.isspace():
            continue
        c = _FROM_CHAR.get(ch.upper())
        if c is None:
            raise ValueError(f"unexpected character {ch!r} in coloring string {s!r}")
        out.append(c)
    return out


def color_classes(coloring: Sequence[int]) -> Tuple[List[int], List[int]]:
    """Return (red_indices, blue_indices)."""
    red = [i for i, c in enumerate(coloring) if c == RED]
    blue = [i for i, c in enumerate(coloring) if c == BLUE]
    return red, blue
