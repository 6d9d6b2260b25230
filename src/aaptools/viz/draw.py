from __future__ import annotations

from typing import Sequence

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from aaptools.aap.detect import BLUE, RED
from aaptools.io.coloring import coloring_to_str

_FACE = {RED: "tab:red", BLUE: "tab:blue"}


def draw_coloring(
    coloring: Sequence[int],
    *,
    highlight: Sequence[int] | None = None,
    ax=None,
    title: str | None = None,
    save_path: str | None = None,
):
    """
    Draw a coloring of {0..n-1} as a strip of cells, one per index.
    Unassigned cells are left white.

    If highlight is given (e.g. an AAP from find_aap_ending_at), those
    cells get a thick black border and arcs join consecutive points.
    If save_path is set, the figure is saved as PNG and closed.

    Returns the Axes drawn on.
    """
    n = len(coloring)
    if ax is None:
        fig, ax = plt.subplots(figsize=(max(4.0, 0.4 * n), 1.6))
    else:
        fig = ax.figure

    for i, c in enumerate(coloring):
        ax.add_patch(Rectangle(
            (i, 0), 1, 1,
            facecolor=_FACE.get(c, "white"),
            edgecolor="gray",
            linewidth=0.8,
        ))

    if highlight:
        pts = sorted(highlight)
        for i in pts:
            ax.add_patch(Rectangle((i, 0), 1, 1, fill=False, edgecolor="black", linewidth=2.5))
        for x, y in zip(pts, pts[1:]):
            mid = (x + y) / 2 + 0.5
            ax.annotate(
                "",
                xy=(y + 0.5, 1.0),
                xytext=(x + 0.5, 1.0),
                arrowprops=dict(arrowstyle="-", connectionstyle="arc3,rad=-0.4", color="black"),
            )
            ax.text(mid, 1.35, str(y - x), ha="center", va="bottom", fontsize=8)

    ax.set_xlim(0, max(n, 1))
    ax.set_ylim(-0.2, 2.0)
    ax.set_aspect("equal")
    ax.set_yticks([])
    ax.set_xticks([i + 0.5 for i in range(n)])
    ax.set_xticklabels([str(i) for i in range(n)], fontsize=7)
    for side in ("top", "right", "left"):
        ax.spines[side].set_visible(False)
    ax.set_title(title if title is not None else coloring_to_str(coloring))

    if save_path:
        fig.savefig(save_path, dpi=200, bbox_inches="tight")
        plt.close(fig)

    return ax
