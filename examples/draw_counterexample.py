#!/usr/bin/env python3
"""Draw the largest counterexample just below B(k, l), and show how
extending it by one index forces a pattern.

Usage:
    python draw_counterexample.py 3 3 --save ce
"""

from __future__ import annotations

import argparse

from aaptools.aap.detect import BLUE, RED, find_aap_ending_at
from aaptools.io.coloring import coloring_to_str
from aaptools.search.driver import compute_threshold
from aaptools.search.oracle import find_counterexample
from aaptools.viz.draw import draw_coloring


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('k', type=int)
    parser.add_argument('l', type=int)
    parser.add_argument('--n-max', type=int, default=100)
    parser.add_argument('--save', type=str, default=None,
                        help='Save PNG files with this prefix instead of showing')
    args = parser.parse_args()

    B = compute_threshold(args.k, args.l, args.n_max)
    if B is None:
        print(f"Unresolved up to Nmax={args.n_max}")
        return
    print(f"B({args.k},{args.l}) = {B}")

    witness = find_counterexample(B - 1, args.k, args.l)
    print(f"Counterexample on {B - 1} points: {coloring_to_str(witness)}")
    draw_coloring(witness, title=f"avoids red {args.k}-AAP / blue {args.l}-AAP",
                  save_path=f"{args.save}_witness.png" if args.save else None)

    lengths = (args.k, args.l)
    for c in (RED, BLUE):
        ext = witness + [c]
        chain = find_aap_ending_at(ext, B - 1, lengths[c], c)
        print(f"  extend with {coloring_to_str([c])}: {chain}")
        if chain is not None:
            draw_coloring(ext, highlight=chain,
                          save_path=f"{args.save}_{coloring_to_str([c])}.png" if args.save else None)

    if not args.save:
        import matplotlib.pyplot as plt
        plt.show()


if __name__ == '__main__':
    main()
