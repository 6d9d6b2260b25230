#!/usr/bin/env python3
"""Compute B(k, l): the least N forcing a red k-AAP or a blue l-AAP.

Usage:
    python compute_baap.py 3 3 --n-max 200
    python compute_baap.py 5 20 --n-max 300 --verbose
    python compute_baap.py 4 4 --linear
"""

from __future__ import annotations

import argparse
import time

from aaptools.search.driver import compute_threshold_result
from aaptools.search.threshold import linear_threshold


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('k', type=int, help='AAP length forbidden in red')
    parser.add_argument('l', type=int, help='AAP length forbidden in blue')
    parser.add_argument('--n-max', type=int, default=200,
                        help='Search cap (default: 200)')
    parser.add_argument('--linear', action='store_true',
                        help='Use the basic linear scan instead of the two-stage search')
    parser.add_argument('--max-nodes', type=int, default=None,
                        help='Give up an oracle call after this many assignments')
    parser.add_argument('--verbose', action='store_true')
    args = parser.parse_args()

    t0 = time.perf_counter()
    if args.linear:
        B = linear_threshold(args.k, args.l, args.n_max,
                             max_nodes=args.max_nodes, verbose=args.verbose)
        evaluations = None
    else:
        res = compute_threshold_result(args.k, args.l, args.n_max,
                                       max_nodes=args.max_nodes, verbose=args.verbose)
        B = res.value
        evaluations = res.evaluations
    t1 = time.perf_counter()

    if B is None:
        print(f"Unresolved up to Nmax={args.n_max}")
    else:
        print(f"B({args.k},{args.l}) = {B}")
    if evaluations is not None:
        print(f"Oracle evaluations: {evaluations}")
    print(f"Elapsed: {(t1 - t0) * 1e3:.3f} ms")


if __name__ == '__main__':
    main()
