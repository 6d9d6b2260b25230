#!/usr/bin/env python3
"""Tabulate B(k, l) for k, l in [k_min, k_max] using a process pool.

Usage:
    python baap_table.py --k-min 3 --k-max 4 --n-max 100 --processes 4
"""

from __future__ import annotations

import argparse
import time

from aaptools.search.table import DEFAULT_PROCESSES, threshold_table


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--k-min', type=int, default=3)
    parser.add_argument('--k-max', type=int, default=4)
    parser.add_argument('--n-max', type=int, default=100)
    parser.add_argument('--processes', type=int, default=DEFAULT_PROCESSES)
    args = parser.parse_args()

    ks = range(args.k_min, args.k_max + 1)
    pairs = [(k, l) for k in ks for l in ks]

    t0 = time.perf_counter()
    table = threshold_table(pairs, args.n_max, processes=args.processes, verbose=True)
    elapsed = time.perf_counter() - t0

    width = max(4, len(str(args.n_max)) + 1)
    print("k\\l " + "".join(f"{l:>{width}}" for l in ks))
    for k in ks:
        cells = []
        for l in ks:
            v = table[(k, l)]
            cells.append(f"{'-' if v is None else v:>{width}}")
        print(f"{k:<4}" + "".join(cells))
    print(f"Elapsed: {elapsed:.2f} s")


if __name__ == '__main__':
    main()
