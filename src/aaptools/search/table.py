from __future__ import annotations

import os
import sys
from multiprocessing import Pool, cpu_count
from typing import Dict, Iterable, List, Optional, Tuple

from aaptools.search.driver import compute_threshold
from aaptools.search.oracle import DEFAULT_MAX_NODES
from aaptools.search.threshold import check_parameters


_env_processes = os.environ.get("AAPTOOLS_PROCESSES")
DEFAULT_PROCESSES = int(_env_processes) if _env_processes else max(1, cpu_count() - 1)

Pair = Tuple[int, int]


def _worker(job: Tuple[int, int, int, Optional[int]]) -> Tuple[Pair, Optional[int]]:
    """
    Return ((k, l), B(k, l) or None).
    """
    k, l, n_max, max_nodes = job
    return (k, l), compute_threshold(k, l, n_max, max_nodes=max_nodes)


def _chunked(it: Iterable[Pair], size: int) -> Iterable[List[Pair]]:
    buf: List[Pair] = []
    for x in it:
        buf.append(x)
        if len(buf) >= size:
            yield buf
            buf = []
    if buf:
        yield buf


def threshold_table(
    pairs: Iterable[Pair],
    n_max: int,
    *,
    processes: int = DEFAULT_PROCESSES,
    batch_size: int = 16,
    max_nodes: Optional[int] = DEFAULT_MAX_NODES,
    verbose: bool = False,
) -> Dict[Pair, Optional[int]]:
    """
    Compute B(k, l) for every (k, l) in *pairs*, each capped at n_max.

    Each pair is an independent two-stage search, so pairs are farmed out
    to a process pool. processes=1 runs everything in this process.

    Returns:
      {(k, l): B(k, l) or None}
    """
    jobs_all = []
    for k, l in dict.fromkeys(pairs):
        check_parameters(k, l, n_max)
        jobs_all.append((k, l))

    out: Dict[Pair, Optional[int]] = {}

    if processes <= 1:
        for k, l in jobs_all:
            key, value = _worker((k, l, n_max, max_nodes))
            out[key] = value
            if verbose:
                print(f"[B({k},{l})] {value}", file=sys.stderr)
        return out

    with Pool(processes=processes) as pool:
        for batch in _chunked(jobs_all, batch_size):
            jobs = [(k, l, n_max, max_nodes) for k, l in batch]
            for key, value in pool.imap_unordered(_worker, jobs, chunksize=1):
                out[key] = value
                if verbose:
                    print(f"[B({key[0]},{key[1]})] {value}", file=sys.stderr)

    return out
