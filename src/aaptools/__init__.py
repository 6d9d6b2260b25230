"""
aaptools: two-color thresholds for almost-arithmetic progressions (AAPs),
incremental AAP detection, backtracking counterexample search, and
monotone threshold search.
"""

from .aap.detect import RED, BLUE, UNCOLORED, creates_aap, find_aap_ending_at
from .aap.bruteforce import (
    is_aap,
    contains_aap,
    exists_counterexample_bruteforce,
)
from .io.coloring import coloring_to_str, str_to_coloring

# Search
from .search.memo import DeadPrefixTable
from .search.oracle import (
    SearchExhausted,
    balanced_order,
    fixed_order,
    exists_counterexample,
    find_counterexample,
)
from .search.threshold import ThresholdOracle, minimal_threshold, linear_threshold
from .search.driver import ThresholdResult, compute_threshold, compute_threshold_result
from .search.table import threshold_table
from .viz.draw import draw_coloring

__all__ = [
    # AAP
    "RED",
    "BLUE",
    "UNCOLORED",
    "creates_aap",
    "find_aap_ending_at",
    "is_aap",
    "contains_aap",
    "exists_counterexample_bruteforce",
    # IO
    "coloring_to_str",
    "str_to_coloring",
    # Search
    "DeadPrefixTable",
    "SearchExhausted",
    "balanced_order",
    "fixed_order",
    "exists_counterexample",
    "find_counterexample",
    "ThresholdOracle",
    "minimal_threshold",
    "linear_threshold",
    "ThresholdResult",
    "compute_threshold",
    "compute_threshold_result",
    "threshold_table",
    # Viz
    "draw_coloring",
]
