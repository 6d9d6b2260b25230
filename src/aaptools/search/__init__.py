from .memo import DeadPrefixTable, prefix_key, prefix_key_from_coloring
from .oracle import (
    BRANCH_ORDERS,
    SearchExhausted,
    balanced_order,
    fixed_order,
    exists_counterexample,
    find_counterexample,
)
from .threshold import (
    ThresholdOracle,
    binary_search_min_n,
    expand_and_bisect,
    minimal_threshold,
    linear_threshold,
)
from .driver import ThresholdResult, compute_threshold, compute_threshold_result
from .table import threshold_table

__all__ = [
    "DeadPrefixTable",
    "prefix_key",
    "prefix_key_from_coloring",
    "BRANCH_ORDERS",
    "SearchExhausted",
    "balanced_order",
    "fixed_order",
    "exists_counterexample",
    "find_counterexample",
    "ThresholdOracle",
    "binary_search_min_n",
    "expand_and_bisect",
    "minimal_threshold",
    "linear_threshold",
    "ThresholdResult",
    "compute_threshold",
    "compute_threshold_result",
    "threshold_table",
]
