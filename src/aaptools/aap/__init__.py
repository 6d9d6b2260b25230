from .detect import RED, BLUE, UNCOLORED, creates_aap, find_aap_ending_at
from .bruteforce import (
    is_aap,
    contains_aap,
    coloring_has_violation,
    find_counterexample_bruteforce,
    exists_counterexample_bruteforce,
)

__all__ = [
    "RED",
    "BLUE",
    "UNCOLORED",
    "creates_aap",
    "find_aap_ending_at",
    "is_aap",
    "contains_aap",
    "coloring_has_violation",
    "find_counterexample_bruteforce",
    "exists_counterexample_bruteforce",
]
