"""Tests for aaptools.aap.bruteforce."""
import pytest

from aaptools.aap.bruteforce import (
    coloring_has_violation,
    contains_aap,
    exists_counterexample_bruteforce,
    find_counterexample_bruteforce,
    is_aap,
)
from aaptools.io.coloring import str_to_coloring


def test_is_aap_two_gaps():
    assert is_aap((0, 1, 3)) is True
    assert is_aap((0, 2, 3, 5)) is True


def test_is_aap_rejects_ap_and_three_gaps():
    assert is_aap((0, 2, 4, 6)) is False
    assert is_aap((0, 1, 3, 6)) is False


def test_is_aap_rejects_short_and_unsorted():
    assert is_aap((0, 5)) is False
    assert is_aap((3, 1, 0)) is False


def test_contains_aap():
    assert contains_aap([0, 2, 4], 3) is False
    assert contains_aap([0, 2, 4, 5], 3) is True
    assert contains_aap([0, 1, 2, 3, 4], 2) is False


def test_coloring_has_violation():
    coloring = str_to_coloring("RBRBRB")
    assert coloring_has_violation(coloring, 3, 3) is False
    assert coloring_has_violation(coloring + [0], 3, 3) is True


def test_b33_bruteforce():
    # a 3-AAP-free set has at most 3 points, so N=6 is the last counterexample
    assert exists_counterexample_bruteforce(6, 3, 3) is True
    assert exists_counterexample_bruteforce(7, 3, 3) is False


def test_find_counterexample_bruteforce_empty():
    assert find_counterexample_bruteforce(0, 3, 3) == ()


def test_bruteforce_too_large():
    with pytest.raises(ValueError):
        exists_counterexample_bruteforce(21, 3, 3)
