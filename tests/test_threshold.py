"""Tests for aaptools.search.threshold."""
import math

import pytest

from aaptools.search.oracle import SearchExhausted, fixed_order
from aaptools.search.threshold import (
    ThresholdOracle,
    binary_search_min_n,
    expand_and_bisect,
    linear_threshold,
    minimal_threshold,
)


# --- known values ---

def test_b33_linear():
    assert linear_threshold(3, 3, 200) == 7


def test_b33_minimal():
    assert minimal_threshold(3, 3, 200) == 7


@pytest.mark.parametrize("k1,k2", [(3, 4), (4, 3), (3, 5)])
def test_minimal_matches_linear(k1, k2):
    assert minimal_threshold(k1, k2, 60) == linear_threshold(k1, k2, 60)


def test_color_swap_symmetry():
    assert minimal_threshold(3, 4, 60) == minimal_threshold(4, 3, 60)


def test_memo_and_order_do_not_change_value():
    base = minimal_threshold(3, 4, 60)
    assert minimal_threshold(3, 4, 60, memo=False) == base
    assert minimal_threshold(3, 4, 60, order=fixed_order) == base


# --- unresolved ---

@pytest.mark.parametrize("k1,k2", [(2, 3), (3, 2), (1, 1)])
def test_short_lengths_unresolved(k1, k2):
    assert minimal_threshold(k1, k2, 40) is None
    assert linear_threshold(k1, k2, 40) is None


@pytest.mark.parametrize("n_max", [0, -5])
def test_minimal_nmax_below_one(n_max):
    assert minimal_threshold(3, 3, n_max) is None


def test_linear_rejects_bad_parameters():
    with pytest.raises(ValueError):
        linear_threshold(0, 3, 10)
    with pytest.raises(ValueError):
        linear_threshold(3, 3, 0)


def test_minimal_rejects_bad_lengths():
    with pytest.raises(ValueError):
        minimal_threshold(3, -1, 10)


@pytest.mark.parametrize("n_max", [0, -5, 10])
def test_minimal_rejects_bad_lengths_for_any_nmax(n_max):
    with pytest.raises(ValueError):
        minimal_threshold(0, 3, n_max)


# --- n_max boundary ---

def test_nmax_exactly_threshold():
    assert minimal_threshold(3, 3, 7) == 7
    assert linear_threshold(3, 3, 7) == 7


def test_nmax_below_threshold():
    assert minimal_threshold(3, 3, 6) is None
    assert linear_threshold(3, 3, 6) is None


@pytest.mark.parametrize("n_max", range(1, 20))
def test_every_nmax(n_max):
    expected = 7 if n_max >= 7 else None
    assert minimal_threshold(3, 3, n_max) == expected


# --- oracle wrapper ---

def test_oracle_caches_and_counts():
    oracle = ThresholdOracle(3, 3, 50)
    assert oracle(7) is True
    assert oracle(6) is False
    assert oracle(7) is True
    assert oracle.evaluations == 2


def test_oracle_refuses_above_nmax():
    oracle = ThresholdOracle(3, 3, 10)
    with pytest.raises(ValueError):
        oracle(11)


def test_logarithmic_evaluations():
    n_max = 1000
    oracle = ThresholdOracle(3, 3, n_max)
    assert minimal_threshold(3, 3, n_max, oracle=oracle) == 7
    assert oracle.evaluations <= 2 * math.ceil(math.log2(n_max)) + 2


def test_never_probes_above_nmax():
    seen = []

    class Recording(ThresholdOracle):
        def forces(self, n):
            seen.append(n)
            return super().forces(n)

        __call__ = forces

    oracle = Recording(2, 2, 37)
    assert minimal_threshold(2, 2, 37, oracle=oracle) is None
    assert max(seen) == 37


def test_oracle_mismatch():
    oracle = ThresholdOracle(3, 4, 50)
    with pytest.raises(ValueError):
        minimal_threshold(3, 3, 50, oracle=oracle)


def test_verbose_progress(capsys):
    minimal_threshold(3, 3, 20, verbose=True)
    err = capsys.readouterr().err
    assert "[B(3,3) N=7] forced" in err


# --- search helpers on a synthetic predicate ---

class _Step:
    """Predicate true from `at` onwards."""

    def __init__(self, at, n_max):
        self.at = at
        self.n_max = n_max
        self.calls = 0

    def __call__(self, n):
        assert 1 <= n <= self.n_max
        self.calls += 1
        return n >= self.at


@pytest.mark.parametrize("at", [1, 2, 3, 17, 64, 65, 99, 100])
def test_expand_and_bisect_finds_step(at):
    pred = _Step(at, 100)
    assert expand_and_bisect(pred, 1, 1) == at


def test_expand_and_bisect_unresolved():
    pred = _Step(101, 100)
    assert expand_and_bisect(pred, 1, 1) is None


def test_expand_and_bisect_start_above_nmax():
    pred = _Step(5, 10)
    assert expand_and_bisect(pred, 11, 22) is None
    assert pred.calls == 0


def test_binary_search_degenerate_interval():
    pred = _Step(1, 10)
    assert binary_search_min_n(1, 1, pred) == 1


# --- resource cap ---

def test_exhaustion_propagates():
    with pytest.raises(SearchExhausted):
        minimal_threshold(4, 4, 40, max_nodes=2)
