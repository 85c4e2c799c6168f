import math

import numpy as np
import pytest

from stability import NaiveStats, evaluate, relative_error, two_pass_variance


def test_naive_stats_well_conditioned():
    s = NaiveStats()
    for x in [2, 4, 4, 4, 5, 5, 7, 9]:
        s.update(x)
    assert s.var == pytest.approx(32 / 7)


def test_naive_stats_undefined():
    s = NaiveStats()
    s.update(1.0)
    assert math.isnan(s.var)


def test_two_pass_variance():
    assert two_pass_variance([1.0, 3.0]) == pytest.approx(2.0)
    assert math.isnan(two_pass_variance([1.0]))


def test_relative_error():
    assert relative_error(1.1, 1.0) == pytest.approx(0.1)
    assert relative_error(-2.0, -2.0) == 0.0


def test_evaluate_welford_beats_naive_at_large_offset():
    rng = np.random.default_rng(0)
    errors = evaluate([1.0, 1e8], num_samples=2000, spread=1.0, rng=rng)
    assert set(errors) == {"welford", "naive"}
    assert len(errors["welford"]) == 2
    assert errors["welford"][0] < 1e-9
    assert errors["welford"][1] < 1e-6
    assert errors["naive"][1] > 1e-3
