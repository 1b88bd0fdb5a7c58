import math

import pytest

from qdsp.base import (
    FastRandom,
    abs_within,
    fast_div,
    fast_exp3,
    fast_exp4,
    fast_exp5,
    fast_exp6,
    fast_exp7,
    fast_exp8,
    fast_exp9,
    fast_inverse,
    fast_rand,
    fast_rational_tanh,
    lin_float,
    lin_to_db,
    linear_interpolate,
    rel_within,
)


@pytest.mark.parametrize("x", [-2.5, -1.0, -0.3, 0.0, 0.3, 1.0, 2.5])
def test_fast_rational_tanh_close_to_tanh(x):
    assert abs(fast_rational_tanh(x) - math.tanh(x)) < 0.03


def test_fast_rational_tanh_is_odd():
    assert fast_rational_tanh(-0.7) == pytest.approx(-fast_rational_tanh(0.7))


@pytest.mark.parametrize(
    "fn, tol",
    [
        (fast_exp3, 1e-2),
        (fast_exp4, 1e-3),
        (fast_exp5, 1e-4),
        (fast_exp6, 1e-5),
        (fast_exp7, 1e-6),
        (fast_exp8, 1e-6),
        (fast_exp9, 1e-6),
    ],
)
def test_fast_exp_approximations(fn, tol):
    for x in (-0.5, 0.0, 0.25, 0.5):
        assert abs(fn(x) - math.exp(x)) < tol


def test_higher_order_exp_is_more_accurate():
    x = 0.9
    assert abs(fast_exp9(x) - math.exp(x)) < abs(fast_exp3(x) - math.exp(x))


def test_linear_interpolate_endpoints():
    assert linear_interpolate(0.5, 0.8, 0.0) == pytest.approx(0.5)
    assert linear_interpolate(0.5, 0.8, 1.0) == pytest.approx(0.8)
    mid = linear_interpolate(1.0, 0.0, 0.5)
    assert mid == pytest.approx(0.5)


@pytest.mark.parametrize("val", [0.01, 0.3, 1.0, 2.0, 7.5, 1000.0])
def test_fast_inverse_is_approximate_reciprocal(val):
    assert rel_within(fast_inverse(val), 1.0 / val, 0.15)


def test_fast_inverse_keeps_sign():
    assert fast_inverse(-4.0) < 0


def test_fast_div_approximates_division():
    assert rel_within(fast_div(3.0, 7.0), 3.0 / 7.0, 0.15)


def test_fast_random_is_deterministic_and_bounded():
    a = FastRandom(1234)
    b = FastRandom(1234)
    seq_a = [a() for _ in range(200)]
    seq_b = [b() for _ in range(200)]
    assert seq_a == seq_b
    assert all(0 <= v <= 0x7FFF for v in seq_a)
    assert len(set(seq_a)) > 100


def test_fast_rand_in_range():
    values = [fast_rand() for _ in range(100)]
    assert all(0 <= v <= 0x7FFF for v in values)


def test_abs_within():
    assert abs_within(1.0, 1.05, 0.1)
    assert not abs_within(1.0, 1.2, 0.1)
    assert abs_within(5, 7, 2)


def test_rel_within():
    assert rel_within(100.0, 101.0, 0.02)
    assert not rel_within(100.0, 110.0, 0.02)


def test_lin_float_of_zero_db_is_unity():
    assert lin_float(0.0) == pytest.approx(1.0)


@pytest.mark.parametrize("db", [-80.0, -12.0, -6.0, 0.0, 3.0, 45.0])
def test_db_round_trip(db):
    assert lin_to_db(lin_float(db)) == pytest.approx(db)


def test_lin_to_db_zero_and_negative():
    assert lin_to_db(0.0) == -math.inf
    with pytest.raises(ValueError):
        lin_to_db(-1.0)