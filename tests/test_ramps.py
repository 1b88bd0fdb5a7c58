import pytest

from qdsp.ramps import (
    ExpDownwardRampGen,
    ExpUpwardRampGen,
    HoldLineGen,
    LinDownwardRampGen,
    LinUpwardRampGen,
)


def take(gen, n):
    return [gen() for _ in range(n)]


def test_exp_upward_reaches_one_after_width():
    gen = ExpUpwardRampGen(0.01, 1000)
    values = take(gen, 10)
    assert values[-1] == pytest.approx(1.0, rel=1e-9)
    assert all(b > a for a, b in zip(values, values[1:]))
    assert values[0] > 0.0


def test_exp_upward_curvature_setting():
    gen = ExpUpwardRampGen(0.1, 1000, 0.5)
    values = take(gen, 100)
    assert values[-1] == pytest.approx(1.0, rel=1e-9)


def test_exp_config_with_new_curve():
    gen = ExpUpwardRampGen(0.01, 1000)
    gen.config(0.02, 1000, 0.8)
    values = take(gen, 20)
    assert values[-1] == pytest.approx(1.0, rel=1e-9)


def test_exp_reset():
    gen = ExpUpwardRampGen(0.01, 1000)
    first = take(gen, 5)
    gen.reset()
    assert take(gen, 5) == first


def test_exp_downward_mirrors_upward():
    up = ExpUpwardRampGen(0.01, 1000)
    down = ExpDownwardRampGen(0.01, 1000)
    for u, d in zip(take(up, 10), take(down, 10)):
        assert u + d == pytest.approx(1.0)
    assert down.__class__(0.01, 1000)() < 1.0


def test_exp_invalid_curve():
    with pytest.raises(ValueError):
        ExpUpwardRampGen(0.01, 1000, 1.0)
    with pytest.raises(ValueError):
        ExpUpwardRampGen(0.01, 1000, 0.0)


def test_lin_upward_reaches_one():
    gen = LinUpwardRampGen(0.01, 1000)
    values = take(gen, 10)
    assert values[-1] == pytest.approx(1.0)
    assert all(b > a for a, b in zip(values, values[1:]))


def test_lin_config_doubles_duration():
    short = LinUpwardRampGen(0.01, 1000)
    long = LinUpwardRampGen(0.01, 1000)
    long.config(0.02, 1000)
    short_values = take(short, 10)
    long_values = take(long, 20)
    assert long_values[19] == pytest.approx(short_values[9])
    assert long_values[9] == pytest.approx(short_values[4])


def test_lin_reset():
    gen = LinUpwardRampGen(0.01, 1000)
    first = take(gen, 4)
    gen.reset()
    assert take(gen, 4) == first


def test_lin_downward_reaches_zero():
    gen = LinDownwardRampGen(0.01, 1000)
    values = take(gen, 10)
    assert values[-1] == pytest.approx(0.0, abs=1e-12)
    assert all(b < a for a, b in zip(values, values[1:]))


def test_lin_invalid_width():
    with pytest.raises(ValueError):
        LinUpwardRampGen(0.0, 1000)


def test_hold_line_is_constant():
    gen = HoldLineGen(0.5, 48000)
    gen.config(1.0, 44100)
    gen.reset()
    assert take(gen, 5) == [1.0] * 5