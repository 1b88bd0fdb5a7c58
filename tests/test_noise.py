import math

import pytest

from qdsp.noise import PinkNoiseGen, WhiteNoiseGen


def take(gen, n):
    return [gen() for _ in range(n)]


def test_white_noise_range():
    values = take(WhiteNoiseGen(), 5000)
    assert all(0.0 <= v <= 2.0 for v in values)


def test_white_noise_first_values_are_pinned():
    values = take(WhiteNoiseGen(), 2)
    assert values[0] == pytest.approx(1.8734636, abs=1e-5)
    assert values[1] == pytest.approx(0.9401307, abs=1e-5)


def test_white_noise_is_deterministic():
    first = take(WhiteNoiseGen(), 200)
    second = take(WhiteNoiseGen(), 200)
    assert first == second
    assert first[0] == pytest.approx(1.8734636, abs=1e-5)


def test_white_noise_varies():
    values = take(WhiteNoiseGen(), 1000)
    assert len(set(values)) > 900


def test_white_state_stays_32_bit():
    gen = WhiteNoiseGen()
    take(gen, 1000)
    assert 0 <= gen.x1 <= 0xFFFFFFFF
    assert 0 <= gen.x2 <= 0xFFFFFFFF


def test_pink_noise_is_deterministic():
    first = take(PinkNoiseGen(), 200)
    second = take(PinkNoiseGen(), 200)
    assert first == second
    assert first[0] == pytest.approx(0.6118933, abs=1e-4)


def test_pink_noise_differs_from_white_and_is_bounded():
    pink = take(PinkNoiseGen(), 2000)
    white = take(WhiteNoiseGen(), 2000)
    assert pink != white
    assert all(math.isfinite(v) and abs(v) < 20.0 for v in pink)


def test_pink_noise_is_smoother_than_white():
    def mean_step(values):
        return sum(abs(b - a) for a, b in zip(values, values[1:])) / (len(values) - 1)

    pink = take(PinkNoiseGen(), 2000)
    white = [v * PinkNoiseGen.c7 for v in take(WhiteNoiseGen(), 2000)]
    assert mean_step(pink) > 0.0
    assert mean_step(white) > 0.0
    assert mean_step(pink) < mean_step(white) * 10