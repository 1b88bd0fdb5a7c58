"""Simple signal shaping: DC blocking, range mapping and a 3-point median filter."""

from __future__ import annotations

from qdsp.base import linear_interpolate, pi

__all__ = ["DcBlock", "Map", "Median3", "median3f"]


def median3f(a: float, b: float, c: float) -> float:
    """The median of three values."""
    return max(min(a, b), min(max(a, b), c))


class DcBlock:
    """First order DC blocking filter with a pole set by the cutoff frequency."""

    def __init__(self, freq: float, sps: float) -> None:
        self.pole = 1.0 - (2.0 * pi * freq / sps)
        self.x = 0.0
        self.y = 0.0

    def __call__(self, s: float) -> float:
        self.y = s - self.x + self.pole * self.y
        self.x = s
        return self.y

    def cutoff(self, freq: float, sps: float) -> None:
        self.pole = 1.0 - (2.0 * pi * freq / sps)


class Map:
    """Maps an input in 0..1 linearly onto y1..y2 (y1 may exceed y2)."""

    def __init__(self, y1: float, y2: float) -> None:
        self.y1 = y1
        self.y2 = y2

    def __call__(self, s: float) -> float:
        return linear_interpolate(self.y1, self.y2, s)

    def range(self, y1: float, y2: float) -> None:
        self.y1 = y1
        self.y2 = y2


class Median3:
    """Median of the three latest samples."""

    def __init__(self, median: float = 0.0) -> None:
        self.reset(median)

    def __call__(self, a: float) -> float:
        self.value = median3f(a, self._b, self._c)
        self._c = self._b
        self._b = a
        return self.value

    def reset(self, median: float) -> None:
        self.value = median
        self._b = median
        self._c = median