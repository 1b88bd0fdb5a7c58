"""Exponential, linear and constant ramp generators."""

from __future__ import annotations

import math
from typing import Optional

__all__ = [
    "ExpUpwardRampGen",
    "ExpDownwardRampGen",
    "LinUpwardRampGen",
    "LinDownwardRampGen",
    "HoldLineGen",
]


def _check_width(width: float, sps: float) -> None:
    if width <= 0 or sps <= 0:
        raise ValueError("width and sps must be positive")


class ExpUpwardRampGen:
    """Exponential rise from 0 to 1 over `width` seconds, like a charging capacitor.

    cv (0 < cv < 1) sets the curvature: the fraction of the full exponential
    that is scaled to reach 1. Higher values give more pronounced curves.
    """

    def __init__(self, width: float, sps: float, cv: float = 0.95) -> None:
        self._set_curve(cv)
        self.config(width, sps)
        self._y = 0.0

    def _set_curve(self, cv: float) -> None:
        if not 0.0 < cv < 1.0:
            raise ValueError("cv must be greater than 0 and less than 1")
        self._tau = -math.log(1.0 - cv)
        self._full = 1.0 / cv

    def __call__(self) -> float:
        self._y = self._full + self._rate * (self._y - self._full)
        return self._y

    def config(self, width: float, sps: float, cv: Optional[float] = None) -> None:
        _check_width(width, sps)
        if cv is not None:
            self._set_curve(cv)
        self._rate = math.exp(-self._tau / (sps * width))

    def reset(self) -> None:
        self._y = 0.0


class ExpDownwardRampGen(ExpUpwardRampGen):
    """Exponential fall from 1 to 0, like a discharging capacitor."""

    def __call__(self) -> float:
        return 1.0 - super().__call__()


class LinUpwardRampGen:
    """Straight ramp from 0 to 1 over `width` seconds."""

    def __init__(self, width: float, sps: float) -> None:
        self.config(width, sps)
        self._y = 0.0

    def __call__(self) -> float:
        self._y += self._rate
        return self._y

    def config(self, width: float, sps: float) -> None:
        _check_width(width, sps)
        self._rate = 1.0 / (width * sps)

    def reset(self) -> None:
        self._y = 0.0


class LinDownwardRampGen(LinUpwardRampGen):
    """Straight ramp from 1 to 0 over `width` seconds."""

    def __call__(self) -> float:
        return 1.0 - super().__call__()


class HoldLineGen:
    """A constant line at 1.0; width and sps are recorded but do not affect output."""

    def __init__(self, width: float = 0.0, sps: float = 0.0) -> None:
        self.width = width
        self.sps = sps
        self._level = 1.0

    def __call__(self) -> float:
        return self._level

    def config(self, width: float, sps: float) -> None:
        self.width = width
        self.sps = sps

    def reset(self) -> None:
        self._level = 1.0