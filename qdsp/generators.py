"""Sine/cosine oscillator and window taper generators built on it."""

from __future__ import annotations

import math
from typing import Tuple

from qdsp.base import pi

__all__ = [
    "SinCosGen",
    "BlackmanGen",
    "BlackmanUpwardRampGen",
    "BlackmanDownwardRampGen",
    "HammingGen",
]


def _check_width(width: float, sps: float) -> None:
    if width <= 0 or sps <= 0:
        raise ValueError("width and sps must be positive")


class SinCosGen:
    """Generates sine and cosine together with a Chamberlin state variable filter.

    Suited to low frequencies; the stable upper limit is roughly sps / 6.
    Each call returns a (sin, cos) pair.
    """

    def __init__(self, freq: float, sps: float) -> None:
        self.config(freq, sps)
        self.reset()

    def config(self, freq: float, sps: float) -> None:
        if sps <= 0:
            raise ValueError("sps must be positive")
        self.a = 2.0 * math.sin(pi * freq / sps)

    def __call__(self) -> Tuple[float, float]:
        self._cos = self._cos - self.a * self._sin
        self._sin = self._sin + self.a * self._cos
        return self._sin, self._cos

    def reset(self, sin: float = 0.0, cos: float = 1.0) -> None:
        self._cos = cos
        self._sin = sin

    def midpoint(self) -> None:
        """Jump to the middle of the cycle (cosine at -1)."""
        self.reset(0.0, -1.0)


class BlackmanGen:
    """Blackman window taper over `width` seconds.

    w(n) = 0.42 - 0.5 cos(2 pi n / N) + 0.08 cos(4 pi n / N)
    """

    def __init__(self, width: float, sps: float) -> None:
        _check_width(width, sps)
        self._cos1 = SinCosGen(1.0 / width, sps)
        self._cos2 = SinCosGen(1.0 / (width / 2), sps)

    def __call__(self) -> float:
        return 0.42 - 0.5 * self._cos1()[1] + 0.08 * self._cos2()[1]

    def config(self, width: float, sps: float) -> None:
        _check_width(width, sps)
        self._cos1.config(1.0 / width, sps)
        self._cos2.config(1.0 / (width / 2), sps)

    def reset(self) -> None:
        self._cos1.reset()
        self._cos2.reset()

    def midpoint(self) -> None:
        self._cos1.midpoint()


class BlackmanUpwardRampGen(BlackmanGen):
    """Rising curve shaped like the first half of a Blackman window."""

    def __init__(self, width: float, sps: float) -> None:
        super().__init__(width * 2, sps)

    def config(self, width: float, sps: float) -> None:
        super().config(width * 2, sps)


class BlackmanDownwardRampGen(BlackmanGen):
    """Falling curve shaped like the second half of a Blackman window."""

    def __init__(self, width: float, sps: float) -> None:
        super().__init__(width * 2, sps)
        self.midpoint()

    def reset(self) -> None:
        self.midpoint()

    def config(self, width: float, sps: float) -> None:
        super().config(width * 2, sps)


class HammingGen:
    """Hamming window taper over `width` seconds: w(n) = 0.54 - 0.46 cos(2 pi n / N)."""

    def __init__(self, width: float, sps: float) -> None:
        _check_width(width, sps)
        self._cos = SinCosGen(1.0 / width, sps)

    def __call__(self) -> float:
        return 0.54 - 0.46 * self._cos()[1]

    def config(self, width: float, sps: float) -> None:
        _check_width(width, sps)
        self._cos.config(1.0 / width, sps)

    def reset(self) -> None:
        self._cos.reset()

    def midpoint(self) -> None:
        self._cos.midpoint()