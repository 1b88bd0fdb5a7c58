"""White and pink noise generators."""

from __future__ import annotations

__all__ = ["WhiteNoiseGen", "PinkNoiseGen"]

_U32 = 0xFFFFFFFF
_WHITE_SCALE = 2.0 / 0xFFFFFFFF


class WhiteNoiseGen:
    """Fast pseudo random white noise.

    The unsigned 32-bit state is scaled so that outputs lie in [0, 2].
    """

    def __init__(self) -> None:
        self.x1 = 0x67452301
        self.x2 = 0xEFCDAB89
        self.s = 0.0

    def __call__(self) -> float:
        self.x1 ^= self.x2
        self.s = self.x2 * _WHITE_SCALE
        self.x2 = (self.x2 + self.x1) & _U32
        return self.s


class PinkNoiseGen(WhiteNoiseGen):
    """Pink noise: white noise through a -3 dB/octave weighted filter bank."""

    scale = 0.2
    c1 = 0.99765
    c2 = 0.0990460 * scale
    c3 = 0.96300
    c4 = 0.2965164 * scale
    c5 = 0.57000
    c6 = 1.0526913 * scale
    c7 = 0.1848 * scale

    def __init__(self) -> None:
        super().__init__()
        self.b0 = 0.0
        self.b1 = 0.0
        self.b2 = 0.0

    def __call__(self) -> float:
        white = super().__call__()
        self.b0 = self.c1 * self.b0 + white * self.c2
        self.b1 = self.c3 * self.b1 + white * self.c4
        self.b2 = self.c5 * self.b2 + white * self.c6
        return self.b0 + self.b1 + self.b2 + white * self.c7