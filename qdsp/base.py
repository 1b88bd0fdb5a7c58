"""Basic numeric helpers: fast approximations, interpolation and comparisons."""

from __future__ import annotations

import math
import struct

__all__ = [
    "pi",
    "fast_rational_tanh",
    "fast_exp3",
    "fast_exp4",
    "fast_exp5",
    "fast_exp6",
    "fast_exp7",
    "fast_exp8",
    "fast_exp9",
    "linear_interpolate",
    "fast_inverse",
    "fast_div",
    "fast_rand",
    "abs_within",
    "rel_within",
    "lin_float",
    "lin_to_db",
    "FastRandom",
]

pi = 3.1415926535897932384626433832795

_INVERSE_MAGIC = 0x7EF311C2
_DEFAULT_SEED = 87263876
_U32 = 0xFFFFFFFF


def fast_rational_tanh(x: float) -> float:
    """Pade approximation of tanh, valid for -3 <= x <= 3."""
    return x * (27 + x * x) / (27 + 9 * x * x)


def fast_exp3(x: float) -> float:
    """Third order Taylor approximation of exp."""
    return (6 + x * (6 + x * (3 + x))) * 0.16666666


def fast_exp4(x: float) -> float:
    """Fourth order Taylor approximation of exp."""
    return (24 + x * (24 + x * (12 + x * (4 + x)))) * 0.041666666


def fast_exp5(x: float) -> float:
    """Fifth order Taylor approximation of exp."""
    return (120 + x * (120 + x * (60 + x * (20 + x * (5 + x))))) * 0.0083333333


def fast_exp6(x: float) -> float:
    """Sixth order Taylor approximation of exp."""
    return (
        720 + x * (720 + x * (360 + x * (120 + x * (30 + x * (6 + x)))))
    ) * 0.0013888888


def fast_exp7(x: float) -> float:
    """Seventh order Taylor approximation of exp."""
    return (
        5040
        + x * (5040 + x * (2520 + x * (840 + x * (210 + x * (42 + x * (7 + x))))))
    ) * 0.00019841269


def fast_exp8(x: float) -> float:
    """Eighth order Taylor approximation of exp."""
    return (
        40320
        + x
        * (
            40320
            + x * (20160 + x * (6720 + x * (1680 + x * (336 + x * (56 + x * (8 + x))))))
        )
    ) * 2.4801587301e-5


def fast_exp9(x: float) -> float:
    """Ninth order Taylor approximation of exp."""
    return (
        362880
        + x
        * (
            362880
            + x
            * (
                181440
                + x
                * (60480 + x * (15120 + x * (3024 + x * (504 + x * (72 + x * (9 + x))))))
            )
        )
    ) * 2.75573192e-6


def linear_interpolate(y1: float, y2: float, mu: float) -> float:
    """Interpolate between y1 (mu == 0) and y2 (mu == 1)."""
    return y1 + mu * (y2 - y1)


def fast_inverse(val: float) -> float:
    """Approximate 1/val by negating the IEEE-754 single precision exponent."""
    (bits,) = struct.unpack("<I", struct.pack("<f", val))
    bits = (_INVERSE_MAGIC - bits) & _U32
    (result,) = struct.unpack("<f", struct.pack("<I", bits))
    return result


def fast_div(a: float, b: float) -> float:
    """Approximate a / b using fast_inverse."""
    return a * fast_inverse(b)


class FastRandom:
    """Linear congruential generator returning integers in 0..32767."""

    def __init__(self, seed: int = _DEFAULT_SEED) -> None:
        self.seed = seed & _U32

    def __call__(self) -> int:
        self.seed = (214013 * self.seed + 2531011) & _U32
        return (self.seed >> 16) & 0x7FFF

    def __iter__(self):
        while True:
            yield self()


_shared_random = FastRandom()


def fast_rand() -> int:
    """Next value of the shared fast random number generator."""
    return _shared_random()


def abs_within(a: float, b: float, eps: float) -> bool:
    """True if a and b differ by at most eps."""
    return abs(a - b) <= eps


def rel_within(a: float, b: float, eps: float) -> bool:
    """True if a and b differ by at most eps relative to the larger magnitude."""
    return abs(a - b) <= eps * max(abs(a), abs(b))


def lin_float(db: float) -> float:
    """Convert decibels to a linear gain."""
    return 10.0 ** (db / 20.0)


def lin_to_db(value: float) -> float:
    """Convert a linear gain to decibels; zero maps to negative infinity."""
    if value < 0:
        raise ValueError("linear value must not be negative")
    if value == 0:
        return -math.inf
    return 20.0 * math.log10(value)