"""Table based sine approximation over a full cycle."""

from __future__ import annotations

import math
from typing import Union

from qdsp.base import linear_interpolate, pi
from qdsp.phase import Phase, frac_to_phase

__all__ = ["sin_lu"]

_TABLE_BITS = 10
_TABLE_SIZE = 1 << _TABLE_BITS
_SHIFT = Phase.bits - _TABLE_BITS
_FRAC_MASK = (1 << _SHIFT) - 1
_FRAC_SCALE = float(1 << _SHIFT)

# One full cycle sampled at 1024 points, plus a closing entry so that the
# last segment can be interpolated without wrapping.
_SIN_TABLE = tuple(
    math.sin(2.0 * pi * i / _TABLE_SIZE) for i in range(_TABLE_SIZE + 1)
)


def _lookup(ph: Phase) -> float:
    index = ph.rep >> _SHIFT
    frac = (ph.rep & _FRAC_MASK) / _FRAC_SCALE
    return linear_interpolate(_SIN_TABLE[index], _SIN_TABLE[index + 1], frac)


def sin_lu(value: Union[Phase, float]) -> float:
    """Sine by table lookup with linear interpolation.

    Accepts either a Phase or an angle in radians in the range [0, 2pi].
    Negative angles raise ValueError; angles of 2pi or more saturate at
    the end of the cycle.
    """
    if isinstance(value, Phase):
        return _lookup(value)
    return _lookup(frac_to_phase(float(value) / (2.0 * pi)))