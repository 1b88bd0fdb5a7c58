"""Zero crossing detectors with hysteresis."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from qdsp.base import lin_float, rel_within

__all__ = ["ZeroCrossing", "CrossingInfo", "ZeroCrossingEx", "UNDEFINED_EDGE"]

UNDEFINED_EDGE = (2**64 - 1) // 2

PULSE_HEIGHT_DIFF = 0.6
PULSE_WIDTH_DIFF = 0.6


class ZeroCrossing:
    """Produces a pulse that is high between upward and downward zero crossings."""

    def __init__(self, hysteresis: float) -> None:
        self.hysteresis = -hysteresis
        self.state = False

    @classmethod
    def from_db(cls, db: float) -> "ZeroCrossing":
        return cls(lin_float(db))

    def __call__(self, s: float) -> bool:
        # Centre the detection on the actual zero.
        s += self.hysteresis / 2
        if not self.state and s > 0.0:
            self.state = True
        elif self.state and s < self.hysteresis:
            self.state = False
        return self.state


@dataclass
class CrossingInfo:
    """Details of one pulse between a leading and a trailing zero crossing.

    crossing holds the sample values just before and after the leading edge.
    Only crossing and leading_edge are valid before the trailing edge.
    """

    crossing: Tuple[float, float] = (0.0, 0.0)
    peak: float = 0.0
    leading_edge: int = UNDEFINED_EDGE
    trailing_edge: int = UNDEFINED_EDGE

    def period(self, following: "CrossingInfo") -> int:
        """Samples between this leading edge and the following one."""
        return following.leading_edge - self.leading_edge

    def fractional_period(self, following: "CrossingInfo") -> float:
        """Period with sub-sample accuracy by linear interpolation of the edges."""
        prev1, curr1 = self.crossing
        dx1 = -prev1 / (curr1 - prev1)
        prev2, curr2 = following.crossing
        dx2 = -prev2 / (curr2 - prev2)
        return (following.leading_edge - self.leading_edge) + (dx2 - dx1)

    def update(self, height: float) -> None:
        self.peak = height

    @property
    def width(self) -> int:
        return self.trailing_edge - self.leading_edge

    @property
    def height(self) -> float:
        return self.peak

    def similar(self, following: "CrossingInfo") -> bool:
        """True if the pulse heights are close to each other."""
        return rel_within(self.height, following.height, 1.0 - PULSE_HEIGHT_DIFF)


class ZeroCrossingEx:
    """Zero crossing detector that records details of each pulse.

    Calling it returns 1 on a leading edge, -1 on a trailing edge and 0
    otherwise. The current pulse is available as `info`.
    """

    def __init__(self, hysteresis: float) -> None:
        self.hysteresis = -hysteresis
        self.state = False
        self.info = CrossingInfo()
        self._time = 0
        self._prev = 0.0

    @classmethod
    def from_db(cls, db: float) -> "ZeroCrossingEx":
        return cls(lin_float(db))

    def __call__(self, s: float) -> int:
        # The fractional period assumes the first crossing sample is negative,
        # so detection is centred on the actual zero.
        s += self.hysteresis / 2

        result = 0
        if s > 0.0:
            if not self.state:
                self.state = True
                result = 1
                self.info = CrossingInfo((self._prev, s), s, self._time)
            else:
                self.info.peak = max(s, self.info.peak)
        elif self.state and s < self.hysteresis:
            self.state = False
            result = -1
            self.info.trailing_edge = self._time

        self._time += 1
        self._prev = s
        return result