"""Envelope processors for dynamics (compressor, expander, AGC), a noise gate and clippers.

Compressor, expander and AGC work in the logarithmic domain: they take an
envelope in decibels and return a gain in decibels. Convert the result with
lin_float and multiply the signal by it.
"""

from __future__ import annotations

from typing import Optional

from qdsp.base import lin_float

__all__ = [
    "Compressor",
    "SoftKneeCompressor",
    "Expander",
    "Agc",
    "NoiseGate",
    "Clip",
    "SoftClip",
]


class Compressor:
    """Attenuates the envelope above a threshold.

    ratio is 1/n for an n:1 compressor (4:1 compression is 0.25).
    """

    def __init__(self, threshold: float, ratio: float) -> None:
        self.threshold = threshold
        self._slope = 1.0 - ratio

    @property
    def ratio(self) -> float:
        return 1.0 - self._slope

    @ratio.setter
    def ratio(self, value: float) -> None:
        self._slope = 1.0 - value

    def __call__(self, env: float) -> float:
        if env <= self.threshold:
            return 0.0
        return self._slope * (self.threshold - env)


class SoftKneeCompressor:
    """A compressor with a gradual gain transition of a given knee width."""

    def __init__(self, threshold: float, width: float, ratio: float) -> None:
        self._threshold = threshold
        self._width = width
        self._slope = 1.0 - ratio
        self._update_knee()

    def _update_knee(self) -> None:
        self._lower = self._threshold - self._width * 0.5
        self._upper = self._threshold + self._width * 0.5

    @property
    def threshold(self) -> float:
        return self._threshold

    @threshold.setter
    def threshold(self, value: float) -> None:
        self._threshold = value
        self._update_knee()

    @property
    def width(self) -> float:
        return self._width

    @width.setter
    def width(self, value: float) -> None:
        self._width = value
        self._update_knee()

    @property
    def ratio(self) -> float:
        return 1.0 - self._slope

    @ratio.setter
    def ratio(self, value: float) -> None:
        self._slope = 1.0 - value

    def __call__(self, env: float) -> float:
        if env <= self._lower:
            return 0.0
        if env <= self._upper:
            soft_slope = self._slope * ((env - self._lower) / self._width) * 0.5
            return soft_slope * (self._lower - env)
        return self._slope * (self._threshold - env)


class Expander:
    """Attenuates the envelope below a threshold; ratio is n for a 1:n expander."""

    def __init__(self, threshold: float, ratio: float) -> None:
        self.threshold = threshold
        self.ratio = ratio

    def __call__(self, env: float) -> float:
        if env >= self.threshold:
            return 0.0
        return self.ratio * (env - self.threshold)


class Agc:
    """Automatic gain control toward a reference level, limited to max_gain dB."""

    def __init__(self, max_gain: float) -> None:
        self.max_gain = max_gain

    def __call__(self, env: float, ref: float) -> float:
        return min(ref - env, self.max_gain)


class NoiseGate:
    """Opens above the onset threshold and closes below the release threshold.

    Thresholds are given in decibels; the onset defaults to 12 dB above the
    release threshold. The stored thresholds are linear values.
    """

    def __init__(
        self, release_threshold: float, onset_threshold: Optional[float] = None
    ) -> None:
        if onset_threshold is None:
            onset_threshold = release_threshold + 12.0
        self.release_threshold = lin_float(release_threshold)
        self.onset_threshold = lin_float(onset_threshold)
        self.state = False

    def __call__(self, env: float) -> bool:
        if not self.state and env > self.onset_threshold:
            self.state = True
        elif self.state and env < self.release_threshold:
            self.state = False
        return self.state

    def set_onset_threshold_db(self, db: float) -> None:
        self.onset_threshold = lin_float(db)

    def set_release_threshold_db(self, db: float) -> None:
        self.release_threshold = lin_float(db)


class Clip:
    """Clips a signal to the range -max_value..+max_value."""

    def __init__(self, max_value: float = 1.0) -> None:
        self.max_value = max_value

    @classmethod
    def from_db(cls, db: float) -> "Clip":
        return cls(lin_float(db))

    def __call__(self, s: float) -> float:
        if s > self.max_value:
            return self.max_value
        if s < -self.max_value:
            return -self.max_value
        return s


class SoftClip(Clip):
    """Clips, then applies a cubic soft saturation curve."""

    def __call__(self, s: float) -> float:
        s = super().__call__(s)
        return 1.5 * s - 0.5 * s * s * s