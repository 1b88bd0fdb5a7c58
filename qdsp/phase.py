"""Fixed point phase (32 fractional bits) and phase accumulators."""

from __future__ import annotations

import copy
import struct
from typing import Iterator, Optional

__all__ = [
    "Phase",
    "PhaseIterator",
    "OneShotPhaseIterator",
    "frac_to_phase",
    "frac_double",
    "frac_float",
    "period",
]

_BITS = 32
_MASK = (1 << _BITS) - 1
_SCALE = float(1 << _BITS)


class Phase:
    """A phase in [0, 2pi) stored as an unsigned 32-bit fraction of a cycle."""

    __slots__ = ("rep",)

    one_cyc = _MASK
    bits = _BITS

    def __init__(self, rep: int = 0) -> None:
        self.rep = int(rep) & _MASK

    @classmethod
    def from_frequency(cls, freq: float, sps: float) -> "Phase":
        """The per-sample phase step for a frequency at a sample rate."""
        return cls(int((_SCALE * freq) / sps))

    @classmethod
    def begin(cls) -> "Phase":
        return cls(0)

    @classmethod
    def end(cls) -> "Phase":
        return cls(cls.one_cyc)

    @classmethod
    def middle(cls) -> "Phase":
        return cls(cls.one_cyc // 2)

    def __add__(self, other: "Phase") -> "Phase":
        if not isinstance(other, Phase):
            return NotImplemented
        return Phase(self.rep + other.rep)

    def __sub__(self, other: "Phase") -> "Phase":
        if not isinstance(other, Phase):
            return NotImplemented
        return Phase(self.rep - other.rep)

    def __lt__(self, other: "Phase") -> bool:
        if not isinstance(other, Phase):
            return NotImplemented
        return self.rep < other.rep

    def __le__(self, other: "Phase") -> bool:
        if not isinstance(other, Phase):
            return NotImplemented
        return self.rep <= other.rep

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Phase):
            return NotImplemented
        return self.rep == other.rep

    def __hash__(self) -> int:
        return hash(self.rep)

    def __int__(self) -> int:
        return self.rep

    def __repr__(self) -> str:
        return f"Phase({self.rep:#010x})"


def frac_to_phase(frac: float) -> Phase:
    """Convert a fraction of a cycle (0 <= frac) to a phase; 1 or more saturates."""
    if frac < 0.0:
        raise ValueError("frac should be greater than or equal to 0")
    if frac >= 1.0:
        return Phase.end()
    return Phase(int(_SCALE * frac))


def frac_double(p: Phase) -> float:
    """The phase as a fraction of a cycle."""
    return p.rep / _SCALE


def frac_float(p: Phase) -> float:
    """The phase as a fraction of a cycle, rounded to single precision."""
    (value,) = struct.unpack("<f", struct.pack("<f", p.rep / _SCALE))
    return value


def period(freq: float) -> float:
    """The period in seconds of a frequency in Hz."""
    return 1.0 / freq


class PhaseIterator:
    """Accumulates phase by a fixed step, wrapping around at the end of a cycle."""

    def __init__(self, freq: Optional[float] = None, sps: Optional[float] = None) -> None:
        self.phase = Phase()
        if freq is None or sps is None:
            self.step = Phase()
        else:
            self.step = Phase.from_frequency(freq, sps)

    def advance(self) -> Phase:
        """Move forward one step and return the new phase."""
        self.phase = self.phase + self.step
        return self.phase

    def retreat(self) -> Phase:
        """Move back one step and return the new phase."""
        self.phase = self.phase - self.step
        return self.phase

    def __iter__(self) -> Iterator[Phase]:
        return self

    def __next__(self) -> Phase:
        current = self.phase
        self.advance()
        return current

    def set_step(self, step: Phase) -> None:
        self.step = step

    def set(self, freq: float, sps: float) -> None:
        self.step = Phase.from_frequency(freq, sps)

    def first(self) -> bool:
        """True within the first step of the cycle."""
        return self.phase < self.step

    def last(self) -> bool:
        """True within the last step of the cycle."""
        return (Phase.end() - self.phase) < self.step

    def _with_phase(self, phase: Phase):
        result = copy.copy(self)
        result.phase = phase
        return result

    def begin(self):
        return self._with_phase(Phase.begin())

    def end(self):
        return self._with_phase(Phase.end())

    def middle(self):
        return self._with_phase(Phase.middle())


class OneShotPhaseIterator(PhaseIterator):
    """A phase iterator that saturates at the ends instead of wrapping."""

    def advance(self) -> Phase:
        self.phase = Phase(min(self.phase.rep + self.step.rep, Phase.one_cyc))
        return self.phase

    def retreat(self) -> Phase:
        self.phase = Phase(max(self.phase.rep - self.step.rep, 0))
        return self.phase