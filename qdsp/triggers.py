"""One-shot pulse generators and a comparator with hysteresis."""

from __future__ import annotations

from qdsp.base import lin_float

__all__ = ["Monostable", "RetriggerableMonostable", "SchmittTrigger"]

_U32 = 0xFFFFFFFF


class Monostable:
    """One-shot pulse generator.

    A true input starts a pulse lasting a fixed number of samples. While a
    pulse is running, further triggers are ignored.
    """

    retriggerable = False

    def __init__(self, duration: float, sps: float) -> None:
        if duration < 0 or sps < 0:
            raise ValueError("duration and sps must not be negative")
        self.n_samples = int(duration * sps) & _U32
        self.ticks = 0

    def __call__(self, val: bool) -> bool:
        if val and (self.retriggerable or self.ticks == 0):
            self.start()
        if self.ticks:
            self.ticks -= 1
        return self.ticks != 0

    @property
    def state(self) -> bool:
        """True while a pulse is running."""
        return self.ticks != 0

    def start(self) -> None:
        self.ticks = self.n_samples

    def stop(self) -> None:
        self.ticks = 0


class RetriggerableMonostable(Monostable):
    """A monostable whose pulse restarts on every trigger."""

    retriggerable = True


class SchmittTrigger:
    """Comparator whose output is high when pos exceeds neg, with hysteresis."""

    def __init__(self, hysteresis: float) -> None:
        self.hysteresis = hysteresis
        self.state = False

    @classmethod
    def from_db(cls, db: float) -> "SchmittTrigger":
        return cls(lin_float(db))

    def __call__(self, pos: float, neg: float) -> bool:
        if not self.state and pos > neg + self.hysteresis:
            self.state = True
        elif self.state and pos < neg - self.hysteresis:
            self.state = False
        return self.state