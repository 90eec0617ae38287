from __future__ import annotations

import dataclasses

MIN_SPEED_MULTIPLIER = 0.1
MAX_SPEED_MULTIPLIER = 10.0


def bpm(beat_len: float) -> float:
    return 60000 / beat_len


@dataclasses.dataclass(frozen=True)
class TimingPoint:
    """Start of a new timing section.

    Attributes:
        time: Start time of the section in milliseconds.
        beat_len: Duration of a beat in milliseconds.
    """

    time: float
    beat_len: float

    @property
    def bpm(self) -> float:
        return bpm(self.beat_len)


@dataclasses.dataclass(frozen=True)
class DifficultyPoint:
    """Local slider velocity change, written as a negative beat length."""

    time: float
    speed_multiplier: float

    @classmethod
    def from_beat_len(cls, time: float, beat_len: float) -> DifficultyPoint:
        speed_multiplier = min(
            max(-100.0 / beat_len, MIN_SPEED_MULTIPLIER), MAX_SPEED_MULTIPLIER
        )
        return cls(time=time, speed_multiplier=speed_multiplier)
