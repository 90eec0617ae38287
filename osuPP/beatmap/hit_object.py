from __future__ import annotations

import dataclasses
from enum import IntFlag
from typing import Optional, Union

from .path import PathControlPoint, Pos2


@dataclasses.dataclass(frozen=True)
class Circle:
    pass


@dataclasses.dataclass(frozen=True)
class Slider:
    """A slider with its reconstructed path.

    Attributes:
        pixel_len: Total length of the slider in osu!pixels.
        repeats: Amount of repeat points, the first span is not counted.
        control_points: Path control points relative to the slider's position.
    """

    pixel_len: float
    repeats: int
    control_points: tuple[PathControlPoint, ...]


@dataclasses.dataclass(frozen=True)
class Spinner:
    end_time: float


@dataclasses.dataclass(frozen=True)
class Hold:
    """A hold note, only found in osu!mania maps."""

    end_time: float


HitObjectKind = Union[Circle, Slider, Spinner, Hold]


class HitSound(IntFlag):
    NORMAL = 1
    WHISTLE = 2
    FINISH = 4
    CLAP = 8

    @staticmethod
    def is_rim(sound: int) -> bool:
        """Whether a taiko note with this sound is a rim (blue) note."""
        return bool(sound & (HitSound.WHISTLE | HitSound.CLAP))

    @staticmethod
    def is_finish(sound: int) -> bool:
        """Whether a taiko note with this sound is a big note."""
        return bool(sound & HitSound.FINISH)


@dataclasses.dataclass(frozen=True)
class HitObject:
    """A hit object as it was read from the map.

    Each game mode interprets these differently, the parser only
    classifies them.

    Attributes:
        pos: Position of the object in osu!pixels.
        start_time: Time of the object in milliseconds.
        kind: One of `Circle`, `Slider`, `Spinner`, `Hold`.
        sound: Hitsound bits, used as note color in osu!taiko.
    """

    pos: Pos2
    start_time: float
    kind: HitObjectKind
    sound: int = 0

    @property
    def end_time(self) -> float:
        if isinstance(self.kind, (Spinner, Hold)):
            return self.kind.end_time
        # sliders need timing information to know their duration
        return self.start_time

    @property
    def is_circle(self) -> bool:
        return isinstance(self.kind, Circle)

    @property
    def is_slider(self) -> bool:
        return isinstance(self.kind, Slider)

    @property
    def is_spinner(self) -> bool:
        return isinstance(self.kind, Spinner)

    @property
    def is_hold(self) -> bool:
        return isinstance(self.kind, Hold)

    @property
    def control_points(self) -> Optional[tuple[PathControlPoint, ...]]:
        if isinstance(self.kind, Slider):
            return self.kind.control_points
        return None
