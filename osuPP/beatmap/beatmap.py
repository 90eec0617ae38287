from __future__ import annotations

import dataclasses
from enum import IntEnum
from typing import Optional, Union

from .attributes import BeatmapAttributes
from .control_point import DifficultyPoint, TimingPoint
from .hit_object import HitObject
from .mods import Mods

DEFAULT_STACK_LENIENCY = 0.7


class GameMode(IntEnum):
    STANDARD = 0
    TAIKO = 1
    CATCH = 2
    MANIA = 3

    @classmethod
    def from_code(cls, code: str) -> GameMode:
        """Decode the `Mode` value of the [General] section."""
        if code not in ("0", "1", "2", "3"):
            raise ValueError(f"invalid game mode: {code!r}")
        return cls(int(code))


@dataclasses.dataclass(frozen=True)
class Beatmap:
    """A parsed .osu file, holding everything difficulty and pp calculation needs.

    Attributes:
        mode: The game mode.
        version: The version of the .osu file format.
        n_circles: Amount of circles.
        n_sliders: Amount of sliders, osu!mania hold notes are counted as sliders.
        n_spinners: Amount of spinners.
        ar: Approach rate.
        od: Overall difficulty.
        cs: Circle size.
        hp: Health drain rate.
        slider_mult: Base slider velocity in hundreds of osu!pixels per beat.
        tick_rate: Amount of slider ticks per beat.
        hit_objects: All hit objects, ordered by the mode's sort policy.
        timing_points: Uninherited timing points ordered by time.
        difficulty_points: Inherited (slider velocity) points ordered by time.
        stack_leniency: Used to calculate the stack offset of stacked objects.
    """

    mode: GameMode = GameMode.STANDARD
    version: int = 0
    n_circles: int = 0
    n_sliders: int = 0
    n_spinners: int = 0
    ar: float = 0.0
    od: float = 0.0
    cs: float = 0.0
    hp: float = 0.0
    slider_mult: float = 0.0
    tick_rate: float = 0.0
    hit_objects: tuple[HitObject, ...] = ()
    timing_points: tuple[TimingPoint, ...] = ()
    difficulty_points: tuple[DifficultyPoint, ...] = ()
    stack_leniency: float = DEFAULT_STACK_LENIENCY

    @property
    def bpm(self) -> float:
        """Beats per minute of the first timing point, 0 if there is none."""
        if not self.timing_points:
            return 0.0
        return self.timing_points[0].bpm

    def attributes(self, mods: Optional[Union[int, Mods]] = None) -> BeatmapAttributes:
        """Extract the map's attributes, adjusted for `mods` if given."""
        attributes = BeatmapAttributes(ar=self.ar, od=self.od, cs=self.cs, hp=self.hp)
        return attributes.with_mods(mods)

    @classmethod
    def parse(cls, source, config=None) -> Beatmap:
        from osuPP.parser import parse

        return parse(source, config)

    @classmethod
    async def parse_async(cls, stream, config=None) -> Beatmap:
        from osuPP.parser import parse_async

        return await parse_async(stream, config)

    @classmethod
    def from_path(cls, path, config=None) -> Beatmap:
        from osuPP.parser import from_path

        return from_path(path, config)

    @classmethod
    async def from_path_async(cls, path, config=None) -> Beatmap:
        from osuPP.parser import from_path_async

        return await from_path_async(path, config)
