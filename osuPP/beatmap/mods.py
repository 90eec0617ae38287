from __future__ import annotations

import dataclasses
from enum import IntFlag
from typing import Optional, Protocol, Union, runtime_checkable


@runtime_checkable
class Mods(Protocol):
    """Anything that can tell how a mod combination changes a map."""

    def change_map(self) -> bool:
        ...

    def speed(self) -> float:
        ...

    def od_ar_hp_multiplier(self) -> float:
        ...

    def hard_rock(self) -> bool:
        ...

    def easy(self) -> bool:
        ...


class GameMods(IntFlag):
    """Legacy mod bit flags as used by the osu! API and replays."""

    NONE = 0
    NO_FAIL = 1 << 0
    EASY = 1 << 1
    TOUCH_DEVICE = 1 << 2
    HIDDEN = 1 << 3
    HARD_ROCK = 1 << 4
    SUDDEN_DEATH = 1 << 5
    DOUBLE_TIME = 1 << 6
    RELAX = 1 << 7
    HALF_TIME = 1 << 8
    NIGHTCORE = 1 << 9
    FLASHLIGHT = 1 << 10
    AUTOPLAY = 1 << 11
    SPUN_OUT = 1 << 12
    AUTOPILOT = 1 << 13
    PERFECT = 1 << 14

    def change_map(self) -> bool:
        return bool(
            self
            & (
                GameMods.DOUBLE_TIME
                | GameMods.NIGHTCORE
                | GameMods.HALF_TIME
                | GameMods.HARD_ROCK
                | GameMods.EASY
            )
        )

    def speed(self) -> float:
        if self & (GameMods.DOUBLE_TIME | GameMods.NIGHTCORE):
            return 1.5
        if self & GameMods.HALF_TIME:
            return 0.75
        return 1.0

    def od_ar_hp_multiplier(self) -> float:
        if self.hard_rock():
            return 1.4
        if self.easy():
            return 0.5
        return 1.0

    def hard_rock(self) -> bool:
        return bool(self & GameMods.HARD_ROCK)

    def easy(self) -> bool:
        return bool(self & GameMods.EASY)


@dataclasses.dataclass(frozen=True)
class ModMultipliers:
    """Mod effects given as plain numbers instead of bit flags.

    Attributes:
        clock_rate: Playback speed of the map.
        multiplier: Factor applied to AR, OD and HP.
        hr: Whether circles are shrunk (HardRock-like).
        ez: Whether circles are enlarged (Easy-like). Ignored if `hr` is set.
    """

    clock_rate: float = 1.0
    multiplier: float = 1.0
    hr: bool = False
    ez: bool = False

    def change_map(self) -> bool:
        return (
            self.clock_rate != 1.0 or self.multiplier != 1.0 or self.hr or self.ez
        )

    def speed(self) -> float:
        return self.clock_rate

    def od_ar_hp_multiplier(self) -> float:
        return self.multiplier

    def hard_rock(self) -> bool:
        return self.hr

    def easy(self) -> bool:
        return self.ez


def as_mods(mods: Optional[Union[int, Mods]]) -> Mods:
    """Turn `None`, an int bit field or a `Mods` implementation into `Mods`."""
    if mods is None:
        return GameMods.NONE
    if isinstance(mods, Mods):
        return mods
    if isinstance(mods, int):
        return GameMods(mods)
    raise TypeError(f"unsupported mods value: {mods!r}")
