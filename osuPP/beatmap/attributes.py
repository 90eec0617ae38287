from __future__ import annotations

import dataclasses
from typing import Optional, Union

from .mods import Mods, as_mods

AR0_MS = 1800.0
AR5_MS = 1200.0
AR10_MS = 450.0
AR_MS_STEP_1 = (AR0_MS - AR5_MS) / 5.0
AR_MS_STEP_2 = (AR5_MS - AR10_MS) / 5.0
MAX_DIFFICULTY_VALUE = 10.0
HARD_ROCK_CS_MULTIPLIER = 1.3
EASY_CS_MULTIPLIER = 0.5


def ar_to_ms(ar: float) -> float:
    """Convert an approach rate into its preempt window in milliseconds."""
    if ar <= 5.0:
        return AR0_MS - AR_MS_STEP_1 * ar
    return AR5_MS - AR_MS_STEP_2 * (ar - 5.0)


def ms_to_ar(ms: float) -> float:
    if ms > AR5_MS:
        return (AR0_MS - ms) / AR_MS_STEP_1
    return 5.0 + (AR5_MS - ms) / AR_MS_STEP_2


@dataclasses.dataclass(frozen=True)
class BeatmapAttributes:
    """A map's difficulty settings, optionally adjusted for mods.

    Attributes:
        ar: Approach rate.
        od: Overall difficulty.
        cs: Circle size.
        hp: Health drain rate.
        clock_rate: Playback speed implied by the mods.
    """

    ar: float
    od: float
    cs: float
    hp: float
    clock_rate: float = 1.0

    def with_mods(self, mods: Optional[Union[int, Mods]]) -> BeatmapAttributes:
        """Adjust the attributes for a mod combination.

        AR is adjusted through its hit window so that speed changing mods
        act on time. OD is *not* adjusted by its hit window.

        Args:
            mods: Legacy mod bits, or any `Mods` implementation.

        Returns:
            attributes: New attributes, or `self` if the mods don't change the map.
        """
        mods = as_mods(mods)

        if not mods.change_map():
            return self

        clock_rate = mods.speed()
        multiplier = mods.od_ar_hp_multiplier()

        ar_ms = min(max(ar_to_ms(self.ar * multiplier), AR10_MS), AR0_MS)
        ar = ms_to_ar(ar_ms / clock_rate)

        od = min(self.od * multiplier, MAX_DIFFICULTY_VALUE)

        cs = self.cs
        if mods.hard_rock():
            cs *= HARD_ROCK_CS_MULTIPLIER
        elif mods.easy():
            cs *= EASY_CS_MULTIPLIER
        cs = min(cs, MAX_DIFFICULTY_VALUE)

        hp = min(self.hp * multiplier, MAX_DIFFICULTY_VALUE)

        return BeatmapAttributes(ar=ar, od=od, cs=cs, hp=hp, clock_rate=clock_rate)
