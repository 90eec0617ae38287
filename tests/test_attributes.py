import pytest

from osuPP.beatmap import BeatmapAttributes, GameMods, ModMultipliers
from osuPP.beatmap.attributes import ar_to_ms, ms_to_ar

BASE = BeatmapAttributes(ar=9.0, od=8.0, cs=4.0, hp=5.0)


def test_no_mods_returns_base_values():
    assert BASE.with_mods(None) is BASE
    assert BASE.with_mods(GameMods.HIDDEN) is BASE
    assert BASE.with_mods(0).clock_rate == 1.0


def test_double_time():
    attributes = BASE.with_mods(GameMods.DOUBLE_TIME)

    assert attributes.clock_rate == 1.5
    # 600ms preempt shortened to 400ms
    assert attributes.ar == pytest.approx(5 + 800 / 150)
    assert attributes.od == 8.0
    assert (attributes.cs, attributes.hp) == (4.0, 5.0)


def test_clock_rate_from_multipliers():
    attributes = BASE.with_mods(ModMultipliers(clock_rate=1.5, multiplier=1.0))

    assert attributes == BASE.with_mods(GameMods.NIGHTCORE | GameMods.DOUBLE_TIME)
    assert attributes.od == BASE.od


def test_half_time():
    attributes = BASE.with_mods(GameMods.HALF_TIME)

    assert attributes.clock_rate == 0.75
    assert attributes.ar == pytest.approx(5 + 400 / 150)
    assert attributes.ar < BASE.ar


def test_hard_rock():
    attributes = BASE.with_mods(int(GameMods.HARD_ROCK))

    assert attributes.ar == pytest.approx(10.0)
    assert attributes.od == 10.0
    assert attributes.cs == pytest.approx(5.2)
    assert attributes.hp == pytest.approx(7.0)


def test_easy():
    attributes = BASE.with_mods(GameMods.EASY)

    assert attributes.ar == pytest.approx(4.5)
    assert attributes.od == 4.0
    assert attributes.cs == 2.0
    assert attributes.hp == 2.5


def test_hard_rock_wins_over_easy():
    attributes = BASE.with_mods(ModMultipliers(multiplier=1.0, hr=True, ez=True))

    assert attributes.cs == pytest.approx(5.2)


def test_ar_window_round_trip():
    for ar in (0.0, 2.5, 5.0, 7.3, 10.0):
        assert ms_to_ar(ar_to_ms(ar)) == pytest.approx(ar)


def test_beatmap_attributes(osu_map):
    from osuPP import parse

    beatmap = parse(osu_map)

    assert beatmap.attributes() == BASE
    assert beatmap.attributes(GameMods.DOUBLE_TIME) == BASE.with_mods(64)


def test_unsupported_mods_value():
    with pytest.raises(TypeError):
        BASE.with_mods("DT")
