import logging

from osuPP import parse as parse_beatmap
from osuPP.beatmap import GameMods
from osuPP.utils import setup_logging

import parse as cli


def test_collect_paths(tmp_path, osu_file):
    nested = tmp_path / "nested"
    nested.mkdir()
    (nested / "other.osu").write_text("osu file format v14\n")
    (nested / "notes.txt").write_text("")

    paths = cli.collect_paths([str(tmp_path)])

    assert sorted(paths) == sorted([str(osu_file), str(nested / "other.osu")])


def test_summarize(osu_map):
    summary = cli.summarize(parse_beatmap(osu_map), GameMods.DOUBLE_TIME)

    assert "mode=STANDARD" in summary
    assert "bpm=120.00" in summary
    assert "clock_rate=1.5" in summary


def test_setup_logging():
    setup_logging("debug")

    assert logging.getLogger().level == logging.DEBUG
