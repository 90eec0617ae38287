from __future__ import annotations

import pytest

MAP_TEMPLATE = """osu file format v14

[General]
AudioFilename: audio.mp3
StackLeniency: 0.5
Mode: {mode}

[Metadata]
Title:test map

[Difficulty]
HPDrainRate:5
CircleSize:4
OverallDifficulty:8
ApproachRate:9
SliderMultiplier:1.4
SliderTickRate:1

[TimingPoints]
{timing_points}

[HitObjects]
{hit_objects}
"""

TIMING_POINTS = [
    "0,500,4,2,0,50,1,0",
    "1000,-50,4,2,0,50,0,0",
    "2000,400,4,2,0,50,1,0",
]

HIT_OBJECTS = [
    "64,80,100,1,0,0:0:0:0:",
    "100,100,600,2,0,B|200:100|200:200,2,150.5",
    "256,192,1500,12,0,2500,0:0:0:0:",
]


def make_map(mode=0, timing_points=None, hit_objects=None) -> str:
    if timing_points is None:
        timing_points = TIMING_POINTS
    if hit_objects is None:
        hit_objects = HIT_OBJECTS
    return MAP_TEMPLATE.format(
        mode=mode,
        timing_points="\n".join(timing_points),
        hit_objects="\n".join(hit_objects),
    )


@pytest.fixture(name="make_map")
def make_map_fixture():
    return make_map


@pytest.fixture
def osu_map() -> str:
    return make_map()


@pytest.fixture
def osu_file(tmp_path, osu_map):
    path = tmp_path / "map.osu"
    path.write_bytes(osu_map.encode("utf-8"))
    return path
