import random

from osuPP.beatmap import Circle, GameMode, HitObject, Pos2
from osuPP.parser import legacy_sort, sort_hit_objects


def circle(time, x=0):
    return HitObject(pos=Pos2(x, 0), start_time=time, kind=Circle())


def identity(value):
    return value


def test_legacy_sort_sorts():
    values = list(range(100))
    random.Random(4).shuffle(values)

    legacy_sort(values, key=identity)

    assert values == list(range(100))


def test_legacy_sort_keeps_small_equal_runs():
    objects = [circle(1000, x) for x in range(8)]

    legacy_sort(objects, key=lambda o: o.start_time)

    assert [o.pos.x for o in objects] == list(range(8))


def test_legacy_sort_reorders_large_equal_runs():
    objects = [circle(1000, x) for x in range(17)]

    legacy_sort(objects, key=lambda o: o.start_time)

    assert [o.pos.x for o in objects] == [0, 14, 13, 12, 11, 10, 9, 15, 8, 6, 5, 4, 3, 2, 1, 7, 16]


def test_mania_keeps_file_order_of_simultaneous_notes():
    objects = [circle(200, 0), circle(100, 1), circle(100, 2), circle(200, 3), circle(100, 4)]

    sort_hit_objects(objects, GameMode.MANIA, unsorted=True)

    assert [o.start_time for o in objects] == [100, 100, 100, 200, 200]
    assert [o.pos.x for o in objects] == [1, 2, 4, 0, 3]


def test_other_modes_sort_only_when_unsorted():
    objects = [circle(300), circle(100), circle(200)]

    sort_hit_objects(objects, GameMode.STANDARD, unsorted=False)
    assert [o.start_time for o in objects] == [300, 100, 200]

    sort_hit_objects(objects, GameMode.TAIKO, unsorted=True)
    assert [o.start_time for o in objects] == [100, 200, 300]
