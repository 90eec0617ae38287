import pytest

from osuPP.beatmap import PathControlPoint, PathType, Pos2
from osuPP.parser import InvalidCurvePointsError, parse_slider_path
from osuPP.parser.slider_path import is_linear

ORIGIN = Pos2(0, 0)


def kinds(control_points):
    return [point.kind for point in control_points]


def positions(control_points):
    return [(point.pos.x, point.pos.y) for point in control_points]


def test_single_bezier_segment():
    control_points = parse_slider_path("B|100:0|200:0|200:100", ORIGIN)

    assert positions(control_points) == [(100, 0), (200, 0), (200, 100)]
    assert kinds(control_points) == [PathType.BEZIER, None, None]


def test_points_are_relative_to_anchor():
    control_points = parse_slider_path("L|200:100|300:50", Pos2(100, 100))

    assert control_points == [
        PathControlPoint(Pos2(100, 0), PathType.LINEAR),
        PathControlPoint(Pos2(200, -50)),
    ]


def test_unknown_type_is_catmull():
    control_points = parse_slider_path("X|10:10|20:20", ORIGIN)

    assert kinds(control_points) == [PathType.CATMULL, None]


def test_collinear_perfect_curve_becomes_linear():
    control_points = parse_slider_path("P|100:0|200:0", ORIGIN)

    assert control_points[0].kind is PathType.LINEAR


def test_perfect_curve_is_kept():
    control_points = parse_slider_path("P|100:0|200:100", ORIGIN)

    assert positions(control_points) == [(100, 0), (200, 100)]
    assert kinds(control_points) == [PathType.PERFECT_CURVE, None]


def test_perfect_curve_counts_the_slider_head():
    control_points = parse_slider_path("P|200:200|300:100", Pos2(100, 100))

    assert control_points[0].kind is PathType.PERFECT_CURVE


@pytest.mark.parametrize("curve", ["P|100:0", "P|100:0|200:100|300:0"])
def test_perfect_curve_without_three_points_becomes_bezier(curve):
    control_points = parse_slider_path(curve, ORIGIN)

    assert control_points[0].kind is PathType.BEZIER


def test_implicit_segments():
    control_points = parse_slider_path("B|1:1|2:2|2:2|3:3", ORIGIN)

    assert positions(control_points) == [(1, 1), (2, 2), (3, 3)]
    assert kinds(control_points) == [PathType.BEZIER, PathType.BEZIER, None]


def test_duplicate_last_point_does_not_start_a_segment():
    control_points = parse_slider_path("B|1:1|2:2|2:2", ORIGIN)

    assert positions(control_points) == [(1, 1), (2, 2), (2, 2)]
    assert kinds(control_points) == [PathType.BEZIER, None, None]


def test_explicit_segments():
    control_points = parse_slider_path("B|1:1|2:2|L|3:3|4:4", ORIGIN)

    assert positions(control_points) == [(1, 1), (2, 2), (3, 3), (4, 4)]
    assert kinds(control_points) == [PathType.BEZIER, None, PathType.LINEAR, None]


def test_first_segment_counts_head_and_next_segment_start():
    # head, 2 own points and the start of the next segment are too many for an arc
    control_points = parse_slider_path("P|100:0|200:100|L|300:0|400:0", ORIGIN)

    assert kinds(control_points) == [PathType.BEZIER, None, PathType.LINEAR, None]


def test_later_segment_uses_next_segment_start():
    control_points = parse_slider_path("L|50:50|P|100:0|200:100|L|300:0", ORIGIN)

    assert kinds(control_points) == [
        PathType.LINEAR,
        PathType.PERFECT_CURVE,
        None,
        PathType.LINEAR,
    ]


def test_point_at_slider_head_starts_implicit_segment():
    control_points = parse_slider_path("B|0:0|100:100|200:0", ORIGIN)

    assert positions(control_points) == [(100, 100), (200, 0)]
    assert kinds(control_points) == [PathType.BEZIER, None]


@pytest.mark.parametrize("curve", ["B", "B|", "L||"])
def test_no_points(curve):
    assert parse_slider_path(curve, ORIGIN) == []


@pytest.mark.parametrize("curve", ["B|1:a", "B|12", "B|1:1|nan:2"])
def test_invalid_curve_points(curve):
    with pytest.raises(InvalidCurvePointsError):
        parse_slider_path(curve, ORIGIN)


def test_is_linear():
    assert is_linear(Pos2(0, 0), Pos2(1, 1), Pos2(2, 2))
    assert not is_linear(Pos2(0, 0), Pos2(1, 1), Pos2(2, 3))
