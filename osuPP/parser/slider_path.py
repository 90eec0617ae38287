from __future__ import annotations

import math
from typing import Optional

import numpy as np

from osuPP.beatmap import PathControlPoint, PathType, Pos2
from .errors import InvalidCurvePointsError

MAX_COORDINATE_VALUE = 131072.0
MAX_REPEATS = 9000
F32_EPSILON = float(np.finfo(np.float32).eps)


def read_point(token: str, anchor: Pos2) -> PathControlPoint:
    """Parse an `x:y` curve point into a control point relative to `anchor`."""
    values = token.split(":")
    if len(values) < 2:
        raise InvalidCurvePointsError(token)

    try:
        x, y = float(values[0]), float(values[1])
    except ValueError as e:
        raise InvalidCurvePointsError(token) from e

    if not (math.isfinite(x) and math.isfinite(y)):
        raise InvalidCurvePointsError(token)

    return PathControlPoint(Pos2(x, y) - anchor)


def is_linear(p0: Pos2, p1: Pos2, p2: Pos2) -> bool:
    """Whether three points lie on a line, evaluated in single precision."""
    a, b, c = (np.array([p.x, p.y], dtype=np.float32) for p in (p0, p1, p2))
    ab = b - a
    ac = c - a
    cross = ab[0] * ac[1] - ab[1] * ac[0]
    return bool(abs(cross) <= F32_EPSILON)


def parse_slider_path(curve: str, anchor: Pos2) -> list[PathControlPoint]:
    """Reconstruct a slider's path from its control point field.

    The field starts with a curve type letter followed by `x:y` points,
    e.g. `B|100:0|200:0|200:100`. Later type letters start new segments.

    Args:
        curve: The `|` separated control point field of a slider.
        anchor: Position of the slider, points are stored relative to it.

    Returns:
        control_points: Control points with a path type on the first point
            of every segment. Empty if the field contains no points.

    Example::
        >>> parse_slider_path("B|1:1|2:2|2:2|3:3", Pos2(0, 0))
        [(1, 1) B, (2, 2) B, (3, 3)]
    """
    tokens = curve.split("|")
    control_points = []
    start = 0

    for end in range(1, len(tokens)):
        # type descriptors are a single letter, everything else is a point
        if len(tokens[end]) > 1:
            continue

        # the first point of the next segment closes this one
        end_point = tokens[end + 1] if end + 1 < len(tokens) else None
        _convert_segment(tokens[start:end], end_point, start == 0, anchor, control_points)
        start = end

    _convert_segment(tokens[start:], None, start == 0, anchor, control_points)

    return control_points


def _convert_segment(
    tokens: list[str],
    end_point: Optional[str],
    first: bool,
    anchor: Pos2,
    control_points: list[PathControlPoint],
) -> None:
    """Convert one explicitly typed segment and append its points.

    The first segment of a path starts at the slider head, which counts
    towards the segment's points but is not emitted. A segment may hold
    several implicit segments of the same type, started by two consecutive
    points at the same position. For `X|1:1|2:2|2:2|3:3` the points are
    `(1, 1) X, (2, 2) X, (3, 3)`.
    """
    path_type = PathType.from_code(tokens[0])
    vertices = [read_point(token, anchor) for token in tokens[1:]]

    if not vertices:
        return

    if first:
        vertices.insert(0, PathControlPoint(Pos2(0, 0)))

    raw_points = [vertex.pos for vertex in vertices]
    if end_point is not None:
        raw_points.append(read_point(end_point, anchor).pos)

    # stable turns perfect curves it can't draw into other types
    if path_type is PathType.PERFECT_CURVE:
        if len(raw_points) != 3:
            path_type = PathType.BEZIER
        elif is_linear(*raw_points):
            path_type = PathType.LINEAR

    vertices[0] = vertices[0].with_kind(path_type)
    segment = []
    last = len(vertices) - 1
    start = 0

    for end in range(1, len(vertices)):
        if vertices[end].pos != vertices[end - 1].pos:
            continue

        # the last point of a segment can't start a new implicit segment
        if end == last:
            continue

        vertices[end - 1] = vertices[end - 1].with_kind(path_type)
        segment.extend(vertices[start:end])
        # skip the duplicate, it's implied by the previous point
        start = end + 1

    segment.extend(vertices[start:])

    if first:
        # the head is the object's own position
        segment = segment[1:]
        if segment[0].kind is None:
            segment[0] = segment[0].with_kind(path_type)

    control_points.extend(segment)
