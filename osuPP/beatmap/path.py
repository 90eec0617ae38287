from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Optional


@dataclasses.dataclass(frozen=True)
class Pos2:
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Pos2) -> Pos2:
        return Pos2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Pos2) -> Pos2:
        return Pos2(self.x - other.x, self.y - other.y)


class PathType(Enum):
    CATMULL = "C"
    BEZIER = "B"
    LINEAR = "L"
    PERFECT_CURVE = "P"

    @classmethod
    def from_code(cls, code: str) -> PathType:
        """Decode a slider curve type letter, unknown letters are Catmull."""
        for path_type in cls:
            if path_type.value == code:
                return path_type
        return cls.CATMULL


@dataclasses.dataclass(frozen=True)
class PathControlPoint:
    """Control point of a slider path.

    Attributes:
        pos: Position relative to the slider's position.
        kind: Path type, only present on the first point of each segment.
    """

    pos: Pos2
    kind: Optional[PathType] = None

    def with_kind(self, kind: PathType) -> PathControlPoint:
        return dataclasses.replace(self, kind=kind)
