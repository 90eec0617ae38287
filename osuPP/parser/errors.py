from __future__ import annotations

from typing import Optional


class ParseError(Exception):
    """Base class of everything that can go wrong while parsing a .osu file."""


class IncorrectFileHeaderError(ParseError):
    def __init__(self) -> None:
        super().__init__("expected `osu file format v` at file begin")


class BadLineError(ParseError):
    def __init__(self, line: str) -> None:
        super().__init__(f"line not in `Key: Value` pattern: {line!r}")
        self.line = line


class MissingFieldError(ParseError):
    def __init__(self, field: str) -> None:
        super().__init__(f"missing field `{field}`")
        self.field = field


class InvalidNumberError(ParseError):
    """A field could not be read as a number."""

    kind = "number"

    def __init__(self, field: str, value: str) -> None:
        super().__init__(f"invalid {self.kind} for `{field}`: {value!r}")
        self.field = field
        self.value = value


class InvalidIntegerError(InvalidNumberError):
    kind = "integer"


class InvalidFloatError(InvalidNumberError):
    kind = "decimal number"


class NonFiniteNumberError(ParseError):
    def __init__(self, field: str, value: float) -> None:
        super().__init__(f"`{field}` must be finite, got {value}")
        self.field = field
        self.value = value


class InvalidModeError(ParseError):
    def __init__(self, value: str) -> None:
        super().__init__(f"invalid mode: {value!r}")
        self.value = value


class UnincludedModeError(ParseError):
    def __init__(self, mode) -> None:
        super().__init__(f"beatmaps of mode {mode.name} are not supported")
        self.mode = mode


class UnknownHitObjectKindError(ParseError):
    def __init__(self, kind: int) -> None:
        super().__init__(f"unknown hit object kind: {kind}")
        self.kind = kind


class InvalidCurvePointsError(ParseError):
    def __init__(self, point: str) -> None:
        super().__init__(f"invalid slider curve point: {point!r}")
        self.point = point


class TooManyRepeatsError(ParseError):
    def __init__(self, repeats: int) -> None:
        super().__init__(f"slider repeat count {repeats} exceeds the limit")
        self.repeats = repeats


class ParseIOError(ParseError):
    def __init__(self, reason: Optional[BaseException] = None) -> None:
        super().__init__(f"failed to read the beatmap: {reason}")
        self.reason = reason
