from .errors import (
    BadLineError,
    IncorrectFileHeaderError,
    InvalidCurvePointsError,
    InvalidFloatError,
    InvalidIntegerError,
    InvalidModeError,
    InvalidNumberError,
    MissingFieldError,
    NonFiniteNumberError,
    ParseError,
    ParseIOError,
    TooManyRepeatsError,
    UnincludedModeError,
    UnknownHitObjectKindError,
)
from .line_source import AsyncLineSource, LineSource, prepare_line
from .osu_parser import OsuParser
from .reader import from_path, from_path_async, parse, parse_async
from .section import Section
from .slider_path import parse_slider_path
from .sort import legacy_sort, sort_hit_objects
