from __future__ import annotations

import math
import logging
from typing import Optional

from osuPP.beatmap import (
    Beatmap,
    Circle,
    DifficultyPoint,
    GameMode,
    HitObject,
    Hold,
    Pos2,
    Slider,
    Spinner,
    TimingPoint,
)
from osuPP.beatmap.beatmap import DEFAULT_STACK_LENIENCY
from osuPP.utils.config import ParserConfig
from .errors import (
    BadLineError,
    IncorrectFileHeaderError,
    InvalidFloatError,
    InvalidIntegerError,
    InvalidModeError,
    MissingFieldError,
    NonFiniteNumberError,
    TooManyRepeatsError,
    UnincludedModeError,
    UnknownHitObjectKindError,
)
from .line_source import OSU_FILE_HEADER
from .section import Section
from .slider_path import MAX_COORDINATE_VALUE, MAX_REPEATS, parse_slider_path
from .sort import sort_by_time, sort_hit_objects

CIRCLE_FLAG = 1 << 0
SLIDER_FLAG = 1 << 1
SPINNER_FLAG = 1 << 3
HOLD_FLAG = 1 << 7

# keys of [Difficulty] that must be present, in the order they are checked
REQUIRED_DIFFICULTY_FIELDS = (
    "OverallDifficulty",
    "CircleSize",
    "HPDrainRate",
    "SliderMultiplier",
    "SliderTickRate",
)


def parse_float(value: Optional[str], field: str) -> float:
    """Read a finite decimal number, raising a `ParseError` naming `field`."""
    if value is None:
        raise MissingFieldError(field)
    try:
        number = float(value)
    except ValueError as e:
        raise InvalidFloatError(field, value) from e
    if not math.isfinite(number):
        raise NonFiniteNumberError(field, number)
    return number


def parse_int(value: Optional[str], field: str, max_value: Optional[int] = None) -> int:
    """Read a non-negative integer, at most `max_value` if given."""
    if value is None:
        raise MissingFieldError(field)
    try:
        number = int(value)
    except ValueError as e:
        raise InvalidIntegerError(field, value) from e
    if number < 0 or (max_value is not None and number > max_value):
        raise InvalidIntegerError(field, value)
    return number


def split_colon(line: str) -> tuple[str, str]:
    key, sep, value = line.partition(":")
    if not sep:
        raise BadLineError(line)
    return key, value.strip()


class _Fields(object):
    def __init__(self, line: str):
        """Sequential access to the comma separated fields of a line."""
        self._fields = line.split(",")
        self._index = 0

    def next(self) -> Optional[str]:
        if self._index >= len(self._fields):
            return None
        field = self._fields[self._index]
        self._index += 1
        return field


class OsuParser(object):
    def __init__(self, config: Optional[ParserConfig] = None):
        """Section based parser that builds a `Beatmap` line by line.

        The parser does no I/O, lines are pushed into it by a line source
        so blocking and async reads share all parsing logic.

        Attributes:
            config: Parser settings, see `ParserConfig`.
        """
        self.config = config if config is not None else ParserConfig()
        self.supported_modes = self.config.supported_modes()

        self.version = 0
        self.mode = GameMode.STANDARD
        self.stack_leniency = DEFAULT_STACK_LENIENCY
        self.n_circles = 0
        self.n_sliders = 0
        self.n_spinners = 0
        self.ar = 0.0
        self.od = 0.0
        self.cs = 0.0
        self.hp = 0.0
        self.slider_mult = 0.0
        self.tick_rate = 0.0
        self.hit_objects = []
        self.timing_points = []
        self.difficulty_points = []

        self.section = Section.NONE
        self._section_state = {}

    def read_header(self, line: Optional[str]) -> None:
        """Read the file format version from the first meaningful line."""
        if line is None:
            raise IncorrectFileHeaderError()

        idx = line.find(OSU_FILE_HEADER)
        if idx == -1:
            raise IncorrectFileHeaderError()

        version = line[idx + len(OSU_FILE_HEADER) :].rstrip()
        self.version = parse_int(version, "file format version", max_value=255)

    def feed(self, line: str) -> None:
        """Process one prepared line of the file body."""
        section = Section.from_header(line)

        if section is not None:
            self._end_section()
            self._begin_section(section)
            return

        if self.section is Section.GENERAL:
            self._parse_general(line)
        elif self.section is Section.DIFFICULTY:
            self._parse_difficulty(line)
        elif self.section is Section.TIMING_POINTS:
            self._parse_timing_point(line)
        elif self.section is Section.HIT_OBJECTS:
            self._parse_hit_object(line)

    def finish(self) -> Beatmap:
        """Close the last section and create the beatmap."""
        self._end_section()

        return Beatmap(
            mode=self.mode,
            version=self.version,
            n_circles=self.n_circles,
            n_sliders=self.n_sliders,
            n_spinners=self.n_spinners,
            ar=self.ar,
            od=self.od,
            cs=self.cs,
            hp=self.hp,
            slider_mult=self.slider_mult,
            tick_rate=self.tick_rate,
            hit_objects=tuple(self.hit_objects),
            timing_points=tuple(self.timing_points),
            difficulty_points=tuple(self.difficulty_points),
            stack_leniency=self.stack_leniency,
        )

    def _begin_section(self, section: Section) -> None:
        logging.debug(f"entering section {section.name}")
        self.section = section

        if section is Section.TIMING_POINTS:
            self._section_state = {
                "prev_time": 0.0,
                "prev_diff": 0.0,
                "unsorted_timings": False,
                "unsorted_difficulties": False,
            }
        elif section is Section.HIT_OBJECTS:
            self._section_state = {"prev_time": 0.0, "unsorted": False}
        else:
            self._section_state = {}

    def _end_section(self) -> None:
        state = self._section_state

        if self.section is Section.GENERAL:
            self._end_general(state)
        elif self.section is Section.DIFFICULTY:
            self._end_difficulty(state)
        elif self.section is Section.TIMING_POINTS:
            if state["unsorted_timings"]:
                sort_by_time(self.timing_points)
            if state["unsorted_difficulties"]:
                sort_by_time(self.difficulty_points)
        elif self.section is Section.HIT_OBJECTS:
            # NOTE: a [General] section after [HitObjects] hasn't set the mode yet
            sort_hit_objects(self.hit_objects, self.mode, state["unsorted"])

        self.section = Section.NONE
        self._section_state = {}

    def _parse_general(self, line: str) -> None:
        key, value = split_colon(line)

        if key == "Mode":
            try:
                self._section_state["mode"] = GameMode.from_code(value)
            except ValueError as e:
                raise InvalidModeError(value) from e
        elif key == "StackLeniency" and GameMode.STANDARD in self.supported_modes:
            self._section_state["stack_leniency"] = parse_float(value, key)

    def _end_general(self, state: dict) -> None:
        self.mode = state.get("mode", GameMode.STANDARD)

        if self.mode not in self.supported_modes:
            raise UnincludedModeError(self.mode)

        if GameMode.STANDARD in self.supported_modes:
            self.stack_leniency = state.get("stack_leniency", DEFAULT_STACK_LENIENCY)

    def _parse_difficulty(self, line: str) -> None:
        key, value = split_colon(line)

        if key in REQUIRED_DIFFICULTY_FIELDS or key == "ApproachRate":
            self._section_state[key] = parse_float(value, key)

    def _end_difficulty(self, state: dict) -> None:
        for field in REQUIRED_DIFFICULTY_FIELDS:
            if field not in state:
                raise MissingFieldError(field)

        self.od = state["OverallDifficulty"]
        self.cs = state["CircleSize"]
        self.hp = state["HPDrainRate"]
        # maps without an approach rate use their overall difficulty
        self.ar = state.get("ApproachRate", self.od)
        self.slider_mult = state["SliderMultiplier"]
        self.tick_rate = state["SliderTickRate"]

    def _parse_timing_point(self, line: str) -> None:
        """Parse a timing point.

        Only the first two fields are relevant, format: time, beat length, ...
        A negative beat length describes a difficulty point instead.
        """
        state = self._section_state
        fields = _Fields(line)

        time = parse_float(_strip(fields.next()), "timing point time")
        beat_len = parse_float(_strip(fields.next()), "beat length")

        if beat_len < 0.0:
            self.difficulty_points.append(DifficultyPoint.from_beat_len(time, beat_len))

            if time < state["prev_diff"]:
                state["unsorted_difficulties"] = True
            else:
                state["prev_diff"] = time
        else:
            self.timing_points.append(TimingPoint(time=time, beat_len=beat_len))

            if time < state["prev_time"]:
                state["unsorted_timings"] = True
            else:
                state["prev_time"] = time

    def _parse_hit_object(self, line: str) -> None:
        """Parse a hit object.

        Format: x, y, time, type, sound, type specific fields...
        The type bits decide the kind of object, checked in the order
        circle, slider, spinner, hold.
        """
        state = self._section_state
        fields = _Fields(line)

        pos = Pos2(
            x=parse_float(fields.next(), "x pos"),
            y=parse_float(fields.next(), "y pos"),
        )
        time = parse_float(_strip(fields.next()), "hit object time")

        if self.hit_objects and time < state["prev_time"]:
            state["unsorted"] = True

        kind_bits = parse_int(fields.next(), "hit object kind", max_value=255)
        sound = fields.next()
        sound = parse_int(sound, "sound", max_value=255) if sound is not None else 0

        if kind_bits & CIRCLE_FLAG:
            self.n_circles += 1
            kind = Circle()
        elif kind_bits & SLIDER_FLAG:
            self.n_sliders += 1
            kind = self._parse_slider(fields, pos)
        elif kind_bits & SPINNER_FLAG:
            self.n_spinners += 1
            kind = Spinner(end_time=parse_float(fields.next(), "spinner end time"))
        elif kind_bits & HOLD_FLAG:
            # osu!stable counts hold notes as sliders
            self.n_sliders += 1
            kind = self._parse_hold(fields, time)
        else:
            raise UnknownHitObjectKindError(kind_bits)

        self.hit_objects.append(
            HitObject(pos=pos, start_time=time, kind=kind, sound=sound)
        )
        state["prev_time"] = time

    def _parse_slider(self, fields: _Fields, pos: Pos2):
        """Parse the slider specific fields.

        Args:
            fields: Remaining fields, format: curve points, repeats, pixel length, ...
            pos: Position of the slider.

        Returns:
            kind: A `Slider`, or a `Circle` if the slider has no curve points.
        """
        curve = fields.next()
        if curve is None:
            raise MissingFieldError("control points")

        repeats = parse_int(fields.next(), "repeats")
        if repeats > MAX_REPEATS:
            raise TooManyRepeatsError(repeats)

        control_points = parse_slider_path(curve, pos)

        if not control_points:
            logging.debug(f"slider at {pos} has no curve points, using a circle")
            return Circle()

        pixel_len = parse_float(fields.next(), "pixel length")

        return Slider(
            pixel_len=min(max(pixel_len, 0.0), MAX_COORDINATE_VALUE),
            # osu!stable treats the first span as a repeat
            repeats=max(repeats - 1, 0),
            control_points=tuple(control_points),
        )

    def _parse_hold(self, fields: _Fields, time: float) -> Hold:
        end_time = time
        extras = fields.next()

        if extras is not None:
            end_time = max(end_time, parse_float(extras.split(":")[0], "hold end time"))

        return Hold(end_time=end_time)


def _strip(value: Optional[str]) -> Optional[str]:
    return value.strip() if value is not None else None
