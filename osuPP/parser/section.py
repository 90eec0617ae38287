from __future__ import annotations

from enum import Enum
from typing import Optional


class Section(Enum):
    NONE = None
    GENERAL = "General"
    DIFFICULTY = "Difficulty"
    TIMING_POINTS = "TimingPoints"
    HIT_OBJECTS = "HitObjects"

    @classmethod
    def from_name(cls, name: str) -> Section:
        for section in cls:
            if section.value == name:
                return section
        return cls.NONE

    @classmethod
    def from_header(cls, line: str) -> Optional[Section]:
        """Read a `[Name]` section header.

        Returns:
            section: The section the header opens, `Section.NONE` for sections
                that are not parsed, or `None` if the line is no header.
        """
        if line.startswith("[") and line.endswith("]") and len(line) >= 2:
            return cls.from_name(line[1:-1])
        return None
