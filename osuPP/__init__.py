from .beatmap import (
    Beatmap,
    BeatmapAttributes,
    Circle,
    DifficultyPoint,
    GameMode,
    GameMods,
    HitObject,
    Hold,
    ModMultipliers,
    PathControlPoint,
    PathType,
    Pos2,
    Slider,
    Spinner,
    TimingPoint,
)
from .parser import ParseError, from_path, from_path_async, parse, parse_async
from .utils import ParserConfig
