from .attributes import BeatmapAttributes
from .beatmap import Beatmap, GameMode
from .control_point import DifficultyPoint, TimingPoint
from .hit_object import Circle, Hold, HitObject, HitObjectKind, HitSound, Slider, Spinner
from .mods import GameMods, ModMultipliers, Mods, as_mods
from .path import PathControlPoint, PathType, Pos2
