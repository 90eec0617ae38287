from __future__ import annotations

import dataclasses
import logging
from typing import List, Union

from omegaconf import DictConfig, OmegaConf

from osuPP.beatmap import GameMode


def _all_modes() -> list[str]:
    return [mode.name.lower() for mode in GameMode]


@dataclasses.dataclass
class ParserConfig:
    """Parser settings.

    Attributes:
        modes: Game modes that may be parsed, by name (`standard`, `taiko`,
            `catch`, `mania`) or number. Maps of other modes are rejected.
        encoding: Encoding of byte streams.
    """

    modes: List[str] = dataclasses.field(default_factory=_all_modes)
    encoding: str = "utf-8"

    def supported_modes(self) -> frozenset[GameMode]:
        return frozenset(_to_mode(mode) for mode in self.modes)


def _to_mode(value: Union[str, int]) -> GameMode:
    if isinstance(value, int) or str(value).isdigit():
        return GameMode(int(value))
    try:
        return GameMode[str(value).upper()]
    except KeyError:
        raise ValueError(f"unknown game mode {value!r}, expected one of {_all_modes()}")


def load_config(path: str) -> ParserConfig:
    """Load parser settings from a .yaml file, missing keys keep their defaults."""
    try:
        loaded = OmegaConf.load(path)
    except OSError as error:
        logging.exception(f"failed to load config, reason: {error}")
        raise
    logging.info(f"loaded config from: {path}")
    return config_from_args(loaded)


def config_from_args(args: DictConfig) -> ParserConfig:
    """Build parser settings from (a subset of) a hydra/omegaconf config."""
    schema = OmegaConf.structured(ParserConfig)
    known = {k: v for k, v in args.items() if k in schema}
    merged = OmegaConf.merge(schema, known)
    return OmegaConf.to_object(merged)
