from __future__ import annotations

import os
import logging
from glob import glob

import hydra
from hydra.utils import to_absolute_path
from omegaconf import DictConfig
from tqdm import tqdm

from osuPP.beatmap import Beatmap, GameMods
from osuPP.parser import ParseError, from_path
from osuPP.utils import config_from_args, setup_logging

OSU_FILE_EXTENSION = ".osu"


def collect_paths(paths: list[str]) -> list[str]:
    """Expand directories into the .osu files they contain."""
    files = []
    for path in paths:
        path = to_absolute_path(path)
        if os.path.isdir(path):
            files.extend(
                sorted(glob(f"{path}/**/*{OSU_FILE_EXTENSION}", recursive=True))
            )
        else:
            files.append(path)
    return files


def summarize(beatmap: Beatmap, mods: GameMods) -> str:
    attributes = beatmap.attributes(mods)
    return (
        f"mode={beatmap.mode.name} v{beatmap.version} "
        f"circles={beatmap.n_circles} sliders={beatmap.n_sliders} "
        f"spinners={beatmap.n_spinners} bpm={beatmap.bpm:.2f} "
        f"ar={attributes.ar:.2f} od={attributes.od:.2f} "
        f"cs={attributes.cs:.2f} hp={attributes.hp:.2f} "
        f"clock_rate={attributes.clock_rate}"
    )


@hydra.main(config_path="configs", config_name="parse", version_base="1.1")
def main(args: DictConfig):
    setup_logging(args.log_level)
    config = config_from_args(args)
    mods = GameMods(args.mods)

    for path in tqdm(collect_paths(args.paths)):
        try:
            beatmap = from_path(path, config)
        except ParseError as e:
            logging.warning(f"skipped: {path}")
            logging.warning(f"reason: {e}")
            continue

        logging.info(f"{os.path.basename(path)}: {summarize(beatmap, mods)}")


if __name__ == "__main__":
    main()
