from __future__ import annotations

import io
import os
import asyncio
import logging
from typing import Optional, Union

import aiofiles

from osuPP.beatmap import Beatmap
from osuPP.utils.config import ParserConfig
from .errors import ParseIOError
from .line_source import AsyncLineSource, LineSource
from .osu_parser import OsuParser

PathLike = Union[str, os.PathLike]


def parse(source, config: Optional[ParserConfig] = None) -> Beatmap:
    """Parse a beatmap from a .osu file's content.

    Args:
        source: The content as bytes or str, or a stream with a `readline()`
            method, e.g. a file opened in binary or text mode.
        config: Parser settings.

    Returns:
        beatmap: The parsed beatmap.
    """
    if isinstance(source, os.PathLike):
        return from_path(source, config)
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)
    elif isinstance(source, str):
        source = io.StringIO(source)

    parser = OsuParser(config)
    lines = LineSource(source, parser.config.encoding)

    parser.read_header(lines.next_header())
    while (line := lines.next_line()) is not None:
        parser.feed(line)

    return parser.finish()


async def parse_async(stream, config: Optional[ParserConfig] = None) -> Beatmap:
    """Parse a beatmap from a stream whose `readline()` is awaitable.

    Produces the same beatmap, or raises the same error, as `parse` does for
    the same content. Bytes or str content are read through an
    `asyncio.StreamReader`.
    """
    parser = OsuParser(config)

    if isinstance(stream, str):
        stream = stream.encode(parser.config.encoding)
    if isinstance(stream, (bytes, bytearray)):
        stream = _stream_reader(bytes(stream))

    lines = AsyncLineSource(stream, parser.config.encoding)

    parser.read_header(await lines.next_header())
    while (line := await lines.next_line()) is not None:
        parser.feed(line)

    return parser.finish()


def _stream_reader(data: bytes) -> asyncio.StreamReader:
    reader = asyncio.StreamReader(limit=len(data) + 1)
    reader.feed_data(data)
    reader.feed_eof()
    return reader


def from_path(path: PathLike, config: Optional[ParserConfig] = None) -> Beatmap:
    """Parse the .osu file at `path`."""
    try:
        with open(path, "rb") as f:
            beatmap = parse(f, config)
    except OSError as e:
        raise ParseIOError(e) from e

    logging.debug(f"parsed {path}: {len(beatmap.hit_objects)} hit objects")
    return beatmap


async def from_path_async(path: PathLike, config: Optional[ParserConfig] = None) -> Beatmap:
    """Parse the .osu file at `path` without blocking the event loop."""
    try:
        async with aiofiles.open(path, "rb") as f:
            beatmap = await parse_async(f, config)
    except OSError as e:
        raise ParseIOError(e) from e

    logging.debug(f"parsed {path}: {len(beatmap.hit_objects)} hit objects")
    return beatmap
