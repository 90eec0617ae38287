from __future__ import annotations

import asyncio
from typing import Optional, Union

from .errors import ParseIOError

OSU_FILE_HEADER = "osu file format v"
BYTE_ORDER_MARK = "\ufeff"


def skip_line(line: str) -> bool:
    # stable writes some lines with a leading space or underscore, ignore them
    return (
        not line
        or line.startswith("//")
        or line.startswith(" ")
        or line.startswith("_")
    )


def prepare_line(raw: str) -> Optional[str]:
    """Strip a raw line for parsing.

    Args:
        raw: A line as read from the stream, including its line break.

    Returns:
        line: The line without trailing whitespace and `//` comment,
            or `None` if the line carries no data.
    """
    line = raw.rstrip()

    if skip_line(line):
        return None

    idx = line.find("//")
    if idx != -1:
        line = line[:idx]

    return line


def is_blank(raw: str) -> bool:
    return not raw.replace(BYTE_ORDER_MARK, "").strip()


class _Decoder(object):
    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def decode(self, raw: Union[bytes, str]) -> Optional[str]:
        if not raw:
            return None
        if isinstance(raw, str):
            return raw
        try:
            return raw.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise ParseIOError(e) from e


class LineSource(_Decoder):
    def __init__(self, stream, encoding: str = "utf-8"):
        """Blocking line source over a binary or text stream.

        Attributes:
            stream: Any object with a `readline()` method returning bytes or str.
            encoding: Encoding used to decode bytes.
        """
        super().__init__(encoding)
        self.stream = stream

    def read_raw(self) -> Optional[str]:
        try:
            raw = self.stream.readline()
        except OSError as e:
            raise ParseIOError(e) from e
        return self.decode(raw)

    def next_header(self) -> Optional[str]:
        """Skip leading blank lines and return the first meaningful one."""
        while (raw := self.read_raw()) is not None:
            if not is_blank(raw):
                return raw
        return None

    def next_line(self) -> Optional[str]:
        while (raw := self.read_raw()) is not None:
            line = prepare_line(raw)
            if line is not None:
                return line
        return None


class AsyncLineSource(_Decoder):
    def __init__(self, stream, encoding: str = "utf-8"):
        """Line source over a stream with an awaitable `readline()`.

        Yields exactly the lines `LineSource` would for the same content,
        `asyncio.StreamReader` and `aiofiles` files both qualify.
        """
        super().__init__(encoding)
        self.stream = stream

    async def read_raw(self) -> Optional[str]:
        try:
            if isinstance(self.stream, asyncio.StreamReader):
                raw = await self._read_unbounded_line()
            else:
                raw = await self.stream.readline()
        except (OSError, ValueError) as e:
            raise ParseIOError(e) from e
        return self.decode(raw)

    async def _read_unbounded_line(self) -> bytes:
        """Read a line from a `StreamReader` regardless of its buffer limit.

        `StreamReader.readline` drops lines longer than the limit, lines of
        any length are read in chunks instead.
        """
        chunks = []
        while True:
            try:
                chunks.append(await self.stream.readuntil(b"\n"))
                break
            except asyncio.IncompleteReadError as e:
                chunks.append(e.partial)
                break
            except asyncio.LimitOverrunError as e:
                chunks.append(await self.stream.readexactly(e.consumed))
        return b"".join(chunks)

    async def next_header(self) -> Optional[str]:
        while (raw := await self.read_raw()) is not None:
            if not is_blank(raw):
                return raw
        return None

    async def next_line(self) -> Optional[str]:
        while (raw := await self.read_raw()) is not None:
            line = prepare_line(raw)
            if line is not None:
                return line
        return None
