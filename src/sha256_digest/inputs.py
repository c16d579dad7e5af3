"""Byte sources for the streaming digest loops.

Two families:
  - blocking inputs (``Input``) fill a caller-owned buffer in place
  - suspendable inputs (``AsyncInput``) append to a cleared buffer, awaiting data
"""

from __future__ import annotations

import asyncio
import logging
import os
import selectors
from typing import BinaryIO, Protocol, Union, runtime_checkable

from sha256_digest.engine import Buffer

logger = logging.getLogger(__name__)

StrPath = Union[str, "os.PathLike[str]"]


# ---------------------------------------------------------------------------
# Blocking
# ---------------------------------------------------------------------------


@runtime_checkable
class Input(Protocol):
    def read_into(self, buf: bytearray | memoryview) -> int: ...


class BytesInput:
    """In-memory input: a view over the data plus a cursor."""

    def __init__(self, data: Buffer) -> None:
        self._view = memoryview(data).cast("B")
        self._pos = 0

    def read_into(self, buf: bytearray | memoryview) -> int:
        chunk = self._view[self._pos : self._pos + len(buf)]
        n = len(chunk)
        buf[:n] = chunk
        self._pos += n
        return n


class ReaderInput:
    """Wraps a binary file object; reads go through ``readinto``.

    Non-blocking streams must expose ``fileno()``: when nothing is ready the
    read waits on a selector instead of polling.
    """

    def __init__(self, fh: BinaryIO) -> None:
        self._fh = fh

    def read_into(self, buf: bytearray | memoryview) -> int:
        # None means "no data yet" on a non-blocking stream, not end of input
        while (n := self._fh.readinto(buf)) is None:  # type: ignore[attr-defined]
            self._wait_readable()
        return n

    def _wait_readable(self) -> None:
        with selectors.DefaultSelector() as sel:
            sel.register(self._fh.fileno(), selectors.EVENT_READ)
            sel.select()


# ---------------------------------------------------------------------------
# Suspendable
# ---------------------------------------------------------------------------


@runtime_checkable
class AsyncInput(Protocol):
    async def read_into(self, buf: bytearray, size: int) -> int: ...


class StreamReaderInput:
    """Wraps an ``asyncio.StreamReader`` (sockets, pipes, subprocess output)."""

    def __init__(self, reader: asyncio.StreamReader) -> None:
        self._reader = reader

    async def read_into(self, buf: bytearray, size: int) -> int:
        data = await self._reader.read(size)
        buf += data
        return len(data)


def _close_if_opened(opening: asyncio.Future[BinaryIO]) -> None:
    """Done-callback closing a file whose opener was abandoned."""
    if opening.cancelled() or opening.exception() is not None:
        return
    opening.result().close()


class AsyncFileInput:
    """File input for the event loop.

    Blocking ``open``/``read``/``close`` calls run in a worker thread. Use as
    an async context manager; the file is closed on every exit path,
    cancellation included (also while the open is still in flight).
    """

    def __init__(self, path: StrPath) -> None:
        self.path = path
        self._fh: BinaryIO | None = None

    async def __aenter__(self) -> AsyncFileInput:
        opening = asyncio.ensure_future(asyncio.to_thread(open, self.path, "rb"))
        try:
            self._fh = await asyncio.shield(opening)
        except asyncio.CancelledError:
            # The worker thread may still hand back an open file
            opening.add_done_callback(_close_if_opened)
            raise
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        # A cancelled read may still hold the reader's lock in its worker thread
        if self._fh is not None and not self._fh.closed:
            await asyncio.to_thread(self._fh.close)
            logger.debug("Closed %s", self.path)

    @property
    def closed(self) -> bool:
        return self._fh is None or self._fh.closed

    async def read_into(self, buf: bytearray, size: int) -> int:
        if self._fh is None:
            raise RuntimeError("AsyncFileInput not opened. Use 'async with' first.")
        data = await asyncio.to_thread(self._fh.read, size)
        buf += data
        return len(data)
