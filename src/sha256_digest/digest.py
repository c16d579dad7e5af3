"""Top-level digest entry points for in-memory values and files."""

from __future__ import annotations

import logging
from functools import singledispatch

from sha256_digest.async_calc import async_calc
from sha256_digest.calc import CHUNK_SIZE, calc
from sha256_digest.engine import Buffer, CryptographyEngine, EngineFactory, HashlibEngine
from sha256_digest.inputs import AsyncFileInput, ReaderInput, StrPath

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# In-memory values
# ---------------------------------------------------------------------------


def _digest_buffer(data: Buffer, engine: EngineFactory) -> str:
    e = engine()
    e.update(data)
    return e.finish().hex()


@singledispatch
def digest(value: object, *, engine: EngineFactory = HashlibEngine) -> str:
    """Return the SHA-256 hex digest of an in-memory value.

    Accepts ``str`` (hashed as UTF-8, so a single character works too),
    ``bytes``, ``bytearray`` and ``memoryview``. Files go through
    ``digest_from_path()`` instead.
    """
    raise TypeError(f"Cannot digest value of type {type(value).__name__}")


@digest.register
def _(value: str, *, engine: EngineFactory = HashlibEngine) -> str:
    return _digest_buffer(value.encode("utf-8"), engine)


@digest.register(bytes)
@digest.register(bytearray)
@digest.register(memoryview)
def _(value: Buffer, *, engine: EngineFactory = HashlibEngine) -> str:
    return _digest_buffer(value, engine)


# ---------------------------------------------------------------------------
# Files (blocking)
# ---------------------------------------------------------------------------


def digest_from_path(
    path: StrPath,
    *,
    engine: EngineFactory = HashlibEngine,
    chunk_size: int = CHUNK_SIZE,
) -> str:
    """Stream a file through the engine and return its hex digest.

    Raises OSError (FileNotFoundError, PermissionError, ...) if the file
    can't be opened or read.
    """
    logger.debug("Hashing %s", path)
    with open(path, "rb") as fh:
        return calc(ReaderInput(fh), engine(), chunk_size=chunk_size)


def cryptography_digest_from_path(path: StrPath, *, chunk_size: int = CHUNK_SIZE) -> str:
    """``digest_from_path()`` using the cryptography engine."""
    return digest_from_path(path, engine=CryptographyEngine, chunk_size=chunk_size)


# ---------------------------------------------------------------------------
# Files (async)
# ---------------------------------------------------------------------------


async def async_digest_from_path(
    path: StrPath,
    *,
    engine: EngineFactory = HashlibEngine,
    chunk_size: int = CHUNK_SIZE,
) -> str:
    """Awaitable ``digest_from_path()``; file I/O never blocks the event loop."""
    logger.debug("Hashing %s (async)", path)
    async with AsyncFileInput(path) as source:
        return await async_calc(source, engine(), chunk_size=chunk_size)


async def async_cryptography_digest_from_path(path: StrPath, *, chunk_size: int = CHUNK_SIZE) -> str:
    """``async_digest_from_path()`` using the cryptography engine."""
    return await async_digest_from_path(path, engine=CryptographyEngine, chunk_size=chunk_size)
