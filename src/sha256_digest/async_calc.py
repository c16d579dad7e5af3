"""Suspendable streaming digest for the asyncio event loop."""

from __future__ import annotations

import logging

from sha256_digest.calc import CHUNK_SIZE
from sha256_digest.engine import Engine
from sha256_digest.inputs import AsyncInput

logger = logging.getLogger(__name__)


async def async_calc(input: AsyncInput, engine: Engine, *, chunk_size: int = CHUNK_SIZE) -> str:
    """Awaitable counterpart of ``calc()``.

    Each ``read_into`` is the only suspension point; engine updates and the
    final digest run synchronously. The buffer is cleared before every read
    so nothing from a previous chunk reaches the engine.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    buf = bytearray()
    total = chunks = 0
    while True:
        buf.clear()
        n = await input.read_into(buf, chunk_size)
        if n == 0:
            break
        engine.update(buf[:n])
        total += n
        chunks += 1

    logger.debug("Hashed %d bytes in %d chunks (async)", total, chunks)
    return engine.finish().hex()
