"""Blocking streaming digest: pull chunks from an input, fold them into an engine."""

from __future__ import annotations

import logging

from sha256_digest.engine import Engine
from sha256_digest.inputs import Input

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024


def calc(input: Input, engine: Engine, *, chunk_size: int = CHUNK_SIZE) -> str:
    """Hash everything ``input`` yields and return the lowercase hex digest.

    The buffer is allocated once and overwritten in place; only the prefix
    reported by each read is handed to the engine. OSError from the input
    propagates unchanged.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    buf = bytearray(chunk_size)
    view = memoryview(buf)
    total = chunks = 0
    while n := input.read_into(view):
        engine.update(view[:n])
        total += n
        chunks += 1

    logger.debug("Hashed %d bytes in %d chunks", total, chunks)
    return engine.finish().hex()
