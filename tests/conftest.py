"""Shared test fixtures for sha256_digest test suite."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from sha256_digest.config import Settings
from sha256_digest.engine import Buffer, HashlibEngine

FIXTURES = Path(__file__).parent / "fixtures"

EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
HELLO_SHA256 = "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
PI_SHA256 = "2617fcb92baa83a96341de050f07a3186657090881eae6b833f66a035600f35a"
FOO_FILE_SHA256 = "433855b7d2b96c23a6f60e70c655eb4305e8806b682a9596a200642f947259b1"


# ---------------------------------------------------------------------------
# Test doubles
# ---------------------------------------------------------------------------

class RecordingEngine(HashlibEngine):
    """HashlibEngine that keeps a copy of every chunk it was given."""

    def __init__(self) -> None:
        super().__init__()
        self.chunks: list[bytes] = []
        self.finished = False

    def update(self, data: Buffer) -> None:
        self.chunks.append(bytes(data))
        super().update(data)

    def finish(self) -> bytes:
        self.finished = True
        return super().finish()


class ScriptedInput:
    """Blocking input that returns a fixed sequence of chunks."""

    def __init__(self, chunks: list[bytes]) -> None:
        self._chunks = list(chunks)

    def read_into(self, buf) -> int:
        if not self._chunks:
            return 0
        chunk = self._chunks.pop(0)
        assert len(chunk) <= len(buf)
        buf[: len(chunk)] = chunk
        return len(chunk)


class AsyncScriptedInput:
    """Suspendable input that yields to the loop before every chunk."""

    def __init__(self, chunks: list[bytes]) -> None:
        self._chunks = list(chunks)

    async def read_into(self, buf: bytearray, size: int) -> int:
        await asyncio.sleep(0)
        if not self._chunks:
            return 0
        chunk = self._chunks.pop(0)
        assert len(chunk) <= size
        buf += chunk
        return len(chunk)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def foo_file() -> Path:
    """Fixture file whose contents are b'hello sha256'."""
    return FIXTURES / "foo.file"


@pytest.fixture()
def ramp_bytes() -> bytes:
    """4 KiB of 0x00..0xff repeated."""
    return bytes(v % 256 for v in range(0x1000))


@pytest.fixture()
def test_settings() -> Settings:
    """Settings that ignore any .env / environment overrides."""
    return Settings(engine="hashlib", chunk_size=1024, max_concurrent=4)
