"""Hash engine protocol and the two SHA-256 implementations."""

from __future__ import annotations

import hashlib
from typing import Callable, Protocol, Union, runtime_checkable

from cryptography.hazmat.primitives import hashes

DIGEST_SIZE = 32

Buffer = Union[bytes, bytearray, memoryview]


# ---------------------------------------------------------------------------
# Protocol
# ---------------------------------------------------------------------------


@runtime_checkable
class Engine(Protocol):
    def update(self, data: Buffer) -> None: ...

    def finish(self) -> bytes: ...


EngineFactory = Callable[[], Engine]


class EngineFinishedError(RuntimeError):
    """Raised when an engine is used after finish() consumed it."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} engine already finished")


# ---------------------------------------------------------------------------
# hashlib implementation (default)
# ---------------------------------------------------------------------------


class HashlibEngine:
    """SHA-256 via the standard library's ``hashlib``."""

    name = "hashlib"

    def __init__(self) -> None:
        self._hash: hashlib._Hash | None = hashlib.sha256()

    def update(self, data: Buffer) -> None:
        if self._hash is None:
            raise EngineFinishedError(self.name)
        self._hash.update(data)

    def finish(self) -> bytes:
        if self._hash is None:
            raise EngineFinishedError(self.name)
        h, self._hash = self._hash, None
        return h.digest()


# ---------------------------------------------------------------------------
# cryptography implementation (alternate)
# ---------------------------------------------------------------------------


class CryptographyEngine:
    """SHA-256 via ``cryptography``'s hazmat hash context.

    The context refuses further use after ``finalize()``; that case is
    surfaced as ``EngineFinishedError`` like the default engine.
    """

    name = "cryptography"

    def __init__(self) -> None:
        self._ctx: hashes.Hash | None = hashes.Hash(hashes.SHA256())

    def update(self, data: Buffer) -> None:
        if self._ctx is None:
            raise EngineFinishedError(self.name)
        self._ctx.update(data)

    def finish(self) -> bytes:
        if self._ctx is None:
            raise EngineFinishedError(self.name)
        ctx, self._ctx = self._ctx, None
        return ctx.finalize()


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

ENGINES: dict[str, type[HashlibEngine] | type[CryptographyEngine]] = {
    HashlibEngine.name: HashlibEngine,
    CryptographyEngine.name: CryptographyEngine,
}


def get_engine(name: str) -> EngineFactory:
    """Look up an engine class by its configured name."""
    try:
        return ENGINES[name]
    except KeyError:
        raise ValueError(f"Unknown engine '{name}' (expected one of: {', '.join(ENGINES)})") from None
