"""SHA-256 digests of text, bytes and files, blocking or on the asyncio loop."""

from sha256_digest.async_calc import async_calc
from sha256_digest.calc import CHUNK_SIZE, calc
from sha256_digest.digest import (
    async_cryptography_digest_from_path,
    async_digest_from_path,
    cryptography_digest_from_path,
    digest,
    digest_from_path,
)
from sha256_digest.engine import (
    DIGEST_SIZE,
    CryptographyEngine,
    Engine,
    EngineFinishedError,
    HashlibEngine,
)
from sha256_digest.inputs import (
    AsyncFileInput,
    AsyncInput,
    BytesInput,
    Input,
    ReaderInput,
    StreamReaderInput,
)

__all__ = [
    "CHUNK_SIZE",
    "DIGEST_SIZE",
    "AsyncFileInput",
    "AsyncInput",
    "BytesInput",
    "CryptographyEngine",
    "Engine",
    "EngineFinishedError",
    "HashlibEngine",
    "Input",
    "ReaderInput",
    "StreamReaderInput",
    "async_calc",
    "async_cryptography_digest_from_path",
    "async_digest_from_path",
    "calc",
    "cryptography_digest_from_path",
    "digest",
    "digest_from_path",
]
