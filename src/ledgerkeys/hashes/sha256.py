"""
SHA-256 digest provider. Thin wrapper over stdlib hashlib with a
reset/add/finish interface so one hasher can be reused across inputs.
"""

from __future__ import annotations

import hashlib

from ..curves import ed25519

DIGEST_SIZE = 32


class SHA256:
    """Resettable incremental SHA-256."""

    def __init__(self) -> None:
        self._ctx = hashlib.sha256()
        self._finished = False

    @classmethod
    def create(cls) -> "SHA256":
        return cls()

    def reset(self) -> None:
        self._ctx = hashlib.sha256()
        self._finished = False

    def add(self, data: bytes | bytearray | memoryview) -> None:
        if self._finished:
            raise RuntimeError("add() called on finished SHA256")
        self._ctx.update(data)

    def finish(self) -> bytes:
        """Return the 32-byte digest. The hasher must be reset before reuse."""
        if self._finished:
            raise RuntimeError("finish() called twice on SHA256")
        self._finished = True
        return self._ctx.digest()


def sha256(data: bytes | bytearray | memoryview) -> bytes:
    """
    SHA-256 of raw bytes.

    Args:
        data: Input bytes (any length).

    Returns:
        32-byte digest.
    """
    return hashlib.sha256(data).digest()


def random_hash() -> bytes:
    """32 random bytes shaped like a digest (for tests and placeholders)."""
    return ed25519.random_bytes(DIGEST_SIZE)


def digest_hash(digest: bytes) -> int:
    """Bucket hash of a digest: its first four bytes, big-endian."""
    return int.from_bytes(digest[:4], "big")


__all__: tuple[str, ...] = (
    "DIGEST_SIZE",
    "SHA256",
    "digest_hash",
    "random_hash",
    "sha256",
)
