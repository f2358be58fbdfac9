"""Hash functions: SHA-256 digest provider."""

from .sha256 import DIGEST_SIZE, SHA256, digest_hash, random_hash, sha256

__all__: tuple[str, ...] = (
    "DIGEST_SIZE",
    "SHA256",
    "digest_hash",
    "random_hash",
    "sha256",
)
