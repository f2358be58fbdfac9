"""
Memoized Ed25519 signature verification.

Verification is a pure function of (public key, signature, message), so its
result can be cached centrally with no effect on correctness. The cache key
is SHA-256(public key || signature || message).

The lock is held only around cache lookups and inserts, never across the
libsodium verify call. Two threads missing on the same triple will both
verify it; the second insert simply overwrites an identical value.
"""

from __future__ import annotations

import threading
from typing import Callable, Optional

from ..config import Settings, load_settings
from ..curves import ed25519
from ..errors import UnsupportedKeyTypeError
from ..hashes import SHA256
from ..keys.types import KeyType, PublicKey, Signature
from ..logger import get_logger
from .lru import LRUCache

log = get_logger(__name__)

DEFAULT_CAPACITY = 0xFFFF


def verify_sig_cache_key(
    key: PublicKey,
    signature: Signature,
    message: bytes,
    hasher: Optional[SHA256] = None,
) -> bytes:
    """Digest of public key bytes, signature bytes and message, in that order."""
    if key.key_type != KeyType.ED25519:
        raise UnsupportedKeyTypeError(f"unsupported key type {key.key_type!r}")
    h = hasher if hasher is not None else SHA256()
    h.reset()
    h.add(key.value)
    h.add(signature)
    h.add(message)
    return h.finish()


class VerificationCache:
    """
    Thread-safe LRU of verification outcomes with hit/miss counters.

    Args:
        capacity: Maximum number of cached outcomes.
        verifier: Detached verify primitive, ``(signature, message, public_key) -> bool``.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        verifier: Callable[[bytes, bytes, bytes], bool] = ed25519.verify_detached,
    ) -> None:
        self._cache: LRUCache[bytes, bool] = LRUCache(capacity)
        self._lock = threading.Lock()
        self._verifier = verifier
        self._hits = 0
        self._misses = 0
        log.debug("verification cache created with capacity %d", capacity)

    @property
    def capacity(self) -> int:
        return self._cache.capacity

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def lookup(self, key: bytes) -> Optional[bool]:
        with self._lock:
            return self._cache.get(key)

    def insert(self, key: bytes, value: bool) -> None:
        with self._lock:
            self._cache.put(key, value)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()
        log.debug("verification cache cleared")

    def flush_counts(self) -> tuple[int, int]:
        """Atomically read and reset the (hits, misses) counters."""
        with self._lock:
            hits, misses = self._hits, self._misses
            self._hits = 0
            self._misses = 0
        log.debug("verification cache counts flushed: hits=%d misses=%d", hits, misses)
        return hits, misses

    def verify(self, key: PublicKey, signature: Signature, message: bytes) -> bool:
        """
        Verify signature over message, consulting the cache first.

        A signature of the wrong length is simply invalid: False is returned
        without touching the cache or counters.
        """
        if len(signature) != ed25519.SIGNATURE_SIZE:
            return False

        cache_key = verify_sig_cache_key(key, signature, message)

        with self._lock:
            cached = self._cache.get(cache_key)
            if cached is not None:
                self._hits += 1
                return cached
            self._misses += 1

        ok = self._verifier(signature, message, key.value)
        with self._lock:
            self._cache.put(cache_key, ok)
        return ok


_default_lock = threading.Lock()
_default_cache: Optional[VerificationCache] = None


def get_default_cache(settings: Optional[Settings] = None) -> VerificationCache:
    """Process-wide cache, created on first use from settings (or the environment)."""
    global _default_cache
    with _default_lock:
        if _default_cache is None:
            settings = settings if settings is not None else load_settings()
            _default_cache = VerificationCache(settings.verify_cache_size)
        return _default_cache


def set_default_cache(cache: Optional[VerificationCache]) -> None:
    """Replace the process-wide cache; None means rebuild lazily on next use."""
    global _default_cache
    with _default_lock:
        _default_cache = cache


def verify_signature(
    key: PublicKey,
    signature: Signature,
    message: bytes,
    cache: Optional[VerificationCache] = None,
) -> bool:
    """
    Verify an Ed25519 signature through the verification cache.

    Returns exactly what uncached verification would return.
    """
    return (cache if cache is not None else get_default_cache()).verify(
        key, signature, message
    )


def clear_verify_sig_cache(cache: Optional[VerificationCache] = None) -> None:
    (cache if cache is not None else get_default_cache()).clear()


def flush_verify_sig_cache_counts(
    cache: Optional[VerificationCache] = None,
) -> tuple[int, int]:
    """(hits, misses) since the last flush; resets both to zero."""
    return (cache if cache is not None else get_default_cache()).flush_counts()


__all__: tuple[str, ...] = (
    "DEFAULT_CAPACITY",
    "VerificationCache",
    "clear_verify_sig_cache",
    "flush_verify_sig_cache_counts",
    "get_default_cache",
    "set_default_cache",
    "verify_sig_cache_key",
    "verify_signature",
)
