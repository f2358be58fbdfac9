"""Signature verification: memoizing cache in front of the Ed25519 primitive."""

from .cache import (DEFAULT_CAPACITY, VerificationCache,
                    clear_verify_sig_cache, flush_verify_sig_cache_counts,
                    get_default_cache, set_default_cache,
                    verify_sig_cache_key, verify_signature)
from .lru import LRUCache

__all__: tuple[str, ...] = (
    "DEFAULT_CAPACITY",
    "LRUCache",
    "VerificationCache",
    "clear_verify_sig_cache",
    "flush_verify_sig_cache_counts",
    "get_default_cache",
    "set_default_cache",
    "verify_sig_cache_key",
    "verify_signature",
)
