"""
Authenticated-identity primitives for ledger nodes: Ed25519 keys with
erasable secret material, StrKey text encoding, and a memoized, thread-safe
signature-verification path.
"""

from .__about__ import __version__
from .curves import (PUBLIC_KEY_SIZE, SECRET_KEY_SIZE, SEED_SIZE,
                     SIGNATURE_SIZE)
from .errors import (InternalCryptoError, InvalidInputError, LedgerKeysError,
                     MalformedEncodingError, UnsupportedKeyTypeError)
from .hashes import SHA256, sha256
from .keys import (KeyType, PublicKey, SecretKey, Seed, Signature, format_key,
                   log_key)
from .serde import VersionByte, crc16_xmodem, strkey_size
from .serde import decode as strkey_decode
from .serde import encode as strkey_encode
from .signing import (LRUCache, VerificationCache, clear_verify_sig_cache,
                      flush_verify_sig_cache_counts, get_default_cache,
                      set_default_cache, verify_sig_cache_key,
                      verify_signature)

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Sizes
    "PUBLIC_KEY_SIZE",
    "SECRET_KEY_SIZE",
    "SEED_SIZE",
    "SIGNATURE_SIZE",
    # Errors
    "InternalCryptoError",
    "InvalidInputError",
    "LedgerKeysError",
    "MalformedEncodingError",
    "UnsupportedKeyTypeError",
    # Hashes
    "SHA256",
    "sha256",
    # Keys
    "KeyType",
    "PublicKey",
    "SecretKey",
    "Seed",
    "Signature",
    "format_key",
    "log_key",
    # Serde: StrKey
    "VersionByte",
    "crc16_xmodem",
    "strkey_decode",
    "strkey_encode",
    "strkey_size",
    # Signing: cached verification
    "LRUCache",
    "VerificationCache",
    "clear_verify_sig_cache",
    "flush_verify_sig_cache_counts",
    "get_default_cache",
    "set_default_cache",
    "verify_sig_cache_key",
    "verify_signature",
)
