"""
Error taxonomy for ledgerkeys.

Every exception raised on purpose by the library derives from LedgerKeysError
and carries a stable machine-readable ``code``. The builtin base classes are
kept so callers catching ValueError / RuntimeError keep working.
"""

from __future__ import annotations


class ErrorCodes:
    """Stable machine-readable error codes."""

    INVALID_INPUT = "INVALID_INPUT"
    MALFORMED_ENCODING = "MALFORMED_ENCODING"
    UNSUPPORTED_KEY_TYPE = "UNSUPPORTED_KEY_TYPE"
    INTERNAL_CRYPTO_ERROR = "INTERNAL_CRYPTO_ERROR"


class LedgerKeysError(Exception):
    """Base class for all ledgerkeys errors."""

    code: str = "LEDGERKEYS_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InvalidInputError(LedgerKeysError, ValueError):
    """Caller supplied a value of the wrong size or shape."""

    code = ErrorCodes.INVALID_INPUT


class MalformedEncodingError(LedgerKeysError, ValueError):
    """A StrKey text failed to decode (checksum, version or length)."""

    code = ErrorCodes.MALFORMED_ENCODING


class UnsupportedKeyTypeError(LedgerKeysError, NotImplementedError):
    """Operation requested for a key type that is not implemented."""

    code = ErrorCodes.UNSUPPORTED_KEY_TYPE


class InternalCryptoError(LedgerKeysError, RuntimeError):
    """
    The signature primitive failed on input it must always accept.

    Indicates a broken environment (corrupted memory, bad libsodium build).
    Never caught inside the library.
    """

    code = ErrorCodes.INTERNAL_CRYPTO_ERROR


__all__: tuple[str, ...] = (
    "ErrorCodes",
    "LedgerKeysError",
    "InvalidInputError",
    "MalformedEncodingError",
    "UnsupportedKeyTypeError",
    "InternalCryptoError",
)
