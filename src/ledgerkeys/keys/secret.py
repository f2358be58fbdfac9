"""
Secret-bearing key material: SecretKey and Seed.

Both own a private bytearray that is overwritten with zeros when the value is
wiped. Wiping happens on ``wipe()``, on leaving a ``with`` block (normal exit
or exception) and, as a last resort, when the object is garbage collected.
Use the context manager form so erasure does not depend on the collector:

    with SecretKey.random() as sk:
        sig = sk.sign(b"hello")
        pk = sk.get_public_key()

Neither type can be pickled or copied; the raw bytes are only reachable
through the derivation methods.
"""

from __future__ import annotations

import hmac
from typing import Any, Optional

from ..curves import ed25519
from ..errors import InvalidInputError, MalformedEncodingError
from ..serde import strkey
from ..serde.strkey import VersionByte
from .types import KeyType, PublicKey, Signature, check_key_type


def _zero(buf: bytearray) -> None:
    buf[:] = bytes(len(buf))


class _Wiped:
    """Owner of a fixed-size secret buffer that is zeroed on every exit path."""

    _size: int = 0

    def __init__(self, key_type: int = KeyType.ED25519) -> None:
        self._key_type = check_key_type(key_type)
        self._buf = bytearray(self._size)

    @property
    def key_type(self) -> KeyType:
        return self._key_type

    def wipe(self) -> None:
        _zero(self._buf)

    def is_zero(self) -> bool:
        """True iff every byte of the storage is zero (e.g. uninitialised or wiped)."""
        for b in self._buf:
            if b != 0:
                return False
        return True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.wipe()

    def __del__(self) -> None:
        buf = getattr(self, "_buf", None)
        if buf is not None:
            _zero(buf)

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key_type == other._key_type and hmac.compare_digest(
            self._buf, other._buf
        )

    __hash__ = None  # type: ignore[assignment]

    def __reduce_ex__(self, protocol):
        raise TypeError(f"{type(self).__name__} cannot be pickled")

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key_type={self._key_type.name}, <redacted>)"


class Seed(_Wiped):
    """32-byte Ed25519 seed; determines exactly one key pair."""

    _size = ed25519.SEED_SIZE

    def __init__(self, value: Optional[bytes] = None, key_type: int = KeyType.ED25519) -> None:
        super().__init__(key_type)
        if value is not None:
            if len(value) != self._size:
                raise InvalidInputError(
                    f"seed must be {self._size} bytes, got {len(value)}"
                )
            self._buf[:] = value

    def to_strkey(self) -> str:
        return strkey.encode(VersionByte.SEED_ED25519, bytes(self._buf))

    def to_secret_key(self) -> "SecretKey":
        return SecretKey.from_seed(self._buf)


class SecretKey(_Wiped):
    """64-byte expanded Ed25519 secret key (seed || public key)."""

    _size = ed25519.SECRET_KEY_SIZE

    @classmethod
    def random(cls) -> "SecretKey":
        """New secret key from libsodium's keypair generator."""
        sk = cls()
        _, raw = ed25519.keypair()
        sk._buf[:] = raw
        return sk

    @classmethod
    def from_seed(cls, seed: bytes | bytearray | memoryview) -> "SecretKey":
        """
        Deterministic secret key from a 32-byte seed.

        Raises:
            InvalidInputError: seed is not exactly 32 bytes.
        """
        if len(seed) != ed25519.SEED_SIZE:
            raise InvalidInputError("seed does not match byte size")
        sk = cls()
        _, raw = ed25519.seed_keypair(bytes(seed))
        sk._buf[:] = raw
        return sk

    @classmethod
    def from_strkey_seed(cls, text: str) -> "SecretKey":
        """
        Secret key from a seed StrKey ("S...").

        Raises:
            MalformedEncodingError: text is not a valid seed StrKey.
        """
        decoded = strkey.try_decode(text, (VersionByte.SEED_ED25519,))
        if decoded is None or len(text) != strkey.strkey_size(ed25519.SEED_SIZE):
            raise MalformedEncodingError("invalid seed")
        seed = bytearray(decoded[1])
        try:
            return cls.from_seed(seed)
        finally:
            _zero(seed)

    def get_public_key(self) -> PublicKey:
        return PublicKey(ed25519.sk_to_pk(bytes(self._buf)), self._key_type)

    def get_seed(self) -> Seed:
        raw = bytearray(ed25519.sk_to_seed(bytes(self._buf)))
        try:
            return Seed(raw, self._key_type)
        finally:
            _zero(raw)

    def get_strkey_seed(self) -> str:
        with self.get_seed() as seed:
            return seed.to_strkey()

    def get_strkey_public(self) -> str:
        return self.get_public_key().to_strkey()

    def sign(self, message: bytes) -> Signature:
        """Deterministic detached Ed25519 signature of message. Not cached."""
        return ed25519.sign_detached(message, bytes(self._buf))


__all__: tuple[str, ...] = ("SecretKey", "Seed")
