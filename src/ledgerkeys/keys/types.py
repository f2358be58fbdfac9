"""Public key type tags and the PublicKey value object."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Optional

from ..curves import ed25519
from ..errors import InvalidInputError, MalformedEncodingError, UnsupportedKeyTypeError
from ..hashes import digest_hash
from ..serde import strkey
from ..serde.strkey import VersionByte

if TYPE_CHECKING:
    from ..signing.cache import VerificationCache

# Detached Ed25519 signature, 64 bytes when well-formed.
Signature = bytes


class KeyType(IntEnum):
    ED25519 = 0


def check_key_type(key_type: int) -> KeyType:
    """Return key_type as a KeyType or raise UnsupportedKeyTypeError."""
    try:
        return KeyType(key_type)
    except ValueError:
        raise UnsupportedKeyTypeError(f"unsupported key type {key_type!r}") from None


def to_key_version(key_type: int) -> VersionByte:
    """StrKey version byte used for public keys of key_type."""
    if key_type == KeyType.ED25519:
        return VersionByte.PUBKEY_ED25519
    raise UnsupportedKeyTypeError(f"invalid public key type {key_type!r}")


def from_key_version(version: int) -> KeyType:
    """Key type for a public-key StrKey version byte."""
    if version == VersionByte.PUBKEY_ED25519:
        return KeyType.ED25519
    raise UnsupportedKeyTypeError(f"invalid public key version byte {version!r}")


@dataclass(frozen=True, eq=True)
class PublicKey:
    """Ed25519 public key. Compared and hashed by its raw bytes."""

    value: bytes
    key_type: KeyType = KeyType.ED25519

    def __post_init__(self) -> None:
        object.__setattr__(self, "key_type", check_key_type(self.key_type))
        if not isinstance(self.value, (bytes, bytearray, memoryview)):
            raise InvalidInputError("public key value must be bytes")
        value = bytes(self.value)
        if len(value) != ed25519.PUBLIC_KEY_SIZE:
            raise InvalidInputError(
                f"public key must be {ed25519.PUBLIC_KEY_SIZE} bytes, got {len(value)}"
            )
        object.__setattr__(self, "value", value)

    def __hash__(self) -> int:
        return digest_hash(self.value)

    def __bytes__(self) -> bytes:
        return self.value

    def hex(self) -> str:
        return self.value.hex()

    def to_strkey(self) -> str:
        return strkey.encode(to_key_version(self.key_type), self.value)

    @classmethod
    def from_strkey(cls, text: str) -> "PublicKey":
        """
        Parse a public-key StrKey ("G...").

        Raises:
            MalformedEncodingError: text is not a valid public-key StrKey.
        """
        decoded = strkey.try_decode(text, (VersionByte.PUBKEY_ED25519,))
        if decoded is None:
            raise MalformedEncodingError("bad public key")
        version, payload = decoded
        return cls(payload, from_key_version(version))

    @classmethod
    def random(cls) -> "PublicKey":
        """Random bytes shaped like a public key; not guaranteed to be on the curve."""
        return cls(ed25519.random_bytes(ed25519.PUBLIC_KEY_SIZE))

    def verify(
        self,
        signature: Signature,
        message: bytes,
        cache: Optional["VerificationCache"] = None,
    ) -> bool:
        from ..signing.cache import verify_signature

        return verify_signature(self, signature, message, cache=cache)

    def __str__(self) -> str:
        return self.to_strkey()


__all__: tuple[str, ...] = (
    "KeyType",
    "PublicKey",
    "Signature",
    "check_key_type",
    "from_key_version",
    "to_key_version",
)
