"""
StrKey: versioned, checksummed base32 text for keys and seeds.

    text = base32(version || payload || crc16_xmodem(version || payload))

with the checksum little-endian and base32 padding stripped. A 32-byte
payload always encodes to 56 characters.
"""

from __future__ import annotations

import base64
import binascii
from enum import IntEnum
from typing import Iterable, Optional

from ..errors import InvalidInputError, MalformedEncodingError
from .crc16 import crc16_xmodem

_CHECKSUM_SIZE = 2
_B32_ALPHABET = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ234567")
# Number of base32 characters mod 8 that cannot occur in unpadded output.
_IMPOSSIBLE_TAILS = frozenset((1, 3, 6))


class VersionByte(IntEnum):
    PUBKEY_ED25519 = 6 << 3  # 'G'
    SEED_ED25519 = 18 << 3  # 'S'


PAYLOAD_SIZES: dict[VersionByte, int] = {
    VersionByte.PUBKEY_ED25519: 32,
    VersionByte.SEED_ED25519: 32,
}


def strkey_size(payload_len: int) -> int:
    """Length in characters of the StrKey text for a payload of payload_len bytes."""
    return ((payload_len + 1 + _CHECKSUM_SIZE) * 8 + 4) // 5


def encode(version: int, payload: bytes) -> str:
    """
    Encode (version, payload) to StrKey text.

    Args:
        version: Version byte (0..255); normally a VersionByte.
        payload: Raw payload bytes.

    Returns:
        Upper-case base32 text without padding.
    """
    if not 0 <= int(version) <= 0xFF:
        raise InvalidInputError(f"version byte out of range: {version}")
    raw = bytes([int(version)]) + bytes(payload)
    raw += crc16_xmodem(raw).to_bytes(_CHECKSUM_SIZE, "little")
    return base64.b32encode(raw).decode("ascii").rstrip("=")


def _unpack(text: str) -> Optional[tuple[int, bytes]]:
    """Base32 + checksum layer. None on any structural failure."""
    if not isinstance(text, str) or not text:
        return None
    if any(c not in _B32_ALPHABET for c in text):
        return None
    if len(text) % 8 in _IMPOSSIBLE_TAILS:
        return None
    padded = text + "=" * (-len(text) % 8)
    try:
        raw = base64.b32decode(padded)
    except binascii.Error:
        return None
    # reject texts whose unused trailing bits are set
    if base64.b32encode(raw).decode("ascii").rstrip("=") != text:
        return None
    if len(raw) < 1 + _CHECKSUM_SIZE:
        return None
    body, checksum = raw[:-_CHECKSUM_SIZE], raw[-_CHECKSUM_SIZE:]
    if crc16_xmodem(body) != int.from_bytes(checksum, "little"):
        return None
    return body[0], body[1:]


def _accept(
    unpacked: tuple[int, bytes], versions: Optional[Iterable[int]]
) -> Optional[tuple[VersionByte, bytes]]:
    version, payload = unpacked
    accepted = set(VersionByte) if versions is None else {int(v) for v in versions}
    if version not in accepted or version not in PAYLOAD_SIZES:
        return None
    ver = VersionByte(version)
    if len(payload) != PAYLOAD_SIZES[ver]:
        return None
    return ver, payload


def try_decode(
    text: str, versions: Optional[Iterable[int]] = None
) -> Optional[tuple[VersionByte, bytes]]:
    """
    Decode StrKey text, returning None instead of raising.

    Args:
        text: StrKey text.
        versions: Accepted version bytes (default: every VersionByte).

    Returns:
        (version, payload) or None if the text is malformed, has an
        unaccepted version, or the payload length does not match the version.
    """
    unpacked = _unpack(text)
    if unpacked is None:
        return None
    return _accept(unpacked, versions)


def decode(
    text: str, versions: Optional[Iterable[int]] = None
) -> tuple[VersionByte, bytes]:
    """
    Decode StrKey text into (version, payload).

    Raises:
        MalformedEncodingError: bad characters or length, checksum mismatch,
            unaccepted version, or wrong payload length for the version.
    """
    unpacked = _unpack(text)
    if unpacked is None:
        raise MalformedEncodingError("invalid StrKey encoding or checksum")
    result = _accept(unpacked, versions)
    if result is None:
        raise MalformedEncodingError(
            f"unexpected StrKey version byte {unpacked[0]} "
            f"or payload length {len(unpacked[1])}"
        )
    return result


__all__: tuple[str, ...] = (
    "PAYLOAD_SIZES",
    "VersionByte",
    "decode",
    "encode",
    "strkey_size",
    "try_decode",
)
