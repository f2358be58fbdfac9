"""
Diagnostic key dump.

Given raw hex, a public-key StrKey or a seed StrKey, print the key in every
form we know. Interpretations are tried in order and the first that parses
wins; nothing here raises for unrecognised input.
"""

from __future__ import annotations

import string
from typing import Callable, Optional, TextIO

from ..curves import ed25519
from ..logger import get_logger
from ..serde import strkey
from ..serde.strkey import VersionByte
from .secret import SecretKey
from .types import PublicKey, from_key_version

log = get_logger(__name__)

_HEX_DIGITS = frozenset(string.hexdigits)
UNKNOWN_KEY = "Unknown key type\n"


def _public_key_lines(pk: PublicKey) -> list[str]:
    return [
        "PublicKey:",
        f"  strKey: {pk.to_strkey()}",
        f"  hex: {pk.hex()}",
    ]


def _secret_key_lines(sk: SecretKey) -> list[str]:
    return ["Seed:", f"  strKey: {sk.get_strkey_seed()}"] + _public_key_lines(
        sk.get_public_key()
    )


def _try_hex(key: str) -> Optional[list[str]]:
    # 32 bytes of hex: show it both as a public key and as a seed
    if len(key) != 2 * ed25519.PUBLIC_KEY_SIZE or not set(key) <= _HEX_DIGITS:
        return None
    data = bytes.fromhex(key)
    lines = _public_key_lines(PublicKey(data))
    with SecretKey.from_seed(data) as sk:
        lines += _secret_key_lines(sk)
    return lines


def _try_public(key: str) -> Optional[list[str]]:
    decoded = strkey.try_decode(key, (VersionByte.PUBKEY_ED25519,))
    if decoded is None:
        return None
    version, payload = decoded
    return _public_key_lines(PublicKey(payload, from_key_version(version)))


def _try_seed(key: str) -> Optional[list[str]]:
    decoded = strkey.try_decode(key, (VersionByte.SEED_ED25519,))
    if decoded is None:
        return None
    with SecretKey.from_seed(decoded[1]) as sk:
        return _secret_key_lines(sk)


_ATTEMPTS: tuple[tuple[str, Callable[[str], Optional[list[str]]]], ...] = (
    ("hex", _try_hex),
    ("public key", _try_public),
    ("seed", _try_seed),
)


def format_key(key: str) -> str:
    """Multi-line report for key, or "Unknown key type" if nothing matched."""
    key = key.strip()
    for name, attempt in _ATTEMPTS:
        lines = attempt(key)
        if lines is not None:
            log.debug("key interpreted as %s", name)
            return "\n".join(lines) + "\n"
    log.debug("key not recognised")
    return UNKNOWN_KEY


def log_key(stream: TextIO, key: str) -> None:
    stream.write(format_key(key))


__all__: tuple[str, ...] = ("UNKNOWN_KEY", "format_key", "log_key")
