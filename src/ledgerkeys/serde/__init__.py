"""Serialization / deserialization (serde): StrKey text encoding."""

from .crc16 import crc16_xmodem
from .strkey import (PAYLOAD_SIZES, VersionByte, decode, encode, strkey_size,
                     try_decode)

__all__: tuple[str, ...] = (
    "PAYLOAD_SIZES",
    "VersionByte",
    "crc16_xmodem",
    "decode",
    "encode",
    "strkey_size",
    "try_decode",
)
