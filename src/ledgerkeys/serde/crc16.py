"""
CRC16-XModem (poly 0x1021, init 0, no reflection). Pure Python, table driven.
"""

from __future__ import annotations

_POLY = 0x1021


def _make_table() -> tuple[int, ...]:
    table = []
    for byte in range(256):
        crc = byte << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = ((crc << 1) ^ _POLY) & 0xFFFF
            else:
                crc = (crc << 1) & 0xFFFF
        table.append(crc)
    return tuple(table)


_TABLE = _make_table()


def crc16_xmodem(data: bytes, crc: int = 0) -> int:
    """
    CRC16-XModem checksum.

    Args:
        data: Input bytes.
        crc: Running value when checksumming in pieces.

    Returns:
        16-bit checksum (0x31C3 for b"123456789").
    """
    for b in data:
        crc = ((crc << 8) & 0xFFFF) ^ _TABLE[((crc >> 8) ^ b) & 0xFF]
    return crc


__all__: tuple[str, ...] = ("crc16_xmodem",)
