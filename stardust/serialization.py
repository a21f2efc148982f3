"""Big-endian helpers for the 16-bit words used in packet headers."""

from __future__ import annotations

_WORD_MASK = 0xFFFF


def write_big_endian16(value: int) -> bytes:
    """Encode the low 16 bits of ``value`` as two big-endian bytes."""
    return (value & _WORD_MASK).to_bytes(2, "big")


def read_big_endian16(data: bytes | bytearray | memoryview) -> int:
    """Decode a big-endian 16-bit word from the first two bytes of ``data``."""
    if len(data) < 2:
        raise ValueError(f"need at least 2 bytes, got {len(data)}")
    return (data[0] << 8) | data[1]