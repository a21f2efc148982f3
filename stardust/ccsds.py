"""CCSDS space packet headers and packets."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import ClassVar

from stardust.serialization import write_big_endian16

BATTLE_OF_YAVIN_UNIX_EPOCH = 233366400
_U64_MASK = (1 << 64) - 1


@dataclass
class PrimaryHeader:
    """The six-byte CCSDS primary header."""

    apid: int = 0
    version: int = 0
    packet_type: int = 0
    secondary_header_flag: int = 1
    sequence_flags: int = 3  # standalone packet
    sequence_count: int = 0

    SIZE: ClassVar[int] = 6

    @classmethod
    def telemetry(cls, apid: int) -> "PrimaryHeader":
        """Create a telemetry packet header for ``apid``."""
        return cls(apid=apid)

    def increment_sequence_count(self) -> None:
        """Advance the sequence count, wrapping at 14 bits."""
        self.sequence_count = (self.sequence_count + 1) & 0x3FFF

    def serialize(self, data_length: int) -> bytes:
        """Encode the header with the given packet data length field."""
        word1 = (
            ((self.version & 0x07) << 13)
            | ((self.packet_type & 0x01) << 12)
            | ((self.secondary_header_flag & 0x01) << 11)
            | (self.apid & 0x07FF)
        )
        word2 = ((self.sequence_flags & 0x03) << 14) | (self.sequence_count & 0x3FFF)
        return (
            write_big_endian16(word1)
            + write_big_endian16(word2)
            + write_big_endian16(data_length)
        )


@dataclass
class SecondaryHeader:
    """The eight-byte secondary header holding a big-endian epoch."""

    epoch: int = 0

    SIZE: ClassVar[int] = 8

    @classmethod
    def now(cls) -> "SecondaryHeader":
        """Create a header stamped with seconds since the mission epoch."""
        unix_seconds = int(time.time())
        return cls(epoch=(unix_seconds - BATTLE_OF_YAVIN_UNIX_EPOCH) & _U64_MASK)

    def serialize(self) -> bytes:
        return (self.epoch & _U64_MASK).to_bytes(self.SIZE, "big")


@dataclass
class Packet:
    """A complete packet: primary header, secondary header and user data."""

    primary: PrimaryHeader
    secondary: SecondaryHeader
    data: bytes = field(default=b"")

    def __post_init__(self) -> None:
        self.data = bytes(self.data)

    def serialize(self) -> bytes:
        secondary_bytes = self.secondary.serialize()
        data_length = (len(secondary_bytes) + len(self.data) - 1) & 0xFFFF
        return self.primary.serialize(data_length) + secondary_bytes + self.data