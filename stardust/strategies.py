"""Strategies that evolve simulated telemetry field values."""

from __future__ import annotations

import abc
import enum
import math
import random
import struct


class FieldType(enum.Enum):
    """Fixed-width numeric field types, valued by their struct format code."""

    UINT8 = "B"
    INT8 = "b"
    UINT16 = "H"
    INT16 = "h"
    UINT32 = "I"
    INT32 = "i"
    FLOAT32 = "f"
    FLOAT64 = "d"

    @property
    def format(self) -> str:
        return self.value

    @property
    def size(self) -> int:
        return struct.calcsize("<" + self.value)

    @property
    def is_float(self) -> bool:
        return self in (FieldType.FLOAT32, FieldType.FLOAT64)

    @property
    def is_signed(self) -> bool:
        return self.value.islower()

    def coerce(self, value: float) -> int | float:
        """Convert ``value`` to what this type can hold, wrapping integers."""
        if self is FieldType.FLOAT64:
            return float(value)
        if self is FieldType.FLOAT32:
            try:
                return struct.unpack("<f", struct.pack("<f", float(value)))[0]
            except OverflowError:
                return math.copysign(math.inf, value)
        bits = self.size * 8
        wrapped = int(value) & ((1 << bits) - 1)
        if self.is_signed and wrapped >= 1 << (bits - 1):
            wrapped -= 1 << bits
        return wrapped


class SimulationStrategy(abc.ABC):
    """Produces the next value of a telemetry field."""

    @abc.abstractmethod
    def apply(self, value: int | float, field_type: FieldType) -> int | float:
        """Return the field's next value."""


class IncrementalStrategy(SimulationStrategy):
    """Adds one to the value, wrapping as the field type does."""

    def apply(self, value: int | float, field_type: FieldType) -> int | float:
        return field_type.coerce(value + 1)


class RandomNoiseStrategy(SimulationStrategy):
    """Replaces the value with a uniform random integer in [0, 100]."""

    LOW = 0
    HIGH = 100

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def apply(self, value: int | float, field_type: FieldType) -> int | float:
        return field_type.coerce(self._rng.randint(self.LOW, self.HIGH))