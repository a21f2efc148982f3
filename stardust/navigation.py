"""Navigation subsystem that simulates telemetry and emits space packets."""

from __future__ import annotations

import struct
import threading
import time
from dataclasses import dataclass, fields

from stardust.ccsds import Packet, PrimaryHeader, SecondaryHeader
from stardust.logger import Level, log, log_buffer
from stardust.strategies import (
    FieldType,
    IncrementalStrategy,
    RandomNoiseStrategy,
    SimulationStrategy,
)
from stardust.threads import Subsystem

NAVIGATION_APID = 42
LOG_BYTES = 12


@dataclass
class NavigationTelemetry:
    """Current values of every navigation telemetry field, in wire order."""

    system_status: int = 0
    nav_mode: int = 0
    target_distance_m: int = 0
    relative_velocity_mps: int = 0
    yaw_rate_dps: int = 0
    pitch_rate_dps: int = 0
    roll_rate_dps: int = 0
    engine_temp_c: float = 0.0
    gyro_drift_ppm: float = 0.0
    hyperdrive_charge_pct: int = 0
    course_correction_x_m: float = 0.0
    course_correction_y_m: float = 0.0
    course_correction_z_m: float = 0.0
    positional_error_m: float = 0.0
    checksum: int = 0


FIELD_TYPES: dict[str, FieldType] = {
    "system_status": FieldType.UINT8,
    "nav_mode": FieldType.UINT8,
    "target_distance_m": FieldType.UINT32,
    "relative_velocity_mps": FieldType.INT32,
    "yaw_rate_dps": FieldType.INT16,
    "pitch_rate_dps": FieldType.INT16,
    "roll_rate_dps": FieldType.INT16,
    "engine_temp_c": FieldType.FLOAT32,
    "gyro_drift_ppm": FieldType.FLOAT32,
    "hyperdrive_charge_pct": FieldType.UINT8,
    "course_correction_x_m": FieldType.FLOAT64,
    "course_correction_y_m": FieldType.FLOAT64,
    "course_correction_z_m": FieldType.FLOAT64,
    "positional_error_m": FieldType.FLOAT32,
    "checksum": FieldType.UINT16,
}

_FIELD_NAMES = tuple(f.name for f in fields(NavigationTelemetry))
# Fields are packed back to back, little-endian, with no padding.
_PACK_FORMAT = "<" + "".join(FIELD_TYPES[name].format for name in _FIELD_NAMES)


class NavigationSubsystem(Subsystem):
    """Simulates navigation telemetry and emits one packet per interval."""

    def __init__(self, running: threading.Event) -> None:
        self.running = running
        self.interval = 1.0
        self.telemetry = NavigationTelemetry()
        self.primary_header = PrimaryHeader.telemetry(NAVIGATION_APID)
        default_strategy = IncrementalStrategy()
        self._models: dict[str, SimulationStrategy | None] = {
            name: default_strategy for name in _FIELD_NAMES
        }

    def set_field_model(
        self, field_name: str, strategy: SimulationStrategy | None
    ) -> None:
        """Use ``strategy`` for ``field_name``; ``None`` freezes the field."""
        if field_name not in self._models:
            raise ValueError(f"Unknown field name: {field_name}")
        self._models[field_name] = strategy

    def simulate(self) -> None:
        """Advance every field that has a strategy by one step."""
        for name, strategy in self._models.items():
            if strategy is not None:
                current = getattr(self.telemetry, name)
                setattr(self.telemetry, name, strategy.apply(current, FIELD_TYPES[name]))

    def pack_telemetry(self) -> bytes:
        """Encode the telemetry fields in order as little-endian bytes."""
        values = (
            FIELD_TYPES[name].coerce(getattr(self.telemetry, name))
            for name in _FIELD_NAMES
        )
        return struct.pack(_PACK_FORMAT, *values)

    def build_packet(self) -> bytes:
        """Step the simulation and return the next serialized packet."""
        secondary = SecondaryHeader.now()
        self.primary_header.increment_sequence_count()
        self.simulate()
        packet = Packet(self.primary_header, secondary, self.pack_telemetry())
        return packet.serialize()

    def run(self) -> None:
        """Emit packets while the running flag is set."""
        random_strategy = RandomNoiseStrategy()
        self.set_field_model("engine_temp_c", random_strategy)
        self.set_field_model("yaw_rate_dps", random_strategy)

        while self.running.is_set():
            serialized = self.build_packet()
            log_buffer(Level.WARN, serialized, LOG_BYTES)
            time.sleep(self.interval)

        log(Level.WARN, "Stopping NavigationSubsystem thread")