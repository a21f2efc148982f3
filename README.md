# stardust

A small telemetry simulator for a spacecraft navigation subsystem. Once a
second it advances a set of simulated navigation readings, packs them into a
little-endian binary payload with no padding, and wraps them in a CCSDS space
packet: a 6-byte primary header, an 8-byte secondary header holding a time
stamp, and the telemetry data.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running the simulator

```
stardust
```

The command starts the navigation subsystem (APID 42) on a background thread.
For every packet it prints the first 12 bytes as a hex dump followed by the
packet's total size. In this mode the `engine_temp_c` and `yaw_rate_dps`
fields take random values; every other field counts up by one per cycle.

Press ENTER to stop it. The thread finishes its current cycle, prints
`Stopping NavigationSubsystem thread`, and the program exits.

### Log level

The amount of output is set with the `LOG_LVL` environment variable, which is
read once per process:

| `LOG_LVL` | Level | Shows                                      |
|-----------|-------|--------------------------------------------|
| `0`       | WARN  | packet dumps and the stop message (default)|
| `1`       | INFO  | plus the "Press ENTER" and exit messages   |
| `2`       | DEBUG | everything                                 |

A missing, non-numeric or out-of-range value falls back to WARN. Each line is
prefixed with the level and the file, function and line that logged it.

```
LOG_LVL=1 stardust
```

## Using the library

Build a packet by hand with `stardust.ccsds`:

```python
from stardust.ccsds import Packet, PrimaryHeader, SecondaryHeader

primary = PrimaryHeader.telemetry(42)
primary.increment_sequence_count()
packet = Packet(primary, SecondaryHeader.now(), b"\x01\x02\x03")
raw = packet.serialize()
```

`PrimaryHeader` encodes the version, packet type, secondary header flag
(set by default), an 11-bit APID, the sequence flags (standalone by default)
and a 14-bit sequence count that wraps around. `Packet.serialize` fills in the
packet data length field as the size of the secondary header plus the data,
minus one. `SecondaryHeader` carries its `epoch` as a big-endian 64-bit
integer; `SecondaryHeader.now()` sets it to the seconds elapsed since Unix
time 233366400.

`stardust.serialization` has `write_big_endian16` and `read_big_endian16` for
16-bit header words; reading fewer than two bytes raises `ValueError`.

Drive the navigation subsystem yourself and choose how each field evolves:

```python
import random
import threading

from stardust.navigation import NavigationSubsystem
from stardust.strategies import IncrementalStrategy, RandomNoiseStrategy

running = threading.Event()
running.set()

nav = NavigationSubsystem(running)
nav.set_field_model("engine_temp_c", RandomNoiseStrategy(random.Random(1)))
nav.set_field_model("checksum", IncrementalStrategy())
nav.set_field_model("nav_mode", None)  # freeze this field
nav.simulate()
payload = nav.pack_telemetry()
raw = nav.build_packet()
```

The current values live in `nav.telemetry`, a `NavigationTelemetry`
dataclass. Every field starts with `IncrementalStrategy`, which adds one per
cycle; `RandomNoiseStrategy` replaces the value with a random whole number
from 0 to 100. Values are kept within their field's type (`FieldType`):
integers wrap like fixed-width integers and 32-bit floats are rounded to
single precision. An unknown field name raises `ValueError`.
`build_packet` advances the sequence count, steps the simulation once and
returns the serialized packet.

Subsystems can be run on threads through `stardust.threads.ThreadFactory`.
`launch(subsystem_type, running)` builds the subsystem with the running flag,
starts its `run` method on a new thread and returns it; the factory joins
every thread it started when it leaves its `with` block or when `join()` is
called.

## What it does not do

Packets are only printed as hex dumps: the simulator does not send them over
a network or write them to files. There is no packet parser; only the 16-bit
word reader in `stardust.serialization` decodes anything. The navigation
subsystem is the only subsystem provided.