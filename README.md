# zh07

A small driver for the Winsen ZH06 and ZH07 laser dust sensors. They measure
the mass concentration of particulate matter (PM1.0, PM2.5 and PM10, in µg/m³).

The sensors communicate over a serial line in one of two modes:

- **Initiative upload**: the sensor broadcasts a 32-byte frame on its own.
  Use `zh07.initiative.ZH07i`.
- **Question and answer**: the host sends a query and the sensor answers
  with a 9-byte frame. Use `zh07.question.ZH07q`.

Both classes take a binary stream: any object with `read(size)`,
`write(data)` and `flush()`, such as an already opened serial port. When no
stream is given, an empty `io.BytesIO` is used.

Both implement the `zh07.common.Sensor` interface: `init()`,
`calculate_checksum()`, `is_reading_valid()` and `read()`. A reading is a
frozen `zh07.common.Reading` dataclass with the fields `pm1`, `pm25` and
`pm10`.

## Installation

```
pip install zh07
```

## Question and answer mode

```python
from zh07.question import ZH07q
from zh07.common import ChecksumMismatchError, SensorCommunicationError

sensor = ZH07q(port)          # port: an open binary stream
sensor.init()                 # send the Q&A mode command, then wait 250 ms

try:
    reading = sensor.read()   # send a query, wait 250 ms, read 9 bytes
except ChecksumMismatchError as exc:
    print("bad frame:", exc)
except SensorCommunicationError:
    print("no response")
else:
    print(reading.pm1, reading.pm25, reading.pm10)
```

`read()` checks the one-byte checksum of the response and raises
`ChecksumMismatchError` when it does not match. A response shorter than
9 bytes is padded with zero bytes; an empty one raises
`SensorCommunicationError`.

## Initiative upload mode

```python
from zh07.initiative import ZH07i

sensor = ZH07i(port)
sensor.init()                 # send the initiative mode command, then wait 250 ms

reading = sensor.read()
if reading is not None and sensor.is_reading_valid():
    print(reading.pm1, reading.pm25, reading.pm10)
```

`ZH07i.read()` returns `None` when the bytes at the head of the stream are
not the start of a frame (`0x42 0x4D` followed by a length of 28); call it
again to keep scanning. It does not check the checksum itself: call
`is_reading_valid()` after a successful read. `received_checksum()` gives
the checksum carried in the frame, `calculate_checksum()` the sum of its
first 30 bytes. If the stream fails or ends partway through a frame,
`SensorCommunicationError` is raised.

## Errors

All errors derive from `zh07.common.ZH07Error`:

- `ChecksumMismatchError`: the Q&A response checksum does not match.
- `SensorCommunicationError`: reading from the stream failed, returned
  nothing or ended early.
- `InvalidFrameError`: defined for malformed frames; neither sensor class
  raises it at present.

## Helpers

`zh07.common` also provides functions for working with raw frames:

- `calculate_checksum(data)`: the one-byte Q&A checksum over all bytes but
  the first and last.
- `byte_to_int(data)`: the first two bytes as a big-endian integer.
- `to_hex(data)`: bytes as `0x..` values, each followed by a space,
  e.g. `"0x00 0x0a 0xff "`.
- `write(stream, command)`: write a command and flush.
- `write_and_read(stream, command)`: write a command, wait 250 ms and
  return the 9-byte response.

## What it does not do

The package does not open serial ports or configure baud rates; pass it a
stream that is already open. It has no command-line tool, does not store or
log readings, and does not send the dormant-mode commands.

## Running the tests

```
pip install -e .[test]
pytest
```