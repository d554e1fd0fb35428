"""Sensor in initiative upload mode, where frames are broadcast continuously."""

from __future__ import annotations

import io
import time

from .common import (
    SET_INITIATIVE_UPLOAD_MODE,
    SLEEP_AFTER_WRITE,
    Reading,
    Sensor,
    SensorCommunicationError,
    _Stream,
    byte_to_int,
    write,
)

FRAME_LENGTH = 32
_START_1 = 0x42
_START_2 = 0x4D
_PAYLOAD_LENGTH = 28


class ZH07i(Sensor):
    """ZH06/ZH07 sensor in initiative upload mode."""

    def __init__(self, stream: _Stream | None = None) -> None:
        self.stream: _Stream = stream if stream is not None else io.BytesIO()
        self.data = bytes(FRAME_LENGTH)

    def init(self) -> None:
        """Switch the sensor to initiative upload mode."""
        write(self.stream, SET_INITIATIVE_UPLOAD_MODE)
        time.sleep(SLEEP_AFTER_WRITE)

    def calculate_checksum(self) -> int:
        """Sum of the first 30 bytes of the last frame."""
        return sum(self.data[:30])

    def is_reading_valid(self) -> bool:
        return self.calculate_checksum() == byte_to_int(self.data[30:32])

    def received_checksum(self) -> int:
        """The checksum carried in the last two bytes of the frame."""
        return byte_to_int(self.data[30:])

    def _read(self, size: int) -> bytes:
        try:
            chunk = self.stream.read(size)
        except OSError as exc:
            raise SensorCommunicationError(str(exc)) from exc
        if not chunk:
            raise SensorCommunicationError("unexpected end of stream")
        return bytes(chunk)

    def _read_exactly(self, size: int) -> bytes:
        buffer = bytearray()
        while len(buffer) < size:
            buffer += self._read(size - len(buffer))
        return bytes(buffer)

    def read(self) -> Reading | None:
        """Read one frame from the stream.

        Returns None when the bytes read do not start a frame, so the caller
        can keep reading until one is found.
        """
        start = self._read(1)
        if start[0] != _START_1:
            return None

        header = self._read(3).ljust(3, b"\x00")
        if header[0] != _START_2:
            return None
        if byte_to_int(header[1:3]) != _PAYLOAD_LENGTH:
            return None

        payload = self._read_exactly(_PAYLOAD_LENGTH)
        self.data = start + header + payload

        return Reading(
            pm1=byte_to_int(self.data[10:12]),
            pm25=byte_to_int(self.data[12:14]),
            pm10=byte_to_int(self.data[14:16]),
        )