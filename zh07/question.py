"""Sensor in question and answer mode, where readings are requested."""

from __future__ import annotations

import io
import time

from .common import (
    QUERY,
    SET_QA_MODE,
    SLEEP_AFTER_WRITE,
    ChecksumMismatchError,
    Reading,
    Sensor,
    _Stream,
    byte_to_int,
    calculate_checksum,
    write,
    write_and_read,
)


class ZH07q(Sensor):
    """ZH06/ZH07 sensor in question and answer mode."""

    def __init__(self, stream: _Stream | None = None) -> None:
        self.stream: _Stream = stream if stream is not None else io.BytesIO()
        self.data = b""

    def init(self) -> None:
        """Switch the sensor to question and answer mode."""
        write(self.stream, SET_QA_MODE)
        time.sleep(SLEEP_AFTER_WRITE)

    def calculate_checksum(self) -> int:
        return calculate_checksum(self.data)

    def is_reading_valid(self) -> bool:
        return self.calculate_checksum() == self.received_checksum()

    def received_checksum(self) -> int:
        """The checksum carried in the last byte of the response."""
        return self.data[8]

    def read(self) -> Reading:
        """Query the sensor and decode its response."""
        self.data = write_and_read(self.stream, QUERY)

        if not self.is_reading_valid():
            raise ChecksumMismatchError(
                f"received={self.received_checksum():X}, "
                f"calculated={self.calculate_checksum():X}"
            )

        return Reading(
            pm1=byte_to_int(self.data[6:8]),
            pm25=byte_to_int(self.data[2:4]),
            pm10=byte_to_int(self.data[4:6]),
        )