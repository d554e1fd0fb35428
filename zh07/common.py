"""Shared pieces of the Winsen ZH06/ZH07 laser dust sensor driver.

The sensors measure particulate matter concentrations (PM1.0, PM2.5 and
PM10) and talk over a serial line in one of two modes: initiative upload,
where the sensor broadcasts frames continuously, and question and answer,
where each reading is requested explicitly.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Protocol


class ZH07Error(Exception):
    """Base class for errors raised by the sensor driver."""


class ChecksumMismatchError(ZH07Error):
    """The calculated checksum does not match the received one."""


class InvalidFrameError(ZH07Error):
    """The received data frame is invalid."""


class SensorCommunicationError(ZH07Error):
    """Communication with the sensor failed."""


class _Stream(Protocol):
    def read(self, size: int, /) -> bytes | None: ...

    def write(self, data: bytes, /) -> int | None: ...

    def flush(self) -> None: ...


@dataclass(frozen=True)
class Reading:
    """Mass concentrations in µg/m³."""

    pm1: int
    pm25: int
    pm10: int


class Sensor(ABC):
    """Common interface of the sensor modes."""

    @abstractmethod
    def init(self) -> None:
        """Put the sensor into this object's communication mode."""

    @abstractmethod
    def calculate_checksum(self) -> int:
        """Compute the checksum of the last frame received."""

    @abstractmethod
    def is_reading_valid(self) -> bool:
        """Tell whether the last frame's checksum is correct."""

    @abstractmethod
    def read(self) -> Reading | None:
        """Return a reading from the sensor."""


SET_INITIATIVE_UPLOAD_MODE = bytes([0xFF, 0x01, 0x78, 0x40, 0x00, 0x00, 0x00, 0x00, 0x47])
SET_QA_MODE = bytes([0xFF, 0x01, 0x78, 0x41, 0x00, 0x00, 0x00, 0x00, 0x46])
QUERY = bytes([0xFF, 0x01, 0x86, 0x00, 0x00, 0x00, 0x00, 0x00, 0x79])

SLEEP_AFTER_WRITE = 0.25
RESPONSE_LENGTH = 9


def calculate_checksum(data: bytes) -> int:
    """Return the one-byte checksum over all bytes but the first and last."""
    return -sum(data[1:-1]) & 0xFF


def byte_to_int(data: bytes) -> int:
    """Decode the first two bytes of ``data`` as a big-endian integer."""
    return (data[0] << 8) | data[1]


def to_hex(data: bytes) -> str:
    """Format bytes as ``0x..`` values, each followed by a space."""
    return "".join(f"{byte:#04x} " for byte in data)


def write(stream: _Stream, command: bytes) -> None:
    """Send a command to the sensor and flush it out."""
    stream.write(command)
    stream.flush()


def write_and_read(stream: _Stream, command: bytes) -> bytes:
    """Send a command, wait for the sensor and return its 9-byte response.

    A short response is padded with zero bytes.
    """
    write(stream, command)
    time.sleep(SLEEP_AFTER_WRITE)
    response = stream.read(RESPONSE_LENGTH)
    if not response:
        raise SensorCommunicationError("no response from sensor")
    return bytes(response).ljust(RESPONSE_LENGTH, b"\x00")