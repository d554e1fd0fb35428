from unittest import mock

import pytest

from zh07.common import (
    QUERY,
    Reading,
    Sensor,
    SensorCommunicationError,
    byte_to_int,
    calculate_checksum,
    to_hex,
    write,
    write_and_read,
)


class FakePort:
    def __init__(self, responses=None, incoming=b""):
        self.responses = dict(responses or {})
        self.written = bytearray()
        self._pending = bytearray()
        self._incoming = bytearray(incoming)

    def write(self, data):
        self._pending += data
        return len(data)

    def flush(self):
        command = bytes(self._pending)
        self._pending.clear()
        self.written += command
        if command in self.responses:
            self._incoming += self.responses[command]

    def read(self, size):
        chunk = bytes(self._incoming[:size])
        del self._incoming[:size]
        return chunk


@mock.patch("time.sleep")
def test_write_and_read(_sleep):
    command = bytes([0xFF, 0x86, 0x00, 0x47, 0x00, 0xC7, 0x03, 0x0F, 0x5A])
    response = bytes([0x01, 0x02, 0x03, 0x04, 0x05, 0x06, 0x07, 0x08, 0x09])
    port = FakePort({command: response})

    assert write_and_read(port, command) == response
    assert bytes(port.written) == command


@mock.patch("time.sleep")
def test_write_and_read_waits_for_sensor(sleep):
    response = bytes([0xFF, 0x86, 0x00, 0x85, 0x00, 0x96, 0x00, 0x65, 0xFA])
    port = FakePort({QUERY: response})
    assert write_and_read(port, QUERY) == response
    sleep.assert_called_once_with(0.25)


@mock.patch("time.sleep")
def test_write_and_read_pads_short_response(_sleep):
    port = FakePort({QUERY: b"\xff\x86"})
    assert write_and_read(port, QUERY) == b"\xff\x86" + bytes(7)


@mock.patch("time.sleep")
def test_write_and_read_without_response(_sleep):
    port = FakePort()
    with pytest.raises(SensorCommunicationError):
        write_and_read(port, QUERY)


def test_write_flushes_command():
    port = FakePort()
    write(port, QUERY)
    assert bytes(port.written) == QUERY


def test_calculate_checksum():
    data = bytes([0xFF, 0x86, 0x00, 0x47, 0x00, 0xC7, 0x03, 0x0F, 0x5A])
    assert calculate_checksum(data) == 0x5A


def test_calculate_checksum_of_query_command():
    assert calculate_checksum(QUERY) == 0x79


def test_calculate_checksum_wraps_zero():
    assert calculate_checksum(bytes(9)) == 0


def test_to_hex():
    assert to_hex(bytes([0x00, 0x01, 0x02, 0x0A, 0xFF])) == "0x00 0x01 0x02 0x0a 0xff "


def test_byte_to_int():
    assert byte_to_int(bytes([0x03, 0x27])) == 0x0327
    assert byte_to_int(bytes([0x00, 0x1C, 0xFF])) == 28


def test_byte_to_int_too_short():
    with pytest.raises(IndexError):
        byte_to_int(b"\x01")


def test_reading_fields():
    reading = Reading(pm1=1, pm25=2, pm10=3)
    assert (reading.pm1, reading.pm25, reading.pm10) == (1, 2, 3)


def test_sensor_is_abstract():
    with pytest.raises(TypeError):
        Sensor()