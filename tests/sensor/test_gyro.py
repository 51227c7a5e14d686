"""Tests for configuration writes and sample reads."""

import pytest

from itg3200.bus.transport import READ, WRITE
from itg3200.errors import BusWriteError, ShortReadError
from itg3200.sensor.gyro import (
    configure,
    read_burst,
    read_sample,
    send,
    write_register,
)
from itg3200.sensor.registers import DLPF_FS, GYRO_ADDRESS, PWR_MGM
from itg3200.sensor.sample import GyroSample


class ShortWriteTransport:
    """Transport stub whose writes report one byte fewer than sent."""

    def write(self, data: bytes) -> int:
        return len(data) - 1


def _ready(gyro):
    gyro.open()
    gyro.select(GYRO_ADDRESS)
    return gyro


class TestConfigure:
    """Tests for the configuration writer."""

    def test_writes_exact_pairs_in_order(self, make_gyro) -> None:
        gyro = _ready(make_gyro())
        configure(gyro)
        assert gyro.writes() == [b"\x3E\x01", b"\x16\x18"]

    def test_registers_updated(self, make_gyro) -> None:
        gyro = _ready(make_gyro())
        configure(gyro)
        assert gyro.registers[PWR_MGM] == 0x01
        assert gyro.registers[DLPF_FS] == 0x18

    def test_no_reads(self, make_gyro) -> None:
        """Configuration is write-only; nothing is read back."""
        gyro = _ready(make_gyro())
        configure(gyro)
        assert not any(t.kind == READ for t in gyro.transactions)

    def test_nack_raises_write_error(self, make_gyro) -> None:
        gyro = _ready(make_gyro(nack_writes=True))
        with pytest.raises(BusWriteError, match="3E 01"):
            configure(gyro)
        # Second register never attempted
        assert gyro.writes() == [b"\x3E\x01"]


class TestSend:
    """Tests for checked write transactions."""

    def test_short_count_raises(self) -> None:
        with pytest.raises(BusWriteError) as exc_info:
            send(ShortWriteTransport(), b"\x16\x18")
        assert exc_info.value.written == 1
        assert "1 of 2" in str(exc_info.value)

    def test_write_register_masks_bytes(self, make_gyro) -> None:
        gyro = _ready(make_gyro())
        write_register(gyro, 0x115, 0x1FF)
        assert gyro.writes() == [b"\x15\xFF"]


class TestReadSample:
    """Tests for the pointer write and burst read."""

    def test_reference_values(self, make_gyro) -> None:
        gyro = _ready(make_gyro(rates=(10, 20, -10)))
        assert read_sample(gyro) == GyroSample(10, 20, -10)

    def test_pointer_write_is_single_byte(self, make_gyro) -> None:
        """The register pointer write is exactly one byte: 0x1D."""
        gyro = _ready(make_gyro())
        read_sample(gyro)
        assert gyro.writes() == [b"\x1D"]

    def test_pointer_precedes_six_byte_read(self, make_gyro) -> None:
        gyro = _ready(make_gyro())
        read_sample(gyro)
        ops = [t for t in gyro.transactions if t.kind in (WRITE, READ)]
        assert [t.kind for t in ops] == [WRITE, READ]
        assert ops[1].requested == 6
        assert len(ops[1].data) == 6

    def test_short_read_raises(self, make_gyro) -> None:
        gyro = _ready(make_gyro(rates=(1, 2, 3), read_limit=4))
        with pytest.raises(ShortReadError) as exc_info:
            read_sample(gyro)
        assert exc_info.value.expected == 6
        assert exc_info.value.received == 4

    def test_empty_read_raises(self, make_gyro) -> None:
        gyro = _ready(make_gyro(read_limit=0))
        with pytest.raises(ShortReadError):
            read_sample(gyro)

    def test_read_burst_other_register(self, make_gyro) -> None:
        gyro = _ready(make_gyro())
        assert read_burst(gyro, 0x00, 1) == bytes([GYRO_ADDRESS])
