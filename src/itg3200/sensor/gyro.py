"""Configuration writes and sample reads against an ITG-3200."""

from __future__ import annotations

from ..bus.transport import I2CTransport
from ..errors import BusWriteError, ShortReadError
from .registers import CONFIG_SEQUENCE, GYRO_XOUT_H, SAMPLE_SIZE
from .sample import GyroSample, decode_sample


def send(transport: I2CTransport, payload: bytes) -> None:
    """Issue one write transaction and check that all of it went out.

    Raises:
        BusWriteError: If the transport fails or sends a short count.
    """
    try:
        written = transport.write(payload)
    except OSError as e:
        raise BusWriteError(payload, reason=e.strerror or str(e)) from e
    if written != len(payload):
        raise BusWriteError(payload, written=written)


def write_register(transport: I2CTransport, register: int, value: int) -> None:
    """Write a single register as a 2-byte {register, value} transaction."""
    send(transport, bytes([register & 0xFF, value & 0xFF]))


def configure(transport: I2CTransport) -> None:
    """Power up on the X gyro PLL clock and select the +/-2000 deg/s range.

    The registers are not read back.
    """
    for register, value in CONFIG_SEQUENCE:
        write_register(transport, register, value)


def read_burst(transport: I2CTransport, register: int, length: int) -> bytes:
    """Point at a register, then read length bytes in one transaction.

    Raises:
        ShortReadError: If fewer than length bytes come back.
    """
    send(transport, bytes([register]))
    data = transport.read(length)
    if len(data) < length:
        raise ShortReadError(length, len(data))
    return data[:length]


def read_sample(transport: I2CTransport) -> GyroSample:
    """Read and decode the X, Y and Z rate registers."""
    return decode_sample(read_burst(transport, GYRO_XOUT_H, SAMPLE_SIZE))
