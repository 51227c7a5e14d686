"""Gyro sample record and raw data decoding."""

from __future__ import annotations

from dataclasses import dataclass

from .registers import SAMPLE_SIZE

INT16_MAX = 32767
UINT16_RANGE = 65536


def fold16(raw: int) -> int:
    """Reinterpret an unsigned 16-bit value as two's-complement signed.

    Values above 32767 have 65536 subtracted; smaller values are
    returned unchanged.
    """
    if raw > INT16_MAX:
        raw -= UINT16_RANGE
    return raw


def decode_axis(high: int, low: int) -> int:
    """Combine a big-endian byte pair into a signed axis reading."""
    return fold16(high * 256 + low)


@dataclass(frozen=True)
class GyroSample:
    """Raw angular rate on each axis, in sensor counts."""

    x: int
    y: int
    z: int

    def report(self) -> str:
        """Format the sample as three lines, one per axis."""
        return "\n".join([
            f"X-Axis of Rotation : {self.x}",
            f"Y-Axis of Rotation : {self.y}",
            f"Z-Axis of Rotation : {self.z}",
        ])


def decode_sample(data: bytes) -> GyroSample:
    """Decode a 6-byte burst (X, Y, Z, high byte first) into a sample.

    Args:
        data: Exactly SAMPLE_SIZE bytes read from GYRO_XOUT_H onward.

    Raises:
        ValueError: If data is not SAMPLE_SIZE bytes long.
    """
    if len(data) != SAMPLE_SIZE:
        raise ValueError(f"Sample must be {SAMPLE_SIZE} bytes, got {len(data)}")
    return GyroSample(
        x=decode_axis(data[0], data[1]),
        y=decode_axis(data[2], data[3]),
        z=decode_axis(data[4], data[5]),
    )
