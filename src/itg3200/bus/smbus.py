"""Linux i2c-dev transport built on smbus2 combined transactions."""

from __future__ import annotations

from smbus2 import SMBus, i2c_msg

from ..errors import BusOpenError, BusWriteError
from .transport import check_address


class SMBusTransport:
    """I2C transport over a /dev/i2c-N character device.

    Each write() and read() is issued as its own I2C_RDWR transfer, so a
    register-pointer write followed by a burst read produces two separate
    bus transactions with a STOP in between, the same as plain write(2)
    and read(2) on the device file.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        self._bus: SMBus | None = None
        self._address: int | None = None

    def open(self) -> None:
        """Open the adapter.

        Raises:
            BusOpenError: If the device node is missing or not accessible.
        """
        try:
            self._bus = SMBus(self.path)
        except OSError as e:
            raise BusOpenError(self.path, e.strerror or str(e)) from e

    def select(self, address: int) -> None:
        self._address = check_address(address)

    def write(self, data: bytes) -> int:
        """Send data to the selected peripheral.

        Raises:
            BusWriteError: If the adapter reports a failed transfer.
        """
        bus, address = self._require()
        try:
            bus.i2c_rdwr(i2c_msg.write(address, bytes(data)))
        except OSError as e:
            raise BusWriteError(data, reason=e.strerror or str(e)) from e
        return len(data)

    def read(self, length: int) -> bytes:
        """Read length bytes; a failed transfer yields no data."""
        bus, address = self._require()
        msg = i2c_msg.read(address, length)
        try:
            bus.i2c_rdwr(msg)
        except OSError:
            return b""
        return bytes(msg)

    def close(self) -> None:
        if self._bus is not None:
            self._bus.close()
            self._bus = None

    def _require(self) -> tuple[SMBus, int]:
        if self._bus is None:
            raise RuntimeError(f"{self.path} is not open")
        if self._address is None:
            raise RuntimeError("no peripheral address selected")
        return self._bus, self._address
