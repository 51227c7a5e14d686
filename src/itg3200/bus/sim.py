"""Simulated ITG-3200 on an in-memory I2C bus."""

from __future__ import annotations

import errno

from ..errors import BusOpenError
from ..sensor.registers import (
    BUS_PATH,
    GYRO_ADDRESS,
    GYRO_XOUT_H,
    REGISTER_SPACE,
    WHO_AM_I,
)
from .transport import (
    CLOSE,
    OPEN,
    READ,
    SELECT,
    WRITE,
    Transaction,
    check_address,
)


class SimulatedGyro:
    """In-memory stand-in for an ITG-3200 behind an i2c-dev adapter.

    The chip keeps a register pointer. A write sets the pointer from its
    first byte and stores any following bytes at consecutive registers.
    A read returns bytes starting at the pointer and auto-increments it.
    Every call is appended to ``transactions`` so tests can assert on the
    exact bus traffic.

    Fault injection:
        fail_open: open() raises BusOpenError as a missing adapter would.
        read_limit: reads return at most this many bytes.
        nack_writes: writes raise OSError(EREMOTEIO), as an unacknowledged
            transfer does on the real adapter.
    """

    def __init__(
        self,
        address: int = GYRO_ADDRESS,
        *,
        fail_open: bool = False,
        read_limit: int | None = None,
        nack_writes: bool = False,
    ) -> None:
        self.address = address
        self.fail_open = fail_open
        self.read_limit = read_limit
        self.nack_writes = nack_writes
        self.registers = bytearray(REGISTER_SPACE)
        self.registers[WHO_AM_I] = address & 0x7E
        self.pointer = 0
        self.is_open = False
        self.transactions: list[Transaction] = []
        self._selected: int | None = None

    def set_rates(self, x: int, y: int, z: int) -> None:
        """Load signed 16-bit angular rates into the data registers."""
        raw = b"".join(
            (v & 0xFFFF).to_bytes(2, "big") for v in (x, y, z)
        )
        self.load(GYRO_XOUT_H, raw)

    def load(self, register: int, data: bytes) -> None:
        """Store raw bytes at consecutive registers."""
        end = register + len(data)
        if register < 0 or end > REGISTER_SPACE:
            raise IndexError(f"Register range 0x{register:02X}+{len(data)} out of bounds")
        self.registers[register:end] = data

    def open(self) -> None:
        self.transactions.append(Transaction(OPEN))
        if self.fail_open:
            raise BusOpenError(BUS_PATH, "No such file or directory")
        self.is_open = True

    def select(self, address: int) -> None:
        self._selected = check_address(address)
        self.transactions.append(Transaction(SELECT, address))

    def write(self, data: bytes) -> int:
        self._check_ready()
        data = bytes(data)
        self.transactions.append(Transaction(WRITE, self._selected, data))
        if self.nack_writes or self._selected != self.address:
            raise OSError(errno.EREMOTEIO, "Remote I/O error")
        if not data:
            return 0
        self.pointer = data[0] % REGISTER_SPACE
        for value in data[1:]:
            self.registers[self.pointer] = value & 0xFF
            self.pointer = (self.pointer + 1) % REGISTER_SPACE
        return len(data)

    def read(self, length: int) -> bytes:
        self._check_ready()
        count = length
        if self.read_limit is not None:
            count = min(count, self.read_limit)
        if self._selected != self.address:
            count = 0
        out = bytearray()
        for _ in range(count):
            out.append(self.registers[self.pointer])
            self.pointer = (self.pointer + 1) % REGISTER_SPACE
        self.transactions.append(
            Transaction(READ, self._selected, bytes(out), requested=length)
        )
        return bytes(out)

    def close(self) -> None:
        self.transactions.append(Transaction(CLOSE))
        self.is_open = False

    def writes(self) -> list[bytes]:
        """Payloads of all write transactions, in order."""
        return [t.data for t in self.transactions if t.kind == WRITE]

    def _check_ready(self) -> None:
        if not self.is_open:
            raise OSError(errno.EBADF, "Bad file descriptor")
        if self._selected is None:
            raise OSError(errno.EINVAL, "No peripheral address selected")
