"""Base protocol for I2C bus transports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

# Transaction kinds recorded in a transaction log
OPEN = "open"
SELECT = "select"
WRITE = "write"
READ = "read"
CLOSE = "close"


@dataclass(frozen=True)
class Transaction:
    """One step performed against the bus.

    Attributes:
        kind: One of OPEN, SELECT, WRITE, READ or CLOSE.
        address: 7-bit peripheral address in effect, or None before SELECT.
        data: Bytes sent (WRITE) or received (READ); empty otherwise.
        requested: Number of bytes asked for by a READ, else None.
    """

    kind: str
    address: int | None = None
    data: bytes = b""
    requested: int | None = None


@runtime_checkable
class I2CTransport(Protocol):
    """Protocol for a plain-I2C bus connection to a single peripheral.

    Mirrors the i2c-dev character device: open the adapter, select a
    peripheral address, then issue raw write and read transactions. Writes
    return the number of bytes sent; reads may return fewer bytes than
    requested when the transfer fails part way.
    """

    def open(self) -> None:
        """Open the bus adapter."""
        ...

    def select(self, address: int) -> None:
        """Bind subsequent transactions to a 7-bit peripheral address."""
        ...

    def write(self, data: bytes) -> int:
        """Send data as one write transaction; returns bytes sent."""
        ...

    def read(self, length: int) -> bytes:
        """Read up to length bytes as one read transaction."""
        ...

    def close(self) -> None:
        """Release the bus adapter."""
        ...


def check_address(address: int) -> int:
    """Validate a 7-bit I2C peripheral address.

    Raises:
        ValueError: If the address does not fit in 7 bits.
    """
    if not 0 <= address <= 0x7F:
        raise ValueError(f"I2C address out of range: 0x{address:X}")
    return address
