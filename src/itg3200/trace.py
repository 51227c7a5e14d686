"""Bus transaction recording and Rich trace rendering."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from .bus.transport import (
    CLOSE,
    OPEN,
    READ,
    SELECT,
    WRITE,
    I2CTransport,
    Transaction,
)


class RecordingTransport:
    """Wraps a transport and logs every call as a Transaction.

    Calls that raise are still logged (reads and writes with the bytes
    that were attempted) before the exception propagates.
    """

    def __init__(self, inner: I2CTransport) -> None:
        self.inner = inner
        self.transactions: list[Transaction] = []
        self._address: int | None = None

    def open(self) -> None:
        self.transactions.append(Transaction(OPEN))
        self.inner.open()

    def select(self, address: int) -> None:
        self.transactions.append(Transaction(SELECT, address))
        self.inner.select(address)
        self._address = address

    def write(self, data: bytes) -> int:
        self.transactions.append(Transaction(WRITE, self._address, bytes(data)))
        return self.inner.write(data)

    def read(self, length: int) -> bytes:
        data = self.inner.read(length)
        self.transactions.append(
            Transaction(READ, self._address, bytes(data), requested=length)
        )
        return data

    def close(self) -> None:
        self.transactions.append(Transaction(CLOSE))
        self.inner.close()


_KIND_STYLES = {
    OPEN: "cyan",
    SELECT: "cyan",
    WRITE: "yellow",
    READ: "green",
    CLOSE: "dim",
}


def format_bytes(data: bytes) -> str:
    """Render bytes as space-separated uppercase hex pairs."""
    return " ".join(f"{b:02X}" for b in data)


def format_transactions(transactions: list[Transaction]) -> Table:
    """Build a Rich table with one row per bus transaction.

    A read that returned fewer bytes than requested is highlighted with
    ``[bold red]`` and shows the received/requested count.

    Args:
        transactions: Log produced by RecordingTransport or SimulatedGyro.

    Returns:
        A Rich Table ready for printing.
    """
    table = Table(title="I2C transactions")
    table.add_column("#", justify="right")
    table.add_column("Op")
    table.add_column("Addr")
    table.add_column("Bytes")

    for i, t in enumerate(transactions):
        style = _KIND_STYLES.get(t.kind, "")
        addr = f"0x{t.address:02X}" if t.address is not None else ""
        payload = format_bytes(t.data)
        if t.kind == READ and t.requested is not None:
            count = f"({len(t.data)}/{t.requested})"
            payload = f"{payload} {count}" if payload else count
            if len(t.data) < t.requested:
                style = "bold red"
        table.add_row(str(i), f"[{style}]{t.kind}[/{style}]" if style else t.kind,
                      addr, payload)

    return table


def print_trace(transactions: list[Transaction], console: Console | None = None) -> None:
    """Print the transaction table, to stderr unless a console is given."""
    if console is None:
        console = Console(stderr=True)
    console.print(format_transactions(transactions))
