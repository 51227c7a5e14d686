"""Exceptions raised by the gyro transports and sensor routines."""


class GyroError(Exception):
    """Base class for all ITG-3200 session errors."""


class BusOpenError(GyroError):
    """The I2C adapter could not be opened or bound to the peripheral."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"cannot open {path}: {reason}")
        self.path = path
        self.reason = reason


class BusWriteError(GyroError):
    """A write transaction was rejected or only partially sent."""

    def __init__(self, data: bytes, written: int | None = None,
                 reason: str | None = None) -> None:
        payload = " ".join(f"{b:02X}" for b in data)
        if reason is not None:
            msg = f"write [{payload}] failed: {reason}"
        else:
            msg = f"write [{payload}] sent {written} of {len(data)} bytes"
        super().__init__(msg)
        self.data = bytes(data)
        self.written = written


class ShortReadError(GyroError):
    """A burst read returned fewer bytes than requested."""

    def __init__(self, expected: int, received: int) -> None:
        super().__init__(f"expected {expected} bytes, received {received}")
        self.expected = expected
        self.received = received
