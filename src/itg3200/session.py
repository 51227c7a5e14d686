"""One-shot gyro session: configure, settle, sample, report."""

from __future__ import annotations

import sys
import time
from typing import Callable, TextIO

from .bus.transport import I2CTransport
from .errors import ShortReadError
from .sensor.gyro import configure, read_sample
from .sensor.registers import GYRO_ADDRESS, SETTLE_SECONDS
from .sensor.sample import GyroSample

SHORT_READ_MESSAGE = "Error : Input/output Error"


def run_session(
    transport: I2CTransport,
    out: TextIO | None = None,
    sleep: Callable[[float], None] | None = None,
) -> GyroSample | None:
    """Run the full open/configure/sample sequence once.

    Opens the transport, selects the gyro, writes the configuration,
    waits SETTLE_SECONDS, then reads one sample and prints it. A short
    read prints SHORT_READ_MESSAGE instead of the axis lines. The
    transport is closed before returning.

    Args:
        transport: Bus connection to use; opened here.
        out: Stream for the report (defaults to stdout).
        sleep: Delay function (defaults to time.sleep).

    Returns:
        The decoded sample, or None after a short read.

    Raises:
        BusOpenError: If the transport cannot be opened. Nothing has been
            written or read at that point.
        BusWriteError: If a configuration or pointer write fails.
    """
    if out is None:
        out = sys.stdout
    if sleep is None:
        sleep = time.sleep
    transport.open()
    try:
        transport.select(GYRO_ADDRESS)
        configure(transport)
        sleep(SETTLE_SECONDS)
        try:
            sample = read_sample(transport)
        except ShortReadError:
            print(SHORT_READ_MESSAGE, file=out)
            return None
        print(sample.report(), file=out)
        return sample
    finally:
        transport.close()
