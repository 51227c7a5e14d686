"""Command-line interface for a one-shot ITG-3200 gyro reading."""

import argparse
import sys

from .bus.smbus import SMBusTransport
from .errors import BusOpenError, BusWriteError
from .sensor.registers import BUS_PATH
from .session import run_session
from .trace import RecordingTransport, print_trace

OPEN_FAILURE_MESSAGE = "Failed to open the bus."


def main(argv: list[str] | None = None) -> None:
    """Entry point: read one sample from the gyro on /dev/i2c-1 and print it.

    Exits with status 1 if the bus cannot be opened or a write fails;
    otherwise exits 0, including after a short read.
    """
    parser = argparse.ArgumentParser(
        prog="itg3200",
        description="Read one angular rate sample from an ITG-3200 gyroscope "
                    f"at 0x68 on {BUS_PATH}",
    )
    parser.add_argument(
        "--trace", action="store_true",
        help="Print every I2C transaction to stderr after the run",
    )
    args = parser.parse_args(argv)

    transport = SMBusTransport(BUS_PATH)
    recorder = RecordingTransport(transport) if args.trace else None

    status = 0
    try:
        run_session(recorder if recorder is not None else transport)
    except BusOpenError as e:
        print(OPEN_FAILURE_MESSAGE, file=sys.stderr)
        print(f"  {e}", file=sys.stderr)
        status = 1
    except BusWriteError as e:
        print(f"Error: {e}", file=sys.stderr)
        status = 1

    if recorder is not None:
        print_trace(recorder.transactions)

    sys.exit(status)
