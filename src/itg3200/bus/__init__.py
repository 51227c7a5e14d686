"""I2C bus transports."""

from .sim import SimulatedGyro
from .smbus import SMBusTransport
from .transport import I2CTransport, Transaction

__all__ = ["I2CTransport", "SMBusTransport", "SimulatedGyro", "Transaction"]
