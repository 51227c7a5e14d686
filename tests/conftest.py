"""Shared fixtures for gyro tests."""

import pytest

from itg3200.bus.sim import SimulatedGyro


@pytest.fixture
def make_gyro():
    """Factory fixture: returns a function that creates a SimulatedGyro."""
    def _make(rates: tuple[int, int, int] = (0, 0, 0), **kwargs) -> SimulatedGyro:
        gyro = SimulatedGyro(**kwargs)
        gyro.set_rates(*rates)
        return gyro
    return _make


@pytest.fixture
def sleeps():
    """Replacement sleep function that records requested delays."""
    calls: list[float] = []

    def _sleep(seconds: float) -> None:
        calls.append(seconds)
    _sleep.calls = calls
    return _sleep
