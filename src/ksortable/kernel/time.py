"""
Time provider abstraction for deterministic testing

Provides both real-time and controllable test-time implementations, so that
identifier generation can be pinned to a known instant.

Fun fact: The KSUID epoch (1,400,000,000 seconds) landed on a Tuesday
afternoon in May 2014 - picked because it is easy to spot, not because
anything happened then!
"""

from datetime import datetime, timedelta, timezone
from typing import Protocol


class TimeProvider(Protocol):
    """Protocol for time providers - allows deterministic testing"""

    def now(self) -> datetime:
        """Return current UTC datetime"""
        ...


class RealTimeProvider:
    """Production time provider using system clock"""

    def now(self) -> datetime:
        """Return current UTC time from system clock"""
        return datetime.now(timezone.utc)


class TestTimeProvider:
    """
    Controllable time provider for deterministic tests

    Allows tests to freeze time and advance it, ensuring reproducible
    identifier timestamps.
    """

    __test__ = False  # not a pytest test class

    def __init__(self, initial_time: datetime | None = None) -> None:
        """
        Initialize with optional fixed time

        Args:
            initial_time: Starting time (defaults to 2025-01-01 UTC)
        """
        self._current_time = initial_time or datetime(2025, 1, 1, tzinfo=timezone.utc)

    @classmethod
    def at_unix(cls, seconds: float) -> "TestTimeProvider":
        """Build a provider frozen at a Unix timestamp"""
        return cls(datetime.fromtimestamp(seconds, tz=timezone.utc))

    def now(self) -> datetime:
        """Return current test time"""
        return self._current_time

    def set_time(self, dt: datetime) -> None:
        """Set current time to specific value"""
        self._current_time = dt

    def advance_seconds(self, seconds: int) -> None:
        """Advance time by specified seconds"""
        self._current_time += timedelta(seconds=seconds)

    def advance_milliseconds(self, milliseconds: int) -> None:
        """Advance time by specified milliseconds"""
        self._current_time += timedelta(milliseconds=milliseconds)


# Global default time provider
default_time_provider: TimeProvider = RealTimeProvider()
