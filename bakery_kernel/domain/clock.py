"""
Clock -- Injectable source of bake timestamps.

Responsibility:
    The catalog stamps every good with the time it was produced. Time is an
    external collaborator: the catalog receives a Clock by constructor
    injection and never calls ``datetime.now()`` itself.

Architecture position:
    Kernel > Domain -- pure, except SystemClock, which is the one sanctioned
    wall-clock boundary.

Failure modes:
    - SequentialClock raises ValueError when built from an empty list.
"""

from abc import ABC, abstractmethod
from datetime import UTC, datetime, timedelta
from typing import Iterator


class Clock(ABC):
    """
    Abstract clock interface.

    Guarantees:
        ``now()`` returns a timezone-aware ``datetime``.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Get the current time."""
        ...


class SystemClock(Clock):
    """Production clock backed by the system wall clock (UTC)."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class DeterministicClock(Clock):
    """
    Test clock with controlled time.

    Guarantees:
        - ``now()`` returns the same value on repeated calls until ``advance()``
          or ``set_time()`` is called.
        - ``tick()`` advances by exactly 1 second and returns the new time.
    """

    def __init__(self, fixed_time: datetime | None = None):
        self._fixed_time = fixed_time or datetime(
            2024, 1, 1, 6, 0, 0, tzinfo=UTC
        )
        self._advance_seconds = 0

    def now(self) -> datetime:
        return self._fixed_time + timedelta(seconds=self._advance_seconds)

    def set_time(self, time: datetime) -> None:
        """Set the clock to a specific time."""
        self._fixed_time = time
        self._advance_seconds = 0

    def advance(self, seconds: int = 1) -> None:
        """Advance the clock by the specified seconds."""
        self._advance_seconds += seconds

    def tick(self) -> datetime:
        """Advance by 1 second and return new time."""
        self.advance(1)
        return self.now()


class SequentialClock(Clock):
    """
    Clock that returns times from a predefined list, in order.

    After exhaustion it keeps returning the last value.

    Raises:
        ValueError: If initialized with an empty list.
    """

    def __init__(self, times: list[datetime]):
        if not times:
            raise ValueError("SequentialClock requires at least one time")
        self._times: Iterator[datetime] = iter(times)
        self._last_time: datetime = times[0]

    def now(self) -> datetime:
        self._last_time = next(self._times, self._last_time)
        return self._last_time
