"""Invocation deadline tracking."""

import time
from typing import Callable


class Deadline:
    """Remaining time budget of the current invocation."""

    def __init__(self, expires_at: float, clock: Callable[[], float] = time.monotonic):
        self._expires_at = expires_at
        self._clock = clock

    @classmethod
    def after(
        cls, seconds: float, clock: Callable[[], float] = time.monotonic
    ) -> "Deadline":
        return cls(clock() + seconds, clock)

    @classmethod
    def from_context(
        cls,
        context: object | None,
        fallback_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> "Deadline":
        """Uses the Lambda context's remaining time when one is available."""
        remaining_ms = getattr(context, "get_remaining_time_in_millis", None)
        if callable(remaining_ms):
            return cls.after(remaining_ms() / 1000.0, clock)
        return cls.after(fallback_seconds, clock)

    def remaining(self) -> float:
        return max(0.0, self._expires_at - self._clock())

    def expired(self) -> bool:
        return self.remaining() <= 0.0
