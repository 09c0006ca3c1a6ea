"""Backoff schedules for polling and retries."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
import random


@dataclass(frozen=True, slots=True)
class Backoff:
    """Delay schedule: ``initial_delay * multiplier**attempt`` capped at ``max_delay``.

    ``jitter`` is a ``(low, high)`` factor range applied to every delay, or
    ``None`` for a deterministic schedule (task polling uses the latter).

    Example:
        >>> list(islice(Backoff(1.0, 10.0), 5))
        [1.0, 2.0, 4.0, 8.0, 10.0]
    """

    initial_delay: float = 1.0
    max_delay: float = 60.0
    multiplier: float = 2.0
    jitter: tuple[float, float] | None = None

    @classmethod
    def constant(cls, delay: float) -> Backoff:
        return cls(initial_delay=delay, max_delay=delay, multiplier=1.0)

    def delay(self, attempt: int) -> float:
        """Delay to wait after the ``attempt``-th failure (0-based)."""
        value = min(self.initial_delay * self.multiplier**attempt, self.max_delay)
        if self.jitter is not None:
            value *= random.uniform(*self.jitter)
        return value

    def __iter__(self) -> Iterator[float]:
        attempt = 0
        while True:
            yield self.delay(attempt)
            attempt += 1
