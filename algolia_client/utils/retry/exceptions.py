"""Retry failure type and per-call statistics."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class RetryStatistics:
    attempts: int = 0
    waited: float = 0.0
    started_at: float = 0.0
    finished_at: float = 0.0
    errors: list[str] = field(default_factory=list)

    @property
    def duration(self) -> float:
        return self.finished_at - self.started_at


class RetryError(Exception):
    """Raised once every attempt failed; chained to the last failure."""

    def __init__(
        self,
        operation: str,
        last_exception: Exception,
        statistics: RetryStatistics,
    ) -> None:
        self.operation = operation
        self.last_exception = last_exception
        self.statistics = statistics
        super().__init__(
            f"{operation} failed after {statistics.attempts} attempts: {last_exception}"
        )

    @property
    def attempts(self) -> int:
        return self.statistics.attempts
