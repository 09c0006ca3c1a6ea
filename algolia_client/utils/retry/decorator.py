"""Retry decorator for coroutines."""

from __future__ import annotations

import asyncio
from functools import wraps
import logging
import time
from typing import TYPE_CHECKING, ParamSpec, TypeVar

from algolia_client.infra.metrics.tracking import (
    track_retry_attempt,
    track_retry_exhausted,
    track_retry_success,
)

from .exceptions import RetryError, RetryStatistics
from .strategies import Backoff

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def retry(
    backoff: Backoff | None = None,
    *,
    max_attempts: int = 3,
    retry_if: Callable[[Exception], bool] | None = None,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Call a coroutine again while it fails with a retryable exception.

    Args:
        backoff: Delay schedule between attempts (``Backoff()`` by default).
        max_attempts: Total number of calls, the first one included.
        retry_if: Decides whether an exception is retried. Defaults to every
            ``Exception``; rejected exceptions propagate untouched.

    Raises:
        RetryError: The last attempt failed too. ``__cause__`` is that failure.

    Example:
        @retry(Backoff.constant(1.0), max_attempts=10, retry_if=is_not_found)
        async def fetch_key() -> Key:
            return await client.get_api_key(value)
    """
    schedule = backoff or Backoff()

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        name = func.__name__

        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            stats = RetryStatistics(started_at=time.monotonic())
            delays = iter(schedule)

            while True:
                stats.attempts += 1
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    if retry_if is not None and not retry_if(e):
                        raise
                    stats.errors.append(type(e).__name__)

                    if stats.attempts >= max_attempts:
                        stats.finished_at = time.monotonic()
                        track_retry_exhausted(name)
                        logger.warning(
                            f"{name} gave up after {stats.attempts} attempts",
                            extra={
                                "function": name,
                                "attempts": stats.attempts,
                                "waited": stats.waited,
                                "exception": str(e),
                            },
                        )
                        raise RetryError(name, e, stats) from e

                    delay = next(delays)
                    stats.waited += delay
                    track_retry_attempt(name, stats.attempts + 1)
                    logger.debug(
                        f"{name} attempt {stats.attempts}/{max_attempts} failed, "
                        f"retrying in {delay:.2f}s",
                        extra={"function": name, "attempt": stats.attempts, "delay": delay},
                    )
                    await asyncio.sleep(delay)
                    continue

                if stats.attempts > 1:
                    track_retry_success(name, stats.attempts)
                return result

        return wrapper

    return decorator
