"""Backoff schedules and the async retry decorator."""

from __future__ import annotations

from algolia_client.utils.retry.decorator import retry
from algolia_client.utils.retry.exceptions import RetryError, RetryStatistics
from algolia_client.utils.retry.strategies import Backoff

__all__ = ["Backoff", "RetryError", "RetryStatistics", "retry"]
