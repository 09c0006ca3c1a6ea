"""Helper functions for tracking client metrics."""

from __future__ import annotations

import logging

from algolia_client.infra.metrics import prometheus

logger = logging.getLogger(__name__)


# ============================================================================
# Request Tracking
# ============================================================================


def track_api_request(method: str, status: int | str, duration: float) -> None:
    """Record one API round trip.

    Args:
        method: HTTP method.
        status: Response status code, or a short failure label
            (``"timeout"``, ``"network"``) when no response was received.
        duration: Round-trip time in seconds.

    Example:
            track_api_request("POST", 200, 0.042)
    """
    prometheus.api_requests_total.labels(method=method, status=str(status)).inc()
    prometheus.api_request_duration_seconds.labels(method=method).observe(duration)


def track_host_failover(host: str, reason: str) -> None:
    """Record that a request gave up on ``host`` and moved on."""
    prometheus.host_failovers_total.labels(host=host, reason=reason).inc()
    logger.debug("Tracked host failover", extra={"host": host, "reason": reason})


# ============================================================================
# Retry Tracking
# ============================================================================


def track_retry_attempt(function: str, attempt: int) -> None:
    """Track a retry attempt.

    Args:
        function: Name of the retried function.
        attempt: Attempt number about to run (2 for the first retry).
    """
    prometheus.retry_attempts_total.labels(function=function, attempt=str(attempt)).inc()


def track_retry_exhausted(function: str) -> None:
    """Track an operation that ran out of retry attempts."""
    prometheus.retry_exhausted_total.labels(function=function).inc()


def track_retry_success(function: str, attempts: int) -> None:
    """Track an operation that succeeded after retrying.

    Args:
        function: Name of the retried function.
        attempts: Total attempts including the successful one.
    """
    prometheus.retry_success_after_failure_total.labels(function=function).inc()
    logger.debug(
        "Retry succeeded",
        extra={"function": function, "attempts": attempts},
    )
