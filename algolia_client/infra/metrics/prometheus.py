"""Prometheus metrics for the Algolia client."""

from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter, Histogram

# Private registry so embedding applications decide whether to expose it
REGISTRY = CollectorRegistry()

# Covers API round trips from 5ms to 30s
DEFAULT_LATENCY_BUCKETS = (
    0.005,
    0.01,
    0.025,
    0.05,
    0.1,
    0.25,
    0.5,
    1.0,
    2.5,
    5.0,
    10.0,
    30.0,
)

# ============================================================================
# API request metrics
# ============================================================================

api_requests_total = Counter(
    "algolia_api_requests_total",
    "Total Algolia API requests by method and response status",
    ["method", "status"],
    registry=REGISTRY,
)

api_request_duration_seconds = Histogram(
    "algolia_api_request_duration_seconds",
    "Algolia API request duration in seconds",
    ["method"],
    buckets=DEFAULT_LATENCY_BUCKETS,
    registry=REGISTRY,
)

host_failovers_total = Counter(
    "algolia_host_failovers_total",
    "Requests moved to the next host after a retryable failure",
    ["host", "reason"],
    registry=REGISTRY,
)

# ============================================================================
# Retry metrics
# ============================================================================

retry_attempts_total = Counter(
    "algolia_retry_attempts_total",
    "Total retry attempts by function",
    ["function", "attempt"],
    registry=REGISTRY,
)

retry_exhausted_total = Counter(
    "algolia_retry_exhausted_total",
    "Total operations that exhausted all retry attempts",
    ["function"],
    registry=REGISTRY,
)

retry_success_after_failure_total = Counter(
    "algolia_retry_success_after_failure_total",
    "Total operations that succeeded after at least one retry",
    ["function"],
    registry=REGISTRY,
)
