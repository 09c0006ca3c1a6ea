"""Unit tests for Prometheus metric tracking helpers."""
from __future__ import annotations

from prometheus_client import generate_latest
import pytest

from algolia_client.infra.metrics import REGISTRY
from algolia_client.infra.metrics.tracking import (
    track_api_request,
    track_host_failover,
    track_retry_attempt,
    track_retry_success,
)


def sample(name: str, **labels: str) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


@pytest.mark.unit
class TestTracking:
    """Test suite for the tracking helpers."""

    def test_track_api_request(self):
        """Test that the counter and the histogram are updated."""
        before = sample("algolia_api_requests_total", method="PATCH", status="200")
        observed = sample("algolia_api_request_duration_seconds_count", method="PATCH")

        track_api_request("PATCH", 200, 0.02)

        assert sample("algolia_api_requests_total", method="PATCH", status="200") == before + 1
        assert sample("algolia_api_request_duration_seconds_count", method="PATCH") == observed + 1

    def test_failure_labels(self):
        """Test that failures without a response use a text status."""
        before = sample("algolia_api_requests_total", method="GET", status="timeout")

        track_api_request("GET", "timeout", 2.0)

        assert sample("algolia_api_requests_total", method="GET", status="timeout") == before + 1

    def test_track_host_failover(self):
        before = sample("algolia_host_failovers_total", host="h.example", reason="503")

        track_host_failover("h.example", "503")

        assert sample("algolia_host_failovers_total", host="h.example", reason="503") == before + 1

    def test_retry_metrics(self):
        attempts = sample("algolia_retry_attempts_total", function="poll", attempt="2")
        successes = sample("algolia_retry_success_after_failure_total", function="poll")

        track_retry_attempt("poll", 2)
        track_retry_success("poll", 2)

        assert sample("algolia_retry_attempts_total", function="poll", attempt="2") == attempts + 1
        assert (
            sample("algolia_retry_success_after_failure_total", function="poll") == successes + 1
        )

    def test_private_registry_exposition(self):
        """Test that the registry renders in the text exposition format."""
        track_api_request("GET", 200, 0.01)

        output = generate_latest(REGISTRY).decode()

        assert "algolia_api_requests_total" in output
