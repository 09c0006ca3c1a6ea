"""Prometheus metrics collected by the client.

The metrics live on a private registry; expose them with
``prometheus_client.generate_latest(REGISTRY)`` if needed.
"""

from algolia_client.infra.metrics.prometheus import REGISTRY

__all__ = ["REGISTRY"]
