"""HTTP transport for the Algolia REST API."""

from algolia_client.infra.external.base_client import BaseHTTPClient, default_hosts

__all__ = [
    "BaseHTTPClient",
    "default_hosts",
]
