"""Logging infrastructure.

Basic usage:
    from algolia_client.infra.logging import setup_logging

    setup_logging()  # reads LOG_* settings once
"""

from algolia_client.infra.logging.config import (
    build_logging_config,
    configure_logging,
    setup_logging,
)
from algolia_client.infra.logging.formatters import JSONFormatter

__all__ = [
    "JSONFormatter",
    "build_logging_config",
    "configure_logging",
    "setup_logging",
]
