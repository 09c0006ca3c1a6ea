"""CLI utilities for running async operations and formatting output."""

from algolia_client.cli.utils.async_runner import coro
from algolia_client.cli.utils.client import get_client
from algolia_client.cli.utils.formatters import (
    echo_json,
    error,
    header,
    info,
    success,
    warning,
)

__all__ = [
    "coro",
    "echo_json",
    "error",
    "get_client",
    "header",
    "info",
    "success",
    "warning",
]
