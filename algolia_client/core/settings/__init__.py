"""Pydantic Settings v2 configuration for the Algolia client.

Settings are read from environment variables (and a local ``.env`` file):
- ``ALGOLIA_*`` for credentials, hosts, timeouts and polling budgets
- ``LOG_*`` for logging

Import settings via the cached loaders:
    from algolia_client.core.settings import get_algolia_settings

    settings = get_algolia_settings()
    print(settings.application_id)

Configuration precedence (highest to lowest):
    1. init kwargs (testing/overrides)
    2. Environment variables
    3. .env file
"""

from __future__ import annotations

from .algolia import AlgoliaSettings
from .loader import clear_all_caches, get_algolia_settings, get_logging_settings
from .logs import LoggingSettings

__all__ = [
    "AlgoliaSettings",
    "LoggingSettings",
    "clear_all_caches",
    "get_algolia_settings",
    "get_logging_settings",
]
