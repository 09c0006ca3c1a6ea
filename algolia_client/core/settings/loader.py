"""LRU-cached settings loaders.

Settings are loaded and validated once, then cached for the lifetime of the
process.

Testing:
    In tests, clear the cache to force reload:
    clear_all_caches()

    Or override with custom values:
    settings = AlgoliaSettings(application_id="TEST", api_key="secret")
"""

from __future__ import annotations

from functools import lru_cache

from .algolia import AlgoliaSettings
from .logs import LoggingSettings


@lru_cache(maxsize=1)
def get_algolia_settings() -> AlgoliaSettings:
    """Get cached Algolia client settings.

    Returns:
        Validated and frozen AlgoliaSettings instance.
    """
    return AlgoliaSettings()


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """Get cached logging settings.

    Returns:
        Validated and frozen LoggingSettings instance.
    """
    return LoggingSettings()


def clear_all_caches() -> None:
    """Clear every cached settings instance."""
    get_algolia_settings.cache_clear()
    get_logging_settings.cache_clear()
