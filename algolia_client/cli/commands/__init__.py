"""CLI command modules."""

from algolia_client.cli.commands import indexes, keys, records, settings

__all__ = [
    "indexes",
    "keys",
    "records",
    "settings",
]
