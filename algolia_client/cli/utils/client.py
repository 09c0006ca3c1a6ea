"""Client construction for CLI commands."""

import click

from algolia_client.core.exceptions import AlgoliaException
from algolia_client.search import AlgoliaClient


def get_client() -> AlgoliaClient:
    """Build a client from ``ALGOLIA_*`` settings, or abort with a usage error."""
    try:
        return AlgoliaClient.from_settings()
    except AlgoliaException as e:
        raise click.UsageError(e.detail) from e
