"""Main CLI entry point for algolia-client commands."""

import click

from algolia_client.cli.commands import indexes, keys, records, settings
from algolia_client.infra.logging.config import setup_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="algolia-client")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Algolia CLI - Manage the indexes, records and keys of an application.

    Credentials are read from ALGOLIA_APPLICATION_ID and ALGOLIA_API_KEY
    (environment or .env file).

    \b
    Command Groups:
      indexes    List, delete, clear, copy and move indexes
      keys       API key management
      records    Search, browse and fetch records
      settings   Index settings

    \b
    Quick Start:
      algolia-client indexes list
      algolia-client records search products "phone" --hits-per-page 5
      algolia-client records browse products > products.jsonl
    """
    ctx.ensure_object(dict)


cli.add_command(indexes.indexes)
cli.add_command(keys.keys)
cli.add_command(records.records)
cli.add_command(settings.settings)


def main() -> None:
    """Entry point for CLI."""
    setup_logging()
    cli(obj={})


if __name__ == "__main__":
    main()
