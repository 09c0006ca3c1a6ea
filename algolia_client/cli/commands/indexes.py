"""Index management CLI commands.

- indexes list: List the indexes of the application
- indexes delete: Delete an index
- indexes clear: Remove every record of an index
- indexes copy / move: Copy or rename an index
"""

import sys

import click

from algolia_client.cli.utils import coro, echo_json, error, get_client, header, info, success, warning
from algolia_client.core.exceptions import AlgoliaException

format_option = click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)

wait_option = click.option(
    "--wait/--no-wait",
    default=False,
    help="Wait until the operation is published",
)


@click.group(name="indexes")
def indexes() -> None:
    """Index management commands."""


@indexes.command(name="list")
@format_option
@coro
async def list_indexes(output_format: str) -> None:
    """List all indexes with their record counts."""
    try:
        async with get_client() as client:
            items = await client.list_indexes()
    except AlgoliaException as e:
        error(f"Failed to list indexes: {e.detail}")
        sys.exit(1)

    if output_format == "json":
        echo_json([item.to_wire() for item in items])
        return

    header("Indexes")
    if not items:
        info("No indexes found")
        return

    click.echo(f"{'Name':<40} {'Entries':>10} {'Data size':>12} {'Updated':<25}")
    click.echo("-" * 90)
    for item in items:
        updated = item.updated_at.isoformat() if item.updated_at else "-"
        click.echo(f"{item.name:<40} {item.entries:>10} {item.data_size:>12} {updated:<25}")
    click.echo()
    success(f"Total: {len(items)} indexes")


@indexes.command()
@click.argument("name")
@click.option("--force", is_flag=True, help="Skip confirmation prompt")
@wait_option
@coro
async def delete(name: str, force: bool, wait: bool) -> None:
    """Delete index NAME with its records, settings and synonyms."""
    if not force:
        warning(f"This will permanently delete index '{name}'.")
        if not click.confirm("Continue?"):
            info("Delete cancelled")
            return

    try:
        async with get_client() as client:
            index = client.init_index(name)
            res = await index.delete()
            if wait:
                await index.wait_task(res.task_id)
    except AlgoliaException as e:
        error(f"Failed to delete index {name}: {e.detail}")
        sys.exit(1)

    success(f"Index {name} deleted (task {res.task_id})")


@indexes.command()
@click.argument("name")
@click.option("--force", is_flag=True, help="Skip confirmation prompt")
@wait_option
@coro
async def clear(name: str, force: bool, wait: bool) -> None:
    """Remove every record of index NAME, keeping its settings."""
    if not force:
        warning(f"This will remove every record of index '{name}'.")
        if not click.confirm("Continue?"):
            info("Clear cancelled")
            return

    try:
        async with get_client() as client:
            index = client.init_index(name)
            res = await index.clear()
            if wait:
                await index.wait_task(res.task_id)
    except AlgoliaException as e:
        error(f"Failed to clear index {name}: {e.detail}")
        sys.exit(1)

    success(f"Index {name} cleared (task {res.task_id})")


@indexes.command()
@click.argument("source")
@click.argument("destination")
@wait_option
@coro
async def copy(source: str, destination: str, wait: bool) -> None:
    """Copy index SOURCE to DESTINATION."""
    try:
        async with get_client() as client:
            res = await client.copy_index(source, destination)
            if wait:
                await client.init_index(destination).wait_task(res.task_id)
    except AlgoliaException as e:
        error(f"Failed to copy {source} to {destination}: {e.detail}")
        sys.exit(1)

    success(f"Index {source} copied to {destination} (task {res.task_id})")


@indexes.command()
@click.argument("source")
@click.argument("destination")
@wait_option
@coro
async def move(source: str, destination: str, wait: bool) -> None:
    """Rename index SOURCE as DESTINATION."""
    try:
        async with get_client() as client:
            res = await client.move_index(source, destination)
            if wait:
                await client.init_index(destination).wait_task(res.task_id)
    except AlgoliaException as e:
        error(f"Failed to move {source} to {destination}: {e.detail}")
        sys.exit(1)

    success(f"Index {source} moved to {destination} (task {res.task_id})")
