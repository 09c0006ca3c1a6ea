"""API key CLI commands."""

import sys

import click

from algolia_client.cli.commands.indexes import format_option
from algolia_client.cli.utils import coro, echo_json, error, get_client, header, info, success
from algolia_client.core.exceptions import AlgoliaException


@click.group(name="keys")
def keys() -> None:
    """API key management commands."""


@keys.command(name="list")
@click.option("--index", "index_name", default=None, help="List the keys of this index only")
@format_option
@coro
async def list_keys(index_name: str | None, output_format: str) -> None:
    """List API keys and their ACL."""
    try:
        async with get_client() as client:
            owner = client.init_index(index_name) if index_name else client
            found = await owner.list_keys()
    except AlgoliaException as e:
        error(f"Failed to list keys: {e.detail}")
        sys.exit(1)

    if output_format == "json":
        echo_json([key.to_wire() for key in found])
        return

    header("API keys")
    if not found:
        info("No keys found")
        return

    click.echo(f"{'Key':<34} {'ACL':<45} {'Description'}")
    click.echo("-" * 100)
    for key in found:
        click.echo(f"{key.value:<34} {','.join(key.acl):<45} {key.description}")
    click.echo()
    success(f"Total: {len(found)} keys")


@keys.command()
@click.argument("key")
@coro
async def get(key: str) -> None:
    """Show the ACL and restrictions of KEY."""
    try:
        async with get_client() as client:
            found = await client.get_api_key(key)
    except AlgoliaException as e:
        error(f"Failed to get key: {e.detail}")
        sys.exit(1)

    echo_json(found.to_wire())


@keys.command()
@click.argument("key")
@click.option("--force", is_flag=True, help="Skip confirmation prompt")
@coro
async def delete(key: str, force: bool) -> None:
    """Delete API key KEY."""
    if not force and not click.confirm(f"Delete key {key}?"):
        info("Delete cancelled")
        return

    try:
        async with get_client() as client:
            await client.delete_api_key(key)
    except AlgoliaException as e:
        error(f"Failed to delete key: {e.detail}")
        sys.exit(1)

    success(f"Key {key} deleted")
