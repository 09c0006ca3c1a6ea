"""Index settings CLI commands."""

import json
import sys

import click

from algolia_client.cli.commands.indexes import format_option
from algolia_client.cli.utils import coro, echo_json, error, get_client, header, success
from algolia_client.core.exceptions import AlgoliaException


@click.group(name="settings")
def settings() -> None:
    """Index settings commands."""


@settings.command()
@click.argument("index_name")
@format_option
@coro
async def get(index_name: str, output_format: str) -> None:
    """Show the settings of INDEX_NAME."""
    try:
        async with get_client() as client:
            current = await client.init_index(index_name).get_settings()
    except AlgoliaException as e:
        error(f"Failed to get settings: {e.detail}")
        sys.exit(1)

    values = current.to_map()
    if output_format == "json":
        echo_json(values)
        return

    header(f"Settings of {index_name}")
    width = max((len(k) for k in values), default=0)
    for key, value in sorted(values.items()):
        rendered = value if isinstance(value, str) else json.dumps(value)
        click.echo(f"  {key:<{width}}  {rendered}")


@settings.command(name="set")
@click.argument("index_name")
@click.argument("values")
@click.option("--forward-to-replicas", is_flag=True, help="Apply the settings to replicas too")
@click.option("--wait/--no-wait", default=False, help="Wait until the settings are published")
@coro
async def set_settings(index_name: str, values: str, forward_to_replicas: bool, wait: bool) -> None:
    """Update the settings of INDEX_NAME from a JSON object.

    \b
    Example:
      algolia-client settings set products '{"searchableAttributes": ["name"]}'
    """
    try:
        changes = json.loads(values)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="VALUES") from e
    if not isinstance(changes, dict):
        raise click.BadParameter("expected a JSON object", param_hint="VALUES")

    try:
        async with get_client() as client:
            index = client.init_index(index_name)
            res = await index.set_settings(changes, forward_to_replicas=forward_to_replicas)
            if wait:
                await index.wait_task(res.task_id)
    except AlgoliaException as e:
        error(f"Failed to update settings: {e.detail}")
        sys.exit(1)

    success(f"Settings of {index_name} updated (task {res.task_id})")
