"""Record CLI commands: search, browse and fetch records of an index."""

import json
import sys

import click

from algolia_client.cli.commands.indexes import format_option
from algolia_client.cli.utils import coro, echo_json, error, get_client, header, info, success
from algolia_client.core.exceptions import AlgoliaException
from algolia_client.search import OutcomeKind


@click.group(name="records")
def records() -> None:
    """Record search and retrieval commands."""


@records.command()
@click.argument("index_name")
@click.argument("query", default="")
@click.option("--filters", default=None, help="Filter expression, e.g. 'brand:acme'")
@click.option("--page", default=0, type=int, help="Page number (0-based)")
@click.option("--hits-per-page", default=20, type=int, help="Hits per page")
@format_option
@coro
async def search(
    index_name: str,
    query: str,
    filters: str | None,
    page: int,
    hits_per_page: int,
    output_format: str,
) -> None:
    """Search INDEX_NAME for QUERY."""
    params = {"page": page, "hitsPerPage": hits_per_page, "filters": filters}
    try:
        async with get_client() as client:
            res = await client.init_index(index_name).search(query, params)
    except AlgoliaException as e:
        error(f"Search failed: {e.detail}")
        sys.exit(1)

    if output_format == "json":
        echo_json(res.to_wire())
        return

    header(f"Results for '{query}' in {index_name}")
    for hit in res.hits:
        attributes = {k: v for k, v in hit.items() if not k.startswith("_")}
        click.echo(json.dumps(attributes, default=str))
    click.echo()
    info(f"Page {res.page + 1}/{max(res.nb_pages, 1)} ({res.processing_time_ms} ms)")
    success(f"{res.nb_hits} hits")


@records.command()
@click.argument("index_name")
@click.option("--query", default="", help="Restrict to records matching this query")
@click.option("--filters", default=None, help="Filter expression")
@click.option(
    "--attribute",
    "attributes",
    multiple=True,
    help="Attribute to retrieve (repeatable, default: all)",
)
@click.option("--limit", default=None, type=int, help="Stop after this many records")
@coro
async def browse(
    index_name: str,
    query: str,
    filters: str | None,
    attributes: tuple[str, ...],
    limit: int | None,
) -> None:
    """Dump the records of INDEX_NAME as JSON Lines."""
    params = {
        "query": query or None,
        "filters": filters,
        "attributesToRetrieve": list(attributes) or None,
    }
    count = 0
    try:
        async with get_client() as client:
            iterator = await client.init_index(index_name).browse_all(params)
            while limit is None or count < limit:
                outcome = await iterator.next_outcome()
                if outcome.kind is OutcomeKind.END:
                    break
                if outcome.kind is OutcomeKind.FAILURE:
                    raise outcome.error
                click.echo(json.dumps(outcome.record, default=str))
                count += 1
    except AlgoliaException as e:
        error(f"Browse failed after {count} records: {e.detail}")
        sys.exit(1)

    click.echo(f"{count} records", err=True)


@records.command()
@click.argument("index_name")
@click.argument("object_id")
@click.option(
    "--attribute",
    "attributes",
    multiple=True,
    help="Attribute to retrieve (repeatable, default: all)",
)
@coro
async def get(index_name: str, object_id: str, attributes: tuple[str, ...]) -> None:
    """Fetch record OBJECT_ID of INDEX_NAME."""
    try:
        async with get_client() as client:
            record = await client.init_index(index_name).get_object(
                object_id, list(attributes) or None
            )
    except AlgoliaException as e:
        error(f"Failed to get {object_id}: {e.detail}")
        sys.exit(1)

    echo_json(record)
