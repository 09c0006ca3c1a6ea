"""Algolia search API: client, index and browse iterator."""

from algolia_client.search.client import AlgoliaClient
from algolia_client.search.index import Index
from algolia_client.search.iterator import BrowseIterator, BrowseOutcome, OutcomeKind
from algolia_client.search.params import encode_params, validate_params

__all__ = [
    "AlgoliaClient",
    "BrowseIterator",
    "BrowseOutcome",
    "Index",
    "OutcomeKind",
    "encode_params",
    "validate_params",
]
