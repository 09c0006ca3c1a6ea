"""Asynchronous client for the Algolia search REST API."""

from algolia_client.core.exceptions import (
    AlgoliaDecodeError,
    AlgoliaException,
    AlgoliaHTTPError,
    AlgoliaUnreachableHostsError,
    InvalidParameterTypeError,
    NoMoreHitsError,
    TaskTimeoutError,
)
from algolia_client.search import (
    AlgoliaClient,
    BrowseIterator,
    BrowseOutcome,
    Index,
    OutcomeKind,
)

__version__ = "0.1.0"

__all__ = [
    "AlgoliaClient",
    "AlgoliaDecodeError",
    "AlgoliaException",
    "AlgoliaHTTPError",
    "AlgoliaUnreachableHostsError",
    "BrowseIterator",
    "BrowseOutcome",
    "Index",
    "InvalidParameterTypeError",
    "NoMoreHitsError",
    "OutcomeKind",
    "TaskTimeoutError",
    "__version__",
]
