"""Search, browse and facet search results."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .base import AlgoliaModel, Record


class QueryRes(AlgoliaModel):
    """Result page of a search query."""

    hits: list[Record] = Field(default_factory=list)
    nb_hits: int = 0
    page: int = 0
    nb_pages: int = 0
    hits_per_page: int = 0
    processing_time_ms: int = Field(default=0, alias="processingTimeMS")
    query: str = ""
    params: str = ""
    facets: dict[str, dict[str, int]] | None = None
    facets_stats: dict[str, dict[str, float]] | None = Field(default=None, alias="facets_stats")
    exhaustive_facets_count: bool | None = None
    exhaustive_nb_hits: bool | None = None
    parsed_query: str | None = None
    query_after_removal: str | None = None
    query_id: str | None = Field(default=None, alias="queryID")
    message: str | None = None
    user_data: list[Any] | None = None


class BrowseRes(QueryRes):
    """One browse page: the hits plus the cursor of the next page.

    ``cursor`` is absent (or empty) on the final page.
    """

    cursor: str | None = None

    @property
    def has_more(self) -> bool:
        return bool(self.cursor)


class MultipleQueryRes(QueryRes):
    """One result of a multi-index query, tagged with its index."""

    index: str = ""
    processed: bool | None = None


class IndexedQuery(AlgoliaModel):
    """A query targeting a specific index, used by multi-index queries."""

    index_name: str
    params: dict[str, Any] = Field(default_factory=dict)


class FacetHit(AlgoliaModel):
    value: str
    highlighted: str = ""
    count: int = 0


class SearchFacetRes(AlgoliaModel):
    facet_hits: list[FacetHit] = Field(default_factory=list)
    exhaustive_facets_count: bool | None = None
    processing_time_ms: int = Field(default=0, alias="processingTimeMS")
