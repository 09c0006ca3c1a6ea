"""API key schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .base import AlgoliaModel

# ACL entries accepted by the API
ACL_VALUES = frozenset(
    {
        "search",
        "browse",
        "addObject",
        "deleteObject",
        "deleteIndex",
        "settings",
        "editSettings",
        "analytics",
        "listIndexes",
        "logs",
        "seeUnretrievableAttributes",
        "usage",
        "recommendation",
    }
)


class Key(AlgoliaModel):
    """An API key and its restrictions."""

    value: str = ""
    acl: list[str] = Field(default_factory=list)
    created_at: int = 0
    description: str = ""
    indexes: list[str] = Field(default_factory=list)
    max_hits_per_query: int = 0
    max_queries_per_ip_per_hour: int = Field(default=0, alias="maxQueriesPerIPPerHour")
    query_parameters: str = ""
    referers: list[str] = Field(default_factory=list)
    validity: int = 0


class AddKeyRes(AlgoliaModel):
    key: str
    created_at: datetime | None = None


class UpdateKeyRes(AlgoliaModel):
    key: str
    updated_at: datetime | None = None
