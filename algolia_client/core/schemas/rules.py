"""Query rule schemas."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import Field

from .base import AlgoliaModel


class RulePatternAnchoring(StrEnum):
    IS = "is"
    STARTS_WITH = "startsWith"
    ENDS_WITH = "endsWith"
    CONTAINS = "contains"


class RuleCondition(AlgoliaModel):
    pattern: str = ""
    anchoring: RulePatternAnchoring = RulePatternAnchoring.IS
    context: str | None = None
    alternatives: bool | None = None


class RuleConsequence(AlgoliaModel):
    params: dict[str, Any] | None = None
    promote: list[dict[str, Any]] | None = None
    hide: list[dict[str, Any]] | None = None
    filter_promotes: bool | None = None
    user_data: Any = None


class TimeRange(AlgoliaModel):
    # Unix timestamps
    from_: int = Field(alias="from")
    until: int


class Rule(AlgoliaModel):
    """A query rule: a condition on the query and the consequence to apply."""

    object_id: str = Field(alias="objectID")
    condition: RuleCondition | None = None
    consequence: RuleConsequence = Field(default_factory=RuleConsequence)
    description: str | None = None
    enabled: bool | None = None
    validity: list[TimeRange] | None = None


class SaveRuleRes(AlgoliaModel):
    task_id: int = Field(alias="taskID")
    updated_at: datetime | None = None
    id: str | None = None


class BatchRulesRes(AlgoliaModel):
    task_id: int = Field(alias="taskID")
    updated_at: datetime | None = None


class DeleteRuleRes(AlgoliaModel):
    task_id: int = Field(alias="taskID")
    deleted_at: datetime | None = None


class ClearRulesRes(AlgoliaModel):
    task_id: int = Field(alias="taskID")
    updated_at: datetime | None = None


class SearchRulesRes(AlgoliaModel):
    hits: list[Rule] = Field(default_factory=list)
    nb_hits: int = 0
    page: int = 0
    nb_pages: int = 0
