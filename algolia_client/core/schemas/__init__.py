"""Pydantic schemas for Algolia requests and responses."""

from __future__ import annotations

from .base import AlgoliaModel, Record
from .batch import (
    BatchAction,
    BatchOperation,
    BatchOperationIndexed,
    RequestOptions,
    add_op,
    add_unique_op,
    decrement_op,
    increment_op,
    remove_op,
)
from .indexes import IndexRes, LogRes
from .keys import ACL_VALUES, AddKeyRes, Key, UpdateKeyRes
from .rules import (
    BatchRulesRes,
    ClearRulesRes,
    DeleteRuleRes,
    Rule,
    RuleCondition,
    RuleConsequence,
    RulePatternAnchoring,
    SaveRuleRes,
    SearchRulesRes,
    TimeRange,
)
from .search import (
    BrowseRes,
    FacetHit,
    IndexedQuery,
    MultipleQueryRes,
    QueryRes,
    SearchFacetRes,
)
from .settings import Settings
from .synonyms import SearchSynonymsRes, Synonym, SynonymType
from .tasks import (
    BatchRes,
    CreateObjectRes,
    DeleteRes,
    DeleteTaskRes,
    MultipleBatchRes,
    TaskStatusRes,
    UpdateObjectRes,
    UpdateTaskRes,
)

__all__ = [
    "ACL_VALUES",
    "AddKeyRes",
    "AlgoliaModel",
    "BatchAction",
    "BatchOperation",
    "BatchOperationIndexed",
    "BatchRes",
    "BatchRulesRes",
    "BrowseRes",
    "ClearRulesRes",
    "CreateObjectRes",
    "DeleteRes",
    "DeleteRuleRes",
    "DeleteTaskRes",
    "FacetHit",
    "IndexRes",
    "IndexedQuery",
    "Key",
    "LogRes",
    "MultipleBatchRes",
    "MultipleQueryRes",
    "QueryRes",
    "Record",
    "RequestOptions",
    "Rule",
    "RuleCondition",
    "RuleConsequence",
    "RulePatternAnchoring",
    "SaveRuleRes",
    "SearchFacetRes",
    "SearchRulesRes",
    "SearchSynonymsRes",
    "Settings",
    "Synonym",
    "SynonymType",
    "TaskStatusRes",
    "TimeRange",
    "UpdateKeyRes",
    "UpdateObjectRes",
    "UpdateTaskRes",
    "add_op",
    "add_unique_op",
    "decrement_op",
    "increment_op",
    "remove_op",
]
