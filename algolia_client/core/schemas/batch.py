"""Batch write operations and partial update operators."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import Field

from .base import AlgoliaModel, Record


class BatchAction(StrEnum):
    ADD_OBJECT = "addObject"
    UPDATE_OBJECT = "updateObject"
    PARTIAL_UPDATE_OBJECT = "partialUpdateObject"
    PARTIAL_UPDATE_OBJECT_NO_CREATE = "partialUpdateObjectNoCreate"
    DELETE_OBJECT = "deleteObject"
    CLEAR = "clear"
    DELETE = "delete"


class BatchOperation(AlgoliaModel):
    """One write operation of an index batch."""

    action: BatchAction
    body: Record | None = None


class BatchOperationIndexed(BatchOperation):
    """One write operation of a multi-index batch."""

    index_name: str


def _operation(name: str, value: Any) -> dict[str, Any]:
    return {"_operation": name, "value": value}


def increment_op(value: int | float) -> dict[str, Any]:
    """Partial update: add ``value`` to a numeric attribute."""
    return _operation("Increment", value)


def decrement_op(value: int | float) -> dict[str, Any]:
    """Partial update: subtract ``value`` from a numeric attribute."""
    return _operation("Decrement", value)


def add_op(value: Any) -> dict[str, Any]:
    """Partial update: append ``value`` to an array attribute."""
    return _operation("Add", value)


def remove_op(value: Any) -> dict[str, Any]:
    """Partial update: remove every occurrence of ``value`` from an array attribute."""
    return _operation("Remove", value)


def add_unique_op(value: Any) -> dict[str, Any]:
    """Partial update: append ``value`` unless the array already holds it."""
    return _operation("AddUnique", value)


class RequestOptions(AlgoliaModel):
    """Per-call transport options.

    Attributes:
        forwarded_for: End-user IP, sent as ``X-Forwarded-For``.
        extra_headers: Headers added to this request only.
        extra_url_params: Query-string parameters added to this request only.
    """

    forwarded_for: str | None = None
    extra_headers: dict[str, str] = Field(default_factory=dict)
    extra_url_params: dict[str, str] = Field(default_factory=dict)

    def headers(self) -> dict[str, str]:
        headers = dict(self.extra_headers)
        if self.forwarded_for:
            headers["X-Forwarded-For"] = self.forwarded_for
        return headers
