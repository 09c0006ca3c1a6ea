"""Acknowledgements returned by write operations."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .base import AlgoliaModel


class UpdateTaskRes(AlgoliaModel):
    task_id: int = Field(alias="taskID")
    updated_at: datetime | None = None


class DeleteTaskRes(AlgoliaModel):
    task_id: int = Field(alias="taskID")
    deleted_at: datetime | None = None


class CreateObjectRes(AlgoliaModel):
    task_id: int = Field(alias="taskID")
    object_id: str = Field(alias="objectID")
    created_at: datetime | None = None


class UpdateObjectRes(AlgoliaModel):
    task_id: int = Field(alias="taskID")
    object_id: str = Field(alias="objectID")
    updated_at: datetime | None = None


class BatchRes(AlgoliaModel):
    task_id: int = Field(alias="taskID")
    object_ids: list[str | None] = Field(default_factory=list, alias="objectIDs")


class MultipleBatchRes(AlgoliaModel):
    """Result of a batch spanning several indexes (one task per index)."""

    task_id: dict[str, int] = Field(alias="taskID")
    object_ids: list[str | None] = Field(default_factory=list, alias="objectIDs")


class TaskStatusRes(AlgoliaModel):
    status: str
    pending_task: bool = False

    @property
    def is_published(self) -> bool:
        return self.status == "published"


class DeleteRes(AlgoliaModel):
    deleted_at: datetime | None = None
