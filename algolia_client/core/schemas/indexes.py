"""Index listing and log entries."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import ConfigDict, Field

from .base import AlgoliaModel


class IndexRes(AlgoliaModel):
    """One entry of the index listing."""

    name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    entries: int = 0
    data_size: int = 0
    file_size: int = 0
    last_build_time_s: int = Field(default=0, alias="lastBuildTimeS")
    number_of_pending_tasks: int = 0
    pending_task: bool = False
    primary: str | None = None
    replicas: list[str] | None = None


class LogRes(AlgoliaModel):
    """One API log entry as returned by ``GET /1/logs``.

    Log entries use snake_case on the wire.
    """

    model_config = ConfigDict(alias_generator=None)

    timestamp: datetime | None = None
    method: str = ""
    answer_code: str = ""
    query_body: str = ""
    answer: str = ""
    url: str = ""
    ip: str = ""
    query_headers: str = ""
    sha1: str = ""
    nb_api_calls: str | None = None
    processing_time_ms: str | None = None
    index: str | None = None
    query_params: str | None = None
    query_nb_hits: str | None = None
    inner_queries: list[dict[str, Any]] | None = None
