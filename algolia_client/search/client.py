"""Application-level Algolia client.

Entry point of the library: holds the transport for one application and
hands out :class:`Index` handles.

Example:
    ```python
    async with AlgoliaClient("APPID", "admin-key") as client:
        index = client.init_index("products")
        res = await index.add_objects([{"objectID": "1", "name": "phone"}])
        await index.wait_task(res.task_id)
    ```
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import SecretStr

from algolia_client.core.exceptions import AlgoliaException
from algolia_client.core.schemas import (
    BatchOperationIndexed,
    DeleteTaskRes,
    IndexedQuery,
    IndexRes,
    LogRes,
    MultipleBatchRes,
    MultipleQueryRes,
    UpdateTaskRes,
)
from algolia_client.core.settings import AlgoliaSettings, get_algolia_settings
from algolia_client.infra.external import BaseHTTPClient
from algolia_client.search.index import Index
from algolia_client.search.keys import KeyManagementMixin
from algolia_client.search.params import encode_params

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx

    from algolia_client.core.schemas import RequestOptions

logger = logging.getLogger(__name__)

MULTIPLE_QUERIES_STRATEGIES = ("none", "stopIfEnoughMatches")


class AlgoliaClient(KeyManagementMixin):
    """Client for one Algolia application.

    Args:
        app_id: Application ID.
        api_key: API key; its ACL bounds what the client may do.
        hosts: Explicit host list, overriding the default DSN/write hosts
            and their fallbacks.
        settings: Timeouts, pool size and polling budgets. Defaults to
            ``AlgoliaSettings`` read from the environment.
        http_client: Caller-managed httpx client.
    """

    _keys_path = "/1/keys"

    def __init__(
        self,
        app_id: str,
        api_key: str,
        hosts: list[str] | None = None,
        *,
        settings: AlgoliaSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or AlgoliaSettings(
            application_id=app_id, api_key=SecretStr(api_key)
        )
        self.app_id = app_id
        self.transport = BaseHTTPClient(
            app_id,
            api_key,
            hosts or self.settings.hosts or None,
            connect_timeout=self.settings.connect_timeout,
            read_timeout=self.settings.read_timeout,
            max_idle_conns_per_host=self.settings.max_idle_conns_per_host,
            max_connections=self.settings.max_connections,
            user_agent=self.settings.user_agent,
            http_client=http_client,
        )

    @classmethod
    def from_settings(
        cls,
        settings: AlgoliaSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> AlgoliaClient:
        """Build a client from ``ALGOLIA_*`` settings.

        Raises:
            AlgoliaException: Application ID or API key is missing.
        """
        settings = settings or get_algolia_settings()
        if not settings.is_configured:
            raise AlgoliaException(
                status_code=0,
                detail="ALGOLIA_APPLICATION_ID and ALGOLIA_API_KEY must be set",
                type="configuration-error",
                title="Configuration Error",
            )
        return cls(
            settings.application_id,
            settings.api_key.get_secret_value(),
            settings.hosts or None,
            settings=settings,
            http_client=http_client,
        )

    def __repr__(self) -> str:
        return f"AlgoliaClient(app_id={self.app_id!r})"

    async def close(self) -> None:
        await self.transport.close()

    async def __aenter__(self) -> AlgoliaClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    # ------------------------------------------------------------------
    # Network configuration
    # ------------------------------------------------------------------

    def set_extra_header(self, key: str, value: str) -> None:
        self.transport.set_extra_header(key, value)

    def set_timeout(self, connect_timeout: float, read_timeout: float) -> None:
        self.transport.set_timeout(connect_timeout, read_timeout)

    def set_max_idle_conns_per_host(self, max_idle_conns_per_host: int) -> None:
        self.transport.set_max_idle_conns_per_host(max_idle_conns_per_host)

    def set_http_client(self, client: httpx.AsyncClient) -> None:
        self.transport.set_http_client(client)

    # ------------------------------------------------------------------
    # Indexes
    # ------------------------------------------------------------------

    def init_index(self, name: str) -> Index:
        """Return a handle on ``name``; no request is sent."""
        return Index(self, name)

    async def list_indexes(
        self, *, request_options: RequestOptions | None = None
    ) -> list[IndexRes]:
        payload = await self.transport.request(
            "GET", "/1/indexes", read=True, request_options=request_options
        )
        return [IndexRes.from_response(item) for item in payload.get("items", [])]

    async def move_index(
        self, source: str, destination: str, *, request_options: RequestOptions | None = None
    ) -> UpdateTaskRes:
        """Rename ``source`` as ``destination``, overwriting it if it exists."""
        return await self.init_index(source).move(destination, request_options=request_options)

    async def copy_index(
        self, source: str, destination: str, *, request_options: RequestOptions | None = None
    ) -> UpdateTaskRes:
        return await self.init_index(source).copy(destination, request_options=request_options)

    async def delete_index(
        self, name: str, *, request_options: RequestOptions | None = None
    ) -> DeleteTaskRes:
        return await self.init_index(name).delete(request_options=request_options)

    async def clear_index(
        self, name: str, *, request_options: RequestOptions | None = None
    ) -> UpdateTaskRes:
        return await self.init_index(name).clear(request_options=request_options)

    # ------------------------------------------------------------------
    # Logs
    # ------------------------------------------------------------------

    async def get_logs(
        self,
        params: Mapping[str, Any] | None = None,
        *,
        request_options: RequestOptions | None = None,
    ) -> list[LogRes]:
        """Return the latest API calls.

        ``params`` accepts ``length``, ``offset``, ``indexName`` and ``type``
        (``all``, ``query``, ``build`` or ``error``).
        """
        query = {k: str(v) for k, v in (params or {}).items() if v is not None}
        payload = await self.transport.request(
            "GET", "/1/logs", params=query, read=True, request_options=request_options
        )
        return [LogRes.from_response(entry) for entry in payload.get("logs", [])]

    # ------------------------------------------------------------------
    # Multi-index operations
    # ------------------------------------------------------------------

    async def multiple_queries(
        self,
        queries: list[IndexedQuery],
        strategy: str = "none",
        *,
        request_options: RequestOptions | None = None,
    ) -> list[MultipleQueryRes]:
        """Run several queries in one round trip.

        With ``stopIfEnoughMatches`` the engine stops once the hits of the
        queries already run reach the ``hitsPerPage`` of the first one.
        """
        if strategy not in MULTIPLE_QUERIES_STRATEGIES:
            msg = f"strategy must be one of {', '.join(MULTIPLE_QUERIES_STRATEGIES)}"
            raise ValueError(msg)

        requests = [
            {"indexName": q.index_name, "params": encode_params(q.params)} for q in queries
        ]
        payload = await self.transport.request(
            "POST",
            "/1/indexes/*/queries",
            body={"requests": requests, "strategy": strategy},
            read=True,
            request_options=request_options,
        )
        return [MultipleQueryRes.from_response(r) for r in payload.get("results", [])]

    async def batch(
        self,
        operations: list[BatchOperationIndexed],
        *,
        request_options: RequestOptions | None = None,
    ) -> MultipleBatchRes:
        """Apply write operations spanning several indexes."""
        payload = await self.transport.request(
            "POST",
            "/1/indexes/*/batch",
            body={"requests": [op.to_wire() for op in operations]},
            request_options=request_options,
        )
        res = MultipleBatchRes.from_response(payload)
        logger.info(
            f"Multi-index batch of {len(operations)} operations sent",
            extra={"operations": len(operations), "indexes": sorted(res.task_id)},
        )
        return res


__all__ = ["AlgoliaClient", "MULTIPLE_QUERIES_STRATEGIES"]
