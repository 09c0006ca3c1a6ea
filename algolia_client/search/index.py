"""Operations scoped to a single Algolia index."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING, Any
from urllib.parse import quote
import warnings

from algolia_client.core.exceptions import InvalidParameterTypeError, TaskTimeoutError
from algolia_client.core.schemas import (
    BatchAction,
    BatchOperation,
    BatchRes,
    BatchRulesRes,
    BrowseRes,
    ClearRulesRes,
    CreateObjectRes,
    DeleteRuleRes,
    DeleteTaskRes,
    QueryRes,
    Rule,
    SaveRuleRes,
    SearchFacetRes,
    SearchRulesRes,
    SearchSynonymsRes,
    Settings,
    Synonym,
    TaskStatusRes,
    UpdateObjectRes,
    UpdateTaskRes,
)
from algolia_client.search.iterator import BrowseIterator
from algolia_client.search.keys import KeyManagementMixin
from algolia_client.search.params import encode_params, encode_url_params
from algolia_client.utils.retry import Backoff

if TYPE_CHECKING:
    from collections.abc import Mapping

    from algolia_client.core.schemas import Record, RequestOptions
    from algolia_client.search.client import AlgoliaClient

logger = logging.getLogger(__name__)


def _object_id(record: Mapping[str, Any]) -> str:
    object_id = record.get("objectID")
    if not isinstance(object_id, str) or not object_id:
        raise InvalidParameterTypeError("objectID", "non-empty str")
    return object_id


def _flag(value: bool) -> str:
    return "true" if value else "false"


class Index(KeyManagementMixin):
    """Handle on one index of an application.

    Created through :meth:`AlgoliaClient.init_index`; holds no state besides
    the index name, so handles are cheap and may be shared.
    """

    def __init__(self, client: AlgoliaClient, name: str) -> None:
        self.client = client
        self.name = name
        self.transport = client.transport
        self.settings = client.settings
        self._path = f"/1/indexes/{quote(name, safe='')}"
        self._keys_path = f"{self._path}/keys"

    def __repr__(self) -> str:
        return f"Index(name={self.name!r})"

    def _object_path(self, object_id: str) -> str:
        return f"{self._path}/{quote(object_id, safe='')}"

    async def _request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
        read: bool = False,
        request_options: RequestOptions | None = None,
    ) -> Any:
        return await self.transport.request(
            method,
            f"{self._path}{path}",
            body=body,
            params=encode_url_params(params),
            read=read,
            request_options=request_options,
        )

    # ------------------------------------------------------------------
    # Index lifecycle
    # ------------------------------------------------------------------

    async def delete(self, *, request_options: RequestOptions | None = None) -> DeleteTaskRes:
        """Delete the index and all its records, settings and synonyms."""
        payload = await self._request("DELETE", "", request_options=request_options)
        return DeleteTaskRes.from_response(payload)

    async def clear(self, *, request_options: RequestOptions | None = None) -> UpdateTaskRes:
        """Remove every record while keeping settings, synonyms and rules."""
        payload = await self._request("POST", "/clear", request_options=request_options)
        return UpdateTaskRes.from_response(payload)

    async def copy(
        self, destination: str, *, request_options: RequestOptions | None = None
    ) -> UpdateTaskRes:
        return await self._operation("copy", destination, request_options)

    async def move(
        self, destination: str, *, request_options: RequestOptions | None = None
    ) -> UpdateTaskRes:
        return await self._operation("move", destination, request_options)

    async def _operation(
        self, operation: str, destination: str, request_options: RequestOptions | None
    ) -> UpdateTaskRes:
        payload = await self._request(
            "POST",
            "/operation",
            body={"operation": operation, "destination": destination},
            request_options=request_options,
        )
        logger.info(
            f"Index {operation} requested",
            extra={"index": self.name, "operation": operation, "destination": destination},
        )
        return UpdateTaskRes.from_response(payload)

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------

    async def get_status(
        self, task_id: int, *, request_options: RequestOptions | None = None
    ) -> TaskStatusRes:
        payload = await self._request(
            "GET", f"/task/{task_id}", read=True, request_options=request_options
        )
        return TaskStatusRes.from_response(payload)

    async def wait_task(
        self,
        task_id: int,
        *,
        timeout: float | None = None,
        request_options: RequestOptions | None = None,
    ) -> None:
        """Block until the task is published.

        The status is polled with a delay starting at ``wait_task_initial_delay``
        and doubling up to ``wait_task_max_delay``.

        Raises:
            TaskTimeoutError: The task is still pending after ``timeout``
                seconds (``wait_task_timeout`` by default).
        """
        budget = self.settings.wait_task_timeout if timeout is None else timeout
        backoff = Backoff(
            initial_delay=self.settings.wait_task_initial_delay,
            max_delay=self.settings.wait_task_max_delay,
        )
        deadline = time.monotonic() + budget

        for delay in backoff:
            status = await self.get_status(task_id, request_options=request_options)
            if status.is_published:
                logger.debug(
                    f"Task {task_id} published", extra={"index": self.name, "task_id": task_id}
                )
                return
            if time.monotonic() + delay > deadline:
                raise TaskTimeoutError(self.name, task_id, budget)
            await asyncio.sleep(delay)

    # ------------------------------------------------------------------
    # Records
    # ------------------------------------------------------------------

    async def get_object(
        self,
        object_id: str,
        attributes: list[str] | None = None,
        *,
        request_options: RequestOptions | None = None,
    ) -> Record:
        """Fetch one record; ``attributes`` restricts the returned attributes."""
        params = {"attributes": ",".join(attributes)} if attributes else None
        return await self.transport.request(
            "GET",
            self._object_path(object_id),
            params=params,
            read=True,
            request_options=request_options,
        )

    async def get_objects(
        self,
        object_ids: list[str],
        attributes_to_retrieve: list[str] | None = None,
        *,
        request_options: RequestOptions | None = None,
    ) -> list[Record | None]:
        """Fetch several records at once; missing records come back as ``None``."""
        requests = []
        for object_id in object_ids:
            request: dict[str, Any] = {"indexName": self.name, "objectID": object_id}
            if attributes_to_retrieve:
                request["attributesToRetrieve"] = ",".join(attributes_to_retrieve)
            requests.append(request)

        payload = await self.transport.request(
            "POST",
            "/1/indexes/*/objects",
            body={"requests": requests},
            read=True,
            request_options=request_options,
        )
        return payload.get("results", [])

    async def get_objects_attrs(
        self,
        object_ids: list[str],
        attributes_to_retrieve: list[str],
        *,
        request_options: RequestOptions | None = None,
    ) -> list[Record | None]:
        warnings.warn(
            "get_objects_attrs is deprecated, use get_objects instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return await self.get_objects(
            object_ids, attributes_to_retrieve, request_options=request_options
        )

    async def add_object(
        self, record: Record, *, request_options: RequestOptions | None = None
    ) -> CreateObjectRes:
        """Add a record; the engine assigns an ``objectID`` when it has none."""
        payload = await self._request("POST", "", body=record, request_options=request_options)
        return CreateObjectRes.from_response(payload)

    async def update_object(
        self, record: Record, *, request_options: RequestOptions | None = None
    ) -> UpdateObjectRes:
        """Replace (or create) the record identified by its ``objectID``."""
        object_id = _object_id(record)
        payload = await self.transport.request(
            "PUT", self._object_path(object_id), body=record, request_options=request_options
        )
        return UpdateObjectRes.from_response(payload)

    async def partial_update_object(
        self, record: Record, *, request_options: RequestOptions | None = None
    ) -> UpdateTaskRes:
        """Update the given attributes only, creating the record if missing.

        Attribute values may be operations built with ``increment_op``,
        ``decrement_op``, ``add_op``, ``remove_op`` or ``add_unique_op``.
        """
        return await self._partial_update(record, True, request_options)

    async def partial_update_object_no_create(
        self, record: Record, *, request_options: RequestOptions | None = None
    ) -> UpdateTaskRes:
        """Like :meth:`partial_update_object`, but never creates the record."""
        return await self._partial_update(record, False, request_options)

    async def _partial_update(
        self, record: Record, create: bool, request_options: RequestOptions | None
    ) -> UpdateTaskRes:
        object_id = _object_id(record)
        payload = await self.transport.request(
            "POST",
            f"{self._object_path(object_id)}/partial",
            body=record,
            params={"createIfNotExists": _flag(create)},
            request_options=request_options,
        )
        return UpdateTaskRes.from_response(payload)

    async def delete_object(
        self, object_id: str, *, request_options: RequestOptions | None = None
    ) -> DeleteTaskRes:
        if not object_id:
            raise InvalidParameterTypeError("objectID", "non-empty str")
        payload = await self.transport.request(
            "DELETE", self._object_path(object_id), request_options=request_options
        )
        return DeleteTaskRes.from_response(payload)

    # ------------------------------------------------------------------
    # Batches
    # ------------------------------------------------------------------

    async def batch(
        self,
        operations: list[BatchOperation] | list[Mapping[str, Any]],
        *,
        request_options: RequestOptions | None = None,
    ) -> BatchRes:
        """Apply several write operations in one request (one task)."""
        requests = [
            op.to_wire() if isinstance(op, BatchOperation) else dict(op) for op in operations
        ]
        payload = await self._request(
            "POST", "/batch", body={"requests": requests}, request_options=request_options
        )
        res = BatchRes.from_response(payload)
        logger.info(
            f"Batch of {len(requests)} operations sent",
            extra={"index": self.name, "operations": len(requests), "task_id": res.task_id},
        )
        return res

    async def _batch_records(
        self,
        action: BatchAction,
        records: list[Record],
        request_options: RequestOptions | None,
        *,
        require_id: bool = True,
    ) -> BatchRes:
        operations = []
        for record in records:
            if require_id:
                _object_id(record)
            operations.append(BatchOperation(action=action, body=record))
        return await self.batch(operations, request_options=request_options)

    async def add_objects(
        self, records: list[Record], *, request_options: RequestOptions | None = None
    ) -> BatchRes:
        return await self._batch_records(
            BatchAction.ADD_OBJECT, records, request_options, require_id=False
        )

    async def update_objects(
        self, records: list[Record], *, request_options: RequestOptions | None = None
    ) -> BatchRes:
        return await self._batch_records(BatchAction.UPDATE_OBJECT, records, request_options)

    async def partial_update_objects(
        self, records: list[Record], *, request_options: RequestOptions | None = None
    ) -> BatchRes:
        return await self._batch_records(
            BatchAction.PARTIAL_UPDATE_OBJECT, records, request_options
        )

    async def partial_update_objects_no_create(
        self, records: list[Record], *, request_options: RequestOptions | None = None
    ) -> BatchRes:
        return await self._batch_records(
            BatchAction.PARTIAL_UPDATE_OBJECT_NO_CREATE, records, request_options
        )

    async def delete_objects(
        self, object_ids: list[str], *, request_options: RequestOptions | None = None
    ) -> BatchRes:
        operations = [
            BatchOperation(
                action=BatchAction.DELETE_OBJECT,
                body={"objectID": _object_id({"objectID": object_id})},
            )
            for object_id in object_ids
        ]
        return await self.batch(operations, request_options=request_options)

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    async def get_settings(self, *, request_options: RequestOptions | None = None) -> Settings:
        payload = await self._request(
            "GET",
            "/settings",
            params={"getVersion": 2},
            read=True,
            request_options=request_options,
        )
        return Settings.from_response(payload)

    async def set_settings(
        self,
        settings: Settings | Mapping[str, Any],
        *,
        forward_to_replicas: bool = False,
        request_options: RequestOptions | None = None,
    ) -> UpdateTaskRes:
        """Replace the given settings (unspecified settings keep their value)."""
        body = settings.to_map() if isinstance(settings, Settings) else dict(settings)
        payload = await self._request(
            "PUT",
            "/settings",
            body=body,
            params={"forwardToReplicas": _flag(forward_to_replicas)},
            request_options=request_options,
        )
        return UpdateTaskRes.from_response(payload)

    # ------------------------------------------------------------------
    # Search and browse
    # ------------------------------------------------------------------

    async def search(
        self,
        query: str,
        params: Mapping[str, Any] | None = None,
        *,
        request_options: RequestOptions | None = None,
    ) -> QueryRes:
        body = {"params": encode_params({**(params or {}), "query": query})}
        payload = await self._request(
            "POST", "/query", body=body, read=True, request_options=request_options
        )
        return QueryRes.from_response(payload)

    async def browse(
        self,
        params: Mapping[str, Any] | None = None,
        cursor: str = "",
        *,
        request_options: RequestOptions | None = None,
    ) -> BrowseRes:
        """Fetch one browse page; pass the previous page's cursor to continue."""
        body: dict[str, Any] = {"params": encode_params(params)}
        if cursor:
            body["cursor"] = cursor
        payload = await self._request(
            "POST", "/browse", body=body, read=True, request_options=request_options
        )
        return BrowseRes.from_response(payload)

    async def browse_all(
        self,
        params: Mapping[str, Any] | None = None,
        *,
        request_options: RequestOptions | None = None,
    ) -> BrowseIterator:
        """Return an iterator over every record matching ``params``.

        The first page is fetched before returning, so an invalid query
        fails here rather than on the first ``next()``. ``request_options``
        apply to every page request.
        """
        return await BrowseIterator(self, params, request_options=request_options).start()

    async def delete_by(
        self,
        params: Mapping[str, Any],
        *,
        request_options: RequestOptions | None = None,
    ) -> UpdateTaskRes:
        """Delete every record matching the filters in ``params`` (server side)."""
        payload = await self._request(
            "POST",
            "/deleteByQuery",
            body={"params": encode_params(params)},
            request_options=request_options,
        )
        return UpdateTaskRes.from_response(payload)

    async def delete_by_query(
        self,
        query: str,
        params: Mapping[str, Any] | None = None,
        *,
        request_options: RequestOptions | None = None,
    ) -> None:
        """Delete every record matching ``query`` and wait for completion.

        Browses the matching objectIDs and deletes them in one batch.
        Prefer :meth:`delete_by`, which runs entirely server-side.
        """
        warnings.warn(
            "delete_by_query is deprecated, use delete_by instead",
            DeprecationWarning,
            stacklevel=2,
        )
        browse_params = {
            **(params or {}),
            "query": query,
            "attributesToRetrieve": ["objectID"],
            "attributesToHighlight": [],
            "attributesToSnippet": [],
            "distinct": False,
        }
        iterator = await self.browse_all(browse_params, request_options=request_options)
        object_ids = [record["objectID"] async for record in iterator]
        if not object_ids:
            return

        res = await self.delete_objects(object_ids, request_options=request_options)
        await self.wait_task(res.task_id, request_options=request_options)

    async def search_for_facet_values(
        self,
        facet: str,
        query: str,
        params: Mapping[str, Any] | None = None,
        *,
        request_options: RequestOptions | None = None,
    ) -> SearchFacetRes:
        """Search the values of a facet declared in ``attributesForFaceting``."""
        body = {"params": encode_params({**(params or {}), "facetQuery": query})}
        payload = await self._request(
            "POST",
            f"/facets/{quote(facet, safe='')}/query",
            body=body,
            read=True,
            request_options=request_options,
        )
        return SearchFacetRes.from_response(payload)

    async def search_facet(
        self,
        facet: str,
        query: str,
        params: Mapping[str, Any] | None = None,
        *,
        request_options: RequestOptions | None = None,
    ) -> SearchFacetRes:
        warnings.warn(
            "search_facet is deprecated, use search_for_facet_values instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return await self.search_for_facet_values(
            facet, query, params, request_options=request_options
        )

    # ------------------------------------------------------------------
    # Synonyms
    # ------------------------------------------------------------------

    async def search_synonyms(
        self,
        query: str = "",
        types: list[str] | None = None,
        page: int = 0,
        hits_per_page: int = 100,
        *,
        request_options: RequestOptions | None = None,
    ) -> SearchSynonymsRes:
        body: dict[str, Any] = {"query": query, "page": page, "hitsPerPage": hits_per_page}
        if types:
            body["type"] = ",".join(types)
        payload = await self._request(
            "POST", "/synonyms/search", body=body, read=True, request_options=request_options
        )
        return SearchSynonymsRes.from_response(payload)

    async def get_synonym(
        self, object_id: str, *, request_options: RequestOptions | None = None
    ) -> Synonym:
        payload = await self._request(
            "GET",
            f"/synonyms/{quote(object_id, safe='')}",
            read=True,
            request_options=request_options,
        )
        return Synonym.from_response(payload)

    async def add_synonym(
        self,
        synonym: Synonym,
        *,
        forward_to_replicas: bool = False,
        request_options: RequestOptions | None = None,
    ) -> UpdateTaskRes:
        payload = await self._request(
            "PUT",
            f"/synonyms/{quote(synonym.object_id, safe='')}",
            body=synonym.to_wire(),
            params={"forwardToReplicas": _flag(forward_to_replicas)},
            request_options=request_options,
        )
        return UpdateTaskRes.from_response(payload)

    async def delete_synonym(
        self,
        object_id: str,
        *,
        forward_to_replicas: bool = False,
        request_options: RequestOptions | None = None,
    ) -> DeleteTaskRes:
        payload = await self._request(
            "DELETE",
            f"/synonyms/{quote(object_id, safe='')}",
            params={"forwardToReplicas": _flag(forward_to_replicas)},
            request_options=request_options,
        )
        return DeleteTaskRes.from_response(payload)

    async def clear_synonyms(
        self,
        *,
        forward_to_replicas: bool = False,
        request_options: RequestOptions | None = None,
    ) -> UpdateTaskRes:
        payload = await self._request(
            "POST",
            "/synonyms/clear",
            params={"forwardToReplicas": _flag(forward_to_replicas)},
            request_options=request_options,
        )
        return UpdateTaskRes.from_response(payload)

    async def batch_synonyms(
        self,
        synonyms: list[Synonym],
        *,
        replace_existing_synonyms: bool = False,
        forward_to_replicas: bool = False,
        request_options: RequestOptions | None = None,
    ) -> UpdateTaskRes:
        payload = await self._request(
            "POST",
            "/synonyms/batch",
            body=[s.to_wire() for s in synonyms],
            params={
                "replaceExistingSynonyms": _flag(replace_existing_synonyms),
                "forwardToReplicas": _flag(forward_to_replicas),
            },
            request_options=request_options,
        )
        return UpdateTaskRes.from_response(payload)

    # ------------------------------------------------------------------
    # Query rules
    # ------------------------------------------------------------------

    async def save_rule(
        self,
        rule: Rule,
        *,
        forward_to_replicas: bool = False,
        request_options: RequestOptions | None = None,
    ) -> SaveRuleRes:
        """Create or replace the rule with the same ``objectID``."""
        payload = await self._request(
            "PUT",
            f"/rules/{quote(rule.object_id, safe='')}",
            body=rule.to_wire(),
            params={"forwardToReplicas": _flag(forward_to_replicas)},
            request_options=request_options,
        )
        return SaveRuleRes.from_response(payload)

    async def batch_rules(
        self,
        rules: list[Rule],
        *,
        forward_to_replicas: bool = False,
        clear_existing_rules: bool = False,
        request_options: RequestOptions | None = None,
    ) -> BatchRulesRes:
        payload = await self._request(
            "POST",
            "/rules/batch",
            body=[r.to_wire() for r in rules],
            params={
                "forwardToReplicas": _flag(forward_to_replicas),
                "clearExistingRules": _flag(clear_existing_rules),
            },
            request_options=request_options,
        )
        return BatchRulesRes.from_response(payload)

    async def get_rule(
        self, object_id: str, *, request_options: RequestOptions | None = None
    ) -> Rule:
        payload = await self._request(
            "GET",
            f"/rules/{quote(object_id, safe='')}",
            read=True,
            request_options=request_options,
        )
        return Rule.from_response(payload)

    async def delete_rule(
        self,
        object_id: str,
        *,
        forward_to_replicas: bool = False,
        request_options: RequestOptions | None = None,
    ) -> DeleteRuleRes:
        payload = await self._request(
            "DELETE",
            f"/rules/{quote(object_id, safe='')}",
            params={"forwardToReplicas": _flag(forward_to_replicas)},
            request_options=request_options,
        )
        return DeleteRuleRes.from_response(payload)

    async def clear_rules(
        self,
        *,
        forward_to_replicas: bool = False,
        request_options: RequestOptions | None = None,
    ) -> ClearRulesRes:
        payload = await self._request(
            "POST",
            "/rules/clear",
            params={"forwardToReplicas": _flag(forward_to_replicas)},
            request_options=request_options,
        )
        return ClearRulesRes.from_response(payload)

    async def search_rules(
        self,
        params: Mapping[str, Any] | None = None,
        *,
        request_options: RequestOptions | None = None,
    ) -> SearchRulesRes:
        """Search rules; ``params`` accepts ``query``, ``anchoring``, ``context``,
        ``page``, ``hitsPerPage`` and ``enabled``."""
        payload = await self._request(
            "POST",
            "/rules/search",
            body=dict(params or {}),
            read=True,
            request_options=request_options,
        )
        return SearchRulesRes.from_response(payload)


__all__ = ["Index"]
