"""API key management shared by the client (global keys) and indexes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote
import warnings

from algolia_client.core.exceptions import AlgoliaHTTPError
from algolia_client.core.schemas import AddKeyRes, DeleteRes, Key, UpdateKeyRes
from algolia_client.utils.retry import Backoff, retry

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from algolia_client.core.schemas import RequestOptions
    from algolia_client.core.settings import AlgoliaSettings
    from algolia_client.infra.external import BaseHTTPClient

logger = logging.getLogger(__name__)


def _deprecated(old: str, new: str) -> None:
    warnings.warn(f"{old} is deprecated, use {new} instead", DeprecationWarning, stacklevel=3)


class KeyNotReadyError(Exception):
    """Internal signal: the key exists but does not match the expected state yet."""


class KeyManagementMixin:
    """CRUD over API keys rooted at ``_keys_path``.

    Hosts must provide ``transport``, ``settings`` and ``_keys_path``.
    """

    transport: BaseHTTPClient
    settings: AlgoliaSettings
    _keys_path: str

    def _key_path(self, key: str) -> str:
        return f"{self._keys_path}/{quote(key, safe='')}"

    async def list_keys(self, *, request_options: RequestOptions | None = None) -> list[Key]:
        """List the API keys."""
        body = await self.transport.request(
            "GET", self._keys_path, read=True, request_options=request_options
        )
        return [Key.from_response(k) for k in body.get("keys", [])]

    async def add_api_key(
        self,
        acl: list[str],
        params: Mapping[str, Any] | None = None,
        *,
        request_options: RequestOptions | None = None,
    ) -> AddKeyRes:
        """Create an API key with the given ACL and restrictions.

        ``params`` accepts ``validity``, ``maxQueriesPerIPPerHour``,
        ``maxHitsPerQuery``, ``indexes``, ``referers``, ``queryParameters``
        and ``description``.
        """
        body = {**(params or {}), "acl": list(acl)}
        payload = await self.transport.request(
            "POST", self._keys_path, body=body, request_options=request_options
        )
        res = AddKeyRes.from_response(payload)
        logger.info("API key created", extra={"path": self._keys_path, "acl": acl})
        return res

    async def update_api_key(
        self,
        key: str,
        params: Mapping[str, Any],
        *,
        request_options: RequestOptions | None = None,
    ) -> UpdateKeyRes:
        """Update the ACL or restrictions of an existing key."""
        payload = await self.transport.request(
            "PUT", self._key_path(key), body=dict(params), request_options=request_options
        )
        return UpdateKeyRes.from_response(payload)

    async def get_api_key(
        self, key: str, *, request_options: RequestOptions | None = None
    ) -> Key:
        payload = await self.transport.request(
            "GET", self._key_path(key), read=True, request_options=request_options
        )
        return Key.from_response(payload)

    async def delete_api_key(
        self, key: str, *, request_options: RequestOptions | None = None
    ) -> DeleteRes:
        payload = await self.transport.request(
            "DELETE", self._key_path(key), request_options=request_options
        )
        return DeleteRes.from_response(payload)

    async def wait_api_key(
        self,
        key: str,
        predicate: Callable[[Key], bool] | None = None,
        *,
        request_options: RequestOptions | None = None,
    ) -> Key:
        """Wait until a key is visible (and matches ``predicate``).

        Keys are propagated asynchronously, so a key is usually not readable
        right after :meth:`add_api_key` or :meth:`update_api_key`.

        Raises:
            RetryError: The key did not reach the expected state within
                ``wait_key_max_attempts`` checks.
        """

        def _not_ready(e: Exception) -> bool:
            return isinstance(e, KeyNotReadyError) or (
                isinstance(e, AlgoliaHTTPError) and e.is_not_found
            )

        @retry(
            Backoff.constant(self.settings.wait_key_delay),
            max_attempts=self.settings.wait_key_max_attempts,
            retry_if=_not_ready,
        )
        async def _check() -> Key:
            found = await self.get_api_key(key, request_options=request_options)
            if predicate is not None and not predicate(found):
                msg = f"API key {key} not updated yet"
                raise KeyNotReadyError(msg)
            return found

        return await _check()

    # Deprecated aliases

    async def add_user_key(
        self,
        acl: list[str],
        params: Mapping[str, Any] | None = None,
        *,
        request_options: RequestOptions | None = None,
    ) -> AddKeyRes:
        _deprecated("add_user_key", "add_api_key")
        return await self.add_api_key(acl, params, request_options=request_options)

    async def update_user_key(
        self,
        key: str,
        params: Mapping[str, Any],
        *,
        request_options: RequestOptions | None = None,
    ) -> UpdateKeyRes:
        _deprecated("update_user_key", "update_api_key")
        return await self.update_api_key(key, params, request_options=request_options)

    async def get_user_key(
        self, key: str, *, request_options: RequestOptions | None = None
    ) -> Key:
        _deprecated("get_user_key", "get_api_key")
        return await self.get_api_key(key, request_options=request_options)

    async def delete_user_key(
        self, key: str, *, request_options: RequestOptions | None = None
    ) -> DeleteRes:
        _deprecated("delete_user_key", "delete_api_key")
        return await self.delete_api_key(key, request_options=request_options)


__all__ = ["KeyManagementMixin"]
