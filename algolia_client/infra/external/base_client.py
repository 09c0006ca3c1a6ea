"""Base HTTP client for the Algolia REST API.

Provides the transport shared by the application-level client and the index
objects:
- Connection pooling through a single ``httpx.AsyncClient``
- Host failover (DSN/write host first, then the algolianet.com fallbacks)
- Authentication and per-request headers
- Request/response logging and metrics
- Timeout configuration
- Error mapping to ``AlgoliaException`` subclasses
"""

from __future__ import annotations

import logging
import random
import time
from typing import TYPE_CHECKING, Any

import httpx
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

from algolia_client.core.exceptions import (
    AlgoliaDecodeError,
    AlgoliaHTTPError,
    AlgoliaUnreachableHostsError,
)
from algolia_client.infra.metrics.tracking import track_api_request, track_host_failover

if TYPE_CHECKING:
    from algolia_client.core.schemas import RequestOptions

logger = logging.getLogger(__name__)
tracer = trace.get_tracer("algolia_client")

DEFAULT_USER_AGENT = "Algolia for Python (algolia-client 0.1.0)"

# Errors after which the same request is sent to the next host
RETRYABLE_TRANSPORT_ERRORS: tuple[type[Exception], ...] = (
    httpx.TimeoutException,
    httpx.NetworkError,
    httpx.RemoteProtocolError,
)


def default_hosts(app_id: str) -> tuple[list[str], list[str]]:
    """Build the default read and write host lists for an application.

    The three algolianet.com fallbacks are shuffled once so that clients
    spread their failover traffic.

    Returns:
        ``(read_hosts, write_hosts)``.
    """
    fallbacks = [f"{app_id}-{i}.algolianet.com" for i in range(1, 4)]
    random.shuffle(fallbacks)
    read_hosts = [f"{app_id}-dsn.algolia.net", *fallbacks]
    write_hosts = [f"{app_id}.algolia.net", *fallbacks]
    return read_hosts, write_hosts


def is_retryable_status(status_code: int) -> bool:
    return status_code >= 500


class BaseHTTPClient:
    """Transport for one Algolia application.

    Example:
        ```python
        transport = BaseHTTPClient("APPID", "api-key")
        async with transport:
            body = await transport.request("GET", "/1/indexes", read=True)
        ```
    """

    def __init__(
        self,
        app_id: str,
        api_key: str,
        hosts: list[str] | None = None,
        *,
        connect_timeout: float = 2.0,
        read_timeout: float = 30.0,
        max_idle_conns_per_host: int = 20,
        max_connections: int = 100,
        user_agent: str = DEFAULT_USER_AGENT,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            app_id: Algolia application ID.
            api_key: API key used for every request.
            hosts: Explicit host list used for reads and writes. Defaults to the
                application's DSN/write hosts plus fallbacks.
            connect_timeout: TCP connect timeout in seconds.
            read_timeout: Response read timeout in seconds.
            max_idle_conns_per_host: Keep-alive connections kept in the pool.
            max_connections: Maximum number of concurrent connections.
            user_agent: User-Agent header value.
            http_client: Pre-built httpx client (its own timeouts and limits apply).
        """
        self.app_id = app_id
        self._api_key = api_key
        self.user_agent = user_agent
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout
        self.max_idle_conns_per_host = max_idle_conns_per_host
        self.max_connections = max_connections
        self.extra_headers: dict[str, str] = {}

        if hosts:
            self.read_hosts = list(hosts)
            self.write_hosts = list(hosts)
        else:
            self.read_hosts, self.write_hosts = default_hosts(app_id)

        # Clients replaced at runtime still own connections until close()
        self._retired_clients: list[httpx.AsyncClient] = []
        self.client = http_client or self._build_client()

    def _build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.read_timeout, connect=self.connect_timeout),
            limits=httpx.Limits(
                max_keepalive_connections=self.max_idle_conns_per_host,
                max_connections=self.max_connections,
            ),
        )

    # ------------------------------------------------------------------
    # Network configuration
    # ------------------------------------------------------------------

    def set_extra_header(self, key: str, value: str) -> None:
        """Send ``key: value`` with every subsequent request."""
        self.extra_headers[key] = value

    def set_timeout(self, connect_timeout: float, read_timeout: float) -> None:
        """Change the connect and read timeouts of subsequent requests."""
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout
        self.client.timeout = httpx.Timeout(read_timeout, connect=connect_timeout)

    def set_max_idle_conns_per_host(self, max_idle_conns_per_host: int) -> None:
        """Resize the keep-alive pool.

        httpx pools cannot be resized in place, so a new client is built; the
        previous one is closed with the transport.
        """
        self.max_idle_conns_per_host = max_idle_conns_per_host
        self._retired_clients.append(self.client)
        self.client = self._build_client()

    def set_http_client(self, client: httpx.AsyncClient) -> None:
        """Use a caller-provided httpx client.

        Timeouts and pool limits configured on this transport no longer apply;
        the caller's client settings win.
        """
        self._retired_clients.append(self.client)
        self.client = client

    async def close(self) -> None:
        """Close the HTTP client(s) and release connections."""
        for client in self._retired_clients:
            await client.aclose()
        self._retired_clients.clear()
        await self.client.aclose()

    async def __aenter__(self) -> BaseHTTPClient:
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager and close client."""
        await self.close()

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    def _headers(self, request_options: RequestOptions | None) -> dict[str, str]:
        headers = {
            "X-Algolia-Application-Id": self.app_id,
            "X-Algolia-API-Key": self._api_key,
            "User-Agent": self.user_agent,
            "Content-Type": "application/json; charset=utf-8",
            **self.extra_headers,
        }
        if request_options is not None:
            headers.update(request_options.headers())
        return headers

    @staticmethod
    def _url(host: str, path: str) -> str:
        if "://" in host:
            return f"{host.rstrip('/')}{path}"
        return f"https://{host}{path}"

    async def request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        params: dict[str, Any] | None = None,
        read: bool = False,
        request_options: RequestOptions | None = None,
    ) -> Any:
        """Send a request, failing over across hosts on retryable errors.

        Args:
            method: HTTP method.
            path: API path, starting with ``/1/``.
            body: JSON-serializable request body.
            params: Query-string parameters.
            read: Use the read (DSN) host list instead of the write one.
            request_options: Per-call headers and URL parameters.

        Returns:
            The decoded JSON body.

        Raises:
            AlgoliaHTTPError: The API answered with a non-retryable error status.
            AlgoliaDecodeError: A successful response was not valid JSON.
            AlgoliaUnreachableHostsError: Every host failed with a retryable error.
        """
        hosts = self.read_hosts if read else self.write_hosts
        query = dict(params or {})
        if request_options is not None:
            query.update(request_options.extra_url_params)
        headers = self._headers(request_options)

        last_error: Exception | None = None
        with tracer.start_as_current_span(
            f"algolia {method} {path}",
            kind=trace.SpanKind.CLIENT,
        ) as span:
            span.set_attribute("http.request.method", method)
            span.set_attribute("url.path", path)

            for host in hosts:
                logger.debug(
                    f"{method} request to {host}{path}",
                    extra={"host": host, "path": path, "params": query},
                )
                start = time.perf_counter()
                try:
                    response = await self.client.request(
                        method,
                        self._url(host, path),
                        params=query or None,
                        json=body,
                        headers=headers,
                    )
                except RETRYABLE_TRANSPORT_ERRORS as e:
                    reason = "timeout" if isinstance(e, httpx.TimeoutException) else "network"
                    track_api_request(method, reason, time.perf_counter() - start)
                    track_host_failover(host, reason)
                    logger.warning(
                        f"{method} {path} failed on {host}, trying next host",
                        extra={"host": host, "path": path, "exception": str(e)},
                    )
                    last_error = e
                    continue

                duration = time.perf_counter() - start
                track_api_request(method, response.status_code, duration)
                logger.info(
                    f"{method} {path} -> {response.status_code}",
                    extra={
                        "host": host,
                        "path": path,
                        "status_code": response.status_code,
                        "duration_ms": duration * 1000,
                    },
                )

                if is_retryable_status(response.status_code):
                    track_host_failover(host, str(response.status_code))
                    last_error = self._http_error(method, path, response)
                    continue

                span.set_attribute("server.address", host)
                span.set_attribute("http.response.status_code", response.status_code)
                try:
                    return self._decode(method, path, response)
                except Exception as e:
                    span.set_status(Status(StatusCode.ERROR, str(e)))
                    raise

            span.set_status(Status(StatusCode.ERROR, "unreachable hosts"))

        logger.error(
            f"{method} {path} failed on every host",
            extra={"hosts": hosts, "path": path, "last_error": str(last_error)},
        )
        raise AlgoliaUnreachableHostsError(hosts, extra={"path": path}) from last_error

    def _decode(self, method: str, path: str, response: httpx.Response) -> Any:
        if not response.is_success:
            raise self._http_error(method, path, response)

        if response.status_code == 204 or not response.content:
            return {}

        try:
            return response.json()
        except ValueError as e:
            raise AlgoliaDecodeError(
                f"Malformed JSON in response to {method} {path}",
                status_code=response.status_code,
                extra={"path": path, "body": response.text[:200]},
            ) from e

    @staticmethod
    def _http_error(method: str, path: str, response: httpx.Response) -> AlgoliaHTTPError:
        message = response.text
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict) and "message" in payload:
            message = str(payload["message"])

        return AlgoliaHTTPError(
            status_code=response.status_code,
            detail=message,
            extra={"method": method, "path": path},
        )


__all__ = ["BaseHTTPClient", "DEFAULT_USER_AGENT", "default_hosts"]
