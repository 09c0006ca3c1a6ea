"""Exception classes raised by the Algolia client."""

from __future__ import annotations

from typing import Any


class AlgoliaException(Exception):
    """Base client exception.

    All errors raised while talking to the Algolia API inherit from this
    class, so callers can catch a single type.

    Attributes:
        status_code: HTTP status code associated with the error (0 when the
            failure happened before any response was received).
        detail: Human-readable error message.
        type: Error type identifier.
        title: Short, human-readable summary of the problem type.
        extra: Additional context-specific information about the error.

    Example:
            raise AlgoliaException(
            status_code=404,
            detail="ObjectID does not exist",
            type="object-not-found",
            extra={"index": "products", "object_id": "42"}
        )
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        type: str = "about:blank",
        title: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        """Initialize client exception.

        Args:
            status_code: HTTP status code.
            detail: Human-readable error message.
            type: Error type identifier.
            title: Short summary of the problem type.
            extra: Additional context about the error.
        """
        self.status_code = status_code
        self.detail = detail
        self.type = type
        self.title = title or self._default_title(status_code)
        self.extra = extra or {}
        super().__init__(detail)

    @staticmethod
    def _default_title(status_code: int) -> str:
        """Get default title for HTTP status code.

        Args:
            status_code: HTTP status code.

        Returns:
            Human-readable title for the status code.
        """
        titles = {
            0: "Client Error",
            400: "Bad Request",
            401: "Unauthorized",
            403: "Forbidden",
            404: "Not Found",
            409: "Conflict",
            422: "Unprocessable Entity",
            429: "Too Many Requests",
            500: "Internal Server Error",
            502: "Bad Gateway",
            503: "Service Unavailable",
            504: "Gateway Timeout",
        }
        return titles.get(status_code, "Error")


class AlgoliaHTTPError(AlgoliaException):
    """Raised when the API answers with a non-retryable error status.

    The ``detail`` carries the ``message`` field of the Algolia error body.

    Example:
            raise AlgoliaHTTPError(
            status_code=404,
            detail="ObjectID does not exist",
            extra={"path": "/1/indexes/products/42"}
        )
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        type: str = "http-error",
        extra: dict[str, Any] | None = None,
    ) -> None:
        """Initialize HTTP error.

        Args:
            status_code: HTTP status code returned by the API.
            detail: Error message returned by the API.
            type: Error type identifier.
            extra: Additional context about the error.
        """
        super().__init__(
            status_code=status_code,
            detail=detail,
            type=type,
            extra=extra,
        )

    @property
    def is_not_found(self) -> bool:
        """Whether the API reported a missing resource."""
        return self.status_code == 404


class AlgoliaUnreachableHostsError(AlgoliaException):
    """Raised when every configured host failed with a retryable error."""

    def __init__(
        self,
        hosts: list[str],
        detail: str = "Unreachable hosts",
        extra: dict[str, Any] | None = None,
    ) -> None:
        """Initialize unreachable hosts error.

        Args:
            hosts: Hosts that were tried, in order.
            detail: Human-readable error message.
            extra: Additional context about the error.
        """
        self.hosts = hosts
        super().__init__(
            status_code=0,
            detail=detail,
            type="unreachable-hosts",
            title="Unreachable Hosts",
            extra={"hosts": hosts, **(extra or {})},
        )


class AlgoliaDecodeError(AlgoliaException):
    """Raised when a successful response carries a malformed payload."""

    def __init__(
        self,
        detail: str,
        status_code: int = 200,
        extra: dict[str, Any] | None = None,
    ) -> None:
        """Initialize decode error.

        Args:
            detail: Human-readable error message.
            status_code: HTTP status code of the undecodable response.
            extra: Additional context about the error.
        """
        super().__init__(
            status_code=status_code,
            detail=detail,
            type="decode-error",
            title="Malformed Response",
            extra=extra,
        )


class InvalidParameterTypeError(AlgoliaException):
    """Raised when a query parameter has a type the API does not accept.

    Raised before any request is sent.

    Example:
            raise InvalidParameterTypeError("insidePolygon", "str or list[list[float]]")
    """

    def __init__(self, parameter: str, expected: str) -> None:
        """Initialize invalid parameter error.

        Args:
            parameter: Name of the offending parameter.
            expected: Description of the accepted types.
        """
        self.parameter = parameter
        self.expected = expected
        super().__init__(
            status_code=0,
            detail=f"{parameter}: invalid type (expected {expected})",
            type="invalid-parameter-type",
            title="Invalid Parameter",
            extra={"parameter": parameter, "expected": expected},
        )


class TaskTimeoutError(AlgoliaException):
    """Raised when an asynchronous task is still pending after the wait budget."""

    def __init__(self, index_name: str, task_id: int, timeout: float) -> None:
        """Initialize task timeout error.

        Args:
            index_name: Index the task belongs to.
            task_id: Identifier of the pending task.
            timeout: Seconds spent waiting.
        """
        self.index_name = index_name
        self.task_id = task_id
        super().__init__(
            status_code=0,
            detail=f"Task {task_id} on index {index_name} not published after {timeout:.0f}s",
            type="task-timeout",
            title="Task Timeout",
            extra={"index": index_name, "task_id": task_id, "timeout": timeout},
        )


class NoMoreHitsError(Exception):
    """Signals that a browse iterator has returned every record.

    This is the expected end of an iteration, not a failure, and therefore
    does not inherit from :class:`AlgoliaException`. Each raise is a new
    instance: match it by type (``except NoMoreHitsError`` or
    ``isinstance``), never by identity.
    """

    def __init__(self) -> None:
        super().__init__("No more hits")


__all__ = [
    "AlgoliaDecodeError",
    "AlgoliaException",
    "AlgoliaHTTPError",
    "AlgoliaUnreachableHostsError",
    "InvalidParameterTypeError",
    "NoMoreHitsError",
    "TaskTimeoutError",
]
