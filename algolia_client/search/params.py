"""Query parameter validation and encoding."""

from __future__ import annotations

from collections.abc import Mapping
import json
from numbers import Real
from typing import Any
from urllib.parse import urlencode

from algolia_client.core.exceptions import InvalidParameterTypeError

GEO_PARAMETERS = ("insideBoundingBox", "insidePolygon")
GEO_EXPECTED_TYPE = "str or list[list[float]]"


def _is_coordinates(value: Any) -> bool:
    if not isinstance(value, list):
        return False
    for row in value:
        if not isinstance(row, list):
            return False
        if not all(isinstance(x, Real) and not isinstance(x, bool) for x in row):
            return False
    return True


def validate_params(params: Mapping[str, Any] | None) -> None:
    """Check parameter types the API would otherwise reject.

    Raises:
        InvalidParameterTypeError: A geo parameter is neither a string nor a
            list of coordinate lists.
    """
    if not params:
        return
    for name in GEO_PARAMETERS:
        if name not in params:
            continue
        value = params[name]
        if isinstance(value, str) or _is_coordinates(value):
            continue
        raise InvalidParameterTypeError(name, GEO_EXPECTED_TYPE)


def _encode_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def encode_params(params: Mapping[str, Any] | None) -> str:
    """Encode query parameters as the URL-encoded ``params`` string.

    ``None`` values are dropped; lists and mappings are JSON-encoded.

    Example:
        >>> encode_params({"query": "phone", "hitsPerPage": 10, "facets": ["brand"]})
        'query=phone&hitsPerPage=10&facets=%5B%22brand%22%5D'
    """
    if not params:
        return ""
    validate_params(params)
    return urlencode(
        [(key, _encode_value(value)) for key, value in params.items() if value is not None]
    )


def encode_url_params(params: Mapping[str, Any] | None) -> dict[str, str]:
    """Encode parameters sent on the query string of the URL itself."""
    if not params:
        return {}
    return {key: _encode_value(value) for key, value in params.items() if value is not None}
