"""Unit tests for query parameter validation and encoding."""
from __future__ import annotations

from urllib.parse import parse_qs

import pytest

from algolia_client.core.exceptions import InvalidParameterTypeError
from algolia_client.search import encode_params, validate_params
from algolia_client.search.params import encode_url_params


@pytest.mark.unit
class TestValidateParams:
    """Test suite for geo parameter type checks."""

    @pytest.mark.parametrize(
        "value",
        [
            "46.6,1.7,46.9,2.2",
            [[46.6, 1.7, 46.9, 2.2]],
            [[46, 1, 47, 2], [40.1, 1.2, 41.3, 2.4]],
        ],
    )
    def test_accepted_geo_values(self, value):
        validate_params({"insideBoundingBox": value, "insidePolygon": value})

    @pytest.mark.parametrize(
        "value",
        [
            46.6,
            [46.6, 1.7, 46.9, 2.2],
            [["46.6", 1.7]],
            [[True, 1.0]],
            {"lat": 1},
        ],
    )
    def test_rejected_geo_values(self, value):
        with pytest.raises(InvalidParameterTypeError) as exc_info:
            validate_params({"insidePolygon": value})

        assert exc_info.value.parameter == "insidePolygon"

    def test_empty_params(self):
        validate_params(None)
        validate_params({})


@pytest.mark.unit
class TestEncodeParams:
    """Test suite for the URL-encoded params string."""

    def test_encoding(self):
        encoded = encode_params(
            {
                "query": "red phone",
                "hitsPerPage": 10,
                "facets": ["brand"],
                "analytics": False,
                "filters": None,
            }
        )

        assert parse_qs(encoded) == {
            "query": ["red phone"],
            "hitsPerPage": ["10"],
            "facets": ['["brand"]'],
            "analytics": ["false"],
        }

    def test_preserves_order(self):
        assert encode_params({"b": 1, "a": 2}) == "b=1&a=2"

    def test_empty(self):
        assert encode_params(None) == ""
        assert encode_params({}) == ""

    def test_validates_before_encoding(self):
        with pytest.raises(InvalidParameterTypeError):
            encode_params({"insideBoundingBox": 12})

    def test_url_params(self):
        assert encode_url_params({"forwardToReplicas": True, "page": 2, "skip": None}) == {
            "forwardToReplicas": "true",
            "page": "2",
        }
