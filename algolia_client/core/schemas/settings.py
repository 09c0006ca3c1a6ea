"""Index settings schema."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .base import AlgoliaModel


class Settings(AlgoliaModel):
    """Typed view of an index's settings.

    Several settings accept more than one JSON type: ``distinct`` is a bool
    or an int, ``removeStopWords`` and ``ignorePlurals`` are a bool or a list
    of language codes, ``typoTolerance`` is a bool or one of
    ``"min"``/``"strict"``. Unknown settings are preserved.

    ``to_map()`` returns the mapping accepted by ``Index.set_settings`` so a
    read-modify-write cycle is lossless:

        settings = await index.get_settings()
        await index.set_settings(settings.to_map())
    """

    # Attributes
    searchable_attributes: list[str] | None = None
    attributes_for_faceting: list[str] | None = None
    unretrievable_attributes: list[str] | None = None
    attributes_to_retrieve: list[str] | None = None
    numeric_attributes_for_filtering: list[str] | None = None
    camel_case_attributes: list[str] | None = None

    # Ranking
    ranking: list[str] | None = None
    custom_ranking: list[str] | None = None
    replicas: list[str] | None = None

    # Faceting
    max_values_per_facet: int | None = None
    sort_facet_values_by: str | None = None

    # Highlighting / snippeting
    attributes_to_highlight: list[str] | None = None
    attributes_to_snippet: list[str] | None = None
    highlight_pre_tag: str | None = None
    highlight_post_tag: str | None = None
    snippet_ellipsis_text: str | None = None
    restrict_highlight_and_snippet_arrays: bool | None = None

    # Pagination
    hits_per_page: int | None = None
    pagination_limited_to: int | None = None

    # Typos
    min_word_sizefor1_typo: int | None = Field(default=None, alias="minWordSizefor1Typo")
    min_word_sizefor2_typos: int | None = Field(default=None, alias="minWordSizefor2Typos")
    typo_tolerance: bool | str | None = None
    allow_typos_on_numeric_tokens: bool | None = None
    disable_typo_tolerance_on_attributes: list[str] | None = None
    disable_typo_tolerance_on_words: list[str] | None = None
    separators_to_index: str | None = None

    # Languages
    ignore_plurals: bool | list[str] | None = None
    remove_stop_words: bool | list[str] | None = None
    query_languages: list[str] | None = None

    # Query strategy
    query_type: str | None = None
    remove_words_if_no_results: str | None = None
    advanced_syntax: bool | None = None
    optional_words: list[str] | None = None
    exact_on_single_word_query: str | None = None
    alternatives_as_exact: list[str] | None = None

    # Rules
    enable_rules: bool | None = None

    # Performance
    allow_compression_of_integer_array: bool | None = None

    # Advanced
    attribute_for_distinct: str | None = None
    distinct: bool | int | None = None
    replace_synonyms_in_highlight: bool | None = None
    min_proximity: int | None = None
    response_fields: list[str] | None = None
    max_facet_hits: int | None = None
    user_data: Any = None

    def to_map(self) -> dict[str, Any]:
        """Return the settings as a camelCase mapping, omitting unset values."""
        return self.to_wire()
