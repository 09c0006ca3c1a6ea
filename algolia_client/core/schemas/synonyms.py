"""Synonym schemas."""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from .base import AlgoliaModel


class SynonymType(StrEnum):
    SYNONYM = "synonym"
    ONE_WAY_SYNONYM = "oneWaySynonym"
    ALT_CORRECTION_1 = "altCorrection1"
    ALT_CORRECTION_2 = "altCorrection2"
    PLACEHOLDER = "placeholder"


class Synonym(AlgoliaModel):
    """A synonym set.

    Which fields are meaningful depends on ``type``:

    - ``synonym``: ``synonyms``
    - ``oneWaySynonym``: ``input`` and ``synonyms``
    - ``altCorrection1``/``altCorrection2``: ``word`` and ``corrections``
    - ``placeholder``: ``placeholder`` and ``replacements``
    """

    object_id: str = Field(alias="objectID")
    type: SynonymType
    synonyms: list[str] | None = None
    input: str | None = None
    word: str | None = None
    corrections: list[str] | None = None
    placeholder: str | None = None
    replacements: list[str] | None = None

    @classmethod
    def regular(cls, object_id: str, synonyms: list[str]) -> Synonym:
        return cls(object_id=object_id, type=SynonymType.SYNONYM, synonyms=synonyms)

    @classmethod
    def one_way(cls, object_id: str, input: str, synonyms: list[str]) -> Synonym:
        return cls(
            object_id=object_id,
            type=SynonymType.ONE_WAY_SYNONYM,
            input=input,
            synonyms=synonyms,
        )

    @classmethod
    def alt_correction(
        cls, object_id: str, word: str, corrections: list[str], typos: int = 1
    ) -> Synonym:
        synonym_type = SynonymType.ALT_CORRECTION_1 if typos == 1 else SynonymType.ALT_CORRECTION_2
        return cls(object_id=object_id, type=synonym_type, word=word, corrections=corrections)

    @classmethod
    def placeholder_set(cls, object_id: str, placeholder: str, replacements: list[str]) -> Synonym:
        return cls(
            object_id=object_id,
            type=SynonymType.PLACEHOLDER,
            placeholder=placeholder,
            replacements=replacements,
        )


class SearchSynonymsRes(AlgoliaModel):
    hits: list[Synonym] = Field(default_factory=list)
    nb_hits: int = 0
