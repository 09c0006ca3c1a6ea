"""Base schema classes for Algolia payloads."""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from algolia_client.core.exceptions import AlgoliaDecodeError

# A record is caller-defined: any JSON object.
Record = dict[str, Any]


class AlgoliaModel(BaseModel):
    """Base model with the common configuration for every Algolia schema.

    Python attributes are snake_case; the wire format is camelCase. Fields
    whose wire name does not follow plain camelCase (``objectID``,
    ``taskID``, ``processingTimeMS``...) declare an explicit alias.

    Unknown response fields are kept (``extra="allow"``) since the API adds
    fields over time.

    Example:
            class TaskRes(AlgoliaModel):
            task_id: int = Field(alias="taskID")

        TaskRes.model_validate({"taskID": 42}).task_id  # 42
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        # Accept both snake_case names and wire aliases
        populate_by_name=True,
        extra="allow",
        use_enum_values=True,
    )

    @classmethod
    def from_response(cls, payload: Any) -> Self:
        """Validate a decoded response body.

        Raises:
            AlgoliaDecodeError: The payload does not match the schema.
        """
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            raise AlgoliaDecodeError(
                f"Unexpected {cls.__name__} payload: {e.error_count()} validation error(s)",
                extra={"schema": cls.__name__, "errors": e.errors(include_url=False)},
            ) from e

    def to_wire(self) -> dict[str, Any]:
        """Dump the model the way the API expects it (aliases, no nulls)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
