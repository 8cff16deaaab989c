from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class BaseRequestDto(BaseModel):
    """
    Base DTO class for API requests.

    String values are stored exactly as submitted: list items and multi-line
    text keep their leading and trailing whitespace.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        str_strip_whitespace=False,
        validate_assignment=True,
    )

    def to_db_dict(self) -> dict[str, Any]:
        """Every field, defaults included, keyed by entity attribute name."""
        return {name: getattr(self, name) for name in type(self).model_fields}


class BaseUpdateRequestDto(BaseRequestDto):
    """
    Base DTO for sparse update payloads.

    Every field is optional. A field left out of the payload is "absent" and
    is not part of `model_fields_set`; a field sent as null is "present with
    null". Only the latter clears a stored value, and only for columns that
    are nullable. Subclasses list their NOT NULL columns in
    `non_nullable_fields` so an explicit null is rejected for them.
    """

    non_nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_for_non_nullable(self):
        for name in sorted(self.non_nullable_fields & self.model_fields_set):
            if getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def to_patch(self) -> dict[str, Any]:
        """Only the fields present in the payload, keyed by entity attribute name."""
        return {name: getattr(self, name) for name in self.model_fields_set}
