"""
Base class for request, result and resource models.

Fields are snake_case in Python and carry their wire name as the pydantic
alias. Every field is optional and defaults to None.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator

M = TypeVar("M", bound="AWSModel")


def _freeze(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, dict):
        return tuple(sorted((k, _freeze(v)) for k, v in value.items()))
    return value


def _format(value: Any) -> str:
    if isinstance(value, list):
        return "[" + ", ".join(_format(v) for v in value) + "]"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class AWSModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    @field_validator("*", mode="before")
    @classmethod
    def _enum_value(cls, value: Any) -> Any:
        # enum-typed fields store the plain string value
        if isinstance(value, Enum):
            return value.value
        return value

    def with_values(self: M, **values: Any) -> M:
        """Assign several fields and return self for chaining."""
        for name, value in values.items():
            setattr(self, name, value)
        return self

    def clone(self: M) -> M:
        """Shallow copy: nested records and lists are shared with the original."""
        return self.model_copy()

    def __hash__(self) -> int:
        return hash((type(self),) + tuple(_freeze(getattr(self, name)) for name in type(self).model_fields))

    def __str__(self) -> str:
        parts = []
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            if value is not None:
                parts.append(f"{field.alias or name}: {_format(value)}")
        return "{" + ",".join(parts) + "}"
