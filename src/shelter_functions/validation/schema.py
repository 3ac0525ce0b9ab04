from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from shelter_functions.exceptions import InvalidArgumentError


class FieldType(StrEnum):
    STRING = "string"
    OBJECT = "object"
    NULL = "null"

    def matches(self, value: Any) -> bool:
        if self is FieldType.STRING:
            return isinstance(value, str)
        if self is FieldType.OBJECT:
            return isinstance(value, Mapping)
        return value is None


Schema = Mapping[str, FieldType]


def validate(payload: Any, schema: Schema) -> None:
    """Check ``payload`` has exactly the keys of ``schema`` with matching types.

    OBJECT-typed values are accepted as opaque mappings; their contents are
    not inspected.
    """
    if not isinstance(payload, Mapping):
        raise InvalidArgumentError("Request data must be an object")
    if len(payload) != len(schema):
        raise InvalidArgumentError("Number of arguments invalid")
    for key, value in payload.items():
        expected = schema.get(key)
        if expected is None or not expected.matches(value):
            raise InvalidArgumentError("Invalid arguments")


__all__ = ["FieldType", "Schema", "validate"]
