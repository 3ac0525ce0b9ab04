from .schema import FieldType, Schema, validate

__all__ = ["FieldType", "Schema", "validate"]
