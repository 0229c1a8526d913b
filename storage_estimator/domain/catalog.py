"""
Column type catalog.

A closed set of column types and the on-disk size each one contributes to a
row. Fixed-size types always add `fixed_size` bytes. Variable-length types add
the declared average length plus a 2-byte length prefix.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import List, Mapping

from pydantic import BaseModel, Field

LENGTH_PREFIX_BYTES = 2


class ColumnType(str, Enum):
    INT = "int"
    BIGINT = "bigint"
    FLOAT = "float"
    DOUBLE = "double"
    UUID = "uuid"
    DATETIME = "datetime"
    DATE = "date"
    BOOLEAN = "boolean"
    VARCHAR = "varchar"
    TEXT = "text"


class TypeDescriptor(BaseModel):
    """
    Static size information for a single column type.
    """

    id: ColumnType = Field(..., description="Catalog key.")
    label: str = Field(..., description="Human-friendly name for selection lists.")
    fixed_size: int = Field(0, ge=0, description="Bytes per value for fixed-size types.")
    is_variable_length: bool = Field(False, description="Size depends on declared length.")

    model_config = {"frozen": True}


def _descriptor(
    type_id: ColumnType, label: str, fixed_size: int, variable: bool = False
) -> TypeDescriptor:
    return TypeDescriptor(
        id=type_id, label=label, fixed_size=fixed_size, is_variable_length=variable
    )


DATA_TYPES: Mapping[ColumnType, TypeDescriptor] = MappingProxyType(
    {
        ColumnType.INT: _descriptor(ColumnType.INT, "Integer", 4),
        ColumnType.BIGINT: _descriptor(ColumnType.BIGINT, "Big Integer", 8),
        ColumnType.FLOAT: _descriptor(ColumnType.FLOAT, "Float", 4),
        ColumnType.DOUBLE: _descriptor(ColumnType.DOUBLE, "Double", 8),
        ColumnType.UUID: _descriptor(ColumnType.UUID, "UUID", 16),
        ColumnType.DATETIME: _descriptor(ColumnType.DATETIME, "DateTime", 8),
        ColumnType.DATE: _descriptor(ColumnType.DATE, "Date", 3),
        ColumnType.BOOLEAN: _descriptor(ColumnType.BOOLEAN, "Boolean", 1),
        ColumnType.VARCHAR: _descriptor(ColumnType.VARCHAR, "String", 0, variable=True),
        ColumnType.TEXT: _descriptor(ColumnType.TEXT, "Text", 0, variable=True),
    }
)


def get_descriptor(type_id: ColumnType | str) -> TypeDescriptor:
    """Look up a descriptor by enum member or raw id string."""
    try:
        return DATA_TYPES[ColumnType(type_id)]
    except ValueError:
        raise ValueError(
            f"Unknown column type '{type_id}'. Available: {', '.join(available_types())}"
        ) from None


def available_types() -> List[str]:
    """List column type ids in catalog order."""
    return [t.value for t in DATA_TYPES]


__all__ = [
    "LENGTH_PREFIX_BYTES",
    "ColumnType",
    "TypeDescriptor",
    "DATA_TYPES",
    "get_descriptor",
    "available_types",
]
