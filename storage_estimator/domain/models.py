"""
Domain models for the SQL Storage Estimator.

Defines the inputs (column specs, activity window) and the output
(`EstimationResult`) of a single estimation pass. All models are frozen; the
caller builds new instances whenever a form field changes.
"""
from __future__ import annotations

from datetime import time
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from storage_estimator.domain.catalog import (
    LENGTH_PREFIX_BYTES,
    ColumnType,
    TypeDescriptor,
    get_descriptor,
)

BASE_OVERHEAD_BYTES = 20  # primary key (8) + agent id (4) + system timestamp (8)


class ColumnSpec(BaseModel):
    """
    One user-defined column: a catalog type and, for variable types, an
    average declared length.
    """

    type: ColumnType = Field(..., description="Catalog type id.")
    length: Optional[int] = Field(
        None, ge=0, description="Average length; only used by variable-length types."
    )

    model_config = {"frozen": True}

    @property
    def descriptor(self) -> TypeDescriptor:
        return get_descriptor(self.type)

    @property
    def size_bytes(self) -> int:
        descriptor = self.descriptor
        if descriptor.is_variable_length:
            return (self.length or 0) + LENGTH_PREFIX_BYTES
        return descriptor.fixed_size

    @classmethod
    def parse(cls, token: str) -> "ColumnSpec":
        """
        Build a column from a `TYPE[:LENGTH]` token, e.g. `varchar:50` or `uuid`.
        """
        type_part, _, length_part = token.strip().partition(":")
        descriptor = get_descriptor(type_part.strip().lower())
        length: Optional[int] = None
        if length_part.strip():
            try:
                length = int(length_part)
            except ValueError:
                raise ValueError(f"Invalid column length in '{token}'") from None
            if length < 0:
                raise ValueError(f"Column length must be >= 0 in '{token}'")
        return cls(type=descriptor.id, length=length)

    def label(self) -> str:
        if self.descriptor.is_variable_length:
            return f"{self.type.value}({self.length or 0})"
        return self.type.value


class ActivityWindow(BaseModel):
    """
    Daily period during which agents write rows.

    Either always active, or a `start`/`end` time-of-day pair. `end < start`
    crosses midnight; `start == end` denotes a full 24-hour cycle.
    """

    always_active: bool = True
    start: Optional[time] = None
    end: Optional[time] = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _require_bounds(self) -> "ActivityWindow":
        if not self.always_active and (self.start is None or self.end is None):
            raise ValueError("start and end are required when the window is not always active")
        return self

    @classmethod
    def always(cls) -> "ActivityWindow":
        return cls(always_active=True)

    @classmethod
    def between(cls, start: time | str, end: time | str) -> "ActivityWindow":
        return cls(always_active=False, start=start, end=end)

    @classmethod
    def parse(cls, value: str) -> "ActivityWindow":
        """Parse a `HH:MM-HH:MM` range."""
        start, sep, end = value.partition("-")
        if not sep:
            raise ValueError(f"Expected START-END (e.g. 09:00-17:00), got '{value}'")
        return cls.between(start.strip(), end.strip())


class EstimationResult(BaseModel):
    """
    Output of one estimation pass.

    `daily_bytes` is derived from the unfloored row count, so
    `daily_bytes / row_size_bytes` can differ from the floored `rows_per_day`.
    """

    row_size_bytes: int = 0
    rows_per_day: int = 0
    daily_bytes: float = 0.0
    monthly_bytes: float = 0.0
    yearly_bytes: float = 0.0
    active_hours_per_day: float = 0.0
    column_count: int = 0
    error: Optional[str] = None

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def data_bytes(self) -> int:
        return max(self.row_size_bytes - BASE_OVERHEAD_BYTES, 0)

    @classmethod
    def zeroed(cls, error: str, column_count: int = 0) -> "EstimationResult":
        return cls(error=error, column_count=column_count)


__all__ = [
    "BASE_OVERHEAD_BYTES",
    "ColumnSpec",
    "ActivityWindow",
    "EstimationResult",
]
