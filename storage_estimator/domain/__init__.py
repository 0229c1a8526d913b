"""
Domain package for the SQL Storage Estimator.

Exports the column type catalog and the input/output models used by the
estimation engine, form state, and reporter.
"""

from storage_estimator.domain.catalog import (
    DATA_TYPES,
    LENGTH_PREFIX_BYTES,
    ColumnType,
    TypeDescriptor,
    available_types,
    get_descriptor,
)
from storage_estimator.domain.models import (
    BASE_OVERHEAD_BYTES,
    ActivityWindow,
    ColumnSpec,
    EstimationResult,
)

__all__ = [
    "DATA_TYPES",
    "LENGTH_PREFIX_BYTES",
    "BASE_OVERHEAD_BYTES",
    "ColumnType",
    "TypeDescriptor",
    "available_types",
    "get_descriptor",
    "ActivityWindow",
    "ColumnSpec",
    "EstimationResult",
]
