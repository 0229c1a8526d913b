"""
SQL Storage Estimator - storage growth projections for agent-written tables.

Given a column layout, a per-agent repeat time, an operational window and a
number of agents, this package estimates:

- The size of a single row (20 bytes base overhead plus configured columns)
- Rows generated per day
- Daily, monthly (30 days) and yearly (365 days) storage growth

The estimation engine is a pure function; the form layer, CLI and rich
reporter are thin callers around it.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from storage_estimator.config import Settings, get_settings
from storage_estimator.domain import (
    DATA_TYPES,
    ActivityWindow,
    ColumnSpec,
    ColumnType,
    EstimationResult,
    TypeDescriptor,
    available_types,
)
from storage_estimator.errors import EstimatorError, InvalidCadence, ProjectionOverflow
from storage_estimator.estimator import (
    active_seconds_per_day,
    estimate,
    parse_cadence,
    row_size,
)
from storage_estimator.form import EstimatorForm
from storage_estimator.utils.logging import configure_logging, get_logger
from storage_estimator.utils.units import format_bytes

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "DATA_TYPES",
    "ActivityWindow",
    "ColumnSpec",
    "ColumnType",
    "EstimationResult",
    "TypeDescriptor",
    "available_types",
    # Engine
    "EstimatorError",
    "InvalidCadence",
    "ProjectionOverflow",
    "active_seconds_per_day",
    "estimate",
    "parse_cadence",
    "row_size",
    # Form state
    "EstimatorForm",
    # Logging / formatting
    "configure_logging",
    "get_logger",
    "format_bytes",
]
