"""
Utilities package for the SQL Storage Estimator.

Exports shared helpers for logging and unit formatting.
Keep this package lightweight and free of domain-specific logic.
"""

from storage_estimator.utils.logging import configure_logging, get_logger
from storage_estimator.utils.units import format_bytes, format_count

__all__ = [
    "configure_logging",
    "get_logger",
    "format_bytes",
    "format_count",
]
