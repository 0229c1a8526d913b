"""
Storage estimation engine.

Converts a column layout and a write cadence into byte counts over time:

    row_size    = 20 + sum(column sizes)
    triggers    = active_seconds_per_day / cadence_seconds
    rows/day    = floor(triggers * agents)
    daily bytes = triggers * agents * row_size   (unfloored)
    monthly     = daily * 30
    yearly      = daily * 365

Usage:
    from storage_estimator.estimator import estimate
    from storage_estimator.domain import ActivityWindow, ColumnSpec

    result = estimate([ColumnSpec.parse("varchar:50")], "00:01:00", ActivityWindow.always(), 100)
    print(result.row_size_bytes, result.daily_bytes)
"""

from __future__ import annotations

import math
import re
from typing import Iterable, Optional, Union

from storage_estimator.domain.models import (
    BASE_OVERHEAD_BYTES,
    ActivityWindow,
    ColumnSpec,
    EstimationResult,
)
from storage_estimator.errors import InvalidCadence, ProjectionOverflow
from storage_estimator.utils.logging import get_logger

log = get_logger(__name__)

SECONDS_PER_DAY = 86_400
MINUTES_PER_DAY = 1_440
DAYS_PER_MONTH = 30
DAYS_PER_YEAR = 365

Cadence = Union[str, int, float]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_cadence(value: Cadence) -> float:
    """
    Convert a repeat time into seconds.

    Accepts `HH:MM:SS` text or a number of seconds. Each text field is read by
    its leading integer, so "00:00:1.5" is one second. Raises InvalidCadence
    when a field has no leading integer, the total is not strictly positive,
    or it does not fit in a float.
    """
    if isinstance(value, bool):
        raise InvalidCadence(value)
    try:
        if isinstance(value, (int, float)):
            seconds = float(value)
        else:
            parts = str(value).strip().split(":")
            if len(parts) != 3:
                raise InvalidCadence(value)
            matches = [_LEADING_INT.match(p) for p in parts]
            if not all(matches):
                raise InvalidCadence(value)
            hours, minutes, secs = (int(m.group(1)) for m in matches)
            seconds = float(hours * 3600 + minutes * 60 + secs)
    except OverflowError:
        raise InvalidCadence(value) from None

    if not math.isfinite(seconds) or seconds <= 0:
        raise InvalidCadence(value)
    return seconds


def column_size(column: ColumnSpec) -> int:
    """Bytes a single column adds to every row."""
    return column.size_bytes


def row_size(columns: Iterable[ColumnSpec]) -> int:
    """Base overhead plus the size of every user-defined column."""
    return BASE_OVERHEAD_BYTES + sum(column_size(c) for c in columns)


def active_seconds_per_day(window: Optional[ActivityWindow] = None) -> int:
    """
    Seconds per day during which agents are writing.

    Identical start and end times count as a full 24-hour cycle.
    """
    if window is None or window.always_active:
        return SECONDS_PER_DAY

    if window.start is None or window.end is None:
        raise ValueError("start and end are required when the window is not always active")
    start_minutes = window.start.hour * 60 + window.start.minute
    end_minutes = window.end.hour * 60 + window.end.minute

    diff_minutes = end_minutes - start_minutes
    if diff_minutes < 0:
        diff_minutes += MINUTES_PER_DAY
    if diff_minutes == 0:
        diff_minutes = MINUTES_PER_DAY
    return diff_minutes * 60


def _project(
    active_seconds: int, cadence_seconds: float, population: int, row_size_bytes: int
) -> tuple[float, float]:
    """Unfloored rows per day and daily bytes; yearly bytes must stay finite too."""
    try:
        total_rows = active_seconds / cadence_seconds * population
        daily_bytes = total_rows * row_size_bytes
    except OverflowError:
        raise ProjectionOverflow(population) from None
    if not math.isfinite(daily_bytes * DAYS_PER_YEAR):
        raise ProjectionOverflow(population)
    return daily_bytes, total_rows


def estimate(
    columns: Iterable[ColumnSpec],
    cadence: Cadence,
    window: Optional[ActivityWindow] = None,
    population: int = 1,
) -> EstimationResult:
    """
    Run a full estimation pass.

    Parameters
    ----------
    columns : iterable[ColumnSpec]
        User-defined columns. May be empty.
    cadence : str | int | float
        Repeat time per agent, as `HH:MM:SS` or seconds.
    window : ActivityWindow | None
        Daily activity window. None means always active.
    population : int
        Number of agents, already clamped to >= 0 by the caller.

    Returns
    -------
    EstimationResult
        Projections, or an all-zero result with `error` set when the cadence
        is invalid or the projection does not fit in a float.
    """
    schema = list(columns)

    try:
        cadence_seconds = parse_cadence(cadence)
    except InvalidCadence as exc:
        log.warning(
            "Invalid repeat time; returning zeroed estimate",
            extra={"cadence": str(cadence), "error": str(exc)},
        )
        return EstimationResult.zeroed(str(exc), column_count=len(schema))

    row_size_bytes = row_size(schema)
    active_seconds = active_seconds_per_day(window)

    try:
        daily_bytes, total_rows = _project(
            active_seconds, cadence_seconds, population, row_size_bytes
        )
    except ProjectionOverflow as exc:
        log.warning(
            "Projection out of range; returning zeroed estimate",
            extra={"cadence": str(cadence), "error": str(exc)},
        )
        return EstimationResult.zeroed(str(exc), column_count=len(schema))

    result = EstimationResult(
        row_size_bytes=row_size_bytes,
        rows_per_day=math.floor(total_rows),
        daily_bytes=daily_bytes,
        monthly_bytes=daily_bytes * DAYS_PER_MONTH,
        yearly_bytes=daily_bytes * DAYS_PER_YEAR,
        active_hours_per_day=active_seconds / 3600,
        column_count=len(schema),
    )
    log.debug(
        "Estimate computed",
        extra={
            "row_size_bytes": result.row_size_bytes,
            "rows_per_day": result.rows_per_day,
            "daily_bytes": result.daily_bytes,
            "agents": population,
        },
    )
    return result


__all__ = [
    "SECONDS_PER_DAY",
    "DAYS_PER_MONTH",
    "DAYS_PER_YEAR",
    "parse_cadence",
    "column_size",
    "row_size",
    "active_seconds_per_day",
    "estimate",
]
