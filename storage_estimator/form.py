"""
Form state for interactive estimation.

Holds the raw values a user edits (agents, repeat time, work hours, columns),
applies the caller-side clamping the engine relies on, and recomputes the
estimate explicitly after every change.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field, ValidationError

from storage_estimator.config import Settings, get_settings
from storage_estimator.domain.catalog import ColumnType, get_descriptor
from storage_estimator.domain.models import ActivityWindow, ColumnSpec, EstimationResult
from storage_estimator.estimator import estimate
from storage_estimator.utils.logging import get_logger

log = get_logger(__name__)


def _clamp_int(value: Any) -> int:
    """Parse to a non-negative int; unparsable input becomes 0."""
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return 0
    return max(0, parsed)


class EstimatorForm(BaseModel):
    """
    Editable estimation inputs.

    Every setter returns the freshly computed EstimationResult so callers can
    redraw immediately.
    """

    agents: int = Field(100, ge=0)
    repeat_time: str = "00:01:00"
    use_work_hours: bool = False
    work_start: str = "09:00"
    work_end: str = "17:00"
    columns: List[ColumnSpec] = Field(default_factory=list)
    default_column: ColumnSpec = ColumnSpec(type=ColumnType.VARCHAR, length=50)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "EstimatorForm":
        settings = settings or get_settings()
        default_column = ColumnSpec(
            type=get_descriptor(settings.default_column_type).id,
            length=settings.default_column_length,
        )
        return cls(
            agents=settings.agents,
            repeat_time=settings.repeat_time,
            work_start=settings.work_start,
            work_end=settings.work_end,
            columns=[default_column] * settings.column_count,
            default_column=default_column,
        )

    @property
    def column_count(self) -> int:
        return len(self.columns)

    def window(self) -> ActivityWindow:
        if not self.use_work_hours:
            return ActivityWindow.always()
        return ActivityWindow.between(self.work_start, self.work_end)

    def calculate(self) -> EstimationResult:
        return estimate(self.columns, self.repeat_time, self.window(), self.agents)

    def set_agents(self, value: Any) -> EstimationResult:
        self.agents = _clamp_int(value)
        return self.calculate()

    def set_repeat_time(self, value: str) -> EstimationResult:
        self.repeat_time = value
        return self.calculate()

    def set_work_hours(
        self, enabled: bool, start: Optional[str] = None, end: Optional[str] = None
    ) -> EstimationResult:
        """
        Toggle operational hours. Bad times raise ValueError and leave the
        form unchanged.
        """
        new_start = start if start is not None else self.work_start
        new_end = end if end is not None else self.work_end
        try:
            ActivityWindow.between(new_start, new_end)
        except ValidationError as exc:
            raise ValueError(f"Invalid work hours '{new_start}-{new_end}'") from exc

        self.use_work_hours = enabled
        self.work_start = new_start
        self.work_end = new_end
        return self.calculate()

    def set_column_count(self, value: Any) -> EstimationResult:
        """
        Resize the column list. New columns use the default column; shrinking
        drops columns from the end.
        """
        count = _clamp_int(value)
        current = len(self.columns)
        if count > current:
            self.columns = self.columns + [self.default_column] * (count - current)
        else:
            self.columns = self.columns[:count]
        log.debug("Column count changed", extra={"from": current, "to": count})
        return self.calculate()

    def update_column(
        self,
        index: int,
        type: Optional[ColumnType | str] = None,
        length: Any = None,
    ) -> EstimationResult:
        """Replace the type and/or length of one column."""
        if not 0 <= index < len(self.columns):
            raise IndexError(f"Column index {index} out of range (0..{len(self.columns) - 1})")
        column = self.columns[index]
        new_type = get_descriptor(type).id if type is not None else column.type
        new_length = _clamp_int(length) if length is not None else column.length
        columns = list(self.columns)
        columns[index] = ColumnSpec(type=new_type, length=new_length)
        self.columns = columns
        return self.calculate()


__all__ = ["EstimatorForm"]
