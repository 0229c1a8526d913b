"""Exceptions raised by the estimation engine."""

from __future__ import annotations


class EstimatorError(Exception):
    """Base class for estimator failures."""

    default_message = "Estimation failed."

    def __init__(self, raw: object = None, message: str | None = None) -> None:
        self.raw = raw
        super().__init__(message or self.default_message)


class InvalidCadence(EstimatorError, ValueError):
    """Repeat time could not be parsed or is not strictly positive."""

    default_message = "Time must be greater than 0 seconds."


class ProjectionOverflow(EstimatorError, OverflowError):
    """Projected row or byte counts fall outside the float range."""

    default_message = "Projection is too large to estimate."


__all__ = ["EstimatorError", "InvalidCadence", "ProjectionOverflow"]
