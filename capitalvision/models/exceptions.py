"""Exceptions raised by the projection models."""


class ProjectionError(Exception):
    """Base exception for projection-related errors."""


class InvalidParameterError(ProjectionError, ValueError):
    """Raised when investment parameters cannot be simulated.

    Covers non-positive durations and negative monetary amounts or rates.
    Raised before any computation starts, so no partial result exists.
    """
