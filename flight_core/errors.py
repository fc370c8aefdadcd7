from __future__ import annotations


class FlightDaysError(Exception):
    """Base class for every error raised while analysing flight days."""


class InvalidInput(FlightDaysError, ValueError):
    """Thresholds, coordinates or the daily series are malformed."""


class NoData(FlightDaysError):
    """Upstream delivered no records, or a year ended up with none."""


class ComputationError(FlightDaysError, ArithmeticError):
    """An aggregate came out non-finite."""
