from __future__ import annotations

import math

from flight_core.errors import InvalidInput

KMH_PER_MS = 3.6


def _as_float(value, name: str) -> float:
    """None/NaN -> 0.0, anything else must be a finite number >= 0."""
    if value is None:
        return 0.0
    try:
        v = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"{name} is not numeric: {value!r}") from exc
    if math.isnan(v):
        return 0.0
    if math.isinf(v):
        raise InvalidInput(f"{name} is not finite: {value!r}")
    if v < 0:
        raise InvalidInput(f"{name} is negative: {value!r}")
    return v


def kmh_to_ms(value) -> float:
    """
    Wind reading in km/h -> m/s. A missing reading becomes 0.0.

    A genuine 0 km/h and a missing value are indistinguishable afterwards,
    so data gaps count as calm days.
    """
    return _as_float(value, "wind") / KMH_PER_MS


def precipitation_mm(value) -> float:
    """Daily precipitation in mm; a missing reading becomes 0.0 (dry)."""
    return _as_float(value, "precipitation")
