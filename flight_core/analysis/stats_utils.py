from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from flight_core.errors import ComputationError, NoData


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round .5 upwards (not to even), matching how results were always shown."""
    f = 10.0 ** int(ndigits)
    return math.floor(float(value) * f + 0.5) / f


def population_std(values: Sequence[float]) -> float:
    """Standard deviation dividing by N (ddof=0)."""
    v = np.asarray(values, dtype=float)
    if v.size == 0:
        raise NoData("no valid weather data found")
    std = float(v.std(ddof=0))
    if not np.isfinite(std):
        raise ComputationError("standard deviation is not finite")
    return std


def summarize_flight_days(counts: Sequence[int]) -> tuple[int, float]:
    """
    Cross-year summary of per-year flight-day counts.
    Returns (average rounded to int, population std rounded to 2 decimals).
    """
    v = np.asarray(counts, dtype=float)
    if v.size == 0:
        raise NoData("no valid weather data found")
    mean = float(v.mean())
    if not np.isfinite(mean):
        raise ComputationError("mean flight days is not finite")
    average = int(round_half_up(mean))
    return average, round_half_up(population_std(v), 2)
