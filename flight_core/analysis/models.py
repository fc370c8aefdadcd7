from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping, Optional

import pandas as pd

from flight_core.config import DATA_SOURCE
from flight_core.errors import InvalidInput
from flight_core.analysis.stats_utils import round_half_up


@dataclass(frozen=True)
class DailyRecord:
    date: date
    precipitation: float  # mm
    wind_speed: float     # m/s, daily mean at 10 m
    wind_gusts: float     # m/s, daily max at 10 m


_THRESHOLD_KEYS = {
    "max_rain": ("maxRain", "max_rain"),
    "max_wind": ("maxWind", "max_wind"),
    "max_wind_gusts": ("maxWindGusts", "max_wind_gusts"),
}


@dataclass(frozen=True)
class Thresholds:
    max_rain: float        # mm/day
    max_wind: float        # m/s
    max_wind_gusts: float  # m/s

    def __post_init__(self):
        for name in ("max_rain", "max_wind", "max_wind_gusts"):
            raw = getattr(self, name)
            if isinstance(raw, bool):
                raise InvalidInput(f"{name} must be a number, got {raw!r}")
            try:
                v = float(raw)
            except (TypeError, ValueError) as exc:
                raise InvalidInput(f"{name} must be a number, got {raw!r}") from exc
            if not math.isfinite(v) or v < 0:
                raise InvalidInput(f"{name} must be a finite value >= 0, got {raw!r}")
            object.__setattr__(self, name, v)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Thresholds":
        """Accepts camelCase (maxRain, ...) or snake_case (max_rain, ...) keys."""
        if not isinstance(data, Mapping):
            raise InvalidInput("thresholds must be a mapping")
        values = {}
        for attr, keys in _THRESHOLD_KEYS.items():
            found = [data[k] for k in keys if k in data]
            if not found:
                raise InvalidInput(f"missing threshold: {keys[0]}")
            values[attr] = found[0]
        return cls(**values)

    def to_dict(self) -> dict:
        return {
            "maxRain": self.max_rain,
            "maxWind": self.max_wind,
            "maxWindGusts": self.max_wind_gusts,
        }


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float
    display_name: Optional[str] = None

    def to_dict(self) -> dict:
        out = {"latitude": self.latitude, "longitude": self.longitude}
        if self.display_name:
            out["displayName"] = self.display_name
        return out


@dataclass(frozen=True)
class YearlyStatistic:
    year: int
    flight_days: int
    total_rain: float
    mean_daily_rain: float
    mean_wind_speed: float
    mean_wind_gusts: float
    total_days: int

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "flightDays": self.flight_days,
            "totalRain": self.total_rain,
            "meanDailyRain": self.mean_daily_rain,
            "meanWindSpeed": self.mean_wind_speed,
            "meanWindGusts": self.mean_wind_gusts,
            "totalDays": self.total_days,
        }


YEARLY_COLUMNS = [
    "Year",
    "Flight Days",
    "Total Rain (mm)",
    "Mean Daily Rain (mm)",
    "Mean Wind Speed (m/s)",
    "Mean Wind Gusts (m/s)",
    "Days Analyzed",
]


@dataclass(frozen=True)
class AnalysisResult:
    location: Optional[Location]
    thresholds: Thresholds
    average_flight_days: int
    standard_deviation: float
    yearly_data: tuple[int, ...]
    yearly_statistics: tuple[YearlyStatistic, ...]
    total_days_analyzed: int
    years_analyzed: int
    data_source: str = field(default=DATA_SOURCE)

    def flight_day_range(self) -> tuple[int, int]:
        """Expected flight days within +-1 standard deviation."""
        lo = round_half_up(self.average_flight_days - self.standard_deviation)
        hi = round_half_up(self.average_flight_days + self.standard_deviation)
        return int(lo), int(hi)

    def yearly_frame(self) -> pd.DataFrame:
        """Yearly statistics as a display table, one row per year."""
        rows = [
            [
                s.year,
                s.flight_days,
                s.total_rain,
                s.mean_daily_rain,
                s.mean_wind_speed,
                s.mean_wind_gusts,
                s.total_days,
            ]
            for s in self.yearly_statistics
        ]
        return pd.DataFrame(rows, columns=YEARLY_COLUMNS)

    def to_dict(self) -> dict:
        """JSON-ready payload in the camelCase shape the web client consumed."""
        return {
            "location": self.location.to_dict() if self.location else None,
            "thresholds": self.thresholds.to_dict(),
            "analysis": {
                "averageFlightDays": self.average_flight_days,
                "standardDeviation": self.standard_deviation,
                "yearlyData": list(self.yearly_data),
                "yearlyStatistics": [s.to_dict() for s in self.yearly_statistics],
                "totalDaysAnalyzed": self.total_days_analyzed,
                "yearsAnalyzed": self.years_analyzed,
                "dataSource": self.data_source,
            },
        }
