"""
Flight-day analysis over a multi-year daily weather series.

Pipeline:
  - normalize each raw day (km/h -> m/s, missing -> 0)
  - group days into calendar-year buckets (ascending years)
  - per year: count days within all three thresholds + rain/wind summaries
  - across years: mean and population std of the yearly counts

Everything here is pure: no I/O, no shared state.
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime
from typing import Mapping, Optional, Sequence

import pandas as pd

from flight_core.analysis.models import (
    AnalysisResult,
    DailyRecord,
    Location,
    Thresholds,
    YearlyStatistic,
)
from flight_core.analysis.stats_utils import round_half_up, summarize_flight_days
from flight_core.analysis.units import kmh_to_ms, precipitation_mm
from flight_core.errors import ComputationError, InvalidInput, NoData

logger = logging.getLogger(__name__)

TIME_COL = "time"
PRECIP_COL = "precipitation_sum"
WIND_COL = "wind_speed_10m_mean"
GUST_COL = "wind_gusts_10m_max"

YearBuckets = dict[int, list[DailyRecord]]


def _to_date(value) -> date:
    """Calendar date of an ISO string / date / datetime / Timestamp, no tz shifting."""
    if value is None or value is pd.NaT:
        raise InvalidInput("missing date")
    if isinstance(value, datetime):  # pd.Timestamp is a datetime subclass
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError as exc:
            raise InvalidInput(f"unparseable date: {value!r}") from exc
    raise InvalidInput(f"unsupported date value: {value!r}")


def normalize_day(day, precipitation, wind_speed_kmh, wind_gusts_kmh) -> DailyRecord:
    return DailyRecord(
        date=_to_date(day),
        precipitation=precipitation_mm(precipitation),
        wind_speed=kmh_to_ms(wind_speed_kmh),
        wind_gusts=kmh_to_ms(wind_gusts_kmh),
    )


def group_by_year(
    times: Sequence,
    precipitation: Sequence,
    wind_speed: Sequence,
    wind_gusts: Sequence,
) -> YearBuckets:
    """
    Partition the parallel daily arrays into per-year buckets.
    Keys come out in ascending year order; bucket order follows the input.
    """
    n = len(times)
    lengths = {len(times), len(precipitation), len(wind_speed), len(wind_gusts)}
    if len(lengths) != 1:
        raise InvalidInput(
            f"daily arrays differ in length: time={n}, precipitation={len(precipitation)}, "
            f"wind_speed={len(wind_speed)}, wind_gusts={len(wind_gusts)}"
        )

    buckets: YearBuckets = {}
    for i in range(n):
        rec = normalize_day(times[i], precipitation[i], wind_speed[i], wind_gusts[i])
        buckets.setdefault(rec.date.year, []).append(rec)

    return {y: buckets[y] for y in sorted(buckets)}


def is_flight_day(day: DailyRecord, thresholds: Thresholds) -> bool:
    # inclusive: a value equal to its limit is still flyable
    return (
        day.precipitation <= thresholds.max_rain
        and day.wind_speed <= thresholds.max_wind
        and day.wind_gusts <= thresholds.max_wind_gusts
    )


def count_flight_days(bucket: Sequence[DailyRecord], thresholds: Thresholds) -> int:
    return sum(1 for day in bucket if is_flight_day(day, thresholds))


def yearly_statistic(year: int, bucket: Sequence[DailyRecord], thresholds: Thresholds) -> YearlyStatistic:
    """Flight-day count plus rain/wind summaries for one calendar year."""
    n = len(bucket)
    if n == 0:
        raise NoData(f"no weather records for {year}")

    total_rain = sum(d.precipitation for d in bucket)
    mean_rain = total_rain / n
    mean_wind = sum(d.wind_speed for d in bucket) / n
    mean_gust = sum(d.wind_gusts for d in bucket) / n
    if not all(math.isfinite(v) for v in (total_rain, mean_rain, mean_wind, mean_gust)):
        raise ComputationError(f"non-finite weather aggregate for {year}")

    return YearlyStatistic(
        year=int(year),
        flight_days=count_flight_days(bucket, thresholds),
        total_rain=round_half_up(total_rain, 1),
        # mean from the unrounded sum
        mean_daily_rain=round_half_up(mean_rain, 2),
        mean_wind_speed=round_half_up(mean_wind, 1),
        mean_wind_gusts=round_half_up(mean_gust, 1),
        total_days=n,
    )


def _coerce_thresholds(thresholds) -> Thresholds:
    if isinstance(thresholds, Thresholds):
        return thresholds
    if isinstance(thresholds, Mapping):
        return Thresholds.from_mapping(thresholds)
    raise InvalidInput("thresholds must be a Thresholds or a mapping")


def analyze_buckets(
    buckets: YearBuckets,
    thresholds: Thresholds,
    location: Optional[Location] = None,
) -> AnalysisResult:
    if not buckets:
        raise NoData("no valid weather data found")

    stats = tuple(yearly_statistic(y, buckets[y], thresholds) for y in sorted(buckets))
    counts = tuple(s.flight_days for s in stats)
    average, std = summarize_flight_days(counts)

    return AnalysisResult(
        location=location,
        thresholds=thresholds,
        average_flight_days=average,
        standard_deviation=std,
        yearly_data=counts,
        yearly_statistics=stats,
        total_days_analyzed=sum(s.total_days for s in stats),
        years_analyzed=len(stats),
    )


def analyze_flight_days(
    times: Sequence,
    precipitation: Sequence,
    wind_speed: Sequence,
    wind_gusts: Sequence,
    thresholds,
    location: Optional[Location] = None,
) -> AnalysisResult:
    """
    Full analysis from parallel daily arrays (wind in km/h, precipitation in mm).
    Raises NoData for an empty series, InvalidInput for malformed input.
    """
    th = _coerce_thresholds(thresholds)
    if len(times) == 0:
        raise NoData("no historical weather data available")

    buckets = group_by_year(times, precipitation, wind_speed, wind_gusts)
    result = analyze_buckets(buckets, th, location)

    logger.info(
        "Analysis complete: %d avg flight days, ±%.1f std dev over %d years",
        result.average_flight_days,
        result.standard_deviation,
        result.years_analyzed,
    )
    return result


def analyze_daily_frame(
    df: pd.DataFrame,
    thresholds,
    location: Optional[Location] = None,
) -> AnalysisResult:
    """Same as analyze_flight_days, fed from the frame the weather loader returns."""
    if df is None:
        raise NoData("no historical weather data available")
    missing = [c for c in (TIME_COL, PRECIP_COL, WIND_COL, GUST_COL) if c not in df.columns]
    if missing:
        raise InvalidInput(f"daily frame is missing columns: {missing}")

    return analyze_flight_days(
        df[TIME_COL].tolist(),
        df[PRECIP_COL].tolist(),
        df[WIND_COL].tolist(),
        df[GUST_COL].tolist(),
        thresholds,
        location=location,
    )
