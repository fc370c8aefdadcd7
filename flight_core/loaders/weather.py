# weather.py
from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Optional

import pandas as pd, requests

from flight_core import config
from flight_core.errors import InvalidInput, NoData
from flight_core.loaders.coords import validate_coordinates

logger = logging.getLogger(__name__)


def trailing_window(today: Optional[date] = None, years: int = config.YEARS) -> tuple[str, str]:
    """
    [start, end] ISO dates for the trailing window: end is yesterday,
    start is today's month/day `years` years before end's year.
    """
    today = today or date.today()
    end = today - timedelta(days=1)
    try:
        start = today.replace(year=end.year - int(years))
    except ValueError:  # Feb 29 in a non-leap year rolls over
        start = date(end.year - int(years), 3, 1)
    return start.isoformat(), end.isoformat()


def load_openmeteo_daily(
    latitude: float,
    longitude: float,
    start_date: str,
    end_date: str,
    timezone: str = config.TIMEZONE,
) -> pd.DataFrame:
    """
    Daily ERA5 archive series for one point. Wind columns stay in km/h as
    delivered; missing values stay NaN.
    """
    params = {
        "latitude": latitude, "longitude": longitude,
        "start_date": start_date, "end_date": end_date,
        "daily": ",".join(config.DAILY_VARS),
        "timezone": timezone,
    }
    logger.info("Fetching weather data from %s to %s", start_date, end_date)
    r = requests.get(
        config.ARCHIVE_URL,
        params=params,
        headers={"User-Agent": config.USER_AGENT},
        timeout=config.HTTP_TIMEOUT,
    )
    r.raise_for_status()

    payload = r.json() or {}
    d = payload.get("daily")
    if not d:
        raise NoData("No weather data received from Open-Meteo API")
    times = d.get("time") or []
    if len(times) == 0:
        raise NoData("No historical weather data available for this location and time period")

    missing = [v for v in config.DAILY_VARS if d.get(v) is None]
    if missing:
        raise NoData(f"Open-Meteo response lacks daily variables: {missing}")

    n = len(times)
    short = {v: len(d[v]) for v in config.DAILY_VARS if len(d[v]) != n}
    if short:
        raise InvalidInput(f"daily arrays differ in length: time={n}, {short}")

    df = pd.DataFrame({
        "time": pd.to_datetime(times),
        "precipitation_sum": d["precipitation_sum"],
        "wind_speed_10m_mean": d["wind_speed_10m_mean"],
        "wind_gusts_10m_max": d["wind_gusts_10m_max"],
    })
    for col in config.DAILY_VARS:
        df[col] = pd.to_numeric(df[col], errors="coerce")
    logger.debug("Open-Meteo returned %d daily rows", len(df))
    return df.sort_values("time").reset_index(drop=True)


def load_trailing_daily(
    latitude,
    longitude,
    years: int = config.YEARS,
    today: Optional[date] = None,
) -> pd.DataFrame:
    """Validate the point, then load the trailing `years`-year window ending yesterday."""
    lat, lon = validate_coordinates(latitude, longitude)
    logger.info("Analyzing flight days for coordinates: %s, %s", lat, lon)
    start, end = trailing_window(today, years)
    return load_openmeteo_daily(lat, lon, start, end)
