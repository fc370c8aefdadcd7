"""
Runtime settings for the flight-days analyzer.

Every value has a default and can be overridden from the environment, e.g.:
    export FLIGHT_DAYS_HTTP_TIMEOUT=60
    export FLIGHT_DAYS_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

import logging
import os

ARCHIVE_URL = "https://archive-api.open-meteo.com/v1/archive"
NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"
DATA_SOURCE = "Open-Meteo Historical Weather API"

DAILY_VARS = ["precipitation_sum", "wind_speed_10m_mean", "wind_gusts_10m_max"]
TIMEZONE = "Europe/Oslo"

# Norway bounding box (approximate)
LAT_RANGE = (58.0, 72.0)
LON_RANGE = (4.0, 32.0)

DEFAULT_THRESHOLDS = {"maxRain": 2.0, "maxWind": 10.0, "maxWindGusts": 15.0}

USER_AGENT = os.environ.get("FLIGHT_DAYS_USER_AGENT", "DroneWeatherAnalyzer/1.0")
HTTP_TIMEOUT = float(os.environ.get("FLIGHT_DAYS_HTTP_TIMEOUT", "30"))
YEARS = int(os.environ.get("FLIGHT_DAYS_YEARS", "5"))
LOG_LEVEL = os.environ.get("FLIGHT_DAYS_LOG_LEVEL", "INFO")


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger once; later calls are no-ops."""
    root = logging.getLogger()
    if root.handlers:
        return
    lvl = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    # requests/urllib3 are chatty at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)
