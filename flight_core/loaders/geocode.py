from __future__ import annotations

import logging

import requests

from flight_core import config
from flight_core.analysis.models import Location
from flight_core.errors import InvalidInput

logger = logging.getLogger(__name__)


def search_places(name: str, limit: int = 5) -> list[Location]:
    """Nominatim free-text search restricted to Norway."""
    if not isinstance(name, str) or not name.strip():
        raise InvalidInput("No place name provided")

    params = {
        "q": f"{name.strip()}, Norway",
        "format": "json",
        "limit": int(limit),
        "countrycodes": "no",
    }
    logger.info("Searching for place: %s", name)
    r = requests.get(
        config.NOMINATIM_URL,
        params=params,
        headers={"User-Agent": config.USER_AGENT},
        timeout=config.HTTP_TIMEOUT,
    )
    r.raise_for_status()

    out: list[Location] = []
    for hit in r.json() or []:
        try:
            lat, lon = float(hit["lat"]), float(hit["lon"])
        except (KeyError, TypeError, ValueError):
            logger.debug("Skipping geocoding hit without coordinates: %r", hit)
            continue
        out.append(Location(latitude=lat, longitude=lon, display_name=hit.get("display_name")))
    return out
