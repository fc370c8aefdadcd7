from __future__ import annotations

import math

from flight_core.config import LAT_RANGE, LON_RANGE
from flight_core.errors import InvalidInput


def validate_coordinates(latitude, longitude) -> tuple[float, float]:
    """
    Check a point is a pair of finite numbers inside the Norway box
    (lat 58..72, lon 4..32). Returns them as floats.
    """
    try:
        lat = float(latitude)
        lon = float(longitude)
    except (TypeError, ValueError) as exc:
        raise InvalidInput("Invalid coordinates provided") from exc
    if isinstance(latitude, bool) or isinstance(longitude, bool):
        raise InvalidInput("Invalid coordinates provided")
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise InvalidInput("Invalid coordinates provided")

    if not (LAT_RANGE[0] <= lat <= LAT_RANGE[1] and LON_RANGE[0] <= lon <= LON_RANGE[1]):
        raise InvalidInput("Coordinates appear to be outside Norway")
    return lat, lon
