# src/api/geocoding.py
from __future__ import annotations

import logging

from src.api.errors import FetchError, GeocodeError
from src.api.http import http_get_json
from src.api.weather_models import Location
from src.config import GEOCODING_URL
from src.logger_config import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


def geocode(query: str) -> Location | None:
    """
    Resolve a free-text place name to a Location.

    Blank input is a no-op: returns None without touching the network.
    Raises GeocodeError("lookup failed") on network/HTTP failure and
    GeocodeError("no results") when the endpoint finds nothing.
    """
    name = (query or "").strip()
    if not name:
        return None

    params = {"name": name, "count": 1, "language": "en", "format": "json"}
    try:
        data = http_get_json(GEOCODING_URL, params=params)
    except FetchError as e:
        raise GeocodeError("lookup failed") from e

    results = data.get("results") if isinstance(data, dict) else None
    if not results:
        logger.info("geocode: no results for %r", name)
        raise GeocodeError("no results")
    if not isinstance(results, list):
        logger.warning("geocode: unexpected results type %s", type(results).__name__)
        raise GeocodeError("lookup failed")

    first = results[0]
    try:
        location = Location(
            name=str(first["name"]),
            latitude=float(first["latitude"]),
            longitude=float(first["longitude"]),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise GeocodeError("lookup failed") from e

    logger.info("geocode: %r -> %s (%.4f, %.4f)", name, location.name, location.latitude, location.longitude)
    return location
