"""
Canonical weather record assembly.

Two entry points share one assembler:
- get_current_weather(name)         -> geocodes first, record carries the resolved name
- get_weather_by_coordinates(lat, lon) -> record carries UNKNOWN_LOCATION; callers
                                        that know the name overwrite it

All unit conversions (m/s -> km/h, °C -> °F) happen here, once.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import Any

from src.api.errors import DataShapeError
from src.api.geocoding import geocode
from src.api.weather_fetch import fetch_forecast
from src.api.weather_models import CurrentConditions, LocationInfo, WeatherRecord
from src.api.weather_utils import (
    as_float,
    celsius_to_fahrenheit,
    float_or_zero,
    mps_to_kph,
)
from src.api.wind import degrees_to_compass
from src.api.wmo_condition import normalize_weather_code
from src.config import CURRENT_FIELDS, UNKNOWN_LOCATION
from src.logger_config import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


def _now_iso() -> str:
    return datetime.now().replace(microsecond=0).isoformat()


def _current_section(payload: Any) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise DataShapeError("forecast response is not a JSON object")
    current = payload.get("current")
    if not isinstance(current, dict):
        raise DataShapeError("forecast response has no 'current' section")
    return current


def _wind_dir(raw: Any) -> str:
    degrees = as_float(raw)
    if degrees is None or not math.isfinite(degrees):
        return ""
    return degrees_to_compass(degrees)


def assemble_weather_record(
    payload: Any,
    lat: float,
    lon: float,
    name: str = UNKNOWN_LOCATION,
) -> WeatherRecord:
    """
    Build a WeatherRecord from a raw forecast payload.

    Raises DataShapeError if the payload has no 'current' section; never
    returns a partially filled record. Missing fields become 0 / "".
    """
    current = _current_section(payload)

    temp_c = float_or_zero(current.get("temperature_2m"))
    apparent = as_float(current.get("apparent_temperature"))
    visibility_m = float_or_zero(current.get("visibility"))
    observed = current.get("time") or _now_iso()

    return WeatherRecord(
        location=LocationInfo(
            name=name,
            region="",
            country="",
            localtime=str(observed),
            lat=lat,
            lon=lon,
        ),
        current=CurrentConditions(
            temp_c=temp_c,
            temp_f=celsius_to_fahrenheit(temp_c),
            condition=normalize_weather_code(current.get("weather_code")),
            humidity=float_or_zero(current.get("relative_humidity_2m")),
            wind_kph=mps_to_kph(float_or_zero(current.get("wind_speed_10m"))),
            wind_dir=_wind_dir(current.get("wind_direction_10m")),
            pressure_mb=float_or_zero(current.get("surface_pressure")),
            feelslike_c=temp_c if apparent is None else apparent,
            uv=float_or_zero(current.get("uv_index")),
            vis_km=visibility_m / 1000,
            last_updated=str(observed),
        ),
    )


def _fetch_current_payload(lat: float, lon: float) -> dict[str, Any]:
    # wind in m/s so the single m/s -> km/h conversion above stays correct
    return fetch_forecast(lat, lon, current=CURRENT_FIELDS, wind_speed_unit="ms")


def get_weather_by_coordinates(lat: float, lon: float) -> WeatherRecord:
    """Record for bare coordinates; location.name is UNKNOWN_LOCATION."""
    payload = _fetch_current_payload(lat, lon)
    return assemble_weather_record(payload, lat, lon)


def get_current_weather(location_name: str) -> WeatherRecord | None:
    """Geocode a place name and assemble its record under the resolved name.

    Blank input is a no-op like geocode(): returns None, no network.
    """
    location = geocode(location_name)
    if location is None:
        return None

    payload = _fetch_current_payload(location.latitude, location.longitude)
    record = assemble_weather_record(
        payload,
        location.latitude,
        location.longitude,
        name=location.name,
    )
    logger.info("current weather for %s: %s", record.location.name, record.current.condition.text)
    return record
