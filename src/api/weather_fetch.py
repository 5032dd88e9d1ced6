from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from src.api.http import http_get_json
from src.config import FORECAST_URL


def _join(fields: Iterable[str] | None) -> str | None:
    if fields is None:
        return None
    if isinstance(fields, str):
        return fields
    joined = ",".join(fields)
    return joined or None


def build_forecast_params(
    lat: float,
    lon: float,
    current: Iterable[str] | None = None,
    hourly: Iterable[str] | None = None,
    daily: Iterable[str] | None = None,
    forecast_days: int | None = None,
    **extra: Any,
) -> dict[str, Any]:
    """
    Query parameters for the forecast endpoint.

    Variable lists are sent comma separated; sections left as None are not
    requested at all. Extra keyword arguments are passed through as-is
    (e.g. wind_speed_unit="ms").
    """
    params: dict[str, Any] = {"latitude": lat, "longitude": lon}

    for key, fields in (("current", current), ("hourly", hourly), ("daily", daily)):
        joined = _join(fields)
        if joined:
            params[key] = joined

    params["timezone"] = "auto"
    if forecast_days is not None:
        params["forecast_days"] = forecast_days

    params.update(extra)
    return params


def fetch_forecast(
    lat: float,
    lon: float,
    current: Iterable[str] | None = None,
    hourly: Iterable[str] | None = None,
    daily: Iterable[str] | None = None,
    forecast_days: int | None = None,
    **extra: Any,
) -> dict[str, Any]:
    """
    Fetch the raw forecast payload.

    Does not normalize or validate sections; callers check for the parts
    they need. Raises FetchError (with status_code) on failure.
    """
    params = build_forecast_params(
        lat,
        lon,
        current=current,
        hourly=hourly,
        daily=daily,
        forecast_days=forecast_days,
        **extra,
    )
    return http_get_json(FORECAST_URL, params=params)
