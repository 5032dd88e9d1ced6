from __future__ import annotations

from typing import Any

from src.api.errors import DataShapeError
from src.api.parameter_status import NORMAL, get_parameter_status
from src.api.simulated import RandomTrendSource, TrendSource
from src.api.weather_fetch import fetch_forecast
from src.api.weather_models import WeatherParameter
from src.api.weather_utils import as_float, float_or_zero, value_at
from src.api.wind import degrees_to_compass
from src.config import DETAILED_CURRENT_FIELDS, DETAILED_HOURLY_FIELDS
from src.utils import round_half_up

DEFAULT_VISIBILITY_M = 10_000
DEFAULT_PRESSURE_HPA = 1013


def _first_hourly(hourly: Any, key: str) -> float | None:
    if not isinstance(hourly, dict):
        return None
    return as_float(value_at(hourly.get(key), 0))


def build_weather_parameters(
    payload: Any,
    trend_source: TrendSource | None = None,
) -> list[WeatherParameter]:
    """
    Rows of the detailed conditions table.

    Wind speed is in km/h here (provider default unit). Trend and
    recent change come from trend_source, which is simulated by default.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("current"), dict):
        raise DataShapeError("forecast response has no 'current' section")

    source = trend_source or RandomTrendSource()
    current = payload["current"]
    hourly = payload.get("hourly")

    temperature = float_or_zero(current.get("temperature_2m"))
    apparent = float_or_zero(current.get("apparent_temperature"))
    humidity = float_or_zero(current.get("relative_humidity_2m"))
    wind_kph = float_or_zero(current.get("wind_speed_10m"))
    wind_deg = float_or_zero(current.get("wind_direction_10m"))
    pressure = as_float(current.get("surface_pressure")) or DEFAULT_PRESSURE_HPA
    uv = float_or_zero(current.get("uv_index"))
    visibility_m = _first_hourly(hourly, "visibility") or DEFAULT_VISIBILITY_M
    dew_point = _first_hourly(hourly, "dew_point_2m") or 0.0

    def row(
        name: str,
        value: str,
        unit: str,
        status: str,
        description: str,
        icon: str,
    ) -> WeatherParameter:
        return WeatherParameter(
            name=name,
            value=value,
            unit=unit,
            status=status,
            trend=source.trend(),
            recent_change=source.recent_change(),
            description=description,
            icon=icon,
        )

    return [
        row(
            "Temperature",
            str(round_half_up(temperature)),
            "°C",
            get_parameter_status("temperature", temperature),
            "Current air temperature",
            "🌡️",
        ),
        row(
            "Feels like",
            str(round_half_up(apparent)),
            "°C",
            get_parameter_status("apparent", apparent),
            "Temperature as perceived by the body",
            "🌡️",
        ),
        row(
            "Humidity",
            str(round_half_up(humidity)),
            "%",
            get_parameter_status("humidity", humidity),
            "Relative humidity of the air",
            "💧",
        ),
        row(
            "Wind",
            f"{round_half_up(wind_kph)} km/h",
            degrees_to_compass(wind_deg),
            get_parameter_status("windSpeed", wind_kph),
            "Wind speed and direction",
            "💨",
        ),
        row(
            "Visibility",
            str(round_half_up(visibility_m / 1000)),
            "km",
            NORMAL,
            "Atmospheric visibility distance",
            "👁️",
        ),
        row(
            "Pressure",
            str(round_half_up(pressure)),
            "hPa",
            get_parameter_status("pressure", pressure),
            "Atmospheric pressure at the surface",
            "📊",
        ),
        row(
            "UV index",
            str(round_half_up(uv)),
            "",
            get_parameter_status("uv", uv),
            "Ultraviolet radiation intensity",
            "☀️",
        ),
        row(
            "Dew point",
            str(round_half_up(dew_point)),
            "°C",
            NORMAL,
            "Condensation temperature of water vapour",
            "💧",
        ),
    ]


def fetch_detailed_conditions(
    lat: float,
    lon: float,
    trend_source: TrendSource | None = None,
) -> list[WeatherParameter]:
    payload = fetch_forecast(
        lat,
        lon,
        current=DETAILED_CURRENT_FIELDS,
        hourly=DETAILED_HOURLY_FIELDS,
        forecast_days=1,
    )
    return build_weather_parameters(payload, trend_source)
