# config.py
"""Configuration settings for the Weather Dashboard application."""

import os


def _env_float(name: str) -> float | None:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    return float(raw)


DEV: bool = os.environ.get("DEV", "0") == "1"

# ------------------- ENDPOINTS -------------------

GEOCODING_URL: str = os.environ.get(
    "WEATHER_GEO_URL", "https://geocoding-api.open-meteo.com/v1/search"
)
"""Geocoding search endpoint (name -> latitude/longitude)."""

FORECAST_BASE_URL: str = os.environ.get(
    "WEATHER_API_BASE_URL", "https://api.open-meteo.com/v1"
).rstrip("/")
FORECAST_URL: str = f"{FORECAST_BASE_URL}/forecast"
"""Forecast endpoint; current/hourly/daily variables are requested per panel."""

HTTP_TIMEOUT_S: float | None = _env_float("WEATHER_HTTP_TIMEOUT_S")
"""Request timeout in seconds. None = requests' own default (no timeout)."""

USER_AGENT: str = "WeatherDashboard/1.0"

# ------------------- FORECAST REQUESTS -------------------

CURRENT_FIELDS: tuple[str, ...] = (
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "precipitation",
    "weather_code",
    "surface_pressure",
    "wind_speed_10m",
    "wind_direction_10m",
    "uv_index",
    "visibility",
)
"""Variables behind the canonical weather record."""

DETAILED_CURRENT_FIELDS: tuple[str, ...] = (
    "temperature_2m",
    "apparent_temperature",
    "relative_humidity_2m",
    "wind_speed_10m",
    "wind_direction_10m",
    "surface_pressure",
    "uv_index",
)
DETAILED_HOURLY_FIELDS: tuple[str, ...] = ("dew_point_2m", "visibility")

DAILY_FIELDS: tuple[str, ...] = (
    "weather_code",
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_probability_mean",
    "relative_humidity_2m_mean",
)

FORECAST_DAYS: int = 7

UNKNOWN_LOCATION: str = "Unknown location"
"""Placeholder name for records assembled from bare coordinates."""

# ------------------- PARAMETER THRESHOLDS -------------------

UV_ALERT: float = 8
UV_ATTENTION: float = 6
"""UV index thresholds (Alert / Attention)."""

HUMIDITY_HIGH: float = 80
HUMIDITY_LOW: float = 20
"""Relative humidity (%) outside (LOW, HIGH) needs attention."""

WIND_ALERT_KPH: float = 25
WIND_ATTENTION_KPH: float = 15
"""Wind speed thresholds (km/h)."""

PRESSURE_LOW_HPA: float = 1000
PRESSURE_HIGH_HPA: float = 1030
"""Surface pressure (hPa) outside (LOW, HIGH) needs attention."""

PRESSURE_STABLE_HPA: float = 1020
"""Above this the wind/pressure card reports a stable high pressure."""

# ------------------- UI COLORS -------------------

COLOR_GREEN: str = "#10B981"
COLOR_AMBER: str = "#F59E0B"
COLOR_RED: str = "#EF4444"
COLOR_DARK_RED: str = "#7C2D12"
"""Air quality bucket colors (Good, Moderate, Sensitive, Unhealthy)."""

COLOR_STATUS: dict[str, str] = {
    "Normal": "#4caf50",
    "Attention": "#ff9800",
    "Alert": "#f44336",
}

COLOR_PRESSURE_HIGH: str = "#4caf50"
COLOR_PRESSURE_NORMAL: str = "#2196f3"
COLOR_PRESSURE_LOW: str = "#ff9800"

COLOR_TEXT_GRAY: str = "#d0d0d0"

# ------------------- PLOTLY CONFIG -------------------

PLOTLY_CONFIG: dict = {
    "displayModeBar": False,
    "responsive": True,
}
