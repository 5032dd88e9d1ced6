from __future__ import annotations

from datetime import date, timedelta
from typing import Any

from src.api.errors import DataShapeError
from src.api.weather_fetch import fetch_forecast
from src.api.weather_models import ForecastDay
from src.api.weather_utils import as_float, as_int, value_at
from src.api.wmo_condition import forecast_icon_name
from src.config import DAILY_FIELDS, FORECAST_DAYS
from src.utils import round_half_up

# indexed by date.weekday(), Monday = 0
WEEKDAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def day_name(date_str: str, today: date | None = None) -> str:
    """'Today' / 'Tomorrow' / weekday name, comparing calendar dates only."""
    day = date.fromisoformat(date_str[:10])
    today = today or date.today()

    if day == today:
        return "Today"
    if day == today + timedelta(days=1):
        return "Tomorrow"
    return WEEKDAY_NAMES[day.weekday()]


def _rounded(column: Any, index: int) -> int:
    value = as_float(value_at(column, index))
    return 0 if value is None else round_half_up(value)


def build_forecast_days(daily: dict[str, Any], today: date | None = None) -> list[ForecastDay]:
    """Turn Open-Meteo's column oriented daily section into ForecastDay rows."""
    dates = daily.get("time") or []
    codes = daily.get("weather_code")

    days: list[ForecastDay] = []
    for i, d in enumerate(dates):
        code = as_int(value_at(codes, i)) or 0
        days.append(
            ForecastDay(
                date=d,
                day_name=day_name(d, today),
                icon=forecast_icon_name(code),
                temp_max=_rounded(daily.get("temperature_2m_max"), i),
                temp_min=_rounded(daily.get("temperature_2m_min"), i),
                rain_chance=_rounded(daily.get("precipitation_probability_mean"), i),
                humidity=_rounded(daily.get("relative_humidity_2m_mean"), i),
                weather_code=code,
            )
        )
    return days


def fetch_extended_forecast(
    lat: float,
    lon: float,
    today: date | None = None,
) -> list[ForecastDay]:
    """7-day forecast rows for the extended forecast card."""
    payload = fetch_forecast(lat, lon, daily=DAILY_FIELDS, forecast_days=FORECAST_DAYS)
    daily = payload.get("daily") if isinstance(payload, dict) else None
    if not isinstance(daily, dict):
        raise DataShapeError("forecast response has no 'daily' section")
    return build_forecast_days(daily, today)
