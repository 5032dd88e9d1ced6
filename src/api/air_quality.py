from __future__ import annotations

from datetime import datetime

from src.api.weather_models import HumidityDistribution, TechnicalMetrics, WeatherRecord
from src.config import COLOR_AMBER, COLOR_DARK_RED, COLOR_GREEN, COLOR_RED
from src.utils import round_half_up


def air_quality_index(humidity: float) -> int:
    """Synthetic AQI derived from humidity only. Display value, not a measurement."""
    return round_half_up(50 + (100 - humidity) * 0.6)


def aqi_category(aqi: float) -> tuple[str, str]:
    """(text, color) bucket of an AQI value."""
    if aqi <= 50:
        return "Good", COLOR_GREEN
    if aqi <= 100:
        return "Moderate", COLOR_AMBER
    if aqi <= 150:
        return "Unhealthy for sensitive groups", COLOR_RED
    return "Unhealthy", COLOR_DARK_RED


def humidity_distribution(humidity: float) -> HumidityDistribution:
    # the three buckets deliberately do not sum to 100
    return HumidityDistribution(
        low=max(0, 100 - humidity - 20),
        medium=min(100, humidity),
        high=max(0, humidity - 50),
    )


def conic_gradient_stops(dist: HumidityDistribution) -> list[tuple[str, float, float]]:
    """
    (bucket, start %, end %) slices for a CSS conic-gradient.

    Buckets are scaled by their sum; an all-zero distribution gives no slices.
    """
    parts = [("low", dist.low), ("medium", dist.medium), ("high", dist.high)]
    total = sum(v for _, v in parts)
    if total <= 0:
        return []

    stops: list[tuple[str, float, float]] = []
    start = 0.0
    for bucket, value in parts:
        end = start + value / total * 100
        stops.append((bucket, start, end))
        start = end
    return stops


def _format_last_update(raw: str) -> str:
    try:
        return datetime.fromisoformat(raw).strftime("%d/%m/%Y %H:%M")
    except ValueError:
        return raw


def build_technical_metrics(record: WeatherRecord) -> TechnicalMetrics:
    humidity = record.current.humidity
    return TechnicalMetrics(
        atmospheric_pressure=record.current.pressure_mb,
        air_quality_index=air_quality_index(humidity),
        humidity_distribution=humidity_distribution(humidity),
        last_update=_format_last_update(record.current.last_updated),
    )
