# src/api/weather_models.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """Geocoded place: the result of one successful search."""

    name: str
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"latitude out of range: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"longitude out of range: {self.longitude}")


@dataclass(frozen=True)
class Condition:
    text: str
    icon: str


@dataclass
class LocationInfo:
    name: str
    region: str
    country: str
    localtime: str
    lat: float
    lon: float


@dataclass
class CurrentConditions:
    """Current conditions in fixed units: °C, km/h, hPa, km."""

    temp_c: float
    temp_f: float
    condition: Condition
    humidity: float
    wind_kph: float
    wind_dir: str  # 16-point compass label, "" when unknown
    pressure_mb: float
    feelslike_c: float
    uv: float
    vis_km: float
    last_updated: str


@dataclass
class WeatherRecord:
    """Canonical weather record shared by the current-conditions panels."""

    location: LocationInfo
    current: CurrentConditions


@dataclass
class WeatherParameter:
    """One row of the detailed conditions table."""

    name: str
    value: str
    unit: str
    status: str  # "Normal" / "Attention" / "Alert"
    trend: str  # simulated
    recent_change: str  # simulated
    description: str
    icon: str


@dataclass
class ForecastDay:
    date: str
    day_name: str
    icon: str
    temp_max: int
    temp_min: int
    rain_chance: int
    humidity: int
    weather_code: int


@dataclass
class HumidityDistribution:
    """Display buckets for the humidity donut. Not a probability distribution."""

    low: float
    medium: float
    high: float


@dataclass
class TechnicalMetrics:
    atmospheric_pressure: float
    air_quality_index: int
    humidity_distribution: HumidityDistribution
    last_update: str


@dataclass
class RecommendationConditions:
    """Inputs of the recommendation rules; wind speed in m/s."""

    temperature: float
    humidity: float
    weather_code: int
    wind_speed: float
    precipitation: float = 0.0


@dataclass
class Recommendation:
    category: str
    title: str
    description: str
    icon: str
    priority: str  # "high" / "medium" / "low"
