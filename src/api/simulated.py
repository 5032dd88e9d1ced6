"""
Placeholder data sources.

Nothing in here is derived from real time series. Trend labels, recent-change
strings and the chart series are sampled around the current record so the
cards have something to draw. Callers get them through TrendSource (or pass an
explicit random.Random), so a real history-backed source can replace them
without touching the cards.
"""

from __future__ import annotations

import math
import random
from typing import Final, Protocol

import pandas as pd

from src.api.weather_models import WeatherRecord
from src.utils import round_half_up

TRENDS: Final[tuple[str, ...]] = ("Rising", "Falling", "Stable")

RECENT_CHANGES: Final[tuple[str, ...]] = (
    "+2°C in 2h",
    "-5% in 1h",
    "+3 km/h",
    "No change",
    "+5% in 1h",
    "-2°C in 3h",
    "+1 hPa",
    "+3 km/h",
)

WIND_ROSE_DIRECTIONS: Final[tuple[str, ...]] = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


class TrendSource(Protocol):
    """Supplies trend / recent-change labels for the detailed conditions table."""

    def trend(self) -> str: ...

    def recent_change(self) -> str: ...


class RandomTrendSource:
    """Simulated TrendSource: uniform picks from fixed display strings."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def trend(self) -> str:
        return self._rng.choice(TRENDS)

    def recent_change(self) -> str:
        return self._rng.choice(RECENT_CHANGES)


_default_source = RandomTrendSource()


def get_trend(source: TrendSource | None = None) -> str:
    return (source or _default_source).trend()


def get_recent_change(source: TrendSource | None = None) -> str:
    return (source or _default_source).recent_change()


# --- chart series -------------------------------------------------------------
def simulate_daily_trend(record: WeatherRecord, rng: random.Random | None = None) -> pd.DataFrame:
    """24 hourly points of temperature, humidity and feels-like around the current values."""
    rng = rng or random.Random()
    base_temp = record.current.temp_c
    base_humidity = record.current.humidity

    rows = []
    for i in range(24):
        rows.append(
            {
                "time": f"{i:02d}:00",
                "temperature": round_half_up(
                    base_temp + math.sin(i * math.pi / 12) * 5 + rng.random() * 2 - 1
                ),
                "humidity": round_half_up(
                    base_humidity + math.cos(i * math.pi / 8) * 10 + rng.random() * 5 - 2.5
                ),
                "feels_like": round_half_up(
                    base_temp + math.sin(i * math.pi / 12) * 4 + rng.random() * 1.5 - 0.75
                ),
            }
        )
    return pd.DataFrame(rows, columns=["time", "temperature", "humidity", "feels_like"])


def simulate_wind_rose(record: WeatherRecord, rng: random.Random | None = None) -> pd.DataFrame:
    """Wind speed per 8 directions, jittered ±5 km/h around the current speed."""
    rng = rng or random.Random()
    base_speed = record.current.wind_kph
    rows = [
        {
            "direction": direction,
            "speed": max(0.0, base_speed + rng.random() * 10 - 5),
            "full_mark": 40,
        }
        for direction in WIND_ROSE_DIRECTIONS
    ]
    return pd.DataFrame(rows, columns=["direction", "speed", "full_mark"])


def simulate_pressure_trend(record: WeatherRecord, rng: random.Random | None = None) -> pd.DataFrame:
    """12 two-hourly pressure points plus a smooth tendency line."""
    rng = rng or random.Random()
    base = record.current.pressure_mb
    rows = []
    for i in range(12):
        wave = math.sin(i * math.pi / 6)
        rows.append(
            {
                "time": f"{i * 2:02d}:00",
                "pressure": base + wave * 8 + rng.random() * 4 - 2,
                "tendency": base + wave * 5,
            }
        )
    return pd.DataFrame(rows, columns=["time", "pressure", "tendency"])
