from __future__ import annotations

from typing import Final

from src.config import (
    COLOR_PRESSURE_HIGH,
    COLOR_PRESSURE_LOW,
    COLOR_PRESSURE_NORMAL,
    PRESSURE_LOW_HPA,
    PRESSURE_STABLE_HPA,
)
from src.utils import round_half_up

COMPASS_POINTS: Final[tuple[str, ...]] = (
    "N",
    "NNE",
    "NE",
    "ENE",
    "E",
    "ESE",
    "SE",
    "SSE",
    "S",
    "SSW",
    "SW",
    "WSW",
    "W",
    "WNW",
    "NW",
    "NNW",
)

_ANGLE_BY_POINT: Final[dict[str, float]] = {
    point: i * 22.5 for i, point in enumerate(COMPASS_POINTS)
}


def degrees_to_compass(degrees: float) -> str:
    """Wind direction in degrees -> 16-point compass label."""
    index = round_half_up(degrees / 22.5) % 16
    return COMPASS_POINTS[index]


def compass_to_degrees(label: str) -> float:
    """Compass label -> dial angle. Unknown labels point north (0°)."""
    return _ANGLE_BY_POINT.get(label, 0.0)


def pressure_quality(pressure_hpa: float) -> tuple[str, str]:
    """(text, color) summary of surface pressure for the wind/pressure card."""
    if pressure_hpa > PRESSURE_STABLE_HPA:
        return "High pressure - stable weather", COLOR_PRESSURE_HIGH
    if pressure_hpa > PRESSURE_LOW_HPA:
        return "Normal pressure", COLOR_PRESSURE_NORMAL
    return "Low pressure - possible bad weather", COLOR_PRESSURE_LOW
