from __future__ import annotations

from src.config import (
    HUMIDITY_HIGH,
    HUMIDITY_LOW,
    PRESSURE_HIGH_HPA,
    PRESSURE_LOW_HPA,
    UV_ALERT,
    UV_ATTENTION,
    WIND_ALERT_KPH,
    WIND_ATTENTION_KPH,
)

NORMAL = "Normal"
ATTENTION = "Attention"
ALERT = "Alert"

STATUSES: tuple[str, ...] = (NORMAL, ATTENTION, ALERT)


def get_parameter_status(parameter: str, value: float) -> str:
    """
    Status of a raw parameter value.

    uv, humidity, windSpeed (km/h) and pressure (hPa) have thresholds;
    every other parameter is always Normal.
    """
    if parameter == "uv":
        if value >= UV_ALERT:
            return ALERT
        if value >= UV_ATTENTION:
            return ATTENTION
        return NORMAL

    if parameter == "humidity":
        if value >= HUMIDITY_HIGH or value <= HUMIDITY_LOW:
            return ATTENTION
        return NORMAL

    if parameter == "windSpeed":
        if value >= WIND_ALERT_KPH:
            return ALERT
        if value >= WIND_ATTENTION_KPH:
            return ATTENTION
        return NORMAL

    if parameter == "pressure":
        if value <= PRESSURE_LOW_HPA or value >= PRESSURE_HIGH_HPA:
            return ATTENTION
        return NORMAL

    return NORMAL
