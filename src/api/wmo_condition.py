from __future__ import annotations

from typing import Final

from src.api.weather_models import Condition

UNKNOWN_CONDITION: Final[Condition] = Condition("Unknown", "Help")

# WMO weather code -> (label, icon id)
_CONDITION_BY_WMO: Final[dict[int, Condition]] = {
    0: Condition("Clear sky", "WbSunny"),
    1: Condition("Mainly clear", "WbSunny"),
    2: Condition("Partly cloudy", "PartlyCloudyDay"),
    3: Condition("Cloudy", "Cloud"),
    45: Condition("Fog", "Foggy"),
    48: Condition("Depositing rime fog", "Foggy"),
    51: Condition("Light drizzle", "Grain"),
    53: Condition("Moderate drizzle", "Grain"),
    55: Condition("Dense drizzle", "Grain"),
    61: Condition("Light rain", "LightMode"),
    63: Condition("Moderate rain", "WaterDrop"),
    65: Condition("Heavy rain", "WaterDrop"),
    71: Condition("Light snow", "AcUnit"),
    73: Condition("Moderate snow", "AcUnit"),
    75: Condition("Heavy snow", "AcUnit"),
    80: Condition("Light showers", "Grain"),
    81: Condition("Moderate showers", "Grain"),
    82: Condition("Violent showers", "WaterDrop"),
    95: Condition("Thunderstorm", "Thunderstorm"),
    96: Condition("Thunderstorm with light hail", "Thunderstorm"),
    99: Condition("Thunderstorm with heavy hail", "Thunderstorm"),
}


def normalize_weather_code(code: object) -> Condition:
    """
    WMO code -> Condition(text, icon).

    Codes outside the table (and non-integers) map to Unknown/Help; that is the
    defined fallback, not an error.
    """
    if isinstance(code, bool) or not isinstance(code, int | float):
        return UNKNOWN_CONDITION
    if isinstance(code, float) and not code.is_integer():
        return UNKNOWN_CONDITION
    return _CONDITION_BY_WMO.get(int(code), UNKNOWN_CONDITION)


# --- extended forecast icons ----------------------------------------------------
# Range based, coarser than the table above: the 7-day card only shows groups.
_FORECAST_GROUPS: Final[tuple[tuple[int, int, str, str], ...]] = (
    (0, 1, "WbSunny", "#FFD700"),
    (2, 3, "PartlyCloudyDay", "#87CEEB"),
    (45, 48, "Foggy", "#B0C4DE"),
    (51, 65, "WaterDrop", "#4682B4"),
    (66, 67, "Grain", "#4682B4"),
    (71, 75, "AcUnit", "#B0E0E6"),
    (80, 82, "LightMode", "#4169E1"),
    (95, 99, "Thunderstorm", "#FFD700"),
)
_FORECAST_DEFAULT: Final[tuple[str, str]] = ("Cloud", "#87CEEB")


def _forecast_group(code: int) -> tuple[str, str]:
    for low, high, icon, color in _FORECAST_GROUPS:
        if low <= code <= high:
            return icon, color
    return _FORECAST_DEFAULT


def forecast_icon_name(code: int) -> str:
    return _forecast_group(code)[0]


def forecast_icon_color(code: int) -> str:
    return _forecast_group(code)[1]
