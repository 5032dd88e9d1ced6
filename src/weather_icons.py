# weather_icons.py
"""Condition icon ids (as produced by the weather-code table) -> inline HTML."""

from __future__ import annotations

_EMOJI_BY_ICON: dict[str, str] = {
    "WbSunny": "☀️",
    "PartlyCloudyDay": "⛅",
    "Cloud": "☁️",
    "Foggy": "🌫️",
    "Grain": "🌦️",
    "LightMode": "🌤️",
    "WaterDrop": "🌧️",
    "AcUnit": "❄️",
    "Thunderstorm": "⛈️",
}
_FALLBACK = "❔"


def icon_emoji(icon: str) -> str:
    return _EMOJI_BY_ICON.get(icon, _FALLBACK)


def render_condition_icon(icon: str, size: int = 48, color: str | None = None) -> str:
    """Returns a <span> sized like an image icon."""
    style = f"display:inline-block;font-size:{int(size * 0.8)}px;line-height:{size}px;"
    if color:
        style += f"color:{color};"
    return f'<span class="wx-icon" title="{icon}" style="{style}">{icon_emoji(icon)}</span>'
