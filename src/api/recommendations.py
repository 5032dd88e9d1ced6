from __future__ import annotations

from src.api.weather_models import Recommendation, RecommendationConditions, WeatherRecord
from src.api.weather_utils import kph_to_mps

# Condition label keyword -> representative WMO code. First match wins.
_CODE_BY_KEYWORD: tuple[tuple[str, int], ...] = (
    ("clear", 0),
    ("cloud", 3),
    ("rain", 63),
    ("snow", 73),
    ("thunderstorm", 95),
)


def recommendation_conditions(record: WeatherRecord) -> RecommendationConditions:
    """Reduce a weather record to the inputs of generate_recommendations()."""
    text = record.current.condition.text.lower()
    code = next((c for keyword, c in _CODE_BY_KEYWORD if keyword in text), 0)

    return RecommendationConditions(
        temperature=record.current.temp_c,
        humidity=record.current.humidity,
        weather_code=code,
        wind_speed=kph_to_mps(record.current.wind_kph),
        # current conditions carry no precipitation probability
        precipitation=0.0,
    )


def _clothing(w: RecommendationConditions) -> Recommendation:
    title = "Optimal clothing"
    if w.temperature < 15:
        return Recommendation("clothing", title, "Seasonal clothing with an extra layer", "🧥", "high")
    if w.temperature > 25:
        return Recommendation(
            "clothing", title, "Light, breathable clothing and sun protection", "👕", "high"
        )
    return Recommendation("clothing", title, "Seasonal clothing with an extra layer", "👔", "medium")


def _activities(w: RecommendationConditions) -> Recommendation:
    title = "Recommended activities"
    if w.precipitation < 20 and w.wind_speed < 15:
        return Recommendation(
            "activities", title, "Good conditions for walking or light activities", "🚶", "high"
        )
    if w.precipitation > 60:
        return Recommendation(
            "activities", title, "Better to stay indoors or pick covered activities", "🏠", "medium"
        )
    return Recommendation(
        "activities", title, "Good conditions for walking or light activities", "🚶", "medium"
    )


def _health(w: RecommendationConditions) -> Recommendation:
    title = "Health and wellbeing"
    if w.humidity > 70:
        return Recommendation(
            "health", title, "High humidity: stay hydrated and look for cool places", "💧", "high"
        )
    if w.humidity < 30:
        return Recommendation(
            "health", title, "Low humidity: use moisturiser and drink more water", "🧴", "medium"
        )
    return Recommendation("health", title, "Normal humidity conditions", "💚", "low")


def _transport(w: RecommendationConditions) -> Recommendation:
    title = "Transport and mobility"
    if w.precipitation > 50 or w.wind_speed > 20:
        return Recommendation("transport", title, "Adverse travel conditions", "⚠️", "high")
    return Recommendation("transport", title, "Normal travel conditions", "🚗", "low")


def generate_recommendations(conditions: RecommendationConditions) -> list[Recommendation]:
    """One recommendation per category: clothing, activities, health, transport."""
    return [
        _clothing(conditions),
        _activities(conditions),
        _health(conditions),
        _transport(conditions),
    ]
