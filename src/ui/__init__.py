"""Expose dashboard card render functions."""

from .card_current import card_current
from .card_detailed import card_detailed
from .card_forecast import card_forecast
from .card_recommendations import card_recommendations
from .card_search import card_search
from .card_technical import card_technical
from .card_trends import card_trends
from .card_wind_pressure import card_wind_pressure

__all__ = [
    "card_current",
    "card_detailed",
    "card_forecast",
    "card_recommendations",
    "card_search",
    "card_technical",
    "card_trends",
    "card_wind_pressure",
]
