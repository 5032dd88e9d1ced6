# src/api/__init__.py
from .errors import (
    DataShapeError as DataShapeError,
    FetchError as FetchError,
    GeocodeError as GeocodeError,
    WeatherDashboardError as WeatherDashboardError,
)
from .geocoding import geocode as geocode
from .weather_fetch import fetch_forecast as fetch_forecast
from .weather_assembler import (
    assemble_weather_record as assemble_weather_record,
    get_current_weather as get_current_weather,
    get_weather_by_coordinates as get_weather_by_coordinates,
)
from .wmo_condition import normalize_weather_code as normalize_weather_code
from .forecast_days import fetch_extended_forecast as fetch_extended_forecast
from .detailed_conditions import fetch_detailed_conditions as fetch_detailed_conditions
