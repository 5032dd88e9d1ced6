from __future__ import annotations


class WeatherDashboardError(Exception):
    """Base class for errors a panel can show to the user."""


class GeocodeError(WeatherDashboardError):
    """Place name lookup failed or found nothing."""


class FetchError(WeatherDashboardError):
    """Forecast request failed; status_code is None for network errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DataShapeError(WeatherDashboardError):
    """A successful response is missing a section the caller needs."""
