from __future__ import annotations

import pytest

import src.api.detailed_conditions as dc
from src.api.errors import DataShapeError
from src.api.parameter_status import ALERT, ATTENTION, NORMAL


class FixedTrends:
    def trend(self):
        return "Stable"

    def recent_change(self):
        return "No change"


def _payload():
    return {
        "current": {
            "temperature_2m": 21.6,
            "apparent_temperature": 20.4,
            "relative_humidity_2m": 85,
            "wind_speed_10m": 26,
            "wind_direction_10m": 90,
            "surface_pressure": 1008.3,
            "uv_index": 6.2,
        },
        "hourly": {"visibility": [24000, 23000], "dew_point_2m": [12.6, 12.0]},
    }


def test_build_weather_parameters():
    params = dc.build_weather_parameters(_payload(), FixedTrends())
    by_name = {p.name: p for p in params}

    assert [p.name for p in params] == [
        "Temperature",
        "Feels like",
        "Humidity",
        "Wind",
        "Visibility",
        "Pressure",
        "UV index",
        "Dew point",
    ]
    assert by_name["Temperature"].value == "22"
    assert by_name["Temperature"].status == NORMAL
    assert by_name["Humidity"].status == ATTENTION
    assert by_name["Wind"].value == "26 km/h"
    assert by_name["Wind"].unit == "E"
    assert by_name["Wind"].status == ALERT
    assert by_name["Visibility"].value == "24"
    assert by_name["Pressure"].value == "1008"
    assert by_name["UV index"].status == ATTENTION
    assert by_name["Dew point"].value == "13"
    assert all(p.trend == "Stable" and p.recent_change == "No change" for p in params)


def test_defaults_when_fields_missing():
    params = dc.build_weather_parameters({"current": {}}, FixedTrends())
    by_name = {p.name: p for p in params}

    assert by_name["Visibility"].value == "10"
    assert by_name["Pressure"].value == "1013"
    assert by_name["Pressure"].status == NORMAL
    assert by_name["Dew point"].value == "0"
    assert by_name["Wind"].unit == "N"


def test_default_trend_source_is_simulated():
    params = dc.build_weather_parameters({"current": {}})
    assert all(p.trend in ("Rising", "Falling", "Stable") for p in params)


@pytest.mark.parametrize("payload", [{}, {"hourly": {}}, None])
def test_missing_current_raises(payload):
    with pytest.raises(DataShapeError):
        dc.build_weather_parameters(payload)


def test_fetch_detailed_conditions_request(monkeypatch):
    seen = {}

    def fake_fetch(lat, lon, **kwargs):
        seen.update(kwargs)
        return _payload()

    monkeypatch.setattr(dc, "fetch_forecast", fake_fetch)

    params = dc.fetch_detailed_conditions(40.4, -3.7, FixedTrends())

    assert len(params) == 8
    assert seen["forecast_days"] == 1
    assert "uv_index" in seen["current"]
    assert "dew_point_2m" in seen["hourly"]
