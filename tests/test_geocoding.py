from __future__ import annotations

import pytest

import src.api.geocoding as geo
from src.api.errors import FetchError, GeocodeError
from src.api.weather_models import Location


def test_geocode_returns_first_result(monkeypatch):
    seen = {}

    def fake_get(url, params=None):
        seen["url"] = url
        seen["params"] = params
        return {"results": [{"name": "Madrid", "latitude": 40.4, "longitude": -3.7}]}

    monkeypatch.setattr(geo, "http_get_json", fake_get)

    loc = geo.geocode("  Madrid ")

    assert loc == Location(name="Madrid", latitude=40.4, longitude=-3.7)
    assert seen["params"] == {"name": "Madrid", "count": 1, "language": "en", "format": "json"}
    assert seen["url"] == geo.GEOCODING_URL


@pytest.mark.parametrize("query", ["", "   ", "\t\n"])
def test_geocode_blank_query_is_noop(monkeypatch, query):
    def must_not_call(*a, **k):
        pytest.fail("blank query must not hit the network")

    monkeypatch.setattr(geo, "http_get_json", must_not_call)

    assert geo.geocode(query) is None


@pytest.mark.parametrize("payload", [{}, {"results": []}, {"results": None}])
def test_geocode_no_results(monkeypatch, payload):
    monkeypatch.setattr(geo, "http_get_json", lambda url, params=None: payload)

    with pytest.raises(GeocodeError, match="no results"):
        geo.geocode("Xyzzyville")


def test_geocode_http_failure_is_lookup_failed(monkeypatch):
    def fail(url, params=None):
        raise FetchError("HTTP 500", status_code=500)

    monkeypatch.setattr(geo, "http_get_json", fail)

    with pytest.raises(GeocodeError, match="lookup failed") as exc:
        geo.geocode("Madrid")
    assert isinstance(exc.value.__cause__, FetchError)


def test_geocode_out_of_range_coordinates(monkeypatch):
    monkeypatch.setattr(
        geo,
        "http_get_json",
        lambda url, params=None: {"results": [{"name": "Nowhere", "latitude": 123, "longitude": 0}]},
    )

    with pytest.raises(GeocodeError, match="lookup failed"):
        geo.geocode("Nowhere")


def test_location_validates_ranges():
    Location("Pole", 90.0, -180.0)
    with pytest.raises(ValueError):
        Location("Bad", -90.5, 0.0)
    with pytest.raises(ValueError):
        Location("Bad", 0.0, 180.1)


@pytest.mark.parametrize(
    "results",
    [{"name": "X"}, "Madrid", 42, ["not-a-dict"], [{"name": "X", "latitude": "north"}]],
)
def test_geocode_malformed_results_is_lookup_failed(monkeypatch, results):
    monkeypatch.setattr(geo, "http_get_json", lambda url, params=None: {"results": results})

    with pytest.raises(GeocodeError, match="lookup failed"):
        geo.geocode("Madrid")
