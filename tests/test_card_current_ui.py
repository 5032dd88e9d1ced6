from __future__ import annotations

import importlib

from src.api.detailed_conditions import build_weather_parameters
from src.api.weather_assembler import assemble_weather_record
from src.api.weather_models import Location
from src.viewmodels.panel_state import PanelState

card_current_module = importlib.import_module("src.ui.card_current")

MADRID = Location("Madrid", 40.4165, -3.70256)


def _record():
    return assemble_weather_record(
        {
            "current": {
                "time": "2024-06-01T14:30",
                "temperature_2m": 21.6,
                "relative_humidity_2m": 40,
                "weather_code": 2,
                "wind_speed_10m": 5,
                "wind_direction_10m": 90,
                "surface_pressure": 1012,
            }
        },
        MADRID.latitude,
        MADRID.longitude,
    )


def _patch(monkeypatch, state, location=MADRID):
    calls = []

    def fake_load_panel(key, loader, *args):
        calls.append((key, args))
        return state

    monkeypatch.setattr(card_current_module, "current_location", lambda: location)
    monkeypatch.setattr(card_current_module, "load_panel", fake_load_panel)
    return calls


def test_load_current_record_uses_searched_name(monkeypatch):
    calls = _patch(monkeypatch, PanelState.success(_record(), 1))

    record, error = card_current_module.load_current_record()

    assert error is None
    assert record.location.name == "Madrid"
    assert calls == [("current", (40.4165, -3.70256))]


def test_load_current_record_without_location(monkeypatch):
    calls = _patch(monkeypatch, PanelState.idle(), location=None)

    assert card_current_module.load_current_record() == (None, None)
    assert calls == []


def test_card_current_renders_record(monkeypatch):
    _patch(monkeypatch, PanelState.success(_record(), 1))
    titles: list[str] = []
    rendered: dict[str, object] = {}

    monkeypatch.setattr(card_current_module, "section_title", lambda html, **kw: titles.append(html))

    def fake_html(html, height, scrolling):
        rendered["html"] = html
        rendered["height"] = height

    monkeypatch.setattr(card_current_module, "st_html", fake_html)

    card_current_module.card_current()

    assert "Madrid" in titles[0]
    html = rendered["html"]
    assert "22°C" in html
    assert "71°F" in html
    assert "Partly cloudy" in html
    assert "18 km/h E" in html
    assert rendered["height"] == 230


def test_card_current_error_shows_retry(monkeypatch):
    _patch(monkeypatch, PanelState.failure(RuntimeError("HTTP 503"), 1))
    seen = {}

    def fake_error_card(title, message, retry_key=None):
        seen.update(title=title, message=message, retry_key=retry_key)

    monkeypatch.setattr(card_current_module, "error_card", fake_error_card)

    card_current_module.card_current()

    assert seen["message"] == "HTTP 503"
    assert seen["retry_key"] == "current"


def test_card_current_falls_back_to_error_card_on_bug(monkeypatch):
    def boom():
        raise RuntimeError("kaboom")

    monkeypatch.setattr(card_current_module, "current_location", boom)
    captured = {}
    monkeypatch.setattr(
        card_current_module,
        "card",
        lambda title, body, height_dvh=16: captured.update(title=title, body=body),
    )

    card_current_module.card_current()

    assert "kaboom" in captured["body"]


def test_card_current_rounds_half_up_like_detailed_table(monkeypatch):
    record = _record()
    record.current.temp_c = 22.5
    record.current.feelslike_c = 20.5
    record.current.pressure_mb = 1012.5
    _patch(monkeypatch, PanelState.success(record, 1))
    monkeypatch.setattr(card_current_module, "section_title", lambda html, **kw: None)
    rendered = {}
    monkeypatch.setattr(
        card_current_module, "st_html", lambda html, height, scrolling: rendered.update(html=html)
    )

    card_current_module.card_current()

    html = rendered["html"]
    assert "23°C" in html
    assert "21°C" in html
    assert "1013 hPa" in html

    params = build_weather_parameters({"current": {"temperature_2m": 22.5}})
    assert params[0].value == "23"
