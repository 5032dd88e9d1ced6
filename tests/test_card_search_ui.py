from __future__ import annotations

import importlib

import pytest

from src.api.errors import GeocodeError
from src.api.weather_models import Location
from src.viewmodels.fetch_coordinator import FetchCoordinator

card_search_module = importlib.import_module("src.ui.card_search")


class DummySt:
    """Streamlit stub holding only session_state."""

    def __init__(self):
        self.session_state: dict[str, object] = {}


@pytest.fixture
def env(monkeypatch):
    dummy_st = DummySt()
    coord = FetchCoordinator()
    monkeypatch.setattr(card_search_module, "st", dummy_st)
    monkeypatch.setattr(card_search_module, "get_coordinator", lambda: coord)
    return dummy_st, coord


def test_blank_query_is_a_no_op(monkeypatch, env):
    dummy_st, coord = env

    def fail(query):
        raise AssertionError("geocode must not be called")

    monkeypatch.setattr(card_search_module, "geocode", fail)

    card_search_module.run_search("   ")

    assert dummy_st.session_state == {}
    assert coord.coords is None


def test_successful_search_selects_location(monkeypatch, env):
    dummy_st, coord = env
    madrid = Location("Madrid", 40.4165, -3.70256)
    monkeypatch.setattr(card_search_module, "geocode", lambda q: madrid)

    card_search_module.run_search("Madrid")

    assert dummy_st.session_state["location"] is madrid
    assert dummy_st.session_state["search_error"] is None
    assert dummy_st.session_state["searched_at"]
    assert coord.coords == (40.4165, -3.70256)
    assert coord.generation == 1


def test_failed_search_keeps_previous_location(monkeypatch, env):
    dummy_st, coord = env
    madrid = Location("Madrid", 40.4165, -3.70256)
    monkeypatch.setattr(card_search_module, "geocode", lambda q: madrid)
    card_search_module.run_search("Madrid")

    def no_results(query):
        raise GeocodeError("no results")

    monkeypatch.setattr(card_search_module, "geocode", no_results)
    card_search_module.run_search("Xyzzyville")

    assert dummy_st.session_state["location"] is madrid
    assert dummy_st.session_state["search_error"] == "Location lookup failed: no results"
    assert coord.generation == 1


def test_card_search_falls_back_to_error_card(monkeypatch):
    def boom(*a, **k):
        raise RuntimeError("form broke")

    monkeypatch.setattr(card_search_module, "section_title", boom)
    captured = {}
    monkeypatch.setattr(
        card_search_module,
        "card",
        lambda title, body, height_dvh=16: captured.update(title=title, body=body),
    )

    card_search_module.card_search()

    assert captured["title"] == card_search_module.TITLE
    assert "form broke" in captured["body"]
