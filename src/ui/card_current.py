# src/ui/card_current.py
from __future__ import annotations

from streamlit.components.v1 import html as st_html

from src.api import get_weather_by_coordinates
from src.api.weather_models import WeatherRecord
from src.ui.common import (
    card,
    current_location,
    error_card,
    hint_card,
    load_panel,
    section_title,
)
from src.utils import round_half_up
from src.viewmodels.panel_state import PanelStatus
from src.weather_icons import render_condition_icon

PANEL_KEY = "current"
TITLE = "🌤️ Current conditions"


def load_current_record() -> tuple[WeatherRecord | None, str | None]:
    """(record, error) for the selected location; the record carries the searched name."""
    location = current_location()
    if location is None:
        return None, None

    state = load_panel(PANEL_KEY, get_weather_by_coordinates, location.latitude, location.longitude)
    if state.status == PanelStatus.ERROR:
        return None, state.error
    if state.status != PanelStatus.SUCCESS:
        return None, None

    record: WeatherRecord = state.data
    record.location.name = location.name
    return record, None


def _metric(label: str, value: str) -> str:
    return f'<div class="metric"><div class="hint">{label}</div><div class="value">{value}</div></div>'


def card_current() -> None:
    """Render the current conditions card for the searched location."""
    try:
        if current_location() is None:
            hint_card(TITLE, "Select a location to see the weather")
            return

        record, error = load_current_record()
        if error:
            error_card(TITLE, error, retry_key=PANEL_KEY)
            return
        if record is None:
            hint_card(TITLE, "Loading weather data...")
            return

        cur = record.current
        section_title(f"{TITLE} — {record.location.name}", mb=3)

        metrics = "".join(
            [
                _metric("Feels like", f"{round_half_up(cur.feelslike_c)}°C"),
                _metric("Humidity", f"{round_half_up(cur.humidity)}%"),
                _metric("Wind", f"{round_half_up(cur.wind_kph)} km/h {cur.wind_dir}"),
                _metric("Pressure", f"{round_half_up(cur.pressure_mb)} hPa"),
                _metric("UV index", f"{cur.uv:g}"),
                _metric("Visibility", f"{cur.vis_km:g} km"),
            ]
        )

        inner_html = f"""
            <!doctype html>
            <html><head><meta charset="utf-8">
            <style>
              :root {{ --fg:#e7eaee; --bg2:rgba(255,255,255,0.06); }}
              html,body {{margin:0;padding:0;background:transparent;color:var(--fg);
                         font-family:ui-sans-serif,system-ui,-apple-system,Segoe UI,Roboto,Ubuntu;}}
              .head {{display:flex;align-items:center;gap:16px;padding:4px 12px;}}
              .temp {{font-size:2.4rem;font-weight:600;}}
              .cond {{font-size:1rem;opacity:.9;}}
              .grid {{display:grid;grid-template-columns:repeat(3,minmax(90px,1fr));gap:8px;padding:8px 12px;}}
              .metric {{background:var(--bg2);border-radius:12px;padding:6px 10px;}}
              .hint {{font-size:.8rem;opacity:.75;}}
              .value {{font-size:1.05rem;}}
            </style></head><body>
              <div class="head">
                {render_condition_icon(cur.condition.icon, size=56)}
                <div>
                  <div class="temp">{round_half_up(cur.temp_c)}°C <span class="hint">/ {round_half_up(cur.temp_f)}°F</span></div>
                  <div class="cond">{cur.condition.text}</div>
                  <div class="hint">Updated {cur.last_updated}</div>
                </div>
              </div>
              <div class="grid">{metrics}</div>
            </body></html>
        """
        st_html(inner_html, height=230, scrolling=False)

    except Exception as e:
        card(TITLE, f"<span class='hint'>Error: {e}</span>", height_dvh=15)
