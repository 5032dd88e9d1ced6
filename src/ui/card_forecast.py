# src/ui/card_forecast.py
from __future__ import annotations

from streamlit.components.v1 import html as st_html

from src.api import fetch_extended_forecast
from src.api.weather_models import ForecastDay
from src.api.wmo_condition import forecast_icon_color
from src.ui.common import (
    card,
    current_location,
    error_card,
    hint_card,
    load_panel,
    section_title,
)
from src.viewmodels.panel_state import PanelStatus
from src.weather_icons import render_condition_icon

PANEL_KEY = "forecast"
TITLE = "📅 Extended forecast (7 days)"


def forecast_cell(day: ForecastDay) -> str:
    icon_html = render_condition_icon(day.icon, size=40, color=forecast_icon_color(day.weather_code))
    return f"""
        <div class="fc-cell">
          <div class="label">{day.day_name}</div>
          <div class="sub">{day.date}</div>
          <div class="icon">{icon_html}</div>
          <div class="temp">{day.temp_max}° / <span class="sub">{day.temp_min}°</span></div>
          <div class="pop">Rain {day.rain_chance}%</div>
          <div class="pop">Humidity {day.humidity}%</div>
        </div>
    """


def card_forecast() -> None:
    """Render the 7-day forecast row."""
    try:
        location = current_location()
        if location is None:
            hint_card(TITLE, "Select a location to see the extended forecast")
            return

        state = load_panel(PANEL_KEY, fetch_extended_forecast, location.latitude, location.longitude)
        if state.status == PanelStatus.ERROR:
            error_card(TITLE, state.error or "", retry_key=PANEL_KEY)
            return
        days: list[ForecastDay] = state.data or []
        if not days:
            hint_card(TITLE, "No forecast data")
            return

        section_title(f"{TITLE} — {location.name}", mb=3)
        inner_html = (
            """
            <!doctype html>
            <html><head><meta charset="utf-8">
            <style>
              :root { --fg:#e7eaee; --bg2:rgba(255,255,255,0.06); }
              html,body {margin:0;padding:0;background:transparent;color:var(--fg);
                         font-family:ui-sans-serif,system-ui,-apple-system,Segoe UI,Roboto,Ubuntu;}
              .fc-row {display:grid;grid-template-columns:repeat(7,minmax(80px,1fr));gap:8px;padding:6px 10px;}
              .fc-cell {display:grid;justify-items:center;gap:2px;background:var(--bg2);
                        border-radius:14px;padding:6px;}
              .label{font-size:.9rem;}
              .sub{font-size:.75rem;opacity:.75;}
              .temp{font-size:1.05rem;}
              .pop{font-size:.8rem;opacity:.85;}
            </style></head><body><div class="fc-row">
            """
            + "".join(forecast_cell(d) for d in days)
            + "</div></body></html>"
        )
        st_html(inner_html, height=190, scrolling=False)

    except Exception as e:
        card(TITLE, f"<span class='hint'>Error: {e}</span>", height_dvh=15)
