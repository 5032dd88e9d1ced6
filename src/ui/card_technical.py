# src/ui/card_technical.py
from __future__ import annotations

from streamlit.components.v1 import html as st_html

from src.api.air_quality import aqi_category, build_technical_metrics, conic_gradient_stops
from src.api.weather_models import HumidityDistribution, TechnicalMetrics
from src.ui.card_current import PANEL_KEY, load_current_record
from src.ui.common import card, error_card, hint_card, section_title
from src.utils import round_half_up

TITLE = "🛰️ Technical control center"

_BUCKET_COLORS = {"low": "#60a5fa", "medium": "#34d399", "high": "#f472b6"}


def donut_gradient(dist: HumidityDistribution) -> str:
    """CSS conic-gradient for the humidity donut."""
    stops = conic_gradient_stops(dist)
    if not stops:
        return "conic-gradient(rgba(255,255,255,0.1) 0% 100%)"
    parts = [f"{_BUCKET_COLORS[b]} {start:.1f}% {end:.1f}%" for b, start, end in stops]
    return f"conic-gradient({', '.join(parts)})"


def technical_html(metrics: TechnicalMetrics) -> str:
    aqi_text, aqi_color = aqi_category(metrics.air_quality_index)
    dist = metrics.humidity_distribution
    return f"""
        <!doctype html>
        <html><head><meta charset="utf-8">
        <style>
          html,body {{margin:0;padding:0;background:transparent;color:#e7eaee;
                     font-family:ui-sans-serif,system-ui,-apple-system,Segoe UI,Roboto,Ubuntu;}}
          .row {{display:grid;grid-template-columns:repeat(3,1fr);gap:10px;padding:6px 10px;}}
          .box {{background:rgba(139,69,233,0.35);border-radius:14px;padding:10px;text-align:center;}}
          .big {{font-size:1.6rem;font-weight:600;}}
          .hint {{font-size:.8rem;opacity:.8;}}
          .donut {{width:90px;height:90px;border-radius:50%;margin:4px auto;
                   background:{donut_gradient(dist)};}}
        </style></head><body><div class="row">
          <div class="box"><div class="hint">Atmospheric pressure</div>
            <div class="big">{round_half_up(metrics.atmospheric_pressure)} hPa</div></div>
          <div class="box"><div class="hint">Air quality index</div>
            <div class="big" style="color:{aqi_color}">{metrics.air_quality_index}</div>
            <div class="hint">{aqi_text}</div></div>
          <div class="box"><div class="hint">Humidity distribution</div>
            <div class="donut"></div>
            <div class="hint">low {dist.low:g} · medium {dist.medium:g} · high {dist.high:g}</div></div>
        </div>
        <div class="hint" style="padding:0 12px">Last update: {metrics.last_update}</div>
        </body></html>
    """


def card_technical() -> None:
    try:
        record, error = load_current_record()
        if error:
            error_card(TITLE, error, retry_key=PANEL_KEY)
            return
        if record is None:
            hint_card(TITLE, "Select a location to see the technical metrics")
            return

        section_title(TITLE, mb=3)
        st_html(technical_html(build_technical_metrics(record)), height=210, scrolling=False)

    except Exception as e:
        card(TITLE, f"<span class='hint'>Error: {e}</span>", height_dvh=15)
