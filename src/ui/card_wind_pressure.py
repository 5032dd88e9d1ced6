# src/ui/card_wind_pressure.py
from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from src.api.simulated import simulate_pressure_trend, simulate_wind_rose
from src.api.wind import compass_to_degrees, pressure_quality
from src.config import COLOR_TEXT_GRAY, PLOTLY_CONFIG
from src.ui.card_current import PANEL_KEY, load_current_record
from src.ui.common import card, error_card, hint_card, section_title
from src.utils import round_half_up

TITLE = "💨 Wind and pressure"

_LAYOUT = dict(
    height=300,
    margin=dict(l=20, r=20, t=20, b=20),
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font=dict(color=COLOR_TEXT_GRAY),
    showlegend=False,
)


def build_wind_rose_figure(df) -> go.Figure:
    fig = go.Figure(
        go.Scatterpolar(
            r=df["speed"],
            theta=df["direction"],
            fill="toself",
            line=dict(color="#4ecdc4"),
            name="Wind (km/h)",
        )
    )
    fig.update_layout(
        polar=dict(radialaxis=dict(range=[0, 40]), angularaxis=dict(direction="clockwise")),
        **_LAYOUT,
    )
    return fig


def build_pressure_figure(df) -> go.Figure:
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=df["time"],
            y=df["pressure"],
            fill="tozeroy",
            mode="lines",
            name="Pressure",
            line=dict(color="#667eea"),
        )
    )
    fig.add_trace(
        go.Scatter(
            x=df["time"],
            y=df["tendency"],
            mode="lines",
            name="Tendency",
            line=dict(color="#ffa726", dash="dash"),
        )
    )
    low = float(df["pressure"].min()) - 5
    high = float(df["pressure"].max()) + 5
    fig.update_layout(yaxis=dict(range=[low, high], title="hPa"), **_LAYOUT)
    return fig


def _dial_html(angle: float, speed_kph: float, wind_dir: str) -> str:
    return (
        "<div style='text-align:center'>"
        f"<div style='display:inline-block;font-size:2.2rem;transform:rotate({angle}deg)'>⬆️</div>"
        f"<div>{round_half_up(speed_kph)} km/h {wind_dir or '—'}</div>"
        "</div>"
    )


def card_wind_pressure() -> None:
    """Wind dial + simulated wind rose, pressure status + simulated pressure curve."""
    try:
        record, error = load_current_record()
        if error:
            error_card(TITLE, error, retry_key=PANEL_KEY)
            return
        if record is None:
            hint_card(TITLE, "Select a location to see the wind and pressure analysis")
            return

        cur = record.current
        section_title(TITLE, mb=3)
        quality_text, quality_color = pressure_quality(cur.pressure_mb)

        col1, col2 = st.columns(2, gap="small")
        with col1:
            st.markdown(
                _dial_html(compass_to_degrees(cur.wind_dir), cur.wind_kph, cur.wind_dir),
                unsafe_allow_html=True,
            )
            st.plotly_chart(
                build_wind_rose_figure(simulate_wind_rose(record)),
                use_container_width=True,
                config=PLOTLY_CONFIG,
            )
        with col2:
            st.markdown(
                f"<div style='text-align:center'><b>{round_half_up(cur.pressure_mb)} hPa</b><br>"
                f"<span style='color:{quality_color}'>{quality_text}</span></div>",
                unsafe_allow_html=True,
            )
            st.plotly_chart(
                build_pressure_figure(simulate_pressure_trend(record)),
                use_container_width=True,
                config=PLOTLY_CONFIG,
            )

    except Exception as e:
        card(TITLE, f"<span class='hint'>Error: {e}</span>", height_dvh=15)
