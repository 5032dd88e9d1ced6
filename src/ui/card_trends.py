# src/ui/card_trends.py
from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from src.api.simulated import simulate_daily_trend
from src.config import COLOR_TEXT_GRAY, PLOTLY_CONFIG
from src.ui.card_current import PANEL_KEY, load_current_record
from src.ui.common import card, error_card, hint_card, section_title

TITLE = "🌡️ Weather trends (24 h)"


def build_trends_figure(df) -> go.Figure:
    """Temperature and feels-like lines over humidity bars (secondary axis)."""
    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=df["time"],
            y=df["humidity"],
            name="Humidity (%)",
            yaxis="y2",
            marker_color="rgba(78,205,196,0.45)",
        )
    )
    fig.add_trace(
        go.Scatter(
            x=df["time"],
            y=df["temperature"],
            name="Temperature (°C)",
            mode="lines+markers",
            line=dict(color="#ff6b6b", width=3),
        )
    )
    fig.add_trace(
        go.Scatter(
            x=df["time"],
            y=df["feels_like"],
            name="Feels like (°C)",
            mode="lines",
            line=dict(color="#ffa726", width=2, dash="dash"),
        )
    )
    fig.update_layout(
        height=320,
        margin=dict(l=10, r=10, t=10, b=10),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        font=dict(color=COLOR_TEXT_GRAY),
        legend=dict(orientation="h", y=-0.2),
        yaxis=dict(title="°C"),
        yaxis2=dict(title="%", overlaying="y", side="right", range=[0, 100]),
    )
    return fig


def card_trends() -> None:
    """Simulated 24 h trend chart around the current conditions."""
    try:
        record, error = load_current_record()
        if error:
            error_card(TITLE, error, retry_key=PANEL_KEY)
            return
        if record is None:
            hint_card(TITLE, "Select a location to see the weather trends")
            return

        section_title(TITLE, mb=3)
        df = simulate_daily_trend(record)
        st.plotly_chart(build_trends_figure(df), use_container_width=True, config=PLOTLY_CONFIG)
        st.caption("Simulated from the current conditions; not historical data.")

    except Exception as e:
        card(TITLE, f"<span class='hint'>Error: {e}</span>", height_dvh=15)
