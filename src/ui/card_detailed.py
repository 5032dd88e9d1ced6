# src/ui/card_detailed.py
from __future__ import annotations

from dataclasses import asdict

import pandas as pd
import streamlit as st

from src.api import fetch_detailed_conditions
from src.api.parameter_status import ALERT, ATTENTION, NORMAL
from src.api.weather_models import WeatherParameter
from src.config import COLOR_STATUS
from src.ui.common import (
    card,
    current_location,
    error_card,
    hint_card,
    load_panel,
    section_title,
)
from src.viewmodels.panel_state import PanelStatus

PANEL_KEY = "detailed"
TITLE = "🔬 Detailed conditions"

COLUMNS = {
    "icon": "",
    "name": "Parameter",
    "value": "Value",
    "unit": "Unit",
    "status": "Status",
    "trend": "Trend",
    "recent_change": "Recent change",
    "description": "Description",
}


def parameters_frame(parameters: list[WeatherParameter]) -> pd.DataFrame:
    df = pd.DataFrame([asdict(p) for p in parameters], columns=list(COLUMNS))
    return df.rename(columns=COLUMNS)


def status_counts(parameters: list[WeatherParameter]) -> dict[str, int]:
    counts = {NORMAL: 0, ATTENTION: 0, ALERT: 0}
    for p in parameters:
        counts[p.status] = counts.get(p.status, 0) + 1
    return counts


def _status_style(value: str) -> str:
    color = COLOR_STATUS.get(value)
    return f"color:{color};font-weight:600" if color else ""


def card_detailed() -> None:
    """Detailed parameter table with Normal / Attention / Alert status."""
    try:
        location = current_location()
        if location is None:
            hint_card(TITLE, "Select a location to see the detailed analysis")
            return

        state = load_panel(PANEL_KEY, fetch_detailed_conditions, location.latitude, location.longitude)
        if state.status == PanelStatus.ERROR:
            error_card(TITLE, state.error or "", retry_key=PANEL_KEY)
            return
        parameters: list[WeatherParameter] = state.data or []

        counts = status_counts(parameters)
        section_title(
            f"{TITLE} &nbsp; | &nbsp; {counts[NORMAL]} normal · {counts[ATTENTION]} attention · "
            f"{counts[ALERT]} alert",
            mb=3,
        )

        df = parameters_frame(parameters)
        st.dataframe(
            df.style.map(_status_style, subset=["Status"]),
            hide_index=True,
            use_container_width=True,
        )
        st.caption("Trend and recent change are simulated placeholders.")

    except Exception as e:
        card(TITLE, f"<span class='hint'>Error: {e}</span>", height_dvh=15)
