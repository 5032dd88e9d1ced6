# src/ui/card_recommendations.py
from __future__ import annotations

import streamlit as st

from src.api.recommendations import generate_recommendations, recommendation_conditions
from src.api.weather_models import Recommendation
from src.ui.card_current import PANEL_KEY, load_current_record
from src.ui.common import card, error_card, hint_card, section_title

TITLE = "💡 Smart recommendations"

_PRIORITY_COLORS = {"high": "#ef4444", "medium": "#f59e0b", "low": "#10b981"}


def recommendation_html(rec: Recommendation) -> str:
    color = _PRIORITY_COLORS.get(rec.priority, "#d0d0d0")
    return (
        f"<div class='rec' style='border-left:4px solid {color};padding:4px 10px;margin:6px 0'>"
        f"<b>{rec.icon} {rec.title}</b> <span class='hint'>({rec.priority})</span><br>"
        f"{rec.description}</div>"
    )


def card_recommendations() -> None:
    try:
        record, error = load_current_record()
        if error:
            error_card(TITLE, error, retry_key=PANEL_KEY)
            return
        if record is None:
            hint_card(TITLE, "Select a location to get recommendations")
            return

        section_title(TITLE, mb=3)
        recs = generate_recommendations(recommendation_conditions(record))
        st.markdown("".join(recommendation_html(r) for r in recs), unsafe_allow_html=True)

    except Exception as e:
        card(TITLE, f"<span class='hint'>Error: {e}</span>", height_dvh=15)
