# src/ui/common.py
from __future__ import annotations

from collections.abc import Callable
from typing import Any

import streamlit as st

from src.paths import asset_path
from src.viewmodels.fetch_coordinator import FetchCoordinator
from src.viewmodels.panel_state import PanelState

COORDINATOR_KEY = "fetch_coordinator"
LOCATION_KEY = "location"


def load_css(file_name: str) -> None:
    path = asset_path(file_name)
    if not path.exists():
        return
    with path.open("r", encoding="utf-8") as f:
        st.markdown(f"<style>{f.read()}</style>", unsafe_allow_html=True)


def section_title(html: str, mt: int = 10, mb: int = 10) -> None:
    """Render a section title with customizable margins.

    Args:
        html: HTML content for the title.
        mt: Top margin in pixels (default: 10).
        mb: Bottom margin in pixels (default: 10).
    """
    st.markdown(
        f"<div class='section-title' style='margin:{mt}px 0 {mb}px 0'>{html}</div>",
        unsafe_allow_html=True,
    )


def card(title: str, body_html: str, height_dvh: int = 16) -> None:
    """Render a card with a title and HTML body.

    Args:
        title: Card title text.
        body_html: HTML content for the card body.
        height_dvh: Minimum height in dvh units (default: 16).
    """
    st.markdown(
        f"""
        <section class="card" style="min-height:{height_dvh}dvh; position:relative; overflow:hidden;">
          <div class="card-title">{title}</div>
          <div class="card-body">{body_html}</div>
        </section>
        """,
        unsafe_allow_html=True,
    )


def hint_card(title: str, text: str) -> None:
    """Empty-state card (no location selected yet)."""
    card(title, f"<span class='hint'>{text}</span>", height_dvh=10)


def error_card(title: str, message: str, retry_key: str | None = None) -> None:
    """Error card with an optional Retry button that re-runs the card's fetch."""
    card(title, f"<span class='hint'>⚠️ Error: {message}</span>", height_dvh=10)
    if retry_key is None:
        return
    # several cards can share one fetch key, the button key must stay unique
    if st.button("Retry", key=f"retry-{retry_key}-{title}"):
        get_coordinator().retry(retry_key)
        st.rerun()


# --- session helpers ------------------------------------------------------------
def get_coordinator() -> FetchCoordinator:
    if COORDINATOR_KEY not in st.session_state:
        st.session_state[COORDINATOR_KEY] = FetchCoordinator()
    return st.session_state[COORDINATOR_KEY]


def current_location() -> Any | None:
    return st.session_state.get(LOCATION_KEY)


def load_panel(key: str, loader: Callable[..., Any], *args: Any) -> PanelState:
    """Load a card's data through the session's coordinator (spinner while fetching)."""
    with st.spinner("Loading weather data..."):
        return get_coordinator().load(key, loader, *args)
