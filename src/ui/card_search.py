# src/ui/card_search.py
from __future__ import annotations

from datetime import datetime

import streamlit as st

from src.api import geocode
from src.api.errors import GeocodeError
from src.ui.common import LOCATION_KEY, card, get_coordinator, section_title

SEARCH_ERROR_KEY = "search_error"
SEARCHED_AT_KEY = "searched_at"
TITLE = "📍 Select location"


def run_search(query: str) -> None:
    """Geocode the query and make it the dashboard's location.

    Blank input does nothing. A failed lookup keeps the previous location
    and leaves an error message for the card.
    """
    if not query.strip():
        return

    st.session_state[SEARCH_ERROR_KEY] = None
    try:
        location = geocode(query)
    except GeocodeError as e:
        st.session_state[SEARCH_ERROR_KEY] = f"Location lookup failed: {e}"
        return

    if location is None:
        return

    st.session_state[LOCATION_KEY] = location
    st.session_state[SEARCHED_AT_KEY] = datetime.now().strftime("%d/%m/%Y, %H:%M:%S")
    get_coordinator().set_location(location.latitude, location.longitude)


def card_search() -> None:
    """Place search form plus the selected location line."""
    try:
        section_title(TITLE, mt=10, mb=4)

        with st.form("location-search", clear_on_submit=False):
            query = st.text_input("City or country", placeholder="e.g. Madrid")
            submitted = st.form_submit_button("Search")

        if submitted:
            run_search(query or "")

        error = st.session_state.get(SEARCH_ERROR_KEY)
        if error:
            st.markdown(f"<span class='hint'>⚠️ {error}</span>", unsafe_allow_html=True)

        location = st.session_state.get(LOCATION_KEY)
        if location is not None:
            searched_at = st.session_state.get(SEARCHED_AT_KEY, "")
            st.markdown(
                f"<div class='location'>📌 {location.name}"
                f"<span class='hint'>&nbsp; | &nbsp;updated {searched_at}</span></div>",
                unsafe_allow_html=True,
            )

    except Exception as e:
        card(TITLE, f"<span class='hint'>Error: {e}</span>", height_dvh=10)

