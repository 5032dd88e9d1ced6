# main.py
"""Main entry point for the Weather Dashboard Streamlit application."""

import sys
import traceback

import streamlit as st

from src.logger_config import setup_logging
from src.paths import ensure_dirs
from src.ui import (
    card_current,
    card_detailed,
    card_forecast,
    card_recommendations,
    card_search,
    card_technical,
    card_trends,
    card_wind_pressure,
)
from src.ui.common import current_location, get_coordinator, load_css

ensure_dirs()

logger = setup_logging()


def main() -> None:
    """Initialize and render the dashboard layout."""
    try:
        logger.info("Rendering Weather Dashboard")
        st.set_page_config(
            page_title="Weather Dashboard",
            layout="wide",
            page_icon="🌦️",
        )
        load_css("style.css")

        st.title("Weather Dashboard")

        # Row 1: search
        card_search()

        coordinator = get_coordinator()
        location = current_location()
        if location is not None:
            coordinator.set_location(location.latitude, location.longitude)
        elif coordinator.coords is not None:
            coordinator.clear()

        # Row 2: current conditions + recommendations
        col1, col2 = st.columns(2, gap="small")
        with col1:
            card_current()
        with col2:
            card_recommendations()

        # Row 3: charts
        card_trends()
        card_wind_pressure()

        # Row 4: forecast
        card_forecast()

        # Row 5: detailed table + technical metrics
        card_detailed()
        card_technical()

        stuck = coordinator.pending()
        if stuck:
            logger.warning("panels still loading after render: %s", ", ".join(stuck))

    except KeyboardInterrupt:
        logger.info("Weather Dashboard shutdown requested")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Unhandled error: {str(e)}")
        logger.error(traceback.format_exc())
        sys.exit(1)


if __name__ == "__main__":
    main()
