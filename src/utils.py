# src/utils.py
"""General-purpose utility functions for the Weather Dashboard application."""

import logging
import math

import streamlit as st

from src.config import DEV
from src.logger_config import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


def report_error(ctx: str, e: Exception) -> None:
    """Log errors and, in DEV mode, display them in the Streamlit UI.

    Only reports; the caller still raises.
    """
    logger.error("%s: %s: %s", ctx, type(e).__name__, e)
    if DEV:
        st.caption(f"⚠ {ctx}: {type(e).__name__}: {e}")


def round_half_up(value: float) -> int:
    """Round .5 away from zero towards +inf (Python's round() is banker's rounding)."""
    return int(math.floor(value + 0.5))
