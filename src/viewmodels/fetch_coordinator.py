# src/viewmodels/fetch_coordinator.py
"""
Shared fetch coordinator for the cards.

One coordinator per Streamlit session, keyed by the selected coordinates:
- a coordinate change bumps the generation and forgets every cached result
- loads with the same key inside one generation hit the network once
- a result that finishes after the generation moved on is discarded
- every caller gets its own deep copy of the data
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable
from typing import Any

from src.api.errors import WeatherDashboardError
from src.logger_config import LOGGER_NAME
from src.viewmodels.panel_state import PanelState, PanelStatus

logger = logging.getLogger(LOGGER_NAME)


class FetchCoordinator:
    def __init__(self) -> None:
        self._coords: tuple[float, float] | None = None
        self._generation = 0
        self._states: dict[str, PanelState] = {}

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def coords(self) -> tuple[float, float] | None:
        return self._coords

    def set_location(self, lat: float, lon: float) -> int:
        """Select coordinates; returns the (possibly new) generation."""
        coords = (lat, lon)
        if coords != self._coords:
            self._coords = coords
            self._generation += 1
            self._states.clear()
            logger.info("coordinates -> %s, generation %s", coords, self._generation)
        return self._generation

    def clear(self) -> None:
        """Back to no location: all cards idle."""
        self._coords = None
        self._generation += 1
        self._states.clear()

    def state(self, key: str) -> PanelState:
        return copy.deepcopy(self._states.get(key, PanelState.idle()))

    def retry(self, key: str) -> None:
        """Forget one card's result so the next load fetches again."""
        self._states.pop(key, None)

    def is_current(self, generation: int) -> bool:
        return generation == self._generation

    def load(self, key: str, loader: Callable[..., Any], *args: Any, **kwargs: Any) -> PanelState:
        """
        Run loader(*args, **kwargs) for this generation unless already done.

        WeatherDashboardError ends up as an ERROR state; anything else
        propagates to the card.
        """
        if self._coords is None:
            return PanelState.idle()

        cached = self._states.get(key)
        if cached is not None and cached.generation == self._generation and cached.is_done:
            return copy.deepcopy(cached)

        generation = self._generation
        self._states[key] = PanelState.loading(generation)

        try:
            result = PanelState.success(loader(*args, **kwargs), generation)
        except WeatherDashboardError as e:
            logger.warning("load %s failed: %s", key, e)
            result = PanelState.failure(e, generation)
        except Exception:
            # leave no card stuck in LOADING
            if self._states.get(key, PanelState.idle()).generation == generation:
                self._states.pop(key, None)
            raise

        if not self.is_current(generation):
            logger.info("discarding stale %s result (generation %s)", key, generation)
            return self.state(key)

        self._states[key] = result
        return copy.deepcopy(result)

    def pending(self) -> list[str]:
        return [k for k, s in self._states.items() if s.status == PanelStatus.LOADING]
