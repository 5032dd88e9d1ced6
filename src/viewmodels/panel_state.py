# src/viewmodels/panel_state.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class PanelStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class PanelState:
    """Loading state of one card: Idle -> Loading -> Success | Error."""

    status: PanelStatus = PanelStatus.IDLE
    data: Any = None
    error: str | None = None
    generation: int = 0

    @classmethod
    def idle(cls) -> PanelState:
        return cls()

    @classmethod
    def loading(cls, generation: int) -> PanelState:
        return cls(status=PanelStatus.LOADING, generation=generation)

    @classmethod
    def success(cls, data: Any, generation: int) -> PanelState:
        return cls(status=PanelStatus.SUCCESS, data=data, generation=generation)

    @classmethod
    def failure(cls, error: Exception, generation: int) -> PanelState:
        return cls(status=PanelStatus.ERROR, error=str(error) or type(error).__name__, generation=generation)

    @property
    def is_done(self) -> bool:
        return self.status in (PanelStatus.SUCCESS, PanelStatus.ERROR)
