"""Runtime state containers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RadioState(str, Enum):
    """Power state of a radio as last reported by the OS."""

    ON = "on"
    OFF = "off"
    UNKNOWN = "unknown"

    @property
    def is_on(self) -> bool:
        return self is RadioState.ON


@dataclass(slots=True)
class EngineState:
    activated: bool = False
    wifi_was_running: RadioState = RadioState.UNKNOWN
    bluetooth_was_running: RadioState = RadioState.UNKNOWN
