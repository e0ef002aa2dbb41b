from __future__ import annotations

import os
from collections.abc import Callable

import pytest

from airplane.core.engine import ModeEngine
from airplane.core.radio import CommandResult
from airplane.core.state import RadioState

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeRadios:
    """In-memory radios; ``set_*`` calls flip the reported state."""

    def __init__(self, wifi: RadioState = RadioState.ON, bluetooth: RadioState = RadioState.OFF) -> None:
        self.wifi = wifi
        self.bluetooth = bluetooth
        self.calls: list[tuple[str, bool]] = []

    def is_wifi_on(self) -> RadioState:
        return self.wifi

    def is_bluetooth_on(self) -> RadioState:
        return self.bluetooth

    def set_wifi(self, on: bool) -> CommandResult:
        self.calls.append(("wifi", on))
        self.wifi = RadioState.ON if on else RadioState.OFF
        return CommandResult(ok=True, returncode=0)

    def set_bluetooth(self, on: bool) -> CommandResult:
        self.calls.append(("bluetooth", on))
        self.bluetooth = RadioState.ON if on else RadioState.OFF
        return CommandResult(ok=True, returncode=0)


class FakeTimer:
    """Manual timer: tests call ``tick`` instead of waiting."""

    def __init__(self) -> None:
        self.interval_ms: int | None = None
        self.callback: Callable[[], None] | None = None
        self.starts = 0
        self.stops = 0

    @property
    def active(self) -> bool:
        return self.callback is not None

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None:
        self.interval_ms = interval_ms
        self.callback = callback
        self.starts += 1

    def stop(self) -> None:
        self.callback = None
        self.stops += 1

    def tick(self) -> None:
        if self.callback is not None:
            self.callback()


@pytest.fixture
def radios() -> FakeRadios:
    return FakeRadios()


@pytest.fixture
def timer() -> FakeTimer:
    return FakeTimer()


@pytest.fixture
def engine(radios: FakeRadios, timer: FakeTimer) -> ModeEngine:
    return ModeEngine(radios, timer)


@pytest.fixture(scope="session")
def qapp():
    from PySide6 import QtWidgets

    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    app.setQuitOnLastWindowClosed(False)
    return app
