"""Airplane mode state machine."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from typing import Protocol

from airplane.core.radio import RadioController
from airplane.core.state import EngineState
from airplane.logging import get_logger

StateListener = Callable[[], None]

DEFAULT_POLL_INTERVAL_MS = 2500


class PollTimer(Protocol):
    """Repeating timer handle; ticks must run on the engine's thread."""

    @property
    def active(self) -> bool: ...

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None: ...

    def stop(self) -> None: ...


class ModeEngine:
    """Disables both radios on activation and restores them on deactivation.

    While activated, a poll re-queries the radios. A radio found back on means
    something outside this process re-enabled it, so airplane mode ends. Both
    snapshots are replaced by what the poll observed before deactivating, so a
    radio that is off at that moment is not restored.
    """

    def __init__(
        self,
        radios: RadioController,
        timer: PollTimer,
        poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
        quit_handler: Callable[[], None] | None = None,
    ) -> None:
        self.radios = radios
        self.timer = timer
        self.poll_interval_ms = poll_interval_ms
        self.logger = get_logger("engine")
        self._quit_handler = quit_handler
        self._state = EngineState()
        self._listeners: list[StateListener] = []

    @property
    def activated(self) -> bool:
        return self._state.activated

    @property
    def polling(self) -> bool:
        return self.timer.active

    @property
    def state(self) -> EngineState:
        return replace(self._state)

    def add_listener(self, listener: StateListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def toggle(self) -> None:
        if self._state.activated:
            self.deactivate()
        else:
            self.activate()

    def activate(self) -> None:
        if self._state.activated:
            self.logger.debug("airplane mode already active, ignoring")
            return
        self.logger.info("activating airplane mode...")

        self._state.activated = True
        # Snapshot before disabling so deactivate() knows what to restore.
        self._state.wifi_was_running = self.radios.is_wifi_on()
        self._state.bluetooth_was_running = self.radios.is_bluetooth_on()

        if self._state.wifi_was_running.is_on:
            self.radios.set_wifi(False)
        if self._state.bluetooth_was_running.is_on:
            self.radios.set_bluetooth(False)

        self._start_poll()
        self._notify()

    def deactivate(self) -> None:
        if not self._state.activated:
            self.logger.debug("airplane mode not active, ignoring")
            return
        self.logger.info("deactivating airplane mode...")

        self._state.activated = False
        self._stop_poll()

        if self._state.wifi_was_running.is_on:
            self.radios.set_wifi(True)
        if self._state.bluetooth_was_running.is_on:
            self.radios.set_bluetooth(True)

        self._notify()

    def poll(self) -> None:
        """One reconciliation tick."""
        if not self._state.activated:
            return

        wifi = self.radios.is_wifi_on()
        bluetooth = self.radios.is_bluetooth_on()
        if wifi.is_on or bluetooth.is_on:
            self.logger.info(
                f"radio re-enabled externally (wifi={wifi.value}, bluetooth={bluetooth.value})"
            )
            self._state.wifi_was_running = wifi
            self._state.bluetooth_was_running = bluetooth
            self.deactivate()

    def quit(self) -> None:
        """Quit without restoring radios."""
        self.logger.info("quitting app...")
        if self._quit_handler is None:
            raise SystemExit(0)
        self._quit_handler()

    def _start_poll(self) -> None:
        self.logger.debug("enabling poll...")
        self.timer.start(self.poll_interval_ms, self.poll)

    def _stop_poll(self) -> None:
        self.logger.debug("disabling poll...")
        if self.timer.active:
            self.timer.stop()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                self.logger.exception("state listener failed")
