"""Wi-Fi and Bluetooth power control through macOS command-line tools.

Every call is best effort: failures are logged at debug level and collapse
to ``RadioState.UNKNOWN`` for queries or a failed ``CommandResult`` for set
commands. Nothing here raises to the caller.
"""

from __future__ import annotations

import re
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from airplane.config import RadioSettings
from airplane.core.state import RadioState
from airplane.logging import get_logger

_ON_PATTERN = re.compile(r"\bon\b", re.IGNORECASE)


@dataclass(slots=True, frozen=True)
class CommandResult:
    ok: bool
    returncode: int | None = None
    stdout: str = ""
    error: str = ""


class RadioController(Protocol):
    def is_wifi_on(self) -> RadioState: ...

    def is_bluetooth_on(self) -> RadioState: ...

    def set_wifi(self, on: bool) -> CommandResult: ...

    def set_bluetooth(self, on: bool) -> CommandResult: ...


def parse_power_state(output: str) -> RadioState:
    """Map status text such as ``Wi-Fi Power (en0): On`` to a radio state."""
    return RadioState.ON if _ON_PATTERN.search(output) else RadioState.OFF


class ShellRadioController:
    """Drives ``networksetup`` for Wi-Fi and ``blueutil`` for Bluetooth."""

    def __init__(self, settings: RadioSettings) -> None:
        self.settings = settings
        self.logger = get_logger("radios")

    def is_wifi_on(self) -> RadioState:
        return self._query(
            "wifi",
            [self.settings.networksetup_path, "-getairportpower", self.settings.wifi_device],
        )

    def is_bluetooth_on(self) -> RadioState:
        return self._query("bluetooth", [self.settings.blueutil_path, "status"])

    def set_wifi(self, on: bool) -> CommandResult:
        self.logger.debug(f"turning {'on' if on else 'off'} wifi...")
        return self._run(
            [
                self.settings.networksetup_path,
                "-setairportpower",
                self.settings.wifi_device,
                "on" if on else "off",
            ]
        )

    def set_bluetooth(self, on: bool) -> CommandResult:
        self.logger.debug(f"turning {'on' if on else 'off'} bluetooth...")
        return self._run([self.settings.blueutil_path, "on" if on else "off"])

    def _query(self, radio: str, args: Sequence[str]) -> RadioState:
        result = self._run(args)
        if not result.ok:
            return RadioState.UNKNOWN
        state = parse_power_state(result.stdout)
        self.logger.debug(f"{radio} is {state.value}")
        return state

    def _run(self, args: Sequence[str]) -> CommandResult:
        try:
            proc = subprocess.run(
                list(args),
                capture_output=True,
                text=True,
                check=False,
                timeout=self.settings.command_timeout,
            )
        except subprocess.TimeoutExpired:
            self.logger.debug(f"Error: command timed out: {' '.join(args)}")
            return CommandResult(ok=False, error="timeout")
        except OSError as exc:
            self.logger.debug(f"Error: {exc}")
            return CommandResult(ok=False, error=str(exc))

        stdout = (proc.stdout or "").strip()
        if proc.returncode != 0:
            error = (proc.stderr or "").strip()
            self.logger.debug(f"Error: {' '.join(args)} exited {proc.returncode}: {error or stdout}")
            return CommandResult(ok=False, returncode=proc.returncode, stdout=stdout, error=error)
        return CommandResult(ok=True, returncode=0, stdout=stdout)
