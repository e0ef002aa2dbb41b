"""Open-at-login support through a per-user launchd agent."""

from __future__ import annotations

import plistlib
import sys
from collections.abc import Sequence
from pathlib import Path

from airplane.config import LoginItemSettings
from airplane.logging import get_logger


def default_program_arguments() -> list[str]:
    return [sys.executable, "-m", "airplane.main"]


class LoginItemManager:
    """Writes or removes ``~/Library/LaunchAgents/<label>.plist``.

    launchd reads the agent at the next login; nothing is loaded into the
    current session.
    """

    def __init__(
        self,
        settings: LoginItemSettings,
        program_arguments: Sequence[str] | None = None,
    ) -> None:
        self.settings = settings
        self.program_arguments = list(program_arguments or default_program_arguments())
        self.logger = get_logger("login-item")

    @property
    def plist_path(self) -> Path:
        return self.settings.launch_agents_dir / f"{self.settings.label}.plist"

    def is_enabled(self) -> bool:
        return self.plist_path.exists()

    def set_enabled(self, enabled: bool) -> bool:
        """Apply the setting and return the resulting on-disk state."""
        try:
            if enabled:
                self._write_agent()
            else:
                self.plist_path.unlink(missing_ok=True)
        except OSError as exc:
            self.logger.warning(f"Could not update login item {self.plist_path}: {exc}")
        else:
            self.logger.info(f"Open at login {'enabled' if enabled else 'disabled'}")
        return self.is_enabled()

    def _write_agent(self) -> None:
        payload = {
            "Label": self.settings.label,
            "ProgramArguments": self.program_arguments,
            "RunAtLoad": True,
            "ProcessType": "Interactive",
        }
        self.plist_path.parent.mkdir(parents=True, exist_ok=True)
        with self.plist_path.open("wb") as fh:
            plistlib.dump(payload, fh)
