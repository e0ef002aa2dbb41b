"""Application configuration models and helpers."""

from __future__ import annotations

import os
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field


DISTRIBUTION = "airplane-menubar"


def _package_version() -> str:
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        # Running from a source checkout without an install.
        return "0.0.0+local"


class AppPaths(BaseModel):
    """Resolved directories for airplane runtime files."""

    base_dir: Path = Field(
        default_factory=lambda: Path(os.getenv("AIRPLANE_HOME", Path.home() / ".airplane"))
    )

    @property
    def logs_dir(self) -> Path:
        return self.base_dir / "logs"

    @property
    def app_log(self) -> Path:
        return self.logs_dir / "airplane.log"

    @property
    def radio_log(self) -> Path:
        return self.logs_dir / "radios.log"

    @property
    def lockfile(self) -> Path:
        return self.base_dir / "airplane.lock"

    def ensure(self) -> None:
        for path in (self.base_dir, self.logs_dir):
            path.mkdir(parents=True, exist_ok=True)


class RadioSettings(BaseModel):
    wifi_device: str = "en0"
    networksetup_path: str = "networksetup"
    blueutil_path: str = "blueutil"
    command_timeout: float | None = Field(default=None, gt=0)


class PollSettings(BaseModel):
    interval_ms: int = Field(default=2500, ge=250, le=60_000)


class LoginItemSettings(BaseModel):
    label: str = "com.airplane.menubar"
    launch_agents_dir: Path = Field(
        default_factory=lambda: Path.home() / "Library" / "LaunchAgents"
    )


class AirplaneSettings(BaseModel):
    app_name: str = "Airplane"
    version: str = Field(default_factory=_package_version)
    log_level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    paths: AppPaths = Field(default_factory=AppPaths)
    radios: RadioSettings = Field(default_factory=RadioSettings)
    poll: PollSettings = Field(default_factory=PollSettings)
    login_item: LoginItemSettings = Field(default_factory=LoginItemSettings)


def _maybe_float(value: str | None) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _maybe_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def load_settings(env_path: Path | None = None) -> AirplaneSettings:
    """Load user settings from environment variables and defaults."""

    env_file = env_path or Path('.env')
    if env_file.exists():
        load_dotenv(env_file)

    overrides: dict[str, Any] = {}

    if (interval := _maybe_int(os.getenv('AIRPLANE_POLL_MS'))) is not None:
        overrides.setdefault('poll', {})['interval_ms'] = interval

    if device := os.getenv('AIRPLANE_WIFI_DEVICE'):
        overrides.setdefault('radios', {})['wifi_device'] = device

    if blueutil := os.getenv('AIRPLANE_BLUEUTIL'):
        overrides.setdefault('radios', {})['blueutil_path'] = blueutil

    if (timeout := _maybe_float(os.getenv('AIRPLANE_COMMAND_TIMEOUT'))) is not None:
        overrides.setdefault('radios', {})['command_timeout'] = timeout

    if level := os.getenv('AIRPLANE_LOG_LEVEL'):
        overrides['log_level'] = level.upper()

    settings = AirplaneSettings(**overrides)
    settings.paths.ensure()
    return settings
