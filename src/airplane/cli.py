"""Typer CLI for airplane."""

from __future__ import annotations

import json
import platform
import shutil

import typer

from airplane.config import load_settings
from airplane.core.radio import ShellRadioController
from airplane.logging import configure_logging
from airplane.main import main as launch

app = typer.Typer(no_args_is_help=True)


@app.command()
def run() -> None:
    """Launch the menu bar app."""

    launch()


@app.command()
def status() -> None:
    """Print the current Wi-Fi and Bluetooth power state."""

    settings = load_settings()
    configure_logging(settings, level="WARNING")
    radios = ShellRadioController(settings.radios)
    info = {
        "wifi": radios.is_wifi_on().value,
        "bluetooth": radios.is_bluetooth_on().value,
    }
    typer.echo(json.dumps(info, indent=2))


@app.command()
def doctor() -> None:
    """Print environment diagnostics."""

    settings = load_settings()
    configure_logging(settings)
    info = {
        "version": settings.version,
        "python": platform.python_version(),
        "platform": platform.platform(),
        "paths": {
            "home": str(settings.paths.base_dir),
            "logs": str(settings.paths.logs_dir),
            "radio_log": str(settings.paths.radio_log),
            "lockfile": str(settings.paths.lockfile),
        },
        "tools": {
            "networksetup": shutil.which(settings.radios.networksetup_path),
            "blueutil": shutil.which(settings.radios.blueutil_path),
        },
    }
    typer.echo(json.dumps(info, indent=2))


@app.command()
def settings(key: str | None = typer.Argument(None)) -> None:
    """Display current settings or a specific section."""

    data = load_settings().model_dump()
    if key:
        data = data.get(key, {})
    typer.echo(json.dumps(data, indent=2, default=str))
