"""Airplane application composition root."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from airplane.config import AirplaneSettings
from airplane.core.engine import ModeEngine, PollTimer
from airplane.core.radio import RadioController, ShellRadioController
from airplane.logging import get_logger
from airplane.services.login_item import LoginItemManager


@dataclass(slots=True)
class AirplaneContext:
    settings: AirplaneSettings
    radios: RadioController
    engine: ModeEngine
    login_items: LoginItemManager


def build_context(
    settings: AirplaneSettings,
    timer: PollTimer,
    quit_handler: Callable[[], None] | None = None,
    radios: RadioController | None = None,
) -> AirplaneContext:
    radios = radios or ShellRadioController(settings.radios)
    engine = ModeEngine(
        radios,
        timer,
        poll_interval_ms=settings.poll.interval_ms,
        quit_handler=quit_handler,
    )
    login_items = LoginItemManager(settings.login_item)

    logger = get_logger("bootstrap")
    logger.info("Airplane context ready")

    return AirplaneContext(
        settings=settings,
        radios=radios,
        engine=engine,
        login_items=login_items,
    )
