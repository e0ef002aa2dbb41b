"""Central logging configuration using loguru.

Radio command failures are swallowed by design, so the only record of them is
the log. Besides the console and the main rotating file, every record bound to
the ``radios`` context also lands in ``radios.log``; ``airplane doctor`` points
there when the menu does not seem to switch anything.
"""

from __future__ import annotations

import sys

from loguru import logger

from airplane.config import AirplaneSettings

RADIO_CONTEXT = "radios"
CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[context]}</cyan> | {message}"
)

_LOGGER_CONFIGURED = False


def _is_radio_record(record) -> bool:
    return record["extra"].get("context") == RADIO_CONTEXT


def configure_logging(settings: AirplaneSettings, level: str | None = None) -> None:
    """Install the stderr, application and radio sinks once per process.

    ``level`` overrides ``settings.log_level`` for the console only; the CLI
    passes ``WARNING`` so JSON output on stdout stays clean.
    """

    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    settings.paths.logs_dir.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.configure(extra={"context": settings.app_name.lower()})
    logger.add(
        sys.stderr,
        level=level or settings.log_level,
        colorize=True,
        format=CONSOLE_FORMAT,
    )
    logger.add(
        settings.paths.app_log,
        level="DEBUG",
        rotation="1 week",
        retention=4,
        compression="zip",
        enqueue=True,
        backtrace=True,
        diagnose=True,
    )
    logger.add(
        settings.paths.radio_log,
        level="DEBUG",
        filter=_is_radio_record,
        rotation="1 MB",
        retention=3,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}",
    )

    _LOGGER_CONFIGURED = True
    logger.bind(context="logging").debug(
        f"logging to {settings.paths.app_log} and {settings.paths.radio_log}"
    )


def get_logger(name: str | None = None):
    return logger.bind(context=name or "airplane")
