"""airplane menu bar entrypoint."""

from __future__ import annotations

import sys

from PySide6 import QtWidgets

from airplane.config import AirplaneSettings, load_settings
from airplane.core.app import build_context
from airplane.logging import configure_logging, get_logger
from airplane.services.poll_timer import QtPollTimer
from airplane.ui.tray import TrayPresenter
from airplane.utils.macos import hide_dock_icon
from airplane.utils.process import AlreadyRunningError, SingleInstance


def main() -> None:
    settings: AirplaneSettings = load_settings()
    configure_logging(settings)
    logger = get_logger("main")

    app = QtWidgets.QApplication(sys.argv)
    app.setQuitOnLastWindowClosed(False)
    app.setApplicationName(settings.app_name)
    app.setApplicationVersion(settings.version)
    hide_dock_icon()

    if not QtWidgets.QSystemTrayIcon.isSystemTrayAvailable():
        logger.error("No system tray available, exiting")
        sys.exit(1)

    try:
        with SingleInstance(settings.paths.lockfile):
            ctx = build_context(settings, QtPollTimer(app), quit_handler=app.quit)

            tray = TrayPresenter(settings, ctx.engine, ctx.login_items)
            tray.toggled.connect(ctx.engine.toggle)
            tray.quit_requested.connect(ctx.engine.quit)
            ctx.engine.add_listener(tray.update)

            tray.show()
            logger.info(f"{settings.app_name} {settings.version} ready")
            sys.exit(app.exec())
    except AlreadyRunningError as exc:
        logger.warning(str(exc))
        QtWidgets.QMessageBox.information(None, settings.app_name, str(exc))
        sys.exit(1)


if __name__ == "__main__":
    main()
