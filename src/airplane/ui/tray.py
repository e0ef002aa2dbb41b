"""Menu bar icon and menu."""

from __future__ import annotations

from PySide6 import QtCore, QtGui, QtWidgets

from airplane.config import AirplaneSettings
from airplane.core.engine import ModeEngine
from airplane.logging import get_logger
from airplane.services.login_item import LoginItemManager

_GLYPH = "✈"


def _make_icon(enabled: bool, size: int = 44) -> QtGui.QIcon:
    pixmap = QtGui.QPixmap(size, size)
    pixmap.fill(QtCore.Qt.GlobalColor.transparent)

    painter = QtGui.QPainter(pixmap)
    painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing)
    painter.setPen(QtGui.QColor(0, 0, 0, 255 if enabled else 110))
    font = QtGui.QFont()
    font.setPixelSize(int(size * 0.8))
    painter.setFont(font)
    painter.drawText(pixmap.rect(), QtCore.Qt.AlignmentFlag.AlignCenter, _GLYPH)
    if not enabled:
        pen = QtGui.QPen(QtGui.QColor(0, 0, 0, 200))
        pen.setWidth(max(2, size // 14))
        painter.setPen(pen)
        painter.drawLine(size // 6, size - size // 6, size - size // 6, size // 6)
    painter.end()

    icon = QtGui.QIcon(pixmap)
    # Template icon: macOS recolours it for light and dark menu bars.
    icon.setIsMask(True)
    return icon


class TrayPresenter(QtCore.QObject):
    """Renders the engine state and forwards user intents.

    ``toggled`` is the ``airplaneModeToggled`` event; ``update`` is registered
    as an engine listener so every transition re-renders the menu.
    """

    toggled = QtCore.Signal()
    quit_requested = QtCore.Signal()

    def __init__(
        self,
        settings: AirplaneSettings,
        engine: ModeEngine,
        login_items: LoginItemManager,
        parent: QtCore.QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.settings = settings
        self.engine = engine
        self.login_items = login_items
        self.logger = get_logger("tray")

        self._icons = {True: _make_icon(True), False: _make_icon(False)}
        self._menu = QtWidgets.QMenu()
        self._tray = QtWidgets.QSystemTrayIcon(self._icons[False], self)

        self._toggle_action = QtGui.QAction(self._menu)
        self._status_action = QtGui.QAction(self._menu)
        self._status_action.setEnabled(False)
        self._login_action = QtGui.QAction("Open at Login", self._menu)
        self._login_action.setCheckable(True)
        self._quit_action = QtGui.QAction("Quit", self._menu)

        self._menu.addAction(self._toggle_action)
        self._menu.addAction(self._status_action)
        self._menu.addSeparator()
        self._menu.addAction(self._login_action)
        self._menu.addAction(self._quit_action)

        self._toggle_action.triggered.connect(self.toggled)
        self._login_action.triggered.connect(self._handle_login_toggle)
        self._quit_action.triggered.connect(self.quit_requested)

        self._tray.setContextMenu(self._menu)
        self._tray.setToolTip(f"{settings.app_name} v{settings.version}")
        self.update()

    def show(self) -> None:
        self._tray.show()

    def update(self) -> None:
        self.logger.debug("updating tray...")
        activated = self.engine.activated
        self._toggle_action.setText(
            "Deactivate Airplane Mode" if activated else "Activate Airplane Mode"
        )
        self._status_action.setText(f"Status: {'On' if activated else 'Off'}")
        self._login_action.setChecked(self.login_items.is_enabled())
        self._tray.setIcon(self._icons[activated])

    @QtCore.Slot(bool)
    def _handle_login_toggle(self, checked: bool) -> None:
        self._login_action.setChecked(self.login_items.set_enabled(checked))
