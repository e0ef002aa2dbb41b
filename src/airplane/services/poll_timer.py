"""Qt-backed repeating timer for the reconciliation poll."""

from __future__ import annotations

from collections.abc import Callable

from PySide6 import QtCore


class QtPollTimer:
    """Wraps a ``QTimer`` living on the thread that created it."""

    def __init__(self, parent: QtCore.QObject | None = None) -> None:
        self._timer = QtCore.QTimer(parent)
        self._timer.setTimerType(QtCore.Qt.TimerType.CoarseTimer)
        self._callback: Callable[[], None] | None = None
        self._timer.timeout.connect(self._on_timeout)

    @property
    def active(self) -> bool:
        return self._timer.isActive()

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._timer.start(interval_ms)

    def stop(self) -> None:
        self._timer.stop()
        self._callback = None

    def _on_timeout(self) -> None:
        if self._callback is not None:
            self._callback()
