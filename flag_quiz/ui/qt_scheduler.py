"""Scheduler backed by the Qt event loop."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import QObject, QTimer


class QtScheduler:
    """Runs callbacks on the GUI thread via single-shot timers."""

    def __init__(self, context: QObject | None = None) -> None:
        self._context = context

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        if self._context is not None:
            QTimer.singleShot(delay_ms, self._context, callback)
        else:
            QTimer.singleShot(delay_ms, callback)
