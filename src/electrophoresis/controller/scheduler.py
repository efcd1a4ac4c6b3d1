"""
Repeating Tasks (Event Loop Scheduling)
=======================================
This module wraps QTimer into a small cancellable repeating task.

Why is this file needed?
------------------------
1. Single ownership: Each task owns exactly one timer, so at most one callback
   chain can be active per task. Starting an active task restarts it instead
   of stacking a second chain.
2. Immediate cancellation: ``stop()`` cancels the pending callback at once, so
   nothing keeps mutating the simulation after a pause or reset.

Everything runs on the Qt event loop of the GUI thread; there is no threading.

Classes:
    RepeatingTask: start/stop wrapper around a repeating QTimer.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import QObject, Qt, QTimer

logger = logging.getLogger(__name__)


class RepeatingTask(QObject):
    def __init__(
        self,
        name: str,
        interval_ms: int,
        callback: Callable[[], None],
        precise: bool = False,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.name = name
        self._callback = callback

        self._timer = QTimer(self)
        self._timer.setSingleShot(False)
        self._timer.setInterval(interval_ms)
        if precise:
            self._timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._timer.timeout.connect(self._on_timeout)

    @property
    def interval_ms(self) -> int:
        return self._timer.interval()

    @property
    def is_active(self) -> bool:
        return self._timer.isActive()

    def start(self) -> None:
        if self._timer.isActive():
            logger.debug(f"Task '{self.name}' already active, restarting.")
        self._timer.start()

    def stop(self) -> None:
        if self._timer.isActive():
            logger.debug(f"Task '{self.name}' stopped.")
        self._timer.stop()

    def _on_timeout(self) -> None:
        self._callback()
