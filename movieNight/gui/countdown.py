"""
countdown
~~~~~~~~~
Single-shot descending counter on the Qt event loop.

``tick(n)`` fires immediately with the starting value, then once per
interval with the decremented value; when the counter reaches zero
``done()`` fires exactly once and the timer stops.
"""
from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QObject, QTimer, Signal, Slot


class Countdown(QObject):
    tick = Signal(int)
    done = Signal()

    def __init__(self, seconds: int, parent: QObject | None = None, interval_ms: int = 1000):
        super().__init__(parent)
        if seconds < 1:
            raise ValueError("countdown needs at least one second")
        self.seconds = seconds
        self._remaining = seconds
        self._active = False
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._step)

    def start(self) -> None:
        self._remaining = self.seconds
        self._active = True
        self.tick.emit(self._remaining)
        self._timer.start()

    def cancel(self) -> None:
        self._timer.stop()
        self._active = False

    def is_active(self) -> bool:
        return self._active

    def remaining(self) -> int:
        return self._remaining

    @Slot()
    def _step(self) -> None:
        if not self._active:
            return
        self._remaining -= 1
        if self._remaining <= 0:
            self.cancel()
            self.done.emit()
        else:
            self.tick.emit(self._remaining)


def run_countdown(
    seconds: int,
    on_tick: Callable[[int], None],
    on_done: Callable[[], None],
    parent: QObject | None = None,
    interval_ms: int = 1000,
) -> Countdown:
    """Wire the callbacks, start counting and hand back the handle."""
    countdown = Countdown(seconds, parent, interval_ms)
    countdown.tick.connect(on_tick)
    countdown.done.connect(on_done)
    countdown.start()
    return countdown
