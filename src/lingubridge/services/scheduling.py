"""Scheduled tasks - cancellable one-shot callbacks used for debouncing."""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from PySide6.QtCore import QObject, QTimer


class ScheduledTask(ABC):
    """
    A single cancellable, delayed callback.

    Arming an already armed task replaces the pending callback, so at most
    one callback is ever waiting per task.
    """

    @abstractmethod
    def arm(self, delay_ms: int, callback: Callable[[], None]) -> None:
        """Schedule callback to run once after delay_ms, replacing any pending one."""
        pass

    @abstractmethod
    def cancel(self) -> None:
        """Drop the pending callback, if any."""
        pass

    @property
    @abstractmethod
    def is_armed(self) -> bool:
        """True while a callback is waiting to fire."""
        pass


class QtScheduledTask(ScheduledTask):
    """ScheduledTask backed by a single-shot QTimer on the Qt event loop."""

    def __init__(self, parent: Optional[QObject] = None):
        self._timer = QTimer(parent)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._fire)
        self._callback: Optional[Callable[[], None]] = None

    def arm(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self._timer.stop()
        self._callback = callback
        self._timer.start(delay_ms)

    def cancel(self) -> None:
        self._timer.stop()
        self._callback = None

    @property
    def is_armed(self) -> bool:
        return self._timer.isActive()

    def _fire(self) -> None:
        callback, self._callback = self._callback, None
        if callback is not None:
            callback()


class ManualClock:
    """
    Virtual clock for driving ManualScheduledTask instances.

    Used for testing and headless runs. Time only moves when advance() is called.
    """

    def __init__(self):
        self.now_ms = 0
        self._tasks: List["ManualScheduledTask"] = []

    def create_task(self) -> "ManualScheduledTask":
        """Create a task bound to this clock."""
        task = ManualScheduledTask(self)
        self._tasks.append(task)
        return task

    def advance(self, ms: int) -> None:
        """Move time forward, firing due tasks in deadline order."""
        target = self.now_ms + ms
        while True:
            due = [
                task for task in self._tasks
                if task.deadline_ms is not None and task.deadline_ms <= target
            ]
            if not due:
                break
            task = min(due, key=lambda t: t.deadline_ms)
            self.now_ms = task.deadline_ms
            task._fire()
        self.now_ms = target


class ManualScheduledTask(ScheduledTask):
    """ScheduledTask whose deadline is measured on a ManualClock."""

    def __init__(self, clock: ManualClock):
        self._clock = clock
        self._callback: Optional[Callable[[], None]] = None
        self.deadline_ms: Optional[int] = None

    def arm(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self._callback = callback
        self.deadline_ms = self._clock.now_ms + delay_ms

    def cancel(self) -> None:
        self._callback = None
        self.deadline_ms = None

    @property
    def is_armed(self) -> bool:
        return self.deadline_ms is not None

    def _fire(self) -> None:
        callback = self._callback
        self.cancel()
        if callback is not None:
            callback()
