"""Unit tests for scheduled tasks."""

from unittest.mock import MagicMock

from PySide6.QtTest import QTest
from PySide6.QtWidgets import QApplication

from lingubridge.services import ManualClock, QtScheduledTask


def ensure_qt_app():
    if QApplication.instance() is None:
        QApplication([])


class TestManualScheduledTask:
    """Virtual-time task behavior."""

    def test_fires_once_after_delay(self):
        clock = ManualClock()
        task = clock.create_task()
        callback = MagicMock()

        task.arm(1000, callback)
        clock.advance(999)
        callback.assert_not_called()
        assert task.is_armed

        clock.advance(1)
        callback.assert_called_once()
        assert not task.is_armed

        clock.advance(5000)
        callback.assert_called_once()

    def test_rearm_replaces_pending_callback(self):
        clock = ManualClock()
        task = clock.create_task()
        first, second = MagicMock(), MagicMock()

        task.arm(1000, first)
        clock.advance(600)
        task.arm(1000, second)
        clock.advance(600)

        first.assert_not_called()
        second.assert_not_called()

        clock.advance(400)
        first.assert_not_called()
        second.assert_called_once()

    def test_cancel_drops_callback(self):
        clock = ManualClock()
        task = clock.create_task()
        callback = MagicMock()

        task.arm(100, callback)
        task.cancel()
        clock.advance(1000)

        callback.assert_not_called()
        assert not task.is_armed

    def test_tasks_fire_in_deadline_order(self):
        clock = ManualClock()
        order = []
        late, early = clock.create_task(), clock.create_task()

        late.arm(300, lambda: order.append(("late", clock.now_ms)))
        early.arm(100, lambda: order.append(("early", clock.now_ms)))
        clock.advance(500)

        assert order == [("early", 100), ("late", 300)]
        assert clock.now_ms == 500

    def test_callback_can_rearm_within_advance(self):
        clock = ManualClock()
        task = clock.create_task()
        fired = []

        def callback():
            fired.append(clock.now_ms)
            if len(fired) < 3:
                task.arm(100, callback)

        task.arm(100, callback)
        clock.advance(1000)

        assert fired == [100, 200, 300]


class TestQtScheduledTask:
    """QTimer-backed task behavior."""

    def test_arm_and_cancel(self):
        ensure_qt_app()
        task = QtScheduledTask()

        task.arm(10_000, MagicMock())
        assert task.is_armed

        task.cancel()
        assert not task.is_armed

    def test_fires_on_event_loop(self):
        ensure_qt_app()
        task = QtScheduledTask()
        callback = MagicMock()

        task.arm(10, callback)
        QTest.qWait(200)

        callback.assert_called_once()
        assert not task.is_armed

    def test_rearm_runs_only_latest_callback(self):
        ensure_qt_app()
        task = QtScheduledTask()
        first, second = MagicMock(), MagicMock()

        task.arm(50, first)
        task.arm(50, second)
        QTest.qWait(300)

        first.assert_not_called()
        second.assert_called_once()
