from PySide6.QtTest import QTest

from electrophoresis.controller.scheduler import RepeatingTask


def test_start_stop(qapp):
    task = RepeatingTask("test", 10, lambda: None)
    assert not task.is_active
    task.start()
    assert task.is_active
    task.start()
    assert task.is_active
    task.stop()
    assert not task.is_active
    assert task.interval_ms == 10


def test_callback_runs_on_event_loop(qapp):
    calls = []
    task = RepeatingTask("test", 5, lambda: calls.append(1))
    task.start()

    for _ in range(200):
        if len(calls) >= 3:
            break
        QTest.qWait(10)
    task.stop()

    assert len(calls) >= 3


def test_stopped_task_never_fires(qapp):
    calls = []
    task = RepeatingTask("test", 1, lambda: calls.append(1))
    task.start()
    task.stop()

    QTest.qWait(50)

    assert calls == []
