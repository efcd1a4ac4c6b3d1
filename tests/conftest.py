"""
Pytest configuration for electrophoresis tests.
"""
import sys
import os
import pytest

# Add src directory to Python path so tests can import electrophoresis modules
src_path = os.path.abspath(os.path.join(os.path.dirname(__file__), "../src"))
sys.path.insert(0, src_path)

# Widgets and timers need a QApplication, but no screen
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


class FakeClock:
    """Manually advanced replacement for time.perf_counter."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def controller(qapp, clock):
    from electrophoresis.controller.run_controller import RunController
    ctrl = RunController(clock=clock)
    yield ctrl
    ctrl.teardown()
