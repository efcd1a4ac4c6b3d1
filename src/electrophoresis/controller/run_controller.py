"""
Run Controller (State Machine)
==============================
Drives when the Motion Update executes and gates the user actions.

Why is this file needed?
------------------------
1. Phases: It owns the Idle -> Running -> Paused transitions and refuses the
   actions that are not allowed in the current phase.
2. Timers: While running, a 1 s tick advances the clock and a per-frame task
   advances the fragments with the measured delta time. Leaving the running
   phase stops both.
3. Signals: Views never poke the state directly; they call the actions below
   and redraw from the emitted signals.

Classes:
    RunController: The controller of one simulation.
"""
from __future__ import annotations

import logging
import time
from typing import Callable, Iterable, Optional

from PySide6.QtCore import QObject, Signal

from electrophoresis.config import DEFAULT_LANES
from electrophoresis.controller.scheduler import RepeatingTask
from electrophoresis.model.fragment import LaneDefinition
from electrophoresis.model.motion import advance_fragments
from electrophoresis.model.state import RunPhase, SimulationState, clamp_voltage

logger = logging.getLogger(__name__)

START_REJECTED_MESSAGE = "Please load the DNA samples first!"


class RunController(QObject):
    # Signals to update the UI
    phase_changed = Signal(object)  # RunPhase
    loaded_changed = Signal(bool)
    elapsed_changed = Signal(int)
    voltage_changed = Signal(int)
    fragments_reset = Signal(object)  # all fragments after a load or reset
    fragments_moved = Signal(object)  # fragments changed in the last frame
    start_rejected = Signal(str)

    def __init__(
        self,
        state: Optional[SimulationState] = None,
        clock: Callable[[], float] = time.perf_counter,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.state = state if state is not None else SimulationState()
        self._clock = clock
        self._last_frame_time: Optional[float] = None

        config = self.state.config
        self.tick_task = RepeatingTask("tick", config.tick_interval_ms, self.on_second, parent=self)
        self.frame_task = RepeatingTask("frame", config.frame_interval_ms, self.on_frame, precise=True, parent=self)

    # --- PROPERTIES ---

    @property
    def phase(self) -> RunPhase:
        return self.state.phase

    @property
    def voltage_locked(self) -> bool:
        """The voltage can only be changed before a run starts."""
        return self.state.phase is not RunPhase.IDLE

    # --- ACTIONS ---

    def load_lanes(self, lanes: Iterable[LaneDefinition] = DEFAULT_LANES) -> bool:
        """
        Load fresh samples. Ignored while running.

        Loading always starts from a clean gel, so a paused run is reset first.
        """
        if self.state.is_running:
            logger.warning("Cannot load samples while the gel is running.")
            return False

        self.reset()
        fragments = self.state.registry.load_lanes(lanes)
        self.state.loaded = True
        self.loaded_changed.emit(True)
        self.fragments_reset.emit(fragments)
        return True

    def start(self) -> bool:
        """Start or resume the run."""
        if not self.state.loaded:
            logger.warning("Start requested before any samples were loaded.")
            self.start_rejected.emit(START_REJECTED_MESSAGE)
            return False
        if self.state.is_running:
            return False

        resumed = self.state.is_paused
        # New delta baseline, the paused interval must not count as travel time
        self._last_frame_time = self._clock()
        self._set_phase(RunPhase.RUNNING)
        self.frame_task.start()
        self.tick_task.start()
        logger.info(f"Run {'resumed' if resumed else 'started'} at {self.state.voltage} V.")
        return True

    def pause(self) -> bool:
        if not self.state.is_running:
            return False

        self._stop_tasks()
        self._set_phase(RunPhase.PAUSED)
        logger.info(f"Run paused at {self.state.elapsed_seconds} s.")
        return True

    def reset(self) -> None:
        self._stop_tasks()
        was_loaded = self.state.loaded
        previous_phase = self.state.phase

        self.state.reset()

        if previous_phase is not RunPhase.IDLE:
            self.phase_changed.emit(RunPhase.IDLE)
        if was_loaded:
            self.loaded_changed.emit(False)
        self.elapsed_changed.emit(0)
        self.fragments_reset.emit([])

    def set_voltage(self, value: int) -> bool:
        if self.voltage_locked:
            logger.debug(f"Voltage change to {value} V ignored, run in progress.")
            return False

        voltage = clamp_voltage(value)
        if voltage != self.state.voltage:
            self.state.voltage = voltage
            self.voltage_changed.emit(voltage)
        return True

    def teardown(self) -> None:
        """Stop all pending callbacks. Called when the owning window closes."""
        self._stop_tasks()

    # --- TIMER CALLBACKS ---

    def on_second(self) -> None:
        if not self.state.is_running:
            return
        self.state.elapsed_seconds += 1
        self.elapsed_changed.emit(self.state.elapsed_seconds)

    def on_frame(self) -> None:
        if not self.state.is_running:
            return

        now = self._clock()
        last = self._last_frame_time if self._last_frame_time is not None else now
        dt = now - last
        self._last_frame_time = now

        config = self.state.config
        moved = advance_fragments(
            self.state.registry,
            dt_seconds=dt,
            voltage=self.state.voltage,
            travel_limit=config.travel_limit,
            base_speed=config.base_speed,
        )
        if moved:
            self.fragments_moved.emit(moved)

    # --- HELPERS ---

    def _set_phase(self, phase: RunPhase) -> None:
        if phase is not self.state.phase:
            self.state.phase = phase
            self.phase_changed.emit(phase)

    def _stop_tasks(self) -> None:
        self.frame_task.stop()
        self.tick_task.stop()
        self._last_frame_time = None
