"""
Simulation State (Data Model)
=============================
This module defines the central data structure of one running simulation.

Why is this file needed?
------------------------
1. State Management: It holds the run phase, the clock, the voltage and the
   loaded fragments in one place.
2. Decoupling: Views read from this object; the Run Controller writes to it.
3. Isolation: It is an ordinary object, not a global, so several independent
   simulations (or tests) can exist side by side.

Classes:
    RunPhase: Idle / Running / Paused.
    SimulationState: The main container class.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from electrophoresis.config import DEFAULT_CONFIG, DEFAULT_VOLTAGE, VOLTAGE_MAX, VOLTAGE_MIN, GelConfig
from electrophoresis.model.registry import SampleRegistry

logger = logging.getLogger(__name__)


class RunPhase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


def clamp_voltage(value: int) -> int:
    return max(VOLTAGE_MIN, min(VOLTAGE_MAX, int(value)))


@dataclass
class SimulationState:
    """
    Pass this instance to the Run Controller; views only read it.

    ``loaded`` is orthogonal to ``phase``: lanes must be loaded before the
    RUNNING phase is reachable.
    """
    config: GelConfig = DEFAULT_CONFIG
    phase: RunPhase = RunPhase.IDLE
    elapsed_seconds: int = 0
    voltage: int = DEFAULT_VOLTAGE
    loaded: bool = False
    registry: SampleRegistry = field(init=False)

    def __post_init__(self) -> None:
        self.registry = SampleRegistry(initial_offset=self.config.initial_offset)
        self.voltage = clamp_voltage(self.voltage)

    @property
    def is_running(self) -> bool:
        return self.phase is RunPhase.RUNNING

    @property
    def is_paused(self) -> bool:
        return self.phase is RunPhase.PAUSED

    def reset(self) -> None:
        """Back to an empty, idle gel. The voltage setting is kept."""
        self.phase = RunPhase.IDLE
        self.elapsed_seconds = 0
        self.loaded = False
        self.registry.clear()
        logger.info("Simulation state has been reset.")
