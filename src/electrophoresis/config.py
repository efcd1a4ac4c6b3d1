"""
Configuration & Constants
=========================
This module serves as the central registry for the simulation constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (gel size, speeds, timer intervals)
   scattered throughout the model, controller and view.
2. Testability: A ``GelConfig`` instance is passed explicitly into the state
   and the controller, so tests can build small gels with their own values.

Exports:
    GelConfig: Frozen dataclass with the gel geometry and timing.
    DEFAULT_CONFIG: The configuration used by the application.
    DEFAULT_LANES: The DNA samples loaded by the "Load" button.
"""
from __future__ import annotations

from dataclasses import dataclass

from electrophoresis.model.fragment import LaneDefinition

VISIBLE_APP_NAME = "Gel Electrophoresis"

# Voltage slider range (V)
VOLTAGE_MIN: int = 50
VOLTAGE_MAX: int = 200
DEFAULT_VOLTAGE: int = 100


@dataclass(frozen=True)
class GelConfig:
    base_speed: float = 0.5  # distance units per frame at 100 V, before mobility
    gel_length: float = 400.0
    gel_width: float = 400.0
    boundary_margin: float = 10.0
    initial_offset: float = 15.0  # bands start just below the well
    well_count: int = 5
    band_width: float = 30.0
    frame_interval_ms: int = 16  # ~60 fps
    tick_interval_ms: int = 1000

    @property
    def travel_limit(self) -> float:
        """Maximum position along the gel before a fragment is finished."""
        return self.gel_length - self.boundary_margin


DEFAULT_CONFIG = GelConfig()

# Sizes in base pairs (bp). Lane 1 is the ladder (standard markers).
DEFAULT_LANES: tuple[LaneDefinition, ...] = (
    LaneDefinition(lane_index=1, sizes=(100, 200, 500, 1000, 2000), label="Ladder"),
    LaneDefinition(lane_index=2, sizes=(300, 800), label="Sample A"),
    LaneDefinition(lane_index=3, sizes=(150, 1200, 1800), label="Sample B"),
    LaneDefinition(lane_index=4, sizes=(500,), label="Control"),
)

LADDER_LANE: int = 1
