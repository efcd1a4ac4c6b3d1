"""
Motion Update
=============
Advances the fragments along the gel for one animation frame.

The mobility formula is tuned for visual pacing, not physical accuracy:
larger fragments move slower, and speed scales linearly with voltage.
"""
from __future__ import annotations

from typing import Iterable

from electrophoresis.config import DEFAULT_CONFIG
from electrophoresis.model.fragment import Fragment

FRAMES_PER_SECOND = 60


def voltage_factor(voltage: int) -> float:
    """Linear scalar relative to the 100 V reference."""
    return voltage / 100


def mobility(size_bp: float) -> float:
    """Size-dependent speed factor, 1.0 for a 300 bp fragment."""
    return 500 / (size_bp + 200)


def fragment_speed(size_bp: float, voltage: int, base_speed: float = DEFAULT_CONFIG.base_speed) -> float:
    """Speed in distance units per second."""
    return base_speed * voltage_factor(voltage) * mobility(size_bp) * FRAMES_PER_SECOND


def advance_fragments(
    fragments: Iterable[Fragment],
    dt_seconds: float,
    voltage: int,
    travel_limit: float,
    base_speed: float = DEFAULT_CONFIG.base_speed,
) -> list[Fragment]:
    """
    Move every unfinished fragment by ``speed * dt_seconds``.

    A fragment reaching ``travel_limit`` is clamped there and marked finished.

    Returns:
        The fragments whose state changed this frame.
    """
    dt_seconds = max(dt_seconds, 0.0)
    moved: list[Fragment] = []
    for fragment in fragments:
        if fragment.finished:
            continue

        fragment.position += fragment_speed(fragment.size_bp, voltage, base_speed) * dt_seconds

        # Boundary check
        if fragment.position >= travel_limit:
            fragment.position = travel_limit
            fragment.finished = True

        moved.append(fragment)
    return moved
