"""
Fragment & Lane Data Types
==========================
Classes:
    Fragment: One simulated DNA fragment (a band on the gel).
    LaneDefinition: The sizes loaded into one well of the gel.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence


@dataclass
class Fragment:
    """
    A DNA fragment travelling down the gel.

    ``position`` is the distance travelled along the gel axis. Once
    ``finished`` is set the position is pinned at the travel limit.
    """
    fragment_id: int
    lane_index: int
    size_bp: float
    position: float
    finished: bool = False

    @property
    def label(self) -> str:
        return f"{self.size_bp:g} bp"


@dataclass(frozen=True)
class LaneDefinition:
    """Sizes (bp) of the fragments loaded into the lane with the given index."""
    lane_index: int
    sizes: Sequence[float] = field(default_factory=tuple)
    label: str = ""

    def __post_init__(self) -> None:
        if self.lane_index < 1:
            raise ValueError(f"Lane index must be >= 1, got {self.lane_index}.")
        for size in self.sizes:
            if size <= 0:
                raise ValueError(f"Fragment size must be positive, got {size} in lane {self.lane_index}.")
        # Freeze the sequence so the definition can be shared safely
        object.__setattr__(self, "sizes", tuple(self.sizes))
