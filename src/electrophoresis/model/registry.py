"""
Sample Registry
===============
Holds the set of simulated fragments currently on the gel.

Why is this file needed?
------------------------
1. Ownership: Fragments are created here (one per size per lane) and
   destroyed here; no other object creates or drops them.
2. Identity: Every fragment gets an id unique within the registry, which the
   renderer uses as the key for its band items.
"""
from __future__ import annotations

import itertools
import logging
from typing import Iterable, Iterator

from electrophoresis.model.fragment import Fragment, LaneDefinition

logger = logging.getLogger(__name__)


class SampleRegistry:
    def __init__(self, initial_offset: float = 15.0) -> None:
        self.initial_offset = initial_offset
        self._fragments: list[Fragment] = []
        # Ids keep increasing across loads, so a stale band never matches a new fragment
        self._ids = itertools.count(1)

    def __iter__(self) -> Iterator[Fragment]:
        return iter(self._fragments)

    def __len__(self) -> int:
        return len(self._fragments)

    @property
    def fragments(self) -> tuple[Fragment, ...]:
        return tuple(self._fragments)

    @property
    def all_finished(self) -> bool:
        """True when every fragment reached the end of the gel (False if empty)."""
        return bool(self._fragments) and all(f.finished for f in self._fragments)

    def lanes(self) -> dict[int, list[Fragment]]:
        """Group the fragments by lane index, keeping load order."""
        grouped: dict[int, list[Fragment]] = {}
        for fragment in self._fragments:
            grouped.setdefault(fragment.lane_index, []).append(fragment)
        return grouped

    def load_lanes(self, lane_definitions: Iterable[LaneDefinition]) -> list[Fragment]:
        """
        Replace the current fragments with one fragment per size per lane.

        All new fragments start at the initial offset, unfinished.
        """
        self.clear()
        for lane in lane_definitions:
            for size in lane.sizes:
                self._fragments.append(
                    Fragment(
                        fragment_id=next(self._ids),
                        lane_index=lane.lane_index,
                        size_bp=size,
                        position=self.initial_offset,
                    )
                )
        logger.info(f"Loaded {len(self._fragments)} fragments in {len(self.lanes())} lanes.")
        return list(self._fragments)

    def clear(self) -> None:
        self._fragments.clear()
