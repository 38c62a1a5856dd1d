"""
Segmented walls for dungeon room boundaries.

A wall is an ordered run of segments, one per tile along that side of the
room. Each segment is either solid or a door. Segment indices count from 0
and are fixed when the wall is built; the owning room decides which
transitions are legal.
"""

from __future__ import annotations

from enum import Enum
from typing import List

import numpy as np


# ==============================================================================
# ENUMS
# ==============================================================================

class WallDirection(Enum):
    """Cardinal side of a room."""
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    def opposite(self) -> 'WallDirection':
        """Return the facing side of a neighbouring room."""
        opposites = {
            WallDirection.NORTH: WallDirection.SOUTH,
            WallDirection.SOUTH: WallDirection.NORTH,
            WallDirection.EAST: WallDirection.WEST,
            WallDirection.WEST: WallDirection.EAST,
        }
        return opposites[self]


class SegmentState(Enum):
    """State of a single wall segment (stored as int8 codes)."""
    SOLID = 0
    DOOR = 1


# ==============================================================================
# ERRORS
# ==============================================================================

class WallError(Exception):
    pass


class OutOfRangeError(WallError):
    pass


# ==============================================================================
# SEGMENTED WALL
# ==============================================================================

class SegmentedWall:
    """
    Ordered, fixed-length sequence of wall segments.

    The segment count never changes after construction. No door semantics
    live here: set_segment_state() overwrites unconditionally.
    """

    def __init__(self, segment_count: int):
        """
        Build a wall with every segment solid.

        Args:
            segment_count: Number of segments (tiles) along the wall
        """
        if segment_count < 0:
            raise ValueError(f"Segment count must not be negative: {segment_count}")
        self._segments = np.full(segment_count, SegmentState.SOLID.value, dtype=np.int8)

    def __len__(self) -> int:
        return int(self._segments.shape[0])

    def __repr__(self) -> str:
        states = "".join("D" if code == SegmentState.DOOR.value else "#" for code in self._segments)
        return f"SegmentedWall({states!r})"

    def is_valid_index(self, segment_index: int) -> bool:
        """Return True if a segment exists at the given index."""
        return 0 <= segment_index < len(self)

    def segment_state(self, segment_index: int) -> SegmentState:
        """
        Get the state of a segment.

        Raises:
            OutOfRangeError: If the index is outside [0, len(wall))
        """
        self._check_index(segment_index)
        return SegmentState(int(self._segments[segment_index]))

    def set_segment_state(self, segment_index: int, state: SegmentState) -> None:
        """
        Replace the state of a segment.

        Raises:
            OutOfRangeError: If the index is outside [0, len(wall))
        """
        self._check_index(segment_index)
        self._segments[segment_index] = state.value

    def door_indices(self) -> List[int]:
        """Indices of every door segment, ascending."""
        return [int(i) for i in np.flatnonzero(self._segments == SegmentState.DOOR.value)]

    def _check_index(self, segment_index: int) -> None:
        if not self.is_valid_index(segment_index):
            raise OutOfRangeError(
                f"Segment index {segment_index} out of range for wall of {len(self)} segments"
            )
