"""
Room boundaries with runtime door placement.

A RoomBoundary is the four segmented walls of one room template. North and
South walls have one segment per tile of width; East and West walls have one
segment per tile of length. Every segment starts solid, and doors are punched
into the boundary at runtime to connect the room to its neighbours.

Door operations are strict: adding a door where one already exists, or
removing one where none exists, raises instead of silently doing nothing.
Callers check with is_valid_location() / has_door_at_location() first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Tuple

from .segmented_wall import SegmentedWall, SegmentState, WallDirection
from ..database.room_specs import RoomSpecification

logger = logging.getLogger(__name__)


# ==============================================================================
# DATA CLASSES
# ==============================================================================

@dataclass(frozen=True)
class WallLocation:
    """Address of one wall segment. Validity depends on the room's footprint."""
    direction: WallDirection
    segment_index: int  # Position within the wall, counting from 0

    def __str__(self) -> str:
        return f"{self.direction.value}[{self.segment_index}]"


class RoomBoundaryError(Exception):
    pass


class InvalidLocationError(RoomBoundaryError):
    pass


class DoorAlreadyPresentError(RoomBoundaryError):
    pass


class NoDoorPresentError(RoomBoundaryError):
    pass


# ==============================================================================
# ROOM BOUNDARY
# ==============================================================================

class RoomBoundary:
    """Four segmented walls sized to a room footprint."""

    def __init__(self, width: int, length: int):
        """
        Initialize the walls of a room.

        Args:
            width: Room width in tiles (North/South segment count)
            length: Room length in tiles (East/West segment count)
        """
        if width <= 0 or length <= 0:
            raise ValueError(f"Room footprint must be positive, got {width}x{length}")

        self.width = width
        self.length = length
        self._walls: Dict[WallDirection, SegmentedWall] = {
            WallDirection.NORTH: SegmentedWall(width),
            WallDirection.SOUTH: SegmentedWall(width),
            WallDirection.EAST: SegmentedWall(length),
            WallDirection.WEST: SegmentedWall(length),
        }

    @classmethod
    def create(cls, width: int, length: int) -> 'RoomBoundary':
        """Create a boundary with no doors."""
        return cls(width, length)

    def __repr__(self) -> str:
        return f"RoomBoundary(width={self.width}, length={self.length}, doors={len(self.door_locations())})"

    def get_wall(self, direction: WallDirection) -> SegmentedWall:
        """Return the wall on the given side."""
        return self._walls[direction]

    def is_valid_location(self, location: WallLocation) -> bool:
        """
        Check if the given wall location exists within this room.

        Returns:
            True if the index falls within [0, width) for North and South
            walls, or [0, length) for East and West walls
        """
        return self.get_wall(location.direction).is_valid_index(location.segment_index)

    def has_door_at_location(self, location: WallLocation) -> bool:
        """
        Return True if the room has a door at the provided location.

        Raises:
            InvalidLocationError: If the location is not valid for this room
        """
        self._check_location(location, "check for a door at")
        wall = self.get_wall(location.direction)
        return wall.segment_state(location.segment_index) == SegmentState.DOOR

    def add_door(self, location: WallLocation) -> None:
        """
        Turn a solid segment into a door.

        Raises:
            InvalidLocationError: If the location is not valid for this room
            DoorAlreadyPresentError: If the segment is already a door
        """
        self._check_location(location, "add a door to")
        if self.has_door_at_location(location):
            raise DoorAlreadyPresentError(
                f"Attempted to add a door to {location}, which already has a door"
            )
        self.get_wall(location.direction).set_segment_state(location.segment_index, SegmentState.DOOR)
        logger.debug(f"Added door at {location} ({self.width}x{self.length} room)")

    def remove_door(self, location: WallLocation) -> None:
        """
        Turn a door segment back into solid wall.

        Raises:
            InvalidLocationError: If the location is not valid for this room
            NoDoorPresentError: If the segment is not a door
        """
        self._check_location(location, "remove a door from")
        if not self.has_door_at_location(location):
            raise NoDoorPresentError(
                f"Attempted to remove a door from {location}, which has no door"
            )
        self.get_wall(location.direction).set_segment_state(location.segment_index, SegmentState.SOLID)
        logger.debug(f"Removed door at {location} ({self.width}x{self.length} room)")

    def wall_locations(self) -> Iterator[WallLocation]:
        """Yield every valid location: North, South, East, West, ascending index."""
        for direction in (WallDirection.NORTH, WallDirection.SOUTH, WallDirection.EAST, WallDirection.WEST):
            for index in range(len(self._walls[direction])):
                yield WallLocation(direction, index)

    def door_locations(self) -> List[WallLocation]:
        """List every location that currently holds a door."""
        doors = []
        for direction, wall in self._walls.items():
            doors.extend(WallLocation(direction, index) for index in wall.door_indices())
        return doors

    def _check_location(self, location: WallLocation, action: str) -> None:
        if not self.is_valid_location(location):
            raise InvalidLocationError(
                f"Attempted to {action} invalid location {location} "
                f"({self.width}x{self.length} room)"
            )


# ==============================================================================
# SPAWNING
# ==============================================================================

@dataclass
class SpawnInfo:
    """Information required to spawn a room from a template."""
    locator: str                             # Storage reference of the chosen template
    position: Tuple[float, float, float]     # Where the room is placed
    door_locations: List[WallLocation] = field(default_factory=list)


@dataclass
class PlacedRoom:
    """A spawned room: its template, placement and live boundary."""
    locator: str
    position: Tuple[float, float, float]
    specification: RoomSpecification
    boundary: RoomBoundary


def spawn_room(
    spawn_info: SpawnInfo,
    resolve_specification: Callable[[str], RoomSpecification],
) -> PlacedRoom:
    """Spawn a room according to the provided spawn info.

    The boundary is built from the template's footprint and every requested
    door is applied in order before the room is returned.

    Args:
        spawn_info: Template locator, position and door set
        resolve_specification: Loader mapping a locator to its specification

    Returns:
        PlacedRoom ready for use by the layout generator

    Raises:
        InvalidLocationError / DoorAlreadyPresentError: From add_door()
    """
    specification = resolve_specification(spawn_info.locator)
    boundary = RoomBoundary.create(specification.width, specification.length)

    for location in spawn_info.door_locations:
        boundary.add_door(location)

    logger.debug(
        f"Spawned {spawn_info.locator} at {spawn_info.position} "
        f"with {len(spawn_info.door_locations)} door(s)"
    )
    return PlacedRoom(
        locator=spawn_info.locator,
        position=spawn_info.position,
        specification=specification,
        boundary=boundary,
    )
