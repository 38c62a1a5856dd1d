"""
Room boundary module.

Rooms are four segmented walls whose segments can be switched between solid
wall and door at runtime, connecting the room to its neighbours.

Usage:
    from dungeon_rooms.generators.rooms import RoomBoundary, WallLocation, WallDirection

    room = RoomBoundary.create(width=4, length=3)
    door = WallLocation(WallDirection.NORTH, 0)
    if room.is_valid_location(door) and not room.has_door_at_location(door):
        room.add_door(door)
"""

from .segmented_wall import (
    WallDirection,
    SegmentState,
    SegmentedWall,
    WallError,
    OutOfRangeError,
)
from .room_boundary import (
    WallLocation,
    RoomBoundary,
    SpawnInfo,
    PlacedRoom,
    spawn_room,
    RoomBoundaryError,
    InvalidLocationError,
    DoorAlreadyPresentError,
    NoDoorPresentError,
)
from .mesh_palette import MeshPalette

__all__ = [
    'WallDirection',
    'SegmentState',
    'SegmentedWall',
    'WallError',
    'OutOfRangeError',
    'WallLocation',
    'RoomBoundary',
    'SpawnInfo',
    'PlacedRoom',
    'spawn_room',
    'RoomBoundaryError',
    'InvalidLocationError',
    'DoorAlreadyPresentError',
    'NoDoorPresentError',
    'MeshPalette',
]
