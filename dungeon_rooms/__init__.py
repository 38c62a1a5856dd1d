"""
Dungeon room toolkit.

Building blocks for assembling multi-room dungeons from pre-authored room
templates:

- generators.rooms: segmented walls and room boundaries with runtime doors
- generators.database: room specifications and the template lookup database
- validation: data-quality checks for template catalogs and door sets
- settings: persistent toolkit settings
"""

from .generators.rooms import (
    WallDirection,
    SegmentState,
    SegmentedWall,
    WallLocation,
    RoomBoundary,
    SpawnInfo,
    PlacedRoom,
    spawn_room,
    MeshPalette,
)
from .generators.database import (
    RoomSpecification,
    RoomTemplateRecord,
    RoomSpecificationDatabase,
)
from .settings import RoomKitSettings, load_settings, save_settings

__all__ = [
    'WallDirection',
    'SegmentState',
    'SegmentedWall',
    'WallLocation',
    'RoomBoundary',
    'SpawnInfo',
    'PlacedRoom',
    'spawn_room',
    'MeshPalette',
    'RoomSpecification',
    'RoomTemplateRecord',
    'RoomSpecificationDatabase',
    'RoomKitSettings',
    'load_settings',
    'save_settings',
]

__version__ = '1.0.0'
