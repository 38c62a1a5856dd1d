"""
Mesh palette for displaying wall segments.

Rendering adapters use a palette to decide which mesh shows a segment in its
current state. Door and wall meshes are picked at random from the template's
alternatives; pass a seed for reproducible picks.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .segmented_wall import SegmentState
from .room_boundary import RoomBoundary, WallLocation


@dataclass
class MeshPalette:
    """
    Door and wall mesh alternatives supplied by a room template.

    Attributes:
        door_meshes: Mesh names usable for door segments
        wall_meshes: Mesh names usable for solid segments
        seed: Optional seed for deterministic selection
    """
    door_meshes: List[str]
    wall_meshes: List[str]
    seed: Optional[int] = None
    _rng: random.Random = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.door_meshes:
            raise ValueError("Mesh palette is missing door meshes")
        if not self.wall_meshes:
            raise ValueError("Mesh palette is missing wall meshes")
        self._rng = random.Random(self.seed)

    @classmethod
    def from_settings(cls, door_meshes: List[str], wall_meshes: List[str], settings) -> 'MeshPalette':
        """Create a palette seeded from RoomKitSettings.mesh_seed."""
        return cls(door_meshes=list(door_meshes), wall_meshes=list(wall_meshes), seed=settings.mesh_seed)

    def pick(self, state: SegmentState) -> str:
        """Return a random mesh for a segment in the given state."""
        meshes = self.door_meshes if state == SegmentState.DOOR else self.wall_meshes
        return self._rng.choice(meshes)

    def render(self, room: RoomBoundary) -> Dict[WallLocation, str]:
        """Choose a mesh for every segment of a room."""
        return {
            location: self.pick(
                SegmentState.DOOR if room.has_door_at_location(location) else SegmentState.SOLID
            )
            for location in room.wall_locations()
        }
