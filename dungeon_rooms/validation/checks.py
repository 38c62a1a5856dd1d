"""
Validation checks for template catalogs and door sets.

- Footprint is positive (CAT-001)
- Locators are unique (CAT-002)
- Theme is set (CAT-003)
- Door locations fit the room (ROOM-001)
- Door locations are not repeated (ROOM-002)
"""

from collections import Counter
from typing import Iterable, Sequence

from .core import ValidationResult
from .rules import CAT_001, CAT_002, CAT_003, ROOM_001, ROOM_002
from ..generators.database.room_specs import RoomTemplateRecord
from ..generators.rooms.room_boundary import RoomBoundary, WallLocation


def validate_template_records(records: Sequence[RoomTemplateRecord]) -> ValidationResult:
    """Check discovered template records for data-quality problems.

    Args:
        records: Records as produced by the catalog scanner

    Returns:
        ValidationResult with one issue per problem found
    """
    result = ValidationResult()

    for record in records:
        spec = record.specification
        if spec.width <= 0 or spec.length <= 0:
            result.add_issue(CAT_001.issue(
                location=record.locator,
                width=spec.width, length=spec.length, theme=spec.theme,
            ))
        if not str(spec.theme).strip():
            result.add_issue(CAT_003.issue(location=record.locator))

    counts = Counter(record.locator for record in records)
    for locator, count in counts.items():
        if count > 1:
            result.add_issue(CAT_002.issue(location=locator, locator=locator, count=count))

    return result


def validate_door_locations(
    width: int,
    length: int,
    locations: Iterable[WallLocation],
) -> ValidationResult:
    """Check a door set against a room footprint before it is applied.

    Args:
        width: Room width in tiles
        length: Room length in tiles
        locations: Door locations in the order they will be added

    Returns:
        ValidationResult with ROOM-001 / ROOM-002 issues

    Raises:
        ValueError: If the footprint is not positive
    """
    result = ValidationResult()
    room = RoomBoundary(width, length)
    seen = set()

    for location in locations:
        if not room.is_valid_location(location):
            limit = len(room.get_wall(location.direction))
            result.add_issue(ROOM_001.issue(
                location=str(location),
                width=width, length=length, limit=limit, direction=location.direction.value,
            ))
        elif location in seen:
            result.add_issue(ROOM_002.issue(location=str(location)))
        seen.add(location)

    return result
