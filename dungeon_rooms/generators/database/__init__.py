"""
Room specification database: template lookup by theme and footprint.

Usage:
    from dungeon_rooms.generators.database import RoomSpecificationDatabase, RoomSpecification

    database = RoomSpecificationDatabase.from_path("/data/rooms")
    spec = RoomSpecification("Crypt", 4, 4)
    if database.exists(spec):
        locators = database.locators_for(spec)
"""

from .room_specs import RoomSpecification, RoomTemplateRecord
from .room_database import (
    RoomSpecificationDatabase,
    RoomDatabaseError,
    EmptyCatalogError,
    InvalidSpecificationError,
    SpecificationNotFoundError,
    ThemeNotFoundError,
)
from .catalog_storage import (
    get_catalog_dir,
    scan_template_records,
    load_record_from_path,
    save_template_record,
)

__all__ = [
    'RoomSpecification',
    'RoomTemplateRecord',
    'RoomSpecificationDatabase',
    'RoomDatabaseError',
    'EmptyCatalogError',
    'InvalidSpecificationError',
    'SpecificationNotFoundError',
    'ThemeNotFoundError',
    'get_catalog_dir',
    'scan_template_records',
    'load_record_from_path',
    'save_template_record',
]
