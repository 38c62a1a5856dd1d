"""
Persistent settings for the room toolkit.

Settings are stored as JSON in ~/.config/dungeon_rooms/settings.json.
Missing or unreadable files fall back to defaults.

Usage:
    from dungeon_rooms.settings import load_settings, save_settings

    settings = load_settings()
    settings.catalog_path = "/data/rooms"
    save_settings(settings)
"""

from __future__ import annotations
import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "settings.json"


@dataclass
class RoomKitSettings:
    # Template catalog
    catalog_path: Optional[str] = None  # None = ~/.config/dungeon_rooms/templates
    validate_catalog: bool = True
    strict_validation: bool = False

    # Rendering adapters
    mesh_seed: Optional[int] = None  # None = random, otherwise deterministic


def get_config_dir() -> Path:
    """
    Get the configuration directory.

    Returns:
        Path to ~/.config/dungeon_rooms/
        Creates the directory if it doesn't exist.
    """
    config_dir = Path.home() / ".config" / "dungeon_rooms"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def _dict_to_settings(data: Dict[str, Any]) -> RoomKitSettings:
    known = {f.name for f in fields(RoomKitSettings)}
    return RoomKitSettings(**{k: v for k, v in data.items() if k in known})


def load_settings(file_path: Optional[Path] = None) -> RoomKitSettings:
    """
    Load settings from disk.

    Args:
        file_path: Settings file (default: get_config_dir() / settings.json)

    Returns:
        Saved settings, or defaults if the file is missing or invalid
    """
    file_path = file_path or get_config_dir() / SETTINGS_FILENAME
    if not file_path.exists():
        return RoomKitSettings()

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return _dict_to_settings(json.load(f))
    except (OSError, json.JSONDecodeError, TypeError, AttributeError) as e:
        logger.warning(f"Ignoring invalid settings file {file_path}: {e}")
        return RoomKitSettings()


def save_settings(settings: RoomKitSettings, file_path: Optional[Path] = None) -> Path:
    """
    Save settings to disk.

    Returns:
        Path to the saved file
    """
    file_path = file_path or get_config_dir() / SETTINGS_FILENAME
    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(asdict(settings), f, indent=2)
    return file_path
