"""
Catalog persistence layer for room template manifests.

Each room template is described by one JSON manifest:

    {"theme": "Crypt", "width": 4, "length": 4, "locator": "rooms/crypt_a"}

The locator is optional and defaults to the manifest's own path. Manifests
live under a catalog directory (default ~/.config/dungeon_rooms/templates/)
and are discovered recursively in sorted path order.
"""

from __future__ import annotations
import hashlib
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .room_specs import RoomSpecification, RoomTemplateRecord

logger = logging.getLogger(__name__)


def get_catalog_dir() -> Path:
    """
    Get the default directory for template manifests.

    Returns:
        Path to ~/.config/dungeon_rooms/templates/
        Creates the directory if it doesn't exist.
    """
    catalog_dir = Path.home() / ".config" / "dungeon_rooms" / "templates"
    catalog_dir.mkdir(parents=True, exist_ok=True)
    return catalog_dir


def _record_to_dict(record: RoomTemplateRecord) -> Dict[str, Any]:
    """Convert a RoomTemplateRecord to a JSON-serializable dictionary."""
    spec = record.specification
    return {
        "theme": spec.theme,
        "width": spec.width,
        "length": spec.length,
        "locator": record.locator,
    }


def _dict_to_record(data: Dict[str, Any], default_locator: str) -> RoomTemplateRecord:
    """Create a RoomTemplateRecord from a manifest dictionary.

    Raises:
        ValueError: If the theme is not a string or a dimension is not an integer
    """
    theme = data["theme"]
    if not isinstance(theme, str):
        raise ValueError(f"theme must be a string, got {theme!r}")
    for key in ("width", "length"):
        value = data[key]
        # bool is an int subclass; reject it explicitly
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"{key} must be an integer tile count, got {value!r}")

    locator = data.get("locator") or default_locator
    if not isinstance(locator, str):
        raise ValueError(f"locator must be a string, got {locator!r}")

    spec = RoomSpecification(theme=theme, width=data["width"], length=data["length"])
    return RoomTemplateRecord(specification=spec, locator=locator)


def _sanitize_filename(name: str) -> str:
    """
    Build a filename for a locator.

    Returns:
        A safe filename (lowercase, path separators and spaces replaced, special chars removed)
        suffixed with a short hash of the exact locator, so distinct locators never share a file
    """
    safe = name.lower().replace("/", "_").replace(" ", "_")
    safe = "".join(c for c in safe if c.isalnum() or c in "_-")
    digest = hashlib.sha1(name.encode("utf-8")).hexdigest()[:8]
    return f"{safe or 'template'}-{digest}"


def load_record_from_path(file_path: Path) -> Optional[RoomTemplateRecord]:
    """
    Load a template record from a manifest file.

    Args:
        file_path: Path to the JSON manifest

    Returns:
        RoomTemplateRecord if valid, None otherwise
    """
    if not file_path.exists():
        return None

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return _dict_to_record(data, default_locator=file_path.as_posix())
    except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        logger.warning(f"Skipping unreadable template manifest {file_path}: {e}")
        return None


def scan_template_records(path: Union[str, Path]) -> List[RoomTemplateRecord]:
    """
    Discover every template manifest under a catalog path.

    Args:
        path: Catalog directory (searched recursively) or a single manifest

    Returns:
        Records in discovery order (sorted manifest path)
    """
    root = Path(path)
    if root.is_file():
        files = [root]
    else:
        files = sorted(root.rglob("*.json"))

    records = []
    for file_path in files:
        record = load_record_from_path(file_path)
        if record:
            records.append(record)

    logger.debug(f"Scanned {len(files)} manifest(s) under {root}, {len(records)} usable")
    return records


def save_template_record(record: RoomTemplateRecord, directory: Optional[Path] = None) -> Path:
    """
    Save a template manifest.

    Args:
        record: The record to save
        directory: Target directory (default: get_catalog_dir())

    Returns:
        Path to the saved file

    Raises:
        OSError: If the file cannot be written
    """
    directory = Path(directory) if directory is not None else get_catalog_dir()
    directory.mkdir(parents=True, exist_ok=True)
    file_path = directory / (_sanitize_filename(record.locator) + ".json")

    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(_record_to_dict(record), f, indent=2, ensure_ascii=False)

    return file_path
