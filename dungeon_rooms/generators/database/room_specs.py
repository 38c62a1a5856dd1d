"""
Room specifications, the lookup keys for room templates.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class RoomSpecification:
    """
    Theme and footprint of a room template.

    Immutable and hashable; two specifications are equal when theme, width
    and length are all equal. No validity check happens here: a zero-width
    specification is representable and is flagged by catalog validation.
    """
    theme: str   # e.g. "Crypt", "Hall"
    width: int   # Tiles along the North/South walls
    length: int  # Tiles along the East/West walls


@dataclass(frozen=True)
class RoomTemplateRecord:
    """A discovered room template: its specification and storage locator."""
    specification: RoomSpecification
    locator: str
