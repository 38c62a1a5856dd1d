"""
Room specification database.

Supports procedural dungeon generation by indexing the available room
templates by specification. Generators ask whether a template exists for a
theme and footprint, fetch the locators of matching templates, and query the
largest footprint of a theme, all without scanning the catalog.

The database is built once from the records discovered by a catalog scan and
is read-only afterwards; rebuilding means constructing a new instance.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .room_specs import RoomSpecification, RoomTemplateRecord

logger = logging.getLogger(__name__)


class RoomDatabaseError(Exception):
    pass


class EmptyCatalogError(RoomDatabaseError):
    pass


class InvalidSpecificationError(RoomDatabaseError):
    pass


class SpecificationNotFoundError(RoomDatabaseError):
    pass


class ThemeNotFoundError(RoomDatabaseError):
    pass


class RoomSpecificationDatabase:
    """Read-only index of room template locators by specification and theme."""

    def __init__(
        self,
        records: Iterable[RoomTemplateRecord],
        validate_on_build: bool = True,
        strict: bool = False,
    ):
        """Build the database from discovered template records.

        Args:
            records: Template records in catalog discovery order
            validate_on_build: If True, check records for data-quality issues.
                               Failures are logged and the records are still
                               indexed unless strict is set.
            strict: If True, raise ValidationError on FAIL issues

        Raises:
            EmptyCatalogError: If no records were supplied
            ValidationError: In strict mode, if validation fails
        """
        records = list(records)
        if not records:
            raise EmptyCatalogError("No room templates were supplied to the database")

        if validate_on_build:
            self._validate(records, strict)

        self._locators_by_spec: Dict[RoomSpecification, List[str]] = {}
        self._max_width_by_theme: Dict[str, int] = {}
        self._max_length_by_theme: Dict[str, int] = {}

        for record in records:
            self._add_record(record)

        logger.info(
            f"Room database built: {len(records)} template(s), "
            f"{len(self._locators_by_spec)} specification(s), "
            f"{len(self._max_width_by_theme)} theme(s)"
        )

    @classmethod
    def build(cls, records: Iterable[RoomTemplateRecord], **kwargs) -> 'RoomSpecificationDatabase':
        """Create a database from the given records."""
        return cls(records, **kwargs)

    @classmethod
    def from_path(cls, path: Union[str, Path], **kwargs) -> 'RoomSpecificationDatabase':
        """Create a database from the template manifests under a catalog path."""
        from .catalog_storage import scan_template_records
        return cls(scan_template_records(path), **kwargs)

    @classmethod
    def from_settings(cls, settings=None) -> 'RoomSpecificationDatabase':
        """Create a database using the configured catalog path and validation mode.

        Args:
            settings: RoomKitSettings, or None to load the saved settings
        """
        from .catalog_storage import get_catalog_dir
        from ...settings import load_settings

        if settings is None:
            settings = load_settings()
        path = settings.catalog_path or get_catalog_dir()
        return cls.from_path(
            path,
            validate_on_build=settings.validate_catalog,
            strict=settings.strict_validation,
        )

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    def _add_record(self, record: RoomTemplateRecord) -> None:
        spec = record.specification
        self._locators_by_spec.setdefault(spec, []).append(record.locator)

        # Widest and longest are tracked independently per theme
        if spec.theme not in self._max_width_by_theme or spec.width > self._max_width_by_theme[spec.theme]:
            self._max_width_by_theme[spec.theme] = spec.width
        if spec.theme not in self._max_length_by_theme or spec.length > self._max_length_by_theme[spec.theme]:
            self._max_length_by_theme[spec.theme] = spec.length

    @staticmethod
    def _validate(records: List[RoomTemplateRecord], strict: bool) -> None:
        from ...validation import ValidationError, validate_template_records

        result = validate_template_records(records)
        for issue in result.warnings:
            logger.warning(str(issue))
        for issue in result.errors:
            logger.error(str(issue))

        if strict and result.failed:
            raise ValidationError(result)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._locators_by_spec)

    def __contains__(self, spec: RoomSpecification) -> bool:
        return spec in self._locators_by_spec

    @property
    def template_count(self) -> int:
        """Total number of indexed templates."""
        return sum(len(locators) for locators in self._locators_by_spec.values())

    def exists(self, spec: RoomSpecification) -> bool:
        """Return True if at least one template has the given specification.

        Raises:
            InvalidSpecificationError: If the width or length is not positive
        """
        if spec.width <= 0 or spec.length <= 0:
            raise InvalidSpecificationError(
                f"Checked for a room template with an invalid size: {spec.width}x{spec.length}"
            )
        return spec in self._locators_by_spec

    def locators_for(self, spec: RoomSpecification) -> Tuple[str, ...]:
        """Locators of every template with the given specification, in discovery order.

        Raises:
            SpecificationNotFoundError: If no template has the specification;
                                        check with exists() first
        """
        try:
            return tuple(self._locators_by_spec[spec])
        except KeyError:
            raise SpecificationNotFoundError(f"No room templates match {spec}") from None

    def max_width(self, theme: str) -> int:
        """Maximum width of rooms with the given theme.

        Raises:
            ThemeNotFoundError: If no template has the theme
        """
        return self._lookup_theme(self._max_width_by_theme, theme)

    def max_length(self, theme: str) -> int:
        """Maximum length of rooms with the given theme.

        Raises:
            ThemeNotFoundError: If no template has the theme
        """
        return self._lookup_theme(self._max_length_by_theme, theme)

    def list_themes(self) -> List[str]:
        """Get all themes with at least one template."""
        return sorted(self._max_width_by_theme)

    def list_specifications(self, theme: Optional[str] = None) -> List[RoomSpecification]:
        """List specifications, optionally filtered by theme.

        Returns:
            Specifications sorted by theme, width, then length
        """
        specs = [
            spec for spec in self._locators_by_spec
            if theme is None or spec.theme == theme
        ]
        return sorted(specs, key=lambda s: (s.theme, s.width, s.length))

    @staticmethod
    def _lookup_theme(table: Dict[str, int], theme: str) -> int:
        if theme not in table:
            raise ThemeNotFoundError(f"No room templates have theme '{theme}'")
        return table[theme]
