"""
Validation rule definitions.

Each rule has:
- Code: Unique identifier (e.g., "CAT-001")
- Severity: FAIL or WARN
- Message template: Human-readable description
- Remediation: Suggested fix

Rules are organized by category:
- CAT: Template catalog data quality
- ROOM: Door sets applied to a room
"""

from dataclasses import dataclass
from typing import Optional

from .core import Severity, ValidationIssue


@dataclass(frozen=True)
class ValidationRule:
    """Definition of a validation rule.

    Attributes:
        code: Unique rule code (e.g., "CAT-001")
        severity: Default severity for this rule
        message_template: Template for error message (use {placeholders})
        remediation_template: Template for suggested fix
        description: Full description of the rule
    """
    code: str
    severity: Severity
    message_template: str
    remediation_template: Optional[str] = None
    description: Optional[str] = None

    def format_message(self, **kwargs) -> str:
        """Format the message template with provided values."""
        return self.message_template.format(**kwargs)

    def format_remediation(self, **kwargs) -> Optional[str]:
        """Format the remediation template with provided values."""
        if self.remediation_template:
            return self.remediation_template.format(**kwargs)
        return None

    def issue(self, location: Optional[str] = None, **kwargs) -> ValidationIssue:
        """Build an issue for this rule."""
        return ValidationIssue(
            severity=self.severity,
            code=self.code,
            message=self.format_message(**kwargs),
            remediation=self.format_remediation(**kwargs),
            location=location,
        )


# =============================================================================
# CATALOG RULES (CAT)
# =============================================================================

CAT_001 = ValidationRule(
    code="CAT-001",
    severity=Severity.FAIL,
    message_template="Non-positive footprint {width}x{length} for theme '{theme}'",
    remediation_template="Set width and length of the template to at least 1 tile",
    description="Templates need at least one segment on every wall"
)

CAT_002 = ValidationRule(
    code="CAT-002",
    severity=Severity.WARN,
    message_template="Locator listed {count} times",
    remediation_template="Remove duplicate catalog entries for {locator}",
    description="Each template should be discovered once"
)

CAT_003 = ValidationRule(
    code="CAT-003",
    severity=Severity.WARN,
    message_template="Template has an empty theme",
    remediation_template="Assign a theme so the template can be found by theme queries",
    description="Themes group templates for thematically consistent generation"
)


# =============================================================================
# ROOM RULES (ROOM)
# =============================================================================

ROOM_001 = ValidationRule(
    code="ROOM-001",
    severity=Severity.FAIL,
    message_template="Door location outside {width}x{length} room footprint",
    remediation_template="Use an index below {limit} on the {direction} wall",
    description="North/South indices must be < width, East/West indices < length"
)

ROOM_002 = ValidationRule(
    code="ROOM-002",
    severity=Severity.FAIL,
    message_template="Door location requested more than once",
    remediation_template="Remove the duplicate door location",
    description="Adding the same door twice is a generator logic error"
)


ALL_RULES = {
    rule.code: rule
    for rule in [CAT_001, CAT_002, CAT_003, ROOM_001, ROOM_002]
}


def get_rule(code: str) -> Optional[ValidationRule]:
    """Look up a rule by code."""
    return ALL_RULES.get(code)
