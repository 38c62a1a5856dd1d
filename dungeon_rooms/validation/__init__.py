"""
Validation package for room template catalogs and door sets.

Public API:
    - ValidationResult, ValidationIssue, Severity: Core result types
    - ValidationError: Exception raised on FAIL issues in strict mode
    - ValidationRule, get_rule: Rule definitions
    - validate_template_records, validate_door_locations: Checks
"""

from .core import (
    Severity,
    ValidationIssue,
    ValidationResult,
    ValidationError,
)
from .rules import ValidationRule, get_rule
from .checks import validate_template_records, validate_door_locations

__all__ = [
    'Severity',
    'ValidationIssue',
    'ValidationResult',
    'ValidationError',
    'ValidationRule',
    'get_rule',
    'validate_template_records',
    'validate_door_locations',
]
