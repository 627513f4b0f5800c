"""
fieldcheck - declarative validation of submitted form fields.

This package contains:
- constants: length limits and email/URL patterns (also as CONSTANTS)
- rules: one predicate per rule name
- options: typed parsing of rule options
- validator: validate()/evaluate() aggregators and the Validator class
"""

from fieldcheck.constants import (
    CONSTANTS,
    EMAIL_REGEX,
    MAX_SHORT_TEXT_LENGTH,
    MAX_TEXTAREA_LENGTH,
    URL_REGEX,
)
from fieldcheck.errors import FieldCheckError, RuleArgumentError, UnknownRuleError
from fieldcheck.lookup import FieldLookup, MappingFieldLookup
from fieldcheck.models import RuleCheck, RuleName, ValidationReport
from fieldcheck.validator import Validator, evaluate, validate

__all__ = [
    # Entry points
    "validate",
    "evaluate",
    "Validator",
    # Constants
    "CONSTANTS",
    "EMAIL_REGEX",
    "MAX_SHORT_TEXT_LENGTH",
    "MAX_TEXTAREA_LENGTH",
    "URL_REGEX",
    # Models
    "RuleCheck",
    "RuleName",
    "ValidationReport",
    # Collaborators
    "FieldLookup",
    "MappingFieldLookup",
    # Errors
    "FieldCheckError",
    "RuleArgumentError",
    "UnknownRuleError",
]
