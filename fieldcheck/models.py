"""Validation models.

Defines the closed set of rule names, the typed (rule, argument) pair
produced by option parsing, and the detailed validation result.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class RuleName(str, Enum):
    """Supported validation rules, keyed by their option names."""

    IS_REQUIRED = "isRequired"
    IS_NUMERIC = "isNumeric"
    HAS_MIN_LENGTH = "hasMinLength"
    HAS_MAX_LENGTH = "hasMaxLength"
    MATCHES_REGULAR_EXPRESSION = "matchesRegularExpression"
    IS_EMAIL = "isEmail"
    IS_URL = "isUrl"
    CONFIRM_EMAIL = "confirmEmail"


@dataclass(frozen=True)
class RuleCheck:
    """
    A single rule to evaluate, with its already-coerced argument.

    Attributes:
        rule: Which rule to run
        argument: Argument typed for that rule (bool, int, compiled pattern, selector...)
    """

    rule: RuleName
    argument: Any = None


class ValidationReport(BaseModel):
    """Detailed outcome of validating one input value."""

    failed_rules: list[RuleName] = Field(default_factory=list)
    skipped_rules: list[str] = Field(default_factory=list)
    checked_rules: int = 0

    @property
    def is_valid(self) -> bool:
        return not self.failed_rules

    def failure_names(self) -> list[str]:
        """Failed rule names as plain option-name strings, in evaluation order."""
        return [rule.value for rule in self.failed_rules]
