"""
Aggregator: evaluates a set of named rules against one input value.

Usage:
    from fieldcheck import validate

    validate("42", {"isNumeric": True, "hasMinLength": 5})
    # False
    validate("42", {"isNumeric": True, "hasMinLength": 5}, return_specifics=True)
    # ["hasMinLength"]
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from fieldcheck.constants import CONSTANTS
from fieldcheck.logging_config import TRACE
from fieldcheck.lookup import FieldLookup
from fieldcheck.models import ValidationReport
from fieldcheck.options import parse_options
from fieldcheck.rules import RuleContext, run_rule
from fieldcheck.settings import get_settings

logger = logging.getLogger(__name__)


def evaluate(
    value: Any,
    options: Mapping[Any, Any],
    *,
    field_lookup: FieldLookup | None = None,
    strict: bool | None = None,
) -> ValidationReport:
    """
    Run every rule in ``options`` against ``value`` and collect the failures.

    Rules are evaluated in mapping order and never short-circuit, so all
    failure reasons are reported in one pass.

    Args:
        value: The input to be validated
        options: Mapping of rule name to rule argument
        field_lookup: Reads sibling field values for confirmEmail
        strict: Raise on unknown rule names (defaults to settings.strict_rules)

    Returns:
        ValidationReport with failed and skipped rule names

    Raises:
        UnknownRuleError: In strict mode, for an unrecognized rule name
        RuleArgumentError: If a rule argument is invalid
    """
    checks, skipped = parse_options(options, strict=strict)
    context = RuleContext(
        field_lookup=field_lookup,
        confirm_email_selector=get_settings().confirm_email_selector,
    )

    report = ValidationReport(skipped_rules=skipped, checked_rules=len(checks))
    for check in checks:
        passed = run_rule(check.rule, value, check.argument, context)
        logger.log(TRACE, f"Rule {check.rule.value} {'passed' if passed else 'failed'}")
        if not passed:
            report.failed_rules.append(check.rule)

    if report.failed_rules:
        logger.debug(f"Validation failed: {report.failure_names()}")
    return report


def validate(
    value: Any,
    options: Mapping[Any, Any],
    return_specifics: bool = False,
    *,
    field_lookup: FieldLookup | None = None,
    strict: bool | None = None,
) -> bool | list[str]:
    """
    Validate ``value`` against the rules in ``options``.

    Args:
        value: The input to be validated
        options: Mapping of rule name to rule argument
        return_specifics: Return the failed rule names instead of False
        field_lookup: Reads sibling field values for confirmEmail
        strict: Raise on unknown rule names (defaults to settings.strict_rules)

    Returns:
        True if every rule passed; otherwise False, or the list of failed
        rule names when return_specifics is True
    """
    report = evaluate(value, options, field_lookup=field_lookup, strict=strict)
    if report.is_valid:
        return True
    if return_specifics is True:
        return report.failure_names()
    return False


class Validator:
    """Validator bound to a field lookup, for validating several fields of one form."""

    CONSTANTS = CONSTANTS

    def __init__(self, field_lookup: FieldLookup | None = None, strict: bool | None = None) -> None:
        self.field_lookup = field_lookup
        self.strict = strict

    def evaluate(self, value: Any, options: Mapping[Any, Any]) -> ValidationReport:
        return evaluate(value, options, field_lookup=self.field_lookup, strict=self.strict)

    def validate(self, value: Any, options: Mapping[Any, Any], return_specifics: bool = False) -> bool | list[str]:
        return validate(
            value,
            options,
            return_specifics,
            field_lookup=self.field_lookup,
            strict=self.strict,
        )
