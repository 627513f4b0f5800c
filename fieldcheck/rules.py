"""
Rule registry: one predicate per supported rule name.

Every registered predicate has the shape ``(value, argument, context) -> bool``
and receives an argument already coerced by ``fieldcheck.options``. The
plain functions below the registry take natural arguments and are what
callers use to run a single rule directly.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable, Mapping, Sequence, Set
from dataclasses import dataclass
from typing import Any

from fieldcheck.constants import EMAIL_REGEX, NUMERIC_REGEX, URL_REGEX
from fieldcheck.errors import RuleArgumentError
from fieldcheck.lookup import FieldLookup
from fieldcheck.models import RuleName

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleContext:
    """
    Collaborators available to rules while one value is validated.

    Attributes:
        field_lookup: Reads sibling field values for confirmEmail (None if unavailable)
        confirm_email_selector: Selector used when confirmEmail has no argument
    """

    field_lookup: FieldLookup | None = None
    confirm_email_selector: str = "email"


Rule = Callable[[Any, Any, RuleContext], bool]


def compile_pattern(pattern: Any) -> re.Pattern[str]:
    """
    Compile a matchesRegularExpression argument.

    Raises:
        RuleArgumentError: If the pattern is not a string or does not compile
    """
    if isinstance(pattern, re.Pattern):
        return pattern
    if not isinstance(pattern, str):
        raise RuleArgumentError(
            RuleName.MATCHES_REGULAR_EXPRESSION.value,
            f"expected a pattern string, got {type(pattern).__name__}",
        )
    try:
        return re.compile(pattern)
    except re.error as e:
        raise RuleArgumentError(
            RuleName.MATCHES_REGULAR_EXPRESSION.value,
            f"invalid regular expression {pattern!r}: {e}",
        ) from e


def is_required(value: Any, validation_required: bool = True) -> bool:
    """
    Fail on a missing value: None, empty string, or an empty collection.

    Args:
        value: Input to be validated
        validation_required: False switches the rule off, so it always passes
    """
    if validation_required is False:
        return True
    if value is None or value == "":
        return False
    if isinstance(value, (Mapping, Sequence, Set)) and not isinstance(value, str) and len(value) == 0:
        return False
    return True


def is_numeric(value: Any) -> bool:
    """
    Pass iff the value parses to a finite float.

    Strings must be plain ASCII decimals: digit-group underscores,
    non-ASCII digits and spelled-out "inf"/"nan" fail.
    """
    if value is None or isinstance(value, bool):
        return False
    if isinstance(value, str) and NUMERIC_REGEX.fullmatch(value) is None:
        return False
    try:
        number = float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(number)


def has_min_length(value: Any, min_length: int | None) -> bool:
    """
    Check string length against a lower bound.

    Args:
        value: Input string to be validated
        min_length: Minimum string length (None means no bound)
    """
    if not isinstance(value, str):
        logger.warning(f"String validator cannot parse a non-string ({type(value).__name__})")
        return False
    return min_length is None or len(value) >= min_length


def has_max_length(value: Any, max_length: int | None) -> bool:
    """
    Check string length against an upper bound.

    Args:
        value: Input string to be validated
        max_length: Maximum string length (None means no bound)
    """
    if not isinstance(value, str):
        logger.warning(f"String validator cannot parse a non-string ({type(value).__name__})")
        return False
    return max_length is None or len(value) <= max_length


def matches_regular_expression(value: Any, pattern: str | re.Pattern[str]) -> bool:
    """
    Pass iff the first match of the pattern covers the entire input.

    A partial match ("abc" inside "abcd") does not pass. Non-string input
    fails closed.

    Raises:
        RuleArgumentError: If the pattern is invalid
    """
    if not isinstance(value, str):
        logger.warning(f"Regular expression validator cannot match a non-string ({type(value).__name__})")
        return False
    match = compile_pattern(pattern).search(value)
    return match is not None and match.group(0) == value


def is_email(value: Any) -> bool:
    return matches_regular_expression(value, EMAIL_REGEX)


def is_url(value: Any) -> bool:
    return matches_regular_expression(value, URL_REGEX)


def confirm_email(value: Any, selector: str, field_lookup: FieldLookup | None = None) -> bool:
    """
    Compare the input against the current value of another field.

    Fails open: when there is no lookup, the field cannot be found, or the
    lookup raises, the rule logs a warning and passes.

    Args:
        value: The string entered into the confirmation field
        selector: Selector of the original email field
        field_lookup: Collaborator that reads the original field's value
    """
    if field_lookup is None:
        logger.warning(f"No field lookup available to read {selector}. Responding with 'valid' to handle.")
        return True

    try:
        original_email = field_lookup.get_value(selector)
    except Exception as e:
        logger.warning(f"Field lookup for {selector} failed: {e}. Responding with 'valid' to handle.")
        return True

    if original_email is None:
        logger.warning(f"No original email in {selector} to compare against. Responding with 'valid' to handle.")
        return True

    return bool(value == original_email)


def _check_required(value: Any, argument: bool, context: RuleContext) -> bool:
    return is_required(value, argument)


def _check_numeric(value: Any, argument: Any, context: RuleContext) -> bool:
    return is_numeric(value)


def _check_min_length(value: Any, argument: int | None, context: RuleContext) -> bool:
    return has_min_length(value, argument)


def _check_max_length(value: Any, argument: int | None, context: RuleContext) -> bool:
    return has_max_length(value, argument)


def _check_pattern(value: Any, argument: re.Pattern[str], context: RuleContext) -> bool:
    return matches_regular_expression(value, argument)


def _check_email(value: Any, argument: Any, context: RuleContext) -> bool:
    return is_email(value)


def _check_url(value: Any, argument: Any, context: RuleContext) -> bool:
    return is_url(value)


def _check_confirm_email(value: Any, argument: str | None, context: RuleContext) -> bool:
    selector = argument if argument is not None else context.confirm_email_selector
    return confirm_email(value, selector, context.field_lookup)


RULES: dict[RuleName, Rule] = {
    RuleName.IS_REQUIRED: _check_required,
    RuleName.IS_NUMERIC: _check_numeric,
    RuleName.HAS_MIN_LENGTH: _check_min_length,
    RuleName.HAS_MAX_LENGTH: _check_max_length,
    RuleName.MATCHES_REGULAR_EXPRESSION: _check_pattern,
    RuleName.IS_EMAIL: _check_email,
    RuleName.IS_URL: _check_url,
    RuleName.CONFIRM_EMAIL: _check_confirm_email,
}


def run_rule(rule: RuleName, value: Any, argument: Any, context: RuleContext) -> bool:
    """Evaluate one registered rule."""
    return RULES[rule](value, argument, context)
