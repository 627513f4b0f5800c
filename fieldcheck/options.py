"""
Option parsing: turns a ``{rule name: argument}`` mapping into typed rule checks.

Argument types are checked here, before any rule runs, so a wrongly typed
rule set is reported as a RuleArgumentError instead of surfacing as a
silently failing validation.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import NonNegativeInt, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from fieldcheck.errors import RuleArgumentError, UnknownRuleError
from fieldcheck.models import RuleCheck, RuleName
from fieldcheck.rules import compile_pattern
from fieldcheck.settings import get_settings

logger = logging.getLogger(__name__)

_PRESENCE = TypeAdapter(Any)
_LENGTH = TypeAdapter(NonNegativeInt | None)


def _required_flag(argument: Any) -> bool:
    # Only a literal False switches the rule off; None, 0 or "false" keep it on
    return argument is not False


def _selector(argument: Any) -> str | None:
    # True only switches the rule on; the configured default selector applies
    if argument is None or argument is True:
        return None
    if not isinstance(argument, str) or not argument:
        raise ValueError(f"expected a non-empty selector string, got {argument!r}")
    return argument


_COERCERS: dict[RuleName, Callable[[Any], Any]] = {
    RuleName.IS_REQUIRED: _required_flag,
    RuleName.IS_NUMERIC: _PRESENCE.validate_python,
    RuleName.HAS_MIN_LENGTH: _LENGTH.validate_python,
    RuleName.HAS_MAX_LENGTH: _LENGTH.validate_python,
    RuleName.MATCHES_REGULAR_EXPRESSION: compile_pattern,
    RuleName.IS_EMAIL: _PRESENCE.validate_python,
    RuleName.IS_URL: _PRESENCE.validate_python,
    RuleName.CONFIRM_EMAIL: _selector,
}


def resolve_rule_name(key: Any) -> RuleName | None:
    """Map an option key (string or RuleName) to a RuleName, or None if unknown."""
    try:
        return RuleName(key)
    except ValueError:
        return None


def coerce_argument(rule: RuleName, argument: Any) -> Any:
    """
    Convert a raw option argument to the type the rule expects.

    Raises:
        RuleArgumentError: If the argument has the wrong type or value
    """
    try:
        return _COERCERS[rule](argument)
    except PydanticValidationError as e:
        message = "; ".join(error["msg"] for error in e.errors())
        raise RuleArgumentError(rule.value, message) from e
    except ValueError as e:
        raise RuleArgumentError(rule.value, str(e)) from e


def parse_options(
    options: Mapping[Any, Any],
    *,
    strict: bool | None = None,
) -> tuple[list[RuleCheck], list[str]]:
    """
    Parse an options mapping into rule checks, preserving mapping order.

    Args:
        options: Mapping of rule name to rule argument
        strict: Raise on unknown rule names (defaults to settings.strict_rules)

    Returns:
        Tuple of (checks to evaluate, unknown rule names that were skipped)

    Raises:
        UnknownRuleError: In strict mode, for an unrecognized rule name
        RuleArgumentError: If any rule argument is invalid
    """
    if strict is None:
        strict = get_settings().strict_rules

    checks: list[RuleCheck] = []
    skipped: list[str] = []

    for key, argument in options.items():
        rule = resolve_rule_name(key)
        if rule is None:
            if strict:
                raise UnknownRuleError(key)
            logger.warning(f"Type: {key} not recognized")
            skipped.append(str(key))
            continue
        checks.append(RuleCheck(rule=rule, argument=coerce_argument(rule, argument)))

    logger.debug(f"Parsed {len(checks)} rule checks ({len(skipped)} skipped)")
    return checks, skipped
