"""Validator error classes.

Raised for configuration mistakes in a rule set, never for failing user input.
"""

from __future__ import annotations


class FieldCheckError(Exception):
    """Base exception for validator errors."""

    pass


class UnknownRuleError(FieldCheckError):
    """Raised in strict mode when an options mapping names an unknown rule."""

    def __init__(self, rule_name: object):
        self.rule_name = rule_name
        super().__init__(f"Rule '{rule_name}' not recognized")


class RuleArgumentError(FieldCheckError):
    """Raised when a rule argument has the wrong type or an invalid value."""

    def __init__(self, rule_name: str, message: str):
        self.rule_name = rule_name
        super().__init__(f"Invalid argument for rule '{rule_name}': {message}")
