"""Field lookup collaborators for rules that compare against a sibling field."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class FieldLookup(Protocol):
    """Protocol for reading the current value of another form field"""

    def get_value(self, selector: str) -> str | None:
        """Return the field's current value, or None if no such field exists"""
        ...


class MappingFieldLookup:
    """Field lookup backed by submitted form data.

    Selectors are plain field names. A leading '#' is ignored so that
    DOM-style ids ("#email") resolve against the same keys.
    """

    def __init__(self, data: Mapping[str, Any]):
        self._data = data

    def get_value(self, selector: str) -> str | None:
        key = selector[1:] if selector.startswith("#") else selector
        if key not in self._data:
            return None
        value = self._data[key]
        return None if value is None else str(value)
