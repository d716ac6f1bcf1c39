"""Built-in validation and visibility rules.

Validation rules take a field value and return an error message, or None when
the value passes. Conditional rules take the read-only mapping of all field
values and return whether the field should be shown.
"""

import re
from typing import Any, Iterable, Mapping, Optional

from .value_objects import ConditionalRule, ValidationRule

EMAIL_PATTERN = re.compile(r"^[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}$", re.IGNORECASE)

INVALID_EMAIL_MESSAGE = "Not a valid email"
REQUIRED_MESSAGE = "This field is required"
TOO_SHORT_MESSAGE = "Too short!"
TOO_LONG_MESSAGE = "Too long!"


def is_email(value: Any) -> Optional[str]:
    """Reject anything that is not an email address."""
    if isinstance(value, str) and EMAIL_PATTERN.match(value):
        return None
    return INVALID_EMAIL_MESSAGE


def required(value: Any) -> Optional[str]:
    """Reject None, blank strings and False."""
    if value is None or value is False:
        return REQUIRED_MESSAGE
    if isinstance(value, str) and not value.strip():
        return REQUIRED_MESSAGE
    return None


def min_length(minimum: int, message: str = TOO_SHORT_MESSAGE) -> ValidationRule:
    """Rule failing when the value is not a string of at least ``minimum`` characters."""

    def rule(value: Any) -> Optional[str]:
        if not isinstance(value, str) or len(value) < minimum:
            return message
        return None

    rule.__name__ = f"min_length_{minimum}"
    return rule


def max_length(maximum: int, message: str = TOO_LONG_MESSAGE) -> ValidationRule:
    """Rule failing when a string value has more than ``maximum`` characters."""

    def rule(value: Any) -> Optional[str]:
        if isinstance(value, str) and len(value) > maximum:
            return message
        return None

    rule.__name__ = f"max_length_{maximum}"
    return rule


def matches(pattern: str, message: str) -> ValidationRule:
    """Rule failing when the value does not fully match ``pattern``."""
    compiled = re.compile(pattern)

    def rule(value: Any) -> Optional[str]:
        if isinstance(value, str) and compiled.fullmatch(value):
            return None
        return message

    return rule


def field_equals(field_name: str, expected: Any) -> ConditionalRule:
    """Show the field when ``field_name`` holds exactly ``expected``."""

    def rule(values: Mapping[str, Any]) -> bool:
        return field_name in values and values[field_name] == expected

    return rule


def field_in(field_name: str, choices: Iterable[Any]) -> ConditionalRule:
    """Show the field when ``field_name`` holds one of ``choices``."""
    allowed = tuple(choices)

    def rule(values: Mapping[str, Any]) -> bool:
        return values.get(field_name) in allowed

    return rule


def field_filled(field_name: str) -> ConditionalRule:
    """Show the field once ``field_name`` has a non-blank value."""

    def rule(values: Mapping[str, Any]) -> bool:
        return required(values.get(field_name)) is None

    return rule
