"""
Data sanitizers for logging filled-in form data.
"""

import re
from typing import Any

from structlog.types import EventDict, WrappedLogger

# Sensitive field patterns that should be masked
SENSITIVE_PATTERNS = [
    r"password",
    r"passwd",
    r"secret",
    r"token",
    r"api_key",
    r"apikey",
    r"credential",
    r"ssn",
    r"credit_card",
    r"card_number",
    r"cvv",
]

# Keys carrying values typed by a form filler
VALUE_KEYS = {"value", "values", "field_value", "field_values"}

# Fields that should be partially masked
PARTIAL_MASK_FIELDS = {"email", "phone"}


class FieldValueMaskingProcessor:
    """
    Structlog processor keeping filled-in form data out of logs.

    Secret-looking keys are redacted, contact data is partially masked and
    form values are replaced by a summary of their types.
    """

    def __call__(
        self,
        logger: WrappedLogger,
        name: str,
        event_dict: EventDict,
    ) -> EventDict:
        """Process log event and mask sensitive data."""
        return sanitize_for_log(event_dict)


def sanitize_for_log(data: dict[str, Any]) -> dict[str, Any]:
    """
    Sanitize a dictionary for logging.

    Args:
        data: Dictionary to sanitize

    Returns:
        Sanitized dictionary with masked sensitive data
    """
    sanitized = {}

    for key, value in data.items():
        if _is_sensitive_field(key):
            sanitized[key] = "***REDACTED***"
        elif key in VALUE_KEYS:
            sanitized[key] = summarize_value(value)
        elif key in PARTIAL_MASK_FIELDS:
            if value is not None:
                sanitized[key] = mask_sensitive_data(key, str(value))
            else:
                sanitized[key] = None
        # Recursively sanitize nested dictionaries
        elif isinstance(value, dict):
            sanitized[key] = sanitize_for_log(value)
        elif isinstance(value, list):
            sanitized[key] = [
                sanitize_for_log(item) if isinstance(item, dict) else item for item in value
            ]
        else:
            sanitized[key] = value

    return sanitized


def summarize_value(value: Any) -> Any:
    """
    Replace a form value (or a mapping of values) by its type names.

    Args:
        value: Single value or mapping of field name to value

    Returns:
        Type summary that is safe to log
    """
    if isinstance(value, dict):
        return {str(k): _type_label(v) for k, v in value.items()}
    return _type_label(value)


def mask_sensitive_data(data_type: str, value: str) -> str:
    """
    Mask sensitive data according to its type.

    Args:
        data_type: Type of data to mask
        value: Value to mask

    Returns:
        Masked value
    """
    if not value:
        return "***"

    maskers = {
        "email": _mask_email,
        "phone": _mask_phone,
    }

    masker = maskers.get(data_type, lambda v: "***MASKED***")
    return masker(value)


def _type_label(value: Any) -> str:
    if value is None:
        return "<none>"
    return f"<{type(value).__name__}>"


def _is_sensitive_field(field_name: str) -> bool:
    """Check if a field name indicates sensitive data."""
    field_lower = field_name.lower()
    return any(re.search(pattern, field_lower) for pattern in SENSITIVE_PATTERNS)


def _mask_email(value: str) -> str:
    """Mask email keeping domain."""
    if "@" in value:
        local, domain = value.rsplit("@", 1)
        if len(local) > 2:
            return f"{local[0]}***@{domain}"
        return f"***@{domain}"
    return "***"


def _mask_phone(value: str) -> str:
    """Mask phone number keeping the last 2 digits."""
    digits = re.sub(r"\D", "", value)
    if len(digits) > 4:
        return f"***{digits[-2:]}"
    return "***"
