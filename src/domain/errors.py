"""Domain errors for Formwright."""

from typing import Optional


class DomainError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize domain error.

        Args:
            message: Error message (must not contain filled-in values)
        """
        super().__init__(message)
        self.message = message


class InvalidFieldTypeError(DomainError):
    """Raised when a field is added with an unknown field type."""

    def __init__(self, field_type: str) -> None:
        message = f"Unknown field type {field_type!r}"
        super().__init__(message)
        self.field_type = field_type


class DuplicateFieldError(DomainError):
    """Raised when a field name is already taken in the form."""

    def __init__(self, field_name: str) -> None:
        """
        Initialize duplicate field error.

        Args:
            field_name: Name that is already present in the form
        """
        message = f"Field {field_name!r} already exists"
        super().__init__(message)
        self.field_name = field_name


class FormDefinitionError(DomainError):
    """Raised when a declarative form definition cannot be loaded."""

    def __init__(self, message: str, field_name: Optional[str] = None) -> None:
        if field_name:
            message = f"{field_name}: {message}"
        super().__init__(message)
        self.field_name = field_name
