"""Application layer errors for Formwright."""


class ApplicationError(Exception):
    """Base exception for all application layer errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize application error.

        Args:
            message: Error message (must not contain filled-in values)
        """
        super().__init__(message)
        self.message = message


class UnknownFieldError(ApplicationError):
    """Raised in strict addressing mode when a value targets a missing field."""

    def __init__(self, form_name: str, field_name: str) -> None:
        """
        Initialize unknown field error.

        Args:
            form_name: Name of the form being completed
            field_name: Field name that does not exist in the form
        """
        message = f"Form {form_name!r} has no field {field_name!r}"
        super().__init__(message)
        self.form_name = form_name
        self.field_name = field_name


class ConfigurationError(ApplicationError):
    """Raised when a configuration value is invalid."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(f"{key}: {message}")
        self.key = key
