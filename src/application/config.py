"""Application configuration for Formwright."""

from enum import Enum

from src.application.errors import ConfigurationError
from src.application.ports import SettingsSource

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Environment(Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TEST = "test"


class Config:
    """Application configuration read from a settings source."""

    def __init__(self, settings: SettingsSource):
        """Initialize configuration with a settings source."""
        self.settings = settings
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from the settings source."""
        environment = (self.settings.get("ENVIRONMENT", "development") or "").lower()
        try:
            self.ENVIRONMENT = Environment(environment)
        except ValueError:
            raise ConfigurationError("ENVIRONMENT", f"unknown environment {environment!r}") from None

        # Logging
        self.LOG_LEVEL = (self.settings.get("LOG_LEVEL", "INFO") or "").upper()
        if self.LOG_LEVEL not in _LOG_LEVELS:
            raise ConfigurationError("LOG_LEVEL", f"unknown level {self.LOG_LEVEL!r}")
        self.JSON_LOGS = self._get_bool(
            "JSON_LOGS", default=self.ENVIRONMENT != Environment.DEVELOPMENT
        )

        # Field addressing: strict mode rejects values for unknown fields
        self.STRICT_FIELD_ADDRESSING = self._get_bool("STRICT_FIELD_ADDRESSING", default=False)

    def _get_bool(self, key: str, default: bool) -> bool:
        raw = self.settings.get(key)
        if raw is None or raw == "":
            return default
        normalized = raw.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
        raise ConfigurationError(key, f"expected a boolean, got {raw!r}")

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == Environment.PRODUCTION
