"""Settings sources."""

from .env_settings import DEFAULT_PREFIX, EnvironmentSettings

__all__ = [
    "DEFAULT_PREFIX",
    "EnvironmentSettings",
]
