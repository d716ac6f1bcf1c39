"""Environment variable settings source."""

import os
from typing import Mapping, Optional

from src.application.ports import SettingsSource

DEFAULT_PREFIX = "FORMWRIGHT_"


class EnvironmentSettings(SettingsSource):
    """
    Reads configuration from environment variables.

    A prefixed variable (``FORMWRIGHT_LOG_LEVEL``) takes precedence over the
    bare name (``LOG_LEVEL``).
    """

    def __init__(self, prefix: str = DEFAULT_PREFIX, environ: Optional[Mapping[str, str]] = None):
        self._prefix = prefix
        self._environ = os.environ if environ is None else environ

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        if self._prefix:
            prefixed = self._environ.get(f"{self._prefix}{key}")
            if prefixed is not None:
                return prefixed
        return self._environ.get(key, default)
