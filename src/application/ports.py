"""Application ports (interfaces) for Formwright.

This module defines the contracts between the application layer and external
systems. Renderers, storage and settings are provided by callers through these
interfaces.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Union

from src.domain.forms import Form


class FormRenderer(ABC):
    """Port for drawing an annotated form snapshot."""

    @abstractmethod
    def render(self, form: Form) -> None:
        """
        Display a form.

        Args:
            form: Snapshot annotated with ``errors`` and ``visible`` per field
        """
        pass


class FormRepository(ABC):
    """Port for form persistence operations."""

    @abstractmethod
    def save_design(self, form: Form) -> None:
        """
        Store a form design (design stage).

        Args:
            form: Form snapshot to store verbatim
        """
        pass

    @abstractmethod
    def save_values(self, form_name: str, values: Mapping[str, Any]) -> None:
        """
        Store the values of a completed form (completion stage).

        Args:
            form_name: Name of the completed form
            values: Mapping of field name to value
        """
        pass


class FormDefinitionParser(ABC):
    """Port for turning a definition document into a definition mapping."""

    @abstractmethod
    def parse(self, source: Union[str, Mapping[str, Any]]) -> Mapping[str, Any]:
        """
        Parse and structurally validate a form definition.

        Args:
            source: Document text or an already parsed mapping

        Returns:
            Definition mapping accepted by FormDefinitionBuilder

        Raises:
            FormDefinitionError: If the document is malformed
        """
        pass


class SettingsSource(ABC):
    """Port for configuration values."""

    @abstractmethod
    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        pass
