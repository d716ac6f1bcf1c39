"""Form definition parsers."""

from .yaml_parser import FORM_DEFINITION_SCHEMA, YamlFormDefinitionParser

__all__ = [
    "FORM_DEFINITION_SCHEMA",
    "YamlFormDefinitionParser",
]
