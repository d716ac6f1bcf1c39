"""
YAML form definition parser with JSON Schema validation.
"""

from typing import Any, Dict, Mapping, Union

import yaml
from jsonschema import Draft7Validator

from src.application.ports import FormDefinitionParser
from src.domain.errors import FormDefinitionError
from src.shared.logging import get_logger

_VALIDATION_RULE_SCHEMA = {
    "oneOf": [
        {"type": "string", "enum": ["email", "required"]},
        {
            "type": "object",
            "required": ["rule"],
            "properties": {
                "rule": {
                    "type": "string",
                    "enum": ["email", "required", "min_length", "max_length", "pattern", "custom"],
                },
                "min": {"type": "integer", "minimum": 0},
                "max": {"type": "integer", "minimum": 0},
                "pattern": {"type": "string"},
                "message": {"type": "string"},
                "name": {"type": "string", "minLength": 1},
            },
            "additionalProperties": False,
        },
    ]
}

_CONDITION_SCHEMA = {
    "type": "object",
    "required": ["field"],
    "properties": {
        "field": {"type": "string", "minLength": 1},
        "equals": {},
        "in": {"type": "array"},
        "filled": {"const": True},
    },
    "additionalProperties": False,
}

FORM_DEFINITION_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["fields"],
    "properties": {
        "name": {"type": "string"},
        "fields": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name", "type"],
                "properties": {
                    "name": {"type": "string", "minLength": 1},
                    "type": {"type": "string", "enum": ["text", "boolean", "select"]},
                    "value": {},
                    "options": {"type": "array", "items": {"type": "string"}},
                    "default_visibility": {"type": "boolean"},
                    "validation": {"type": "array", "items": _VALIDATION_RULE_SCHEMA},
                    "visible_when": {"type": "array", "items": _CONDITION_SCHEMA},
                },
                "additionalProperties": False,
            },
        },
    },
    "additionalProperties": False,
}


class YamlFormDefinitionParser(FormDefinitionParser):
    """
    Parses YAML form definitions and validates their structure.

    Semantic checks (duplicate names, unknown custom rules) are left to the
    domain builder.
    """

    def __init__(self, schema: Mapping[str, Any] = FORM_DEFINITION_SCHEMA):
        self._validator = Draft7Validator(dict(schema))
        self._logger = get_logger("infrastructure.yaml_parser")

    def parse(self, source: Union[str, Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Parse a definition document.

        Args:
            source: YAML text or an already parsed mapping

        Returns:
            Definition mapping

        Raises:
            FormDefinitionError: If the YAML is invalid or breaks the schema
        """
        if isinstance(source, str):
            try:
                data = yaml.safe_load(source)
            except yaml.YAMLError as e:
                raise FormDefinitionError(f"Invalid YAML: {e}") from e
        else:
            data = dict(source)

        if not isinstance(data, dict):
            raise FormDefinitionError("Definition must be a mapping")

        errors = sorted(self._validator.iter_errors(data), key=lambda e: list(e.absolute_path))
        if errors:
            first = errors[0]
            location = "/".join(str(part) for part in first.absolute_path) or "<root>"
            self._logger.warning(
                "form_definition_schema_violation",
                location=location,
                error_count=len(errors),
            )
            raise FormDefinitionError(f"Schema violation at {location}: {first.message}")

        return data
