"""Build Forms from declarative definitions.

A definition is a plain mapping (usually parsed from YAML by the
infrastructure layer)::

    name: Contact
    fields:
      - name: email
        type: text
        validation:
          - required
          - email
          - {rule: max_length, max: 120}
      - name: favourite_colour
        type: select
        options: [red, green, pink]
      - name: favourite_shade_of_pink
        type: text
        default_visibility: false
        visible_when:
          - {field: favourite_colour, equals: pink}

Declarative rule entries are compiled into the same callables the builder
operations accept, so a loaded form behaves exactly like a hand-built one.
"""

import logging
import re
from typing import Any, Callable, Dict, List, Mapping, Optional

from src.domain.errors import DomainError, FormDefinitionError
from . import rules
from .operations import (
    add_conditional_rule,
    add_field,
    add_validation_rule,
    new_form,
    set_default_visibility,
    set_field_options,
    set_name,
    set_value,
)
from .value_objects import ConditionalRule, Form, ValidationRule

logger = logging.getLogger(__name__)

RuleFactory = Callable[[Mapping[str, Any]], ValidationRule]

VALIDATION_RULE_KINDS: Dict[str, RuleFactory] = {
    "email": lambda entry: rules.is_email,
    "required": lambda entry: rules.required,
    "min_length": lambda entry: rules.min_length(
        int(entry["min"]), entry.get("message", rules.TOO_SHORT_MESSAGE)
    ),
    "max_length": lambda entry: rules.max_length(
        int(entry["max"]), entry.get("message", rules.TOO_LONG_MESSAGE)
    ),
    "pattern": lambda entry: rules.matches(entry["pattern"], entry["message"]),
}

CONDITION_KINDS = ("equals", "in", "filled")


class FormDefinitionBuilder:
    """
    Compiles declarative definitions into Form snapshots.

    Custom validation rules are referenced by identifier
    (``{rule: custom, name: postcode}``) and resolved from the registry given
    at construction time.
    """

    def __init__(self, custom_rules: Optional[Mapping[str, ValidationRule]] = None):
        self._custom_rules: Dict[str, ValidationRule] = dict(custom_rules or {})

    def build(self, definition: Mapping[str, Any]) -> Form:
        """
        Build a Form from a definition mapping.

        Args:
            definition: Mapping with ``name`` and ``fields`` keys

        Returns:
            Form with fields in document order

        Raises:
            FormDefinitionError: If the definition cannot be compiled
        """
        if not isinstance(definition, Mapping):
            raise FormDefinitionError("Definition must be a mapping")

        form = set_name(str(definition.get("name", "")), new_form())
        for entry in definition.get("fields") or []:
            form = self._build_field(entry, form)

        logger.info(f"Form {form.name!r} built from definition with {len(form.fields)} fields")
        return form

    def _build_field(self, entry: Mapping[str, Any], form: Form) -> Form:
        field_name = entry.get("name")
        if not field_name:
            raise FormDefinitionError("Field entry without a name")

        try:
            form = add_field(entry.get("type", "text"), field_name, form)
        except DomainError as e:
            raise FormDefinitionError(e.message, field_name=field_name) from e

        if "options" in entry:
            form = set_field_options(field_name, entry["options"], form)
        if "default_visibility" in entry:
            form = set_default_visibility(field_name, bool(entry["default_visibility"]), form)
        if "value" in entry:
            form = set_value(field_name, entry["value"], form)

        for rule_entry in entry.get("validation", []):
            form = add_validation_rule(
                field_name, self._compile_validation(rule_entry, field_name), form
            )
        for condition in entry.get("visible_when", []):
            form = add_conditional_rule(
                field_name, self._compile_condition(condition, field_name), form
            )
        return form

    def _compile_validation(self, entry: Any, field_name: str) -> ValidationRule:
        # Parameterless rules may be written as a bare string
        if isinstance(entry, str):
            entry = {"rule": entry}

        kind = entry.get("rule")
        if kind == "custom":
            rule_name = entry.get("name")
            if rule_name not in self._custom_rules:
                raise FormDefinitionError(f"Unknown custom rule {rule_name!r}", field_name=field_name)
            return self._custom_rules[rule_name]

        factory = VALIDATION_RULE_KINDS.get(kind)
        if factory is None:
            raise FormDefinitionError(f"Unknown validation rule {kind!r}", field_name=field_name)
        try:
            return factory(entry)
        except (KeyError, TypeError, ValueError, re.error) as e:
            raise FormDefinitionError(
                f"Invalid parameters for rule {kind!r}", field_name=field_name
            ) from e

    def _compile_condition(self, entry: Mapping[str, Any], field_name: str) -> ConditionalRule:
        source = entry.get("field")
        kinds: List[str] = [kind for kind in CONDITION_KINDS if kind in entry]
        if not source or len(kinds) != 1:
            raise FormDefinitionError(
                "Condition needs a 'field' and exactly one of equals/in/filled",
                field_name=field_name,
            )

        kind = kinds[0]
        if kind == "equals":
            return rules.field_equals(source, entry["equals"])
        if kind == "in":
            return rules.field_in(source, entry["in"])
        return rules.field_filled(source)
