"""Builder and filler operations over immutable Form snapshots.

Every operation takes the form as its last argument and returns a new Form,
so steps can be prepared with ``functools.partial`` and chained with
``pipe`` (see ``pipeline``).
"""

from dataclasses import replace
from typing import Any, Dict, Iterable, Optional, Union

from src.domain.errors import DuplicateFieldError
from .addressing import find_field, find_field_index, set_field_attribute, update_field
from .value_objects import ConditionalRule, Field, FieldType, Form, ValidationRule


def new_form() -> Form:
    """Empty form: no name, no fields."""
    return Form(name="", fields=())


def set_name(name: str, form: Form) -> Form:
    return replace(form, name=name)


def get_name(form: Form) -> str:
    return form.name


def add_field(field_type: Union[FieldType, str], name: str, form: Form) -> Form:
    """
    Append a minimal field record at the tail of the form.

    Args:
        field_type: FieldType member or its string value
        name: Field name, must not already exist in the form
        form: Form to extend

    Returns:
        New Form with the field appended

    Raises:
        InvalidFieldTypeError: If field_type is not a known type
        DuplicateFieldError: If a field with the same name exists
    """
    parsed_type = FieldType.parse(field_type)
    if find_field_index(form.fields, name) >= 0:
        raise DuplicateFieldError(name)
    return replace(form, fields=form.fields + (Field(name=name, type=parsed_type),))


def set_value(field_name: str, value: Any, form: Form) -> Form:
    """Set the value of the named field. No coercion against the field type."""
    return set_field_attribute(form, field_name, "value", value)


def get_value(field_name: str, form: Form) -> Optional[Any]:
    """Current value of the named field, or None when the field is absent."""
    found = find_field(form, field_name)
    if found is None:
        return None
    return found.value


def get_values(form: Form) -> Dict[str, Any]:
    """Map each field name to its current value, in field order."""
    values: Dict[str, Any] = {}
    for item in form.fields:
        values[item.name] = item.value
    return values


def set_field_options(field_name: str, options: Iterable[str], form: Form) -> Form:
    """Set the choices of the named field (meaningful for select fields)."""
    return set_field_attribute(form, field_name, "options", tuple(options))


def set_default_visibility(field_name: str, visibility: bool, form: Form) -> Form:
    return set_field_attribute(form, field_name, "default_visibility", visibility)


def add_validation_rule(field_name: str, rule: ValidationRule, form: Form) -> Form:
    """Append a validation rule; rules run in attachment order."""
    return update_field(
        form,
        field_name,
        lambda f: replace(f, validation_rules=f.validation_rules + (rule,)),
    )


def add_conditional_rule(field_name: str, rule: ConditionalRule, form: Form) -> Form:
    """Append a visibility rule; rules are OR-combined."""
    return update_field(
        form,
        field_name,
        lambda f: replace(f, conditional_rules=f.conditional_rules + (rule,)),
    )
