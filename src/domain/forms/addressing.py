"""Update-by-name addressing for form fields.

Reads return ``None`` for a name the form does not contain. Writes replace the
first field with that name in place; a write to a missing name appends a new
record at the tail instead of failing.
"""

import logging
from dataclasses import replace
from typing import Any, Callable, Optional, Sequence

from .value_objects import Field, Form

logger = logging.getLogger(__name__)

FieldTransform = Callable[[Field], Field]


def find_field_index(fields: Sequence[Field], field_name: str) -> int:
    """Index of the first field named ``field_name``, or -1."""
    for index, candidate in enumerate(fields):
        if candidate.name == field_name:
            return index
    return -1


def find_field(form: Form, field_name: str) -> Optional[Field]:
    """Return the named field, or None when the form has no such field."""
    index = find_field_index(form.fields, field_name)
    if index < 0:
        return None
    return form.fields[index]


def update_field(form: Form, field_name: str, transform: FieldTransform) -> Form:
    """
    Replace the named field with ``transform(field)``.

    Args:
        form: Snapshot to update
        field_name: Name of the field to address
        transform: Pure function building the replacement field

    Returns:
        New Form; field order and all other fields are preserved. When no field
        matches, ``transform`` is applied to an untyped record carrying
        ``field_name`` and the result is appended.
    """
    fields = form.fields
    index = find_field_index(fields, field_name)

    if index < 0:
        logger.warning(
            f"Field {field_name!r} not found in form {form.name!r}, appended at position {len(fields)}"
        )
        appended = transform(Field(name=field_name, type=None))
        return replace(form, fields=fields + (appended,))

    updated = transform(fields[index])
    return replace(form, fields=fields[:index] + (updated,) + fields[index + 1:])


def set_field_attribute(form: Form, field_name: str, attribute: str, value: Any) -> Form:
    """Write one attribute of the named field."""
    return update_field(form, field_name, lambda f: replace(f, **{attribute: value}))
