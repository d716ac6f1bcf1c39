"""Validation and visibility passes.

Both passes are pure functions of the snapshot: they return a new Form whose
fields carry freshly computed ``errors`` or ``visible`` attributes. Running a
pass twice gives the same result as running it once.
"""

import logging
from dataclasses import replace
from types import MappingProxyType
from typing import Dict, Tuple

from .operations import get_values
from .value_objects import Field, Form

logger = logging.getLogger(__name__)


def _field_errors(field: Field) -> Tuple[str, ...]:
    # Every rule runs, even after the first failure
    results = [rule(field.value) for rule in field.validation_rules]
    return tuple(message for message in results if message)


def validate(form: Form) -> Form:
    """Annotate every field with the messages of its failing validation rules."""
    fields = tuple(replace(f, errors=_field_errors(f)) for f in form.fields)
    logger.debug(
        f"Form {form.name!r} validated: {sum(1 for f in fields if f.errors)} "
        f"of {len(fields)} fields with errors"
    )
    return replace(form, fields=fields)


def check_visibility(form: Form) -> Form:
    """
    Annotate every field with its visibility for the current values.

    A field without conditional rules is always visible; otherwise it is
    visible when any of its rules returns true. All rules see the same
    read-only mapping of values, computed once per pass.
    """
    values = MappingProxyType(get_values(form))

    def visibility(field: Field) -> bool:
        if not field.conditional_rules:
            return True
        return any(rule(values) for rule in field.conditional_rules)

    fields = tuple(replace(f, visible=visibility(f)) for f in form.fields)
    logger.debug(
        f"Form {form.name!r} visibility checked: {sum(1 for f in fields if f.visible)} "
        f"of {len(fields)} fields visible"
    )
    return replace(form, fields=fields)


def collect_errors(form: Form) -> Dict[str, Tuple[str, ...]]:
    """Errors by field name for fields of a validated snapshot that have any."""
    return {f.name: f.errors for f in form.fields if f.errors}


def is_valid(form: Form) -> bool:
    """True when no field of a validated snapshot carries errors."""
    return not collect_errors(form)
