"""Forms domain module.

Immutable form snapshots, update-by-name operations and the validation and
visibility passes.
"""

from .value_objects import (
    ConditionalRule,
    Field,
    FieldType,
    Form,
    ValidationRule,
)
from .addressing import find_field, find_field_index, update_field
from .operations import (
    add_conditional_rule,
    add_field,
    add_validation_rule,
    get_name,
    get_value,
    get_values,
    new_form,
    set_default_visibility,
    set_field_options,
    set_name,
    set_value,
)
from .evaluation import check_visibility, collect_errors, is_valid, validate
from .pipeline import compose, pipe
from .rules import (
    field_equals,
    field_filled,
    field_in,
    is_email,
    matches,
    max_length,
    min_length,
    required,
)
from .definitions import FormDefinitionBuilder

__all__ = [
    # Value objects
    "Form",
    "Field",
    "FieldType",
    "ValidationRule",
    "ConditionalRule",
    # Addressing
    "find_field",
    "find_field_index",
    "update_field",
    # Builder operations
    "new_form",
    "set_name",
    "get_name",
    "add_field",
    "set_field_options",
    "set_default_visibility",
    "add_validation_rule",
    "add_conditional_rule",
    # Filler operations
    "set_value",
    "get_value",
    "get_values",
    # Passes
    "validate",
    "check_visibility",
    "collect_errors",
    "is_valid",
    # Composition
    "pipe",
    "compose",
    # Rules
    "is_email",
    "required",
    "min_length",
    "max_length",
    "matches",
    "field_equals",
    "field_in",
    "field_filled",
    # Definitions
    "FormDefinitionBuilder",
]
