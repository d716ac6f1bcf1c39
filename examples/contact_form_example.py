#!/usr/bin/env python3
"""
Example usage of the Formwright form engine.

Builds a form by hand and from a YAML definition, fills it in and runs the
validation and visibility passes.
"""

from functools import partial

from src.domain.forms import (
    FormDefinitionBuilder,
    add_conditional_rule,
    add_field,
    add_validation_rule,
    check_visibility,
    collect_errors,
    field_equals,
    get_values,
    is_email,
    new_form,
    pipe,
    set_default_visibility,
    set_field_options,
    set_name,
    set_value,
    validate,
)
from src.infrastructure.definitions import YamlFormDefinitionParser
from src.shared.logging import configure_logging

SURVEY_YAML = """
name: Survey
fields:
  - name: email
    type: text
    validation: [required, email]
  - name: favourite_colour
    type: select
    options: [red, green, pink]
  - name: favourite_shade_of_pink
    type: text
    default_visibility: false
    visible_when:
      - {field: favourite_colour, equals: pink}
"""


def print_form(form):
    """Print fields the way a renderer would read them."""
    print(f"\n== {form.name} ==")
    for field in form.fields:
        marker = "shown " if field.is_shown else "hidden"
        errors = ", ".join(field.errors or ()) or "-"
        print(f"  [{marker}] {field.name:<26} value={field.value!r:<22} errors={errors}")


def build_by_hand():
    """Design stage with builder operations."""
    return pipe(
        new_form(),
        partial(set_name, "Contact"),
        partial(add_field, "text", "email"),
        partial(add_validation_rule, "email", is_email),
        partial(add_field, "select", "favourite_colour"),
        partial(set_field_options, "favourite_colour", ["red", "green", "pink"]),
        partial(add_field, "text", "favourite_shade_of_pink"),
        partial(set_default_visibility, "favourite_shade_of_pink", False),
        partial(
            add_conditional_rule,
            "favourite_shade_of_pink",
            field_equals("favourite_colour", "pink"),
        ),
    )


def main():
    configure_logging(environment="development", log_level="WARNING", json_logs=False)

    form = build_by_hand()

    # Completion stage: each pass must be re-run after values change
    filled = pipe(
        form,
        partial(set_value, "email", "not_an_email"),
        partial(set_value, "favourite_colour", "green"),
        validate,
        check_visibility,
    )
    print_form(filled)
    print("errors:", collect_errors(filled))

    fixed = pipe(
        filled,
        partial(set_value, "email", "ben@example.com"),
        partial(set_value, "favourite_colour", "pink"),
        validate,
        check_visibility,
    )
    print_form(fixed)
    print("values:", get_values(fixed))

    definition = YamlFormDefinitionParser().parse(SURVEY_YAML)
    survey = FormDefinitionBuilder().build(definition)
    print_form(check_visibility(validate(survey)))
    print("design snapshot:", survey.to_dict())


if __name__ == "__main__":
    main()
