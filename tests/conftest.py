"""Test configuration and shared fixtures."""

from functools import partial

import pytest

from src.domain.forms import (
    Form,
    add_conditional_rule,
    add_field,
    add_validation_rule,
    field_equals,
    is_email,
    new_form,
    pipe,
    set_default_visibility,
    set_name,
)
from tests.fakes import FakeFormRepository, FakeRenderer, FakeSettings


@pytest.fixture
def empty_form() -> Form:
    """Form with no name and no fields."""
    return new_form()


@pytest.fixture
def contact_form() -> Form:
    """Form with a name field and a validated email field."""
    return pipe(
        new_form(),
        partial(set_name, "Contact"),
        partial(add_field, "text", "given_name"),
        partial(add_field, "text", "email"),
        partial(add_validation_rule, "email", is_email),
    )


@pytest.fixture
def colour_form() -> Form:
    """Form whose second field is only shown when the colour is pink."""
    return pipe(
        new_form(),
        partial(set_name, "Colours"),
        partial(add_field, "text", "favourite_colour"),
        partial(add_field, "text", "favourite_shade_of_pink"),
        partial(set_default_visibility, "favourite_shade_of_pink", False),
        partial(
            add_conditional_rule,
            "favourite_shade_of_pink",
            field_equals("favourite_colour", "pink"),
        ),
    )


@pytest.fixture
def form_repository() -> FakeFormRepository:
    return FakeFormRepository()


@pytest.fixture
def renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture
def settings() -> FakeSettings:
    """Settings for the test environment."""
    return FakeSettings({"ENVIRONMENT": "test", "LOG_LEVEL": "DEBUG"})
