"""Tests for the visibility pass."""

from functools import partial

import pytest

from src.domain.forms import (
    add_conditional_rule,
    add_field,
    check_visibility,
    new_form,
    pipe,
    set_value,
)


class TestCheckVisibility:
    """Test conditional field visibility."""

    def test_apply_conditional_visibility(self, colour_form):
        form = pipe(
            colour_form,
            partial(set_value, "favourite_colour", "green"),
            check_visibility,
        )
        assert form.fields[1].visible is False

        updated = pipe(
            form,
            partial(set_value, "favourite_colour", "pink"),
            check_visibility,
        )
        assert updated.fields[1].visible is True

    def test_field_without_rules_is_visible(self, colour_form):
        form = check_visibility(colour_form)
        assert form.fields[0].visible is True

    def test_default_visibility_does_not_override_rules(self, colour_form):
        form = check_visibility(set_value("favourite_colour", "pink", colour_form))

        assert form.fields[1].default_visibility is False
        assert form.fields[1].visible is True

    def test_rules_are_or_combined(self):
        form = pipe(
            new_form(),
            partial(add_field, "text", "trigger"),
            partial(add_field, "text", "target"),
            partial(add_conditional_rule, "target", lambda values: values["trigger"] == "a"),
            partial(add_conditional_rule, "target", lambda values: values["trigger"] == "b"),
        )

        shown = [
            check_visibility(set_value("trigger", value, form)).fields[1].visible
            for value in ("a", "b", "c")
        ]

        assert shown == [True, True, False]

    def test_rules_see_all_values(self):
        seen = []
        form = pipe(
            new_form(),
            partial(add_field, "text", "given_name"),
            partial(set_value, "given_name", "Max"),
            partial(add_field, "boolean", "subscribe"),
            partial(set_value, "subscribe", True),
            partial(add_conditional_rule, "subscribe", lambda values: seen.append(dict(values)) or True),
        )

        check_visibility(form)

        assert seen == [{"given_name": "Max", "subscribe": True}]

    def test_rules_cannot_mutate_shared_values(self):
        def mutating(values):
            values["trigger"] = "changed"
            return True

        form = pipe(
            new_form(),
            partial(add_field, "text", "trigger"),
            partial(add_conditional_rule, "trigger", mutating),
        )

        with pytest.raises(TypeError):
            check_visibility(form)

    def test_is_idempotent(self, colour_form):
        once = check_visibility(set_value("favourite_colour", "green", colour_form))
        twice = check_visibility(once)

        assert [f.visible for f in twice.fields] == [f.visible for f in once.fields] == [True, False]

    def test_stale_until_rechecked(self, colour_form):
        checked = check_visibility(set_value("favourite_colour", "green", colour_form))
        changed = set_value("favourite_colour", "pink", checked)

        # No reactive recomputation: visibility only changes on the next pass
        assert changed.fields[1].visible is False
        assert check_visibility(changed).fields[1].visible is True


class TestIsShown:
    """Test effective visibility used by renderers."""

    def test_uses_default_visibility_before_first_pass(self, colour_form):
        assert colour_form.fields[0].is_shown is True
        assert colour_form.fields[1].is_shown is False

    def test_uses_computed_visibility_after_pass(self, colour_form):
        form = check_visibility(set_value("favourite_colour", "pink", colour_form))
        assert form.fields[1].is_shown is True
