"""Composition helpers for Form -> Form steps."""

from functools import reduce
from typing import Callable

from .value_objects import Form

FormStep = Callable[[Form], Form]


def pipe(form: Form, *steps: FormStep) -> Form:
    """Apply ``steps`` to ``form`` in order; each step reads the previous result."""
    return reduce(lambda current, step: step(current), steps, form)


def compose(*steps: FormStep) -> FormStep:
    """Bundle ``steps`` into a single reusable step."""

    def composed(form: Form) -> Form:
        return pipe(form, *steps)

    return composed
