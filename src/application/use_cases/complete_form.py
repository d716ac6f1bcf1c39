"""Complete form use case for Formwright."""

import time
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from src.application.config import Config
from src.application.errors import UnknownFieldError
from src.application.ports import FormRenderer, FormRepository
from src.domain.forms import (
    Form,
    check_visibility,
    find_field,
    get_values,
    set_value,
    validate,
)
from src.shared.logging import form_context, get_logger


@dataclass(frozen=True)
class CompleteFormRequest:
    """Request DTO carrying the form and the values typed by the filler."""
    form: Form
    values: Mapping[str, Any] = field(default_factory=dict)
    correlation_id: Optional[str] = None


@dataclass(frozen=True)
class CompleteFormResponse:
    """Response DTO for form completion."""
    form: Form
    errors: Dict[str, Tuple[str, ...]]
    completed: bool

    @classmethod
    def from_form(cls, form: Form) -> "CompleteFormResponse":
        """
        Build the response from a validated, visibility-checked snapshot.

        Hidden fields do not block completion.
        """
        errors = {f.name: f.errors for f in form.fields if f.errors and f.is_shown}
        return cls(form=form, errors=errors, completed=not errors)


class CompleteFormUseCase:
    """Use case for filling in a form and storing its values once valid."""

    def __init__(
        self,
        form_repository: FormRepository,
        renderer: Optional[FormRenderer] = None,
        config: Optional[Config] = None,
    ) -> None:
        """
        Initialize use case with dependencies.

        Args:
            form_repository: Repository receiving completed values
            renderer: Optional renderer receiving every annotated snapshot
            config: Application configuration (lenient addressing when omitted)
        """
        self._form_repository = form_repository
        self._renderer = renderer
        self._strict = bool(config and config.STRICT_FIELD_ADDRESSING)
        self._logger = get_logger("application.complete_form")

    def execute(self, request: CompleteFormRequest) -> CompleteFormResponse:
        """
        Execute form completion.

        Values are applied in mapping order, then the validation and
        visibility passes run on the result.

        Args:
            request: Completion request

        Returns:
            Annotated snapshot, errors of shown fields and completion flag

        Raises:
            UnknownFieldError: If strict addressing is enabled and a value
                targets a field the form does not have
        """
        start_time = time.time()
        form = request.form

        with form_context(form.name, request.correlation_id):
            self._logger.info(
                "form_completion_started",
                field_count=len(form.fields),
                submitted_fields=len(request.values),
            )

            for field_name, value in request.values.items():
                if self._strict and find_field(form, field_name) is None:
                    self._logger.warning("form_completion_unknown_field", field_name=field_name)
                    raise UnknownFieldError(form.name, field_name)
                form = set_value(field_name, value, form)

            form = check_visibility(validate(form))
            response = CompleteFormResponse.from_form(form)

            if self._renderer is not None:
                self._renderer.render(form)

            duration_ms = (time.time() - start_time) * 1000
            if not response.completed:
                self._logger.warning(
                    "form_completion_rejected",
                    invalid_fields=sorted(response.errors),
                    duration_ms=duration_ms,
                )
                return response

            self._form_repository.save_values(form.name, get_values(form))
            self._logger.info("form_completion_succeeded", duration_ms=duration_ms)
            return response
