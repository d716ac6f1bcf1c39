"""Publish form use case for Formwright."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple, Union

from src.application.ports import FormDefinitionParser, FormRepository
from src.domain.errors import FormDefinitionError
from src.domain.forms import Form, FormDefinitionBuilder, ValidationRule
from src.shared.logging import form_context, get_logger


@dataclass(frozen=True)
class PublishFormResponse:
    """Response DTO for a published form design."""
    form: Form
    field_names: Tuple[str, ...]

    @classmethod
    def from_form(cls, form: Form) -> "PublishFormResponse":
        return cls(form=form, field_names=form.field_names)


class PublishFormUseCase:
    """Use case for turning a definition document into a stored form design."""

    def __init__(
        self,
        form_repository: FormRepository,
        parser: FormDefinitionParser,
        custom_rules: Optional[Mapping[str, ValidationRule]] = None,
    ) -> None:
        """
        Initialize use case with dependencies.

        Args:
            form_repository: Repository receiving the design snapshot
            parser: Parser for definition documents
            custom_rules: Registry for ``{rule: custom, name: ...}`` entries
        """
        self._form_repository = form_repository
        self._parser = parser
        self._builder = FormDefinitionBuilder(custom_rules)
        self._logger = get_logger("application.publish_form")

    def execute(self, source: Union[str, Mapping[str, Any]]) -> PublishFormResponse:
        """
        Execute form publication.

        Args:
            source: Definition document text or parsed mapping

        Returns:
            Published form and its field names

        Raises:
            FormDefinitionError: If the definition is malformed
        """
        definition = self._parser.parse(source)
        form_name = str(definition.get("name", ""))

        with form_context(form_name):
            try:
                form = self._builder.build(definition)
            except FormDefinitionError as e:
                self._logger.warning(
                    "form_definition_rejected",
                    reason=e.message,
                    field_name=e.field_name,
                )
                raise

            self._form_repository.save_design(form)
            self._logger.info("form_definition_loaded", field_count=len(form.fields))
            return PublishFormResponse.from_form(form)
