"""
Application bootstrap and dependency injection configuration.
This is the composition root where all dependencies are wired together.
"""

from typing import Mapping, Optional

from src.application.config import Config
from src.application.ports import FormRenderer, FormRepository, SettingsSource
from src.application.use_cases.complete_form import CompleteFormUseCase
from src.application.use_cases.publish_form import PublishFormUseCase
from src.domain.forms import ValidationRule
from src.infrastructure.definitions import YamlFormDefinitionParser
from src.infrastructure.settings import EnvironmentSettings
from src.shared.logging import configure_logging


def bootstrap_config(settings: Optional[SettingsSource] = None) -> Config:
    """
    Bootstrap application configuration and logging.

    Args:
        settings: Settings source, environment variables when omitted

    Returns:
        Configured Config instance
    """
    config = Config(settings or EnvironmentSettings())
    configure_logging(
        environment=config.ENVIRONMENT.value,
        log_level=config.LOG_LEVEL,
        json_logs=config.JSON_LOGS,
        include_caller_info=not config.is_production,
    )
    return config


def build_complete_form_use_case(
    form_repository: FormRepository,
    renderer: Optional[FormRenderer] = None,
    config: Optional[Config] = None,
) -> CompleteFormUseCase:
    """Wire the completion use case with the bootstrapped configuration."""
    return CompleteFormUseCase(
        form_repository=form_repository,
        renderer=renderer,
        config=config or bootstrap_config(),
    )


def build_publish_form_use_case(
    form_repository: FormRepository,
    custom_rules: Optional[Mapping[str, ValidationRule]] = None,
) -> PublishFormUseCase:
    """Wire the publication use case with the YAML parser."""
    return PublishFormUseCase(
        form_repository=form_repository,
        parser=YamlFormDefinitionParser(),
        custom_rules=custom_rules,
    )
