"""
Example logging configuration for Formwright (for local demos).

This file is not used by the application/tests; it demonstrates how to initialize
the logging system manually.
"""

import os

from src.shared.logging import configure_logging, form_context, get_logger


def setup_logging():
    """
    Configure Formwright logging.

    This should be called at application startup.
    """
    environment = os.getenv("ENVIRONMENT", "development")
    log_level = os.getenv("LOG_LEVEL", "INFO")

    # Use JSON logs in production, readable format in development
    json_logs = environment in ["production", "staging"]

    # Include caller info only in development for debugging
    include_caller = environment == "development"

    configure_logging(
        environment=environment,
        log_level=log_level,
        json_logs=json_logs,
        include_caller_info=include_caller,
    )

    print(f"Logging configured for {environment} environment")
    print(f"   - Log level: {log_level}")
    print(f"   - Format: {'JSON' if json_logs else 'Key-Value'}")
    print("   - Form value masking: ACTIVE")


if __name__ == "__main__":
    setup_logging()

    logger = get_logger("example")
    logger.info("application_started", version="1.0.0")

    # Values are summarized, contact data partially masked
    with form_context("Contact"):
        logger.info(
            "form_values_received",
            values={"given_name": "Max", "email": "max@example.com"},
            email="max@example.com",
        )
