"""
Context management for structured logging.
"""

import uuid
from contextlib import contextmanager
from typing import Iterator, Optional

import structlog


@contextmanager
def form_context(form_name: str, correlation_id: Optional[str] = None) -> Iterator[str]:
    """
    Bind form name and correlation ID to all logs emitted inside the block.

    Args:
        form_name: Name of the form being processed
        correlation_id: Correlation ID for tracing, generated when omitted

    Yields:
        The correlation ID in effect
    """
    corr_id = correlation_id or generate_correlation_id()
    with structlog.contextvars.bound_contextvars(
        correlation_id=corr_id,
        form_name=form_name,
    ):
        yield corr_id


def generate_correlation_id() -> str:
    """Generate a unique correlation ID for tracing."""
    return f"corr_{uuid.uuid4().hex[:16]}"
