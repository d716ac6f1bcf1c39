"""
Formwright Structured Logging.

This module provides structured logging capabilities with:
- Masking of filled-in form values and contact data
- Form and correlation ID context tracking
- JSON or key-value rendering depending on environment
"""

from .factory import configure_logging, get_logger
from .sanitizers import mask_sensitive_data, sanitize_for_log, summarize_value
from .context import form_context, generate_correlation_id

__all__ = [
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "sanitize_for_log",
    "summarize_value",
    "form_context",
    "generate_correlation_id",
]
