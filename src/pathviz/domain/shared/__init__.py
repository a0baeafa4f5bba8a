"""Shared domain components.

This module exports shared exceptions and formatting helpers
used across domain boundaries.
"""

from pathviz.domain.shared.exceptions import (
    BusinessRuleViolation,
    DataContractError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from pathviz.domain.shared.formatting import (
    beautify_value,
    format_number,
    round_significant,
    sanitize_html_unit,
)

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "BusinessRuleViolation",
    "EntityNotFoundError",
    "DataContractError",
    # Formatting
    "beautify_value",
    "format_number",
    "round_significant",
    "sanitize_html_unit",
]
