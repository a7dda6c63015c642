"""
Validation utilities for services.
"""
from services.validators.field_validator import (
    validate_date,
    validate_email,
    validate_integer,
    validate_non_negative,
    validate_not_future,
    validate_positive,
    validate_required_text,
    validate_text,
)

__all__ = [
    "validate_date",
    "validate_email",
    "validate_integer",
    "validate_non_negative",
    "validate_not_future",
    "validate_positive",
    "validate_required_text",
    "validate_text",
]
