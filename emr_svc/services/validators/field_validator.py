"""
Field-level validation for entity writes.

Each validator raises ValidationError naming the field and the rule it broke.
Services call these before touching a repository, so a rejected entity never
reaches storage.
"""
import math
from datetime import date, datetime
from numbers import Real
from typing import Any, Optional

from core.exceptions import ValidationError

# SQLite INTEGER range
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def validate_required_text(value: Any, field: str) -> str:
    """
    Validate that a required string is present and not blank.

    Args:
        value: The value to check.
        field: Field name reported in the error.

    Returns:
        str: The value, unchanged.

    Raises:
        ValidationError: If the value is not a string or is empty after trimming.
    """
    if not isinstance(value, str):
        raise ValidationError(field, "must be text")
    if not value.strip():
        raise ValidationError(field, "must not be empty")
    return value


def _require_number(value: Any, field: str) -> Real:
    # bool is an int subclass; True is not a duration
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(field, "must be a number")
    if not math.isfinite(value):
        raise ValidationError(field, "must be a finite number")
    return value


def validate_non_negative(value: Any, field: str) -> Real:
    """
    Validate that a number is zero or greater.

    Raises:
        ValidationError: If the value is not a number or is negative.
    """
    _require_number(value, field)
    if value < 0:
        raise ValidationError(field, "must not be negative")
    return value


def validate_positive(value: Any, field: str) -> Real:
    """
    Validate that a number is strictly greater than zero.

    Raises:
        ValidationError: If the value is not a number or is zero or negative.
    """
    _require_number(value, field)
    if value <= 0:
        raise ValidationError(field, "must be positive")
    return value


def validate_date(value: Any, field: str) -> date:
    """
    Validate that a value is a calendar date.

    Raises:
        ValidationError: If the value is not a date.
    """
    # datetime is a date subclass but carries a time we would silently drop
    if isinstance(value, datetime) or not isinstance(value, date):
        raise ValidationError(field, "must be a date")
    return value


def validate_not_future(value: date, field: str, today: Optional[date] = None) -> date:
    """
    Validate that a date is not after today.

    Args:
        value: The date to check (already validated with validate_date).
        field: Field name reported in the error.
        today: Reference date, defaults to date.today().
    """
    today = today or date.today()
    if value > today:
        raise ValidationError(field, "must not be in the future")
    return value


def validate_email(value: Any, field: str = "email") -> str:
    """
    Validate that an email address is present and looks like local@domain.

    Raises:
        ValidationError: If the value is blank or has no '@' between two parts.
    """
    validate_required_text(value, field)
    local, sep, domain = value.strip().partition("@")
    if not sep or not local or not domain:
        raise ValidationError(field, "must be an email address")
    return value


def validate_integer(value: Any, field: str) -> int:
    """
    Validate that a value is a whole number.

    Raises:
        ValidationError: If the value is not an int (bools are rejected) or
            does not fit a 64-bit INTEGER column.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(field, "must be a whole number")
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValidationError(field, "is too large to store")
    return value


def validate_text(value: Any, field: str) -> str:
    """
    Validate that a value is a string. Empty text is allowed.

    Raises:
        ValidationError: If the value is not a string.
    """
    if not isinstance(value, str):
        raise ValidationError(field, "must be text")
    return value
