"""
Reusable field validators.

Each validator returns the value unchanged when it is valid and raises
ValidationError naming the field otherwise.
"""

from typing import Any, Optional
from datetime import datetime, date

from shared.constants import DATE_FORMAT
from shared.exceptions import ValidationError


# =================== TEXT VALIDATION ===================

def validate_required_text(value: Any, field_name: str) -> str:
    """
    Require a string that is not empty or whitespace-only.

    Args:
        value: Value to validate
        field_name: Name reported in the error

    Returns:
        The value exactly as supplied (no trimming)

    Raises:
        ValidationError: If value is not a string or is blank
    """
    if not isinstance(value, str):
        raise ValidationError(field_name, f"{field_name} must be a string", value)

    if not value.strip():
        raise ValidationError(
            field_name, f"{field_name} cannot be empty or whitespace"
        )

    return value


# =================== NUMERIC VALIDATION ===================

def validate_non_negative_int(value: Any, field_name: str) -> int:
    """
    Require an integer >= 0. Booleans are rejected.

    Raises:
        ValidationError: If value is not an int or is negative
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(field_name, f"{field_name} must be an integer", value)

    if value < 0:
        raise ValidationError(field_name, f"{field_name} cannot be negative", value)

    return value


def validate_identity(value: Any, field_name: str = "id") -> Optional[int]:
    """Require None (not yet persisted) or a positive integer."""
    if value is None:
        return None

    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(field_name, f"{field_name} must be an integer", value)

    if value <= 0:
        raise ValidationError(field_name, f"{field_name} must be positive", value)

    return value


# =================== DATE VALIDATION ===================

def coerce_date(value: Any, field_name: str) -> date:
    """Convert date, datetime or ISO date string to a date."""
    # datetime is a subclass of date, check it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValidationError(field_name, f"{field_name} cannot be empty")
        try:
            return datetime.strptime(text, DATE_FORMAT).date()
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text.replace('Z', '+00:00')).date()
        except ValueError:
            raise ValidationError(
                field_name, f"Invalid {field_name} date format", value
            )

    raise ValidationError(
        field_name, f"{field_name} must be date, datetime, or string", value
    )


def validate_not_future(
    value: Any,
    field_name: str,
    today: Optional[date] = None
) -> date:
    """
    Require a calendar date no later than today.

    Args:
        value: date, datetime or ISO string
        field_name: Name reported in the error
        today: Reference date, defaults to date.today()

    Raises:
        ValidationError: If the date is after today
    """
    parsed = coerce_date(value, field_name)
    reference = today or date.today()

    if parsed > reference:
        raise ValidationError(
            field_name,
            f"{field_name} cannot be in the future",
            parsed.isoformat(),
            details={"today": reference.isoformat()}
        )

    return parsed
