"""
Input validation functions for SalesAnalyst parameters.

All validators raise ValidationError on invalid input.
"""

import calendar
from datetime import date, datetime
from typing import Any

from sales_engine.exceptions import ValidationError
from sales_engine.models import InvoiceStatus


# English month names, index 1..12
MONTH_NAMES = {name.lower(): index for index, name in enumerate(calendar.month_name) if name}

DATE_FORMAT = "%Y-%m-%d"


def validate_date_string(value: str, field: str = "date") -> date:
    """
    Validate and parse a YYYY-MM-DD date string.

    Args:
        value: Date string to validate
        field: Field name for error messages

    Returns:
        Parsed date object

    Raises:
        ValidationError: If date is invalid or in wrong format
    """
    if not value:
        raise ValidationError(field, "Date is required", value)

    if not isinstance(value, str):
        raise ValidationError(field, "Must be a string", value)

    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise ValidationError(field, "Invalid date format. Expected YYYY-MM-DD", value)


def validate_date(value: Any, field: str = "date") -> date:
    """
    Validate a calendar date given as date, datetime or YYYY-MM-DD string.

    A datetime is reduced to its date component.

    Raises:
        ValidationError: If value cannot be read as a date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return validate_date_string(value, field)


def validate_invoice_status(value: Any, field: str = "status") -> InvoiceStatus:
    """
    Validate an invoice status.

    Args:
        value: InvoiceStatus member or status string (case-insensitive)
        field: Field name for error messages

    Returns:
        InvoiceStatus member

    Raises:
        ValidationError: If status is not pending, shipped or returned
    """
    if isinstance(value, InvoiceStatus):
        return value

    if not isinstance(value, str) or not value.strip():
        raise ValidationError(field, "Must be a non-empty string", value)

    try:
        return InvoiceStatus.parse(value)
    except ValueError:
        raise ValidationError(
            field,
            f"Must be one of: {', '.join(InvoiceStatus.values())}",
            value
        )


def validate_month_name(value: Any, field: str = "month") -> int:
    """
    Validate an English month name.

    Args:
        value: Month name, e.g. "March" (case-insensitive)
        field: Field name for error messages

    Returns:
        Month number (1-12)

    Raises:
        ValidationError: If the name is not a month
    """
    if not isinstance(value, str):
        raise ValidationError(field, "Must be a string", value)

    month = MONTH_NAMES.get(value.strip().lower())
    if month is None:
        raise ValidationError(field, "Must be an English month name", value)

    return month


def validate_limit(
    value: int,
    field: str = "limit",
    min_value: int = 0,
) -> int:
    """
    Validate a limit/count parameter.

    Args:
        value: Limit value to validate
        field: Field name for error messages
        min_value: Minimum allowed value

    Returns:
        Validated limit

    Raises:
        ValidationError: If limit is not an integer or below min_value
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(field, "Must be an integer", value)

    if value < min_value:
        raise ValidationError(
            field,
            f"Must be at least {min_value}",
            value
        )

    return value
