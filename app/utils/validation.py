"""
Reusable business validation rules.

Every rule fails fast with a BusinessValidationError on the first violation.
"""
import re
from datetime import date, timedelta
from typing import Any, Optional

from app.exceptions import BusinessValidationError
from app.utils import dates

MAX_WORK_ENTRY_AGE_DAYS = 60
MAX_DAILY_HOURS = 24.0
MAX_DESCRIPTION_LENGTH = 2000
MAX_PAGE_SIZE = 100

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")
TICKET_ID_PATTERN = re.compile(r"^[A-Z]+-\d+$")


def require_non_empty(value: Optional[str], field_name: str) -> None:
    if value is None or not value.strip():
        raise BusinessValidationError(f"{field_name} cannot be null or empty")


def require_non_null(value: Any, field_name: str) -> None:
    if value is None:
        raise BusinessValidationError(f"{field_name} cannot be null")


def validate_not_future_date(d: Optional[date], field_name: str) -> None:
    require_non_null(d, field_name)
    if dates.is_future(d):
        raise BusinessValidationError(f"{field_name} cannot be in the future")


def validate_not_past_date(d: Optional[date], field_name: str) -> None:
    require_non_null(d, field_name)
    if dates.is_past(d):
        raise BusinessValidationError(f"{field_name} cannot be in the past")


def validate_range(value, field_name: str, min_value, max_value) -> None:
    require_non_null(value, field_name)
    if value < min_value or value > max_value:
        raise BusinessValidationError(
            f"{field_name} must be between {min_value} and {max_value} (current: {value})"
        )


def validate_hours_spent(hours: Optional[float]) -> None:
    require_non_null(hours, "Hours spent")
    validate_range(hours, "Hours spent", 0.0, MAX_DAILY_HOURS)
    if hours <= 0:
        raise BusinessValidationError("Hours spent must be greater than 0")


def validate_work_date(work_date: Optional[date]) -> None:
    require_non_null(work_date, "Work date")
    validate_not_future_date(work_date, "Work date")

    cutoff = dates.today() - timedelta(days=MAX_WORK_ENTRY_AGE_DAYS)
    if work_date < cutoff:
        raise BusinessValidationError(
            f"Work date cannot be older than {MAX_WORK_ENTRY_AGE_DAYS} days"
        )


def validate_email(email: Optional[str]) -> None:
    require_non_null(email, "Email")
    if not EMAIL_PATTERN.match(email):
        raise BusinessValidationError("Invalid email address")


def validate_ticket_id(ticket_id: Optional[str]) -> None:
    # Optional field
    if ticket_id is None or not ticket_id.strip():
        return
    if not TICKET_ID_PATTERN.match(ticket_id):
        raise BusinessValidationError(
            "Invalid ticket ID format. Expected format: PREFIX-NUMBER (e.g., PROJ-123)"
        )


def validate_max_length(value: Optional[str], field_name: str, max_length: int) -> None:
    if value is not None and len(value) > max_length:
        raise BusinessValidationError(
            f"{field_name} must not exceed {max_length} characters (current: {len(value)})"
        )


def validate_pagination_params(page: int, size: int) -> None:
    if page < 0:
        raise BusinessValidationError("Page number cannot be negative")
    if size <= 0:
        raise BusinessValidationError("Page size must be positive")
    if size > MAX_PAGE_SIZE:
        raise BusinessValidationError(f"Page size cannot exceed {MAX_PAGE_SIZE}")


def validate_description(description: Optional[str]) -> None:
    if description is None:
        return
    validate_max_length(description, "Description", MAX_DESCRIPTION_LENGTH)
    if not description.strip():
        raise BusinessValidationError("Description cannot be empty")


def validate_date_range(start: date, end: date) -> None:
    require_non_null(start, "Start date")
    require_non_null(end, "End date")
    if start > end:
        raise BusinessValidationError("Start date cannot be after end date")


def require_at_least_one_non_null(message: str, *values: Any) -> None:
    """Fails unless at least one of values is not None."""
    if all(v is None for v in values):
        raise BusinessValidationError(message)
