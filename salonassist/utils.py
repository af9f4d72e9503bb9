"""Shared utilities used across the salon back end."""

from datetime import date, datetime
from typing import Optional, Union

DateLike = Union[date, datetime, str]


def to_date(value: DateLike) -> date:
    """Coerce an ISO string, datetime or date into a date.

    Examples:
        >>> to_date("2026-01-10")
        datetime.date(2026, 1, 10)
        >>> to_date(datetime(2026, 1, 10, 14, 30))
        datetime.date(2026, 1, 10)
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value.strip()[:10])


def days_since(value: Optional[DateLike], today: DateLike) -> Optional[int]:
    """Whole days between ``value`` and ``today``; None when value is missing."""
    if value is None:
        return None
    return (to_date(today) - to_date(value)).days


def format_display_date(value: DateLike) -> str:
    """Format a date the way customer-facing emails show it (DD.MM.YYYY)."""
    return to_date(value).strftime("%d.%m.%Y")
