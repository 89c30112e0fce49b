"""Payment calendar helpers."""

import calendar
from datetime import date


def add_months(start: date, months: int) -> date:
    """Return ``start`` shifted by ``months``.

    The day is clamped to the last day of the target month (Jan 31 + 1 month
    is Feb 28 or 29).
    """
    year = start.year + (start.month - 1 + months) // 12
    month = (start.month - 1 + months) % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def days_between(start: date, end: date) -> int:
    return (end - start).days
