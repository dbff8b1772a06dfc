"""Date parsing utilities."""

from datetime import date, datetime, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports ISO and free-form dates ("2024-01-15", "Jan 15 2024") and a few
    relative words: "today", "yesterday", "tomorrow", and "this month",
    "last month", "next month" (first day of that month).

    Args:
        date_str: Date string

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    text = date_str.strip().lower()
    today = date.today()

    relative_days = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }
    if text in relative_days:
        return relative_days[text]

    month_offsets = {"last month": -1, "this month": 0, "next month": 1}
    if text in month_offsets:
        return (today + relativedelta(months=month_offsets[text])).replace(day=1)

    try:
        return date_parser.parse(text).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}") from None


def coerce_date(value: "date | datetime | str") -> date:
    """Return ``value`` as a date, parsing strings with :func:`parse_date`."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_date(value)


def month_key(value: date) -> str:
    """Return the ``YYYY-MM`` accounting period a date falls in."""
    return f"{value.year:04d}-{value.month:02d}"


def month_bounds(period: str) -> tuple[date, date]:
    """Get the first and last day of a ``YYYY-MM`` period.

    Raises:
        ValueError: If the period is not in ``YYYY-MM`` form
    """
    try:
        start = datetime.strptime(period.strip(), "%Y-%m").date()
    except ValueError:
        raise ValueError(f"Invalid period '{period}' (expected YYYY-MM)") from None
    end = start + relativedelta(months=1) - timedelta(days=1)
    return start, end
