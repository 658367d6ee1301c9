"""Date parsing utilities."""

from datetime import date, timedelta
import re

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

PERIODS = (
    "this-month",
    "this-year",
    "this-week",
    "last-month",
    "last-year",
    "last-week",
)


def parse_iso_date(date_str: str) -> date:
    """Parse a strict YYYY-MM-DD date as written in ledger headers.

    Raises:
        ValueError: If the string is not in YYYY-MM-DD form or is not a real
            calendar date (e.g. 2023-02-30)
    """
    date_str = date_str.strip()
    if not _ISO_DATE_RE.match(date_str):
        raise ValueError(f"Could not parse date '{date_str}': expected YYYY-MM-DD")
    try:
        return date_parser.isoparse(date_str).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_date(date_str: str, today: date | None = None) -> date:
    """Parse a date used as a query or command-line bound.

    Supports:
    - Absolute dates: "2024-01-15"
    - Relative dates: "today", "yesterday"

    Args:
        date_str: Date string
        today: Reference date for relative keywords (defaults to date.today())

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = today or date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    return parse_iso_date(date_str)


def get_date_range(period: str, today: date | None = None) -> tuple[date, date]:
    """Get start and end dates for a specified period.

    Args:
        period: Period string (this-month, this-year, this-week, last-month, last-year, last-week)
        today: Reference date (defaults to date.today())

    Returns:
        Tuple of (start_date, end_date) for the specified period

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = today or date.today()

    if period == "this-month":
        return (today.replace(day=1), today)

    elif period == "this-year":
        return (today.replace(month=1, day=1), today)

    elif period == "this-week":
        return (today - timedelta(days=today.weekday()), today)

    elif period == "last-month":
        start_date = (today - relativedelta(months=1)).replace(day=1)
        # Day before the first of the current month
        end_date = today.replace(day=1) - timedelta(days=1)
        return (start_date, end_date)

    elif period == "last-year":
        start_date = today.replace(month=1, day=1) - relativedelta(years=1)
        end_date = today.replace(month=1, day=1) - timedelta(days=1)
        return (start_date, end_date)

    elif period == "last-week":
        # Monday to Sunday
        start_date = today - timedelta(days=today.weekday() + 7)
        end_date = start_date + timedelta(days=6)
        return (start_date, end_date)

    else:
        raise ValueError(f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}")
