"""Date parsing utilities."""

from datetime import date, timedelta
from dateutil import parser as date_parser

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


def parse_date(date_str: str, dayfirst: bool = False) -> date:
    """Parse a date string into a date object.

    Supports:
    - Absolute dates: "2024-01-15", "15 Jan 2024", "01/15/2024", etc.
    - Relative dates: "today", "yesterday", "tomorrow", "last friday"

    Args:
        date_str: Date string in various formats
        dayfirst: Read ambiguous numeric dates such as "03/04/2024" as
            day/month, as many bank statements print them

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    if date_str.startswith("last ") and date_str[5:] in WEEKDAYS:
        target_day = WEEKDAYS.index(date_str[5:])
        days_ago = (today.weekday() - target_day) % 7 or 7
        return today - timedelta(days=days_ago)

    try:
        return date_parser.parse(date_str, dayfirst=dayfirst).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")
