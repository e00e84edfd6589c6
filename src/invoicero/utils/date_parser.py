"""Date parsing utilities."""

import re
from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - ISO dates: "2024-01-15"
    - Czech dates (day first): "15. 1. 2024", "15.01.2024"
    - Other absolute dates: "January 15, 2024"
    - Relative dates: "today", "yesterday", "tomorrow", "end of month",
      "next month"

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    # Handle relative dates
    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
        "end of month": (today + relativedelta(months=1)).replace(day=1) - timedelta(days=1),
        "next month": (today + relativedelta(months=1)).replace(day=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        return date.fromisoformat(date_str)
    except ValueError:
        pass

    # "15. 1. 2024" is the usual way dates are written on Czech invoices
    date_str = re.sub(r"\.\s+", ".", date_str)

    try:
        dt = date_parser.parse(date_str, dayfirst=True)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def format_date(value: date) -> str:
    """Format a date the way it is printed on invoices, e.g. ``05. 03. 2024``."""
    return value.strftime("%d. %m. %Y")
