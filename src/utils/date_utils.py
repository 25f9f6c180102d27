"""Date utility functions."""

import logging
from datetime import date, datetime
from typing import Optional

logger = logging.getLogger(__name__)

# E*TRADE expects fixed-width month/day/year with no separators, e.g. 01312024
ETRADE_DATE_FORMAT = "%m%d%Y"


def format_etrade_date(value: date) -> str:
    """
    Format a date for an E*TRADE query parameter.

    Accepts ``date`` or ``datetime``; the time of day is dropped.

    Args:
        value: Date to format

    Returns:
        Eight-character MMDDYYYY string
    """
    return value.strftime(ETRADE_DATE_FORMAT)


def parse_cli_date(value: Optional[str]) -> Optional[date]:
    """
    Parse a date given on the command line.

    Accepts ISO format (YYYY-MM-DD) or the E*TRADE wire format (MMDDYYYY).

    Args:
        value: Date string, or None

    Returns:
        Parsed date, or None when value is None or empty

    Raises:
        ValueError: If the string matches neither format
    """
    if not value:
        return None

    try:
        return date.fromisoformat(value)
    except ValueError:
        pass

    try:
        return datetime.strptime(value, ETRADE_DATE_FORMAT).date()
    except ValueError as e:
        logger.debug(f"Could not parse date '{value}': {e}")
        raise ValueError(f"Invalid date '{value}' (expected YYYY-MM-DD or MMDDYYYY)") from e
