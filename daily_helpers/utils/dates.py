# ==============================================================================
# DATE HELPERS
# ==============================================================================
# Lenient parsing of user-supplied dates and month arithmetic
# ==============================================================================

from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta
from typing import Optional, Sequence, Union

from daily_helpers.core.exceptions import InvalidArgumentError

# Tried in order; the first format that parses wins
DEFAULT_DATE_FORMATS: Sequence[str] = (
    "%d/%m/%Y",
    "%Y-%m-%d",
    "%m/%d/%Y",
    "%Y/%m/%d",
    "%d-%m-%Y",
    "%Y.%m.%d",
)


def _candidate_formats(extra_format: Optional[str]) -> Sequence[str]:
    return (extra_format,) if extra_format else DEFAULT_DATE_FORMATS


def convert_date(value: Optional[str], extra_format: Optional[str] = None) -> Optional[datetime]:
    """
    Parse ``value`` with the default formats, or only ``extra_format`` if given.

    Args:
        value: Date text, e.g. "31/12/2024" or "2024-12-31"
        extra_format: strptime format that replaces the defaults

    Returns:
        Parsed datetime, or None when the text is empty or matches no format
    """
    if not value:
        return None

    for fmt in _candidate_formats(extra_format):
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


def combine_date_and_time(day: Union[date, datetime], time_of_day: timedelta) -> datetime:
    """Midnight of ``day`` plus the hour and minute components of ``time_of_day``."""
    seconds = time_of_day.seconds
    return datetime.combine(
        day.date() if isinstance(day, datetime) else day,
        time(hour=seconds // 3600, minute=(seconds // 60) % 60),
    )


def parse_and_format_date(
    value: Optional[str],
    output_format: str,
    input_format: Optional[str] = None,
) -> Optional[str]:
    """Re-format a date string; None when it is empty or cannot be parsed."""
    parsed = convert_date(value, input_format)
    if parsed is None:
        return None
    return parsed.strftime(output_format)


def last_day_of_month(month: int, year: int) -> datetime:
    """
    Last instant (23:59:59.999) of the given month.

    Raises:
        InvalidArgumentError: If month is outside 1..12 or year is below 1
    """
    if month < 1 or month > 12:
        raise InvalidArgumentError("Month must be between 1 and 12.", argument="month")
    if year < 1:
        raise InvalidArgumentError("Year must be greater than 0.", argument="year")

    last_day = calendar.monthrange(year, month)[1]
    return datetime(year, month, last_day, 23, 59, 59, 999000)
