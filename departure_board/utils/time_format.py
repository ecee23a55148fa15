"""
Departure time utilities.

Boards only show the time of day of a departure, in the short US style
("5:30 PM"). Times read from scenario files are parsed with dateutil so
that both ISO 8601 and human formats ("May 30 2019 5:30 PM") are accepted.

Departure times are local wall-clock times of the departure airport and are
always stored naive: a UTC offset in the input is dropped, the time of day
as written is kept.
"""

import logging
from datetime import datetime
from typing import Optional, Union

from dateutil import parser as date_parser

logger = logging.getLogger(__name__)


def format_short_time(dt: datetime) -> str:
    """
    Format the time of day of dt without the date.

    Args:
        dt: Departure time

    Returns:
        Time such as "5:30 PM" or "12:05 AM", hour without leading zero
    """
    hour = dt.hour % 12 or 12
    suffix = 'AM' if dt.hour < 12 else 'PM'
    return f"{hour}:{dt.minute:02d} {suffix}"


def parse_departure_time(value: Optional[Union[str, datetime]]) -> Optional[datetime]:
    """
    Parse a departure time.

    Args:
        value: datetime, string understood by dateutil, or None

    Returns:
        Naive datetime, None if value is None or an empty string.
        "2019-05-30T17:30:00Z" and "2019-05-30T17:30:00+09:00" both give 17:30.

    Raises:
        ValueError: If the value cannot be parsed
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return _drop_offset(value)
    if not isinstance(value, str):
        raise ValueError(f"Invalid departure time: {value!r}")
    if not value.strip():
        return None
    try:
        return _drop_offset(date_parser.parse(value))
    except (ValueError, OverflowError) as e:
        logger.debug(f"Could not parse departure time {value!r}: {e}")
        raise ValueError(f"Invalid departure time: {value!r}") from e


def _drop_offset(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt
    return dt.replace(tzinfo=None)


def make_departure_time(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> datetime:
    """Build a departure time from its date components."""
    return datetime(year, month, day, hour, minute)
