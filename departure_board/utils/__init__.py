"""Time formatting and airfare helpers."""

from .time_format import format_short_time, make_departure_time, parse_departure_time
from .airfare import calculate_airfare, format_airfare, BAG_COST, COST_PER_MILE

__all__ = [
    'format_short_time',
    'make_departure_time',
    'parse_departure_time',
    'calculate_airfare',
    'format_airfare',
    'BAG_COST',
    'COST_PER_MILE',
]
