"""
Data models for the departure_board library.

This package contains the models used to represent airports, flights
and their status, and the departure board holding them.

It also provides a queryable collection for fluent filtering of departures.
"""

from .flight_status import FlightStatus
from .airport import Airport
from .flight import Flight
from .queryable_collection import QueryableCollection
from .flight_collection import FlightCollection
from .departure_board import DepartureBoard, DEFAULT_AIRPORT_CITY

__all__ = [
    # Core models
    'FlightStatus',
    'Airport',
    'Flight',
    'DepartureBoard',
    'DEFAULT_AIRPORT_CITY',
    # Queryable collections
    'QueryableCollection',
    'FlightCollection',
]
