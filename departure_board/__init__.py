"""
Airport departure board library.

This package provides simple data models for an airport departures display
and tools to print departures and passenger alerts.

The main public API includes:
- FlightStatus: Status of a departing flight
- Airport: Destination or origin airport
- Flight: A single departure
- DepartureBoard: Container of departures for the current airport
- print_departures: Print the departure listing of a board
- calculate_airfare: Airfare for checked bags, distance and travelers
"""

from .models import Airport, DepartureBoard, Flight, FlightCollection, FlightStatus
from .display import format_departure, print_departures
from .utils.airfare import calculate_airfare, format_airfare

__version__ = '0.1.0'
__all__ = [
    'Airport',
    'DepartureBoard',
    'Flight',
    'FlightCollection',
    'FlightStatus',
    'format_departure',
    'print_departures',
    'calculate_airfare',
    'format_airfare',
]
