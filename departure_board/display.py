"""
Printing of the departure listing.

Optional values are printed as an empty string, never as None.
"""

import sys
from typing import Optional, TextIO

from departure_board.models.departure_board import DepartureBoard
from departure_board.models.flight import Flight


def format_departure(flight: Flight) -> str:
    """
    Render one departure as a block of lines.

    The block ends with a newline so that printed blocks are separated
    by an empty line.
    """
    return (
        f"Destination: {flight.destination.city}\n"
        f"Airline: {flight.airline}\n"
        f"Flight: {flight.flight_name}\n"
        f"Departure Time: {flight.formatted_departure_time()}\n"
        f"Terminal: {flight.formatted_terminal()}\n"
        f"Status: {flight.status.value}\n"
    )


def print_departures(departure_board: DepartureBoard, stream: Optional[TextIO] = None) -> None:
    """Print every departure of departure_board to stream (stdout by default)."""
    stream = stream or sys.stdout
    for departure in departure_board.departures:
        print(format_departure(departure), file=stream)
