"""
Departure board model.

The board holds the departures of the current airport in the order they
were added and produces the passenger alert messages for them.
"""

import logging
import sys
from typing import Iterable, Iterator, List, Optional, TextIO, Tuple

import pandas as pd

from .airport import Airport
from .flight import Flight
from .flight_collection import FlightCollection
from .flight_status import FlightStatus

logger = logging.getLogger(__name__)

DEFAULT_AIRPORT_CITY = "New York City (JFK)"

# Placeholder used in alerts when the time is not known
TBD = "TBD"

INFORMATION_DESK_MESSAGE = "Please seek the nearest information desk for more details."


class DepartureBoard:
    """
    Departures display for a single airport.

    Flights can only be added through add_flight(); the departures
    property exposes them as an immutable tuple.

    Example:
        board = DepartureBoard()
        board.add_flight(Flight(Airport("Tokyo (NRT)"), "United Airlines", "UA 7998",
                                terminal="7", status=FlightStatus.CANCELED))
        board.alert_passengers()
    """

    def __init__(self, current_airport: Optional[Airport] = None):
        self._departures: List[Flight] = []
        self.current_airport = current_airport or Airport(DEFAULT_AIRPORT_CITY)

    @property
    def departures(self) -> Tuple[Flight, ...]:
        """Departures in the order they were added."""
        return tuple(self._departures)

    def add_flight(self, flight: Flight) -> None:
        """
        Add a departure to the board.

        Raises:
            TypeError: If flight is not a Flight
        """
        if not isinstance(flight, Flight):
            raise TypeError(f"Expected a Flight, got {type(flight).__name__}")
        self._departures.append(flight)
        logger.debug(f"Added flight {flight.flight_name} to {flight.destination.city} "
                     f"({len(self._departures)} departures at {self.current_airport.city})")

    def add_flights(self, flights: Iterable[Flight]) -> None:
        """
        Add multiple departures to the board.

        Every item is checked first, so nothing is added when one is not a Flight.

        Raises:
            TypeError: If any item is not a Flight
        """
        flights = list(flights)
        for index, flight in enumerate(flights):
            if not isinstance(flight, Flight):
                raise TypeError(f"Expected a Flight at position {index}, got {type(flight).__name__}")
        for flight in flights:
            self.add_flight(flight)

    def flights(self) -> FlightCollection:
        """Return a queryable collection over the departures."""
        return FlightCollection(self._departures)

    @staticmethod
    def alert_message(flight: Flight) -> str:
        """
        Build the passenger alert for a single departure.

        A flight without a terminal always directs passengers to the
        information desk, whatever its status.
        """
        if flight.terminal is None:
            return INFORMATION_DESK_MESSAGE

        city = flight.destination.city
        time = flight.formatted_departure_time(TBD)
        terminal = flight.terminal

        if flight.status is FlightStatus.CANCELED:
            return f"We're sorry your flight to {city} was canceled, here is a $500 voucher."
        if flight.status is FlightStatus.EN_ROUTE:
            return f"Your flight to {city} is en route. Hope you're on it :)"
        if flight.status is FlightStatus.SCHEDULED:
            return f"Your flight to {city} is scheduled to depart at {time} from terminal: {terminal}."
        if flight.status is FlightStatus.BOARDING:
            return (f"Your flight is boarding, please head to terminal: {terminal} immediately. "
                    "The doors are closing soon.")
        if flight.status is FlightStatus.DELAYED:
            return (f"We're sorry your flight to {city} has been delayed, "
                    "here is a open, half-full bag of pretzels.")
        return "Your flight has already landed"

    def alert_messages(self) -> List[str]:
        """Return the alert message of every departure, in board order."""
        return [self.alert_message(flight) for flight in self._departures]

    def alert_passengers(self, stream: Optional[TextIO] = None) -> List[str]:
        """
        Print an alert message for every departure.

        Args:
            stream: Output stream, defaults to stdout

        Returns:
            The printed messages
        """
        stream = stream or sys.stdout
        messages = self.alert_messages()
        for message in messages:
            print(message, file=stream)
        logger.info(f"Sent {len(messages)} passenger alerts for {self.current_airport.city}")
        return messages

    def to_dataframe(self) -> pd.DataFrame:
        """
        Convert the departures to a DataFrame, one row per flight.

        Missing departure times are NaT and missing terminals are None.
        """
        columns = ['destination', 'airline', 'flight', 'departure_time', 'terminal', 'status']
        rows = [
            {
                'destination': f.destination.city,
                'airline': f.airline,
                'flight': f.flight_name,
                'departure_time': f.departure_time,
                'terminal': f.terminal,
                'status': f.status.value,
            }
            for f in self._departures
        ]
        df = pd.DataFrame(rows, columns=columns)
        df['departure_time'] = pd.to_datetime(df['departure_time'])
        return df

    def __len__(self) -> int:
        return len(self._departures)

    def __iter__(self) -> Iterator[Flight]:
        return iter(tuple(self._departures))

    def __repr__(self):
        return f"DepartureBoard(current_airport='{self.current_airport.city}', departures={len(self._departures)})"
