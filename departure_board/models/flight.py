from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from departure_board.models.airport import Airport
from departure_board.models.flight_status import FlightStatus
from departure_board.utils.time_format import format_short_time, parse_departure_time


@dataclass(frozen=True)
class Flight:
    """
    Data class for storing a single departure.

    A canceled flight may have no departure time, and a terminal may not be
    assigned yet, so both are optional.

    Attributes:
        destination: Airport the flight is departing to
        airline: Operating airline (e.g., "Delta Air Lines")
        flight_name: Flight designator (e.g., "DL 423")
        departure_time: Scheduled departure, None if not known
        terminal: Departure terminal, None if not assigned yet
        status: Current status of the flight
    """

    destination: Airport
    airline: str
    flight_name: str
    departure_time: Optional[Union[datetime, str]] = None
    terminal: Optional[str] = None
    status: Union[FlightStatus, str] = FlightStatus.SCHEDULED

    def __post_init__(self):
        if not isinstance(self.destination, Airport):
            raise TypeError(f"destination must be an Airport, got {type(self.destination).__name__}")
        for name, label in (('airline', 'Flight airline'), ('flight_name', 'Flight name')):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise TypeError(f"{label} must be a string, got {type(value).__name__}")
            if not value.strip():
                raise ValueError(f"{label} must not be empty")
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, 'departure_time', parse_departure_time(self.departure_time))
        if not isinstance(self.status, FlightStatus):
            object.__setattr__(self, 'status', FlightStatus.from_label(self.status))
        if self.terminal is not None and not isinstance(self.terminal, str):
            object.__setattr__(self, 'terminal', str(self.terminal))

    def formatted_departure_time(self, placeholder: str = "") -> str:
        """Return the short departure time or placeholder when there is none."""
        if self.departure_time is None:
            return placeholder
        return format_short_time(self.departure_time)

    def formatted_terminal(self, placeholder: str = "") -> str:
        """Return the terminal or placeholder when it is not assigned."""
        if self.terminal is None:
            return placeholder
        return self.terminal

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'destination': self.destination.to_dict(),
            'airline': self.airline,
            'flight_name': self.flight_name,
            'departure_time': self.departure_time.isoformat() if self.departure_time else None,
            'terminal': self.terminal,
            'status': self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Flight':
        """
        Create instance from dictionary.

        The departure time may be any format understood by dateutil, a
        missing or null departure time or terminal means not known.
        """
        return cls(
            destination=Airport.from_dict(data['destination']),
            airline=data['airline'],
            flight_name=data['flight_name'],
            departure_time=parse_departure_time(data.get('departure_time')),
            terminal=data.get('terminal'),
            status=FlightStatus.from_label(data['status']),
        )

    def __str__(self):
        return f"{self.flight_name} {self.airline} to {self.destination.city} ({self.status.value})"
