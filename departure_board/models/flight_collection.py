"""
Specialized queryable collection for Flight objects.

Provides departure-board filters while keeping the composability of
the base QueryableCollection.
"""

from datetime import datetime
from typing import Union, TYPE_CHECKING

from .flight_status import FlightStatus
from .queryable_collection import QueryableCollection

if TYPE_CHECKING:
    from .flight import Flight


class FlightCollection(QueryableCollection['Flight']):
    """
    Collection of departures with domain-specific filters.

    Examples:
        # Flights passengers still need to catch
        board.flights().by_status(FlightStatus.SCHEDULED, FlightStatus.BOARDING)

        # Chaining
        board.flights().by_airline("Delta Air Lines").sorted_by_departure().first()
    """

    def by_status(self, *statuses: Union[FlightStatus, str]) -> 'FlightCollection':
        """
        Filter flights by one or more statuses.

        Args:
            *statuses: FlightStatus members or labels ("Canceled", "en route")

        Returns:
            New FlightCollection with flights in any of the statuses
        """
        wanted = {FlightStatus.from_label(s) for s in statuses}
        return FlightCollection([f for f in self._items if f.status in wanted])

    def by_airline(self, airline: str) -> 'FlightCollection':
        """Filter flights operated by airline (case-insensitive)."""
        airline = airline.lower()
        return FlightCollection([f for f in self._items if f.airline.lower() == airline])

    def to_destination(self, city: str) -> 'FlightCollection':
        """
        Filter flights whose destination city contains city.

        Matching is case-insensitive so "tokyo" matches "Tokyo (NRT)".
        """
        city = city.lower()
        return FlightCollection([f for f in self._items if city in f.destination.city.lower()])

    def without_terminal(self) -> 'FlightCollection':
        """Filter to flights that have no terminal assigned yet."""
        return FlightCollection([f for f in self._items if f.terminal is None])

    def with_departure_time(self) -> 'FlightCollection':
        """Filter to flights with a known departure time."""
        return FlightCollection([f for f in self._items if f.departure_time is not None])

    def departing_between(self, start: datetime, end: datetime) -> 'FlightCollection':
        """
        Filter flights departing in the inclusive window [start, end].

        Flights without a departure time are never included.
        """
        return FlightCollection([
            f for f in self._items
            if f.departure_time is not None and start <= f.departure_time <= end
        ])

    def sorted_by_departure(self) -> 'FlightCollection':
        """Sort by departure time, flights without a time last."""
        # stable sort keeps board order among untimed flights
        return FlightCollection(sorted(
            self._items,
            key=lambda f: (f.departure_time is None, f.departure_time or datetime.min)
        ))
