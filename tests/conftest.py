import pytest
from pathlib import Path
from datetime import datetime

from departure_board.models import Airport, DepartureBoard, Flight, FlightStatus
from departure_board.sources import sample_board


@pytest.fixture
def test_assets_dir() -> Path:
    """Return the path to the test assets directory."""
    return Path(__file__).parent / 'assets'


@pytest.fixture
def jfk_scenario(test_assets_dir) -> Path:
    """Return the path to the JFK departures scenario."""
    return test_assets_dir / 'jfk_departures.json'


@pytest.fixture
def board() -> DepartureBoard:
    """Return the three-flight sample board."""
    return sample_board()


@pytest.fixture
def make_flight():
    """Return a factory for flights with sensible defaults."""
    def _make_flight(city="Los Angeles (LAX)", airline="Delta Air Lines", flight_name="DL 423",
                     departure_time=datetime(2019, 5, 30, 17, 30), terminal="4",
                     status=FlightStatus.SCHEDULED):
        return Flight(
            destination=Airport(city),
            airline=airline,
            flight_name=flight_name,
            departure_time=departure_time,
            terminal=terminal,
            status=status,
        )
    return _make_flight
