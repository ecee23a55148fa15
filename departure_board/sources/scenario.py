"""
JSON scenario files for departure boards.

A scenario describes the current airport and its departures:

    {
      "current_airport": {"city": "New York City (JFK)"},
      "departures": [
        {"destination": {"city": "Los Angeles (LAX)"}, "airline": "Delta Air Lines",
         "flight_name": "DL 423", "departure_time": "2019-05-30T17:30:00",
         "terminal": "4", "status": "En Route"}
      ]
    }

current_airport is optional; departure_time and terminal may be null.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from departure_board.models import Airport, DepartureBoard, Flight, FlightStatus
from departure_board.utils.time_format import make_departure_time

logger = logging.getLogger(__name__)


class ScenarioError(Exception):
    """Exception raised when a scenario cannot be loaded."""

    def __init__(self, message: str, details: Any = None):
        """
        Initialize scenario error.

        Args:
            message: Error message
            details: Underlying exception or additional context
        """
        super().__init__(message)
        self.details = details

    def __str__(self) -> str:
        msg = super().__str__()
        if self.details is not None:
            msg += f": {self.details}"
        return msg


def load_scenario_from_dict(data: Dict[str, Any]) -> DepartureBoard:
    """
    Build a departure board from parsed scenario data.

    Args:
        data: Scenario dictionary

    Returns:
        DepartureBoard with the scenario departures in file order

    Raises:
        ScenarioError: If the data is not a valid scenario
    """
    if not isinstance(data, dict):
        raise ScenarioError("Scenario must be a JSON object", type(data).__name__)

    current_airport = None
    if data.get('current_airport') is not None:
        try:
            current_airport = Airport.from_dict(data['current_airport'])
        except (KeyError, TypeError, ValueError) as e:
            raise ScenarioError("Invalid current_airport", e) from e

    board = DepartureBoard(current_airport)

    departures = data.get('departures', [])
    if not isinstance(departures, list):
        raise ScenarioError("Scenario departures must be a list", type(departures).__name__)

    for index, entry in enumerate(departures):
        try:
            board.add_flight(Flight.from_dict(entry))
        except KeyError as e:
            raise ScenarioError(f"Departure {index} is missing field {e.args[0]!r}") from e
        except (TypeError, ValueError) as e:
            raise ScenarioError(f"Invalid departure {index}", e) from e

    logger.info(f"Loaded {len(board)} departures for {board.current_airport.city}")
    return board


def load_scenario(path: Union[str, Path]) -> DepartureBoard:
    """
    Load a departure board from a JSON scenario file.

    Raises:
        ScenarioError: If the file cannot be read or is not a valid scenario
    """
    path = Path(path)
    logger.debug(f"Loading scenario from {path}")
    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise ScenarioError(f"Cannot read scenario {path}", e) from e
    except UnicodeDecodeError as e:
        raise ScenarioError(f"Invalid encoding in scenario {path}", e) from e
    except json.JSONDecodeError as e:
        raise ScenarioError(f"Invalid JSON in scenario {path}", e) from e
    return load_scenario_from_dict(data)


def save_scenario(board: DepartureBoard, path: Union[str, Path]) -> None:
    """Write board to path as a JSON scenario."""
    path = Path(path)
    data = {
        'current_airport': board.current_airport.to_dict(),
        'departures': [flight.to_dict() for flight in board.departures],
    }
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2)
    logger.info(f"Saved {len(board)} departures to {path}")


def sample_board() -> DepartureBoard:
    """
    Return the demonstration board departing New York City (JFK).

    One flight is canceled with no departure time and one has no
    terminal assigned yet.
    """
    board = DepartureBoard()
    board.add_flights([
        Flight(
            destination=Airport("Los Angeles (LAX)"),
            airline="Delta Air Lines",
            flight_name="DL 423",
            departure_time=make_departure_time(2019, 5, 30, 17, 30),
            terminal="4",
            status=FlightStatus.EN_ROUTE,
        ),
        Flight(
            destination=Airport("Tokyo (NRT)"),
            airline="United Airlines",
            flight_name="UA 7998",
            departure_time=None,
            terminal="7",
            status=FlightStatus.CANCELED,
        ),
        Flight(
            destination=Airport("Las Vegas (LAS)"),
            airline="JetBlue Airways",
            flight_name="B6 2611",
            departure_time=make_departure_time(2019, 5, 30, 20, 0),
            terminal=None,
            status=FlightStatus.LANDED,
        ),
    ])
    return board
