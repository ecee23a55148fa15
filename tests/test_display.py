"""
Tests for printing the departure listing.
"""

import io
from departure_board.display import format_departure, print_departures
from departure_board.models import DepartureBoard


class TestDisplay:
    """Test cases for the departure listing."""

    def test_format_departure(self, make_flight):
        assert format_departure(make_flight()) == (
            "Destination: Los Angeles (LAX)\n"
            "Airline: Delta Air Lines\n"
            "Flight: DL 423\n"
            "Departure Time: 5:30 PM\n"
            "Terminal: 4\n"
            "Status: Scheduled\n"
        )

    def test_format_departure_missing_values(self, make_flight):
        """Test that missing values are printed as empty strings."""
        text = format_departure(make_flight(departure_time=None, terminal=None))

        assert "Departure Time: \n" in text
        assert "Terminal: \n" in text
        assert "None" not in text
        assert "Optional" not in text

    def test_print_departures(self, board):
        stream = io.StringIO()
        print_departures(board, stream)
        out = stream.getvalue()

        blocks = out.split("\n\n")
        assert blocks[0] == (
            "Destination: Los Angeles (LAX)\n"
            "Airline: Delta Air Lines\n"
            "Flight: DL 423\n"
            "Departure Time: 5:30 PM\n"
            "Terminal: 4\n"
            "Status: En Route"
        )
        assert "Flight: UA 7998\nDeparture Time: \nTerminal: 7\nStatus: Canceled" in blocks[1]
        assert "Departure Time: 8:00 PM\nTerminal: \nStatus: Landed" in blocks[2]
        assert out.endswith("Status: Landed\n\n")

    def test_print_departures_stdout(self, board, capsys):
        print_departures(board)
        out = capsys.readouterr().out
        assert out.count("Destination: ") == 3

    def test_print_empty_board(self, capsys):
        print_departures(DepartureBoard())
        assert capsys.readouterr().out == ""
