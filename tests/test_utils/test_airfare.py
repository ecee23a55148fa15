"""
Tests for airfare calculation.
"""

import pytest
from departure_board.utils.airfare import BAG_COST, COST_PER_MILE, calculate_airfare, format_airfare


class TestCalculateAirfare:
    """Test cases for calculate_airfare."""

    def test_constants(self):
        assert BAG_COST == 25.0
        assert COST_PER_MILE == 0.10

    def test_reference_fare(self):
        """2 bags, 2000 miles, 3 travelers cost $750."""
        assert calculate_airfare(checked_bags=2, distance=2000, travelers=3) == 750.0

    def test_various_inputs(self):
        assert calculate_airfare(0, 0, 1) == 0.0
        assert calculate_airfare(1, 0, 1) == 25.0
        assert calculate_airfare(0, 1234, 1) == 123.4
        assert calculate_airfare(3, 500, 2) == 250.0
        assert calculate_airfare(2, 2000, 0) == 0.0

    def test_returns_float(self):
        assert isinstance(calculate_airfare(1, 1, 1), float)

    def test_cost_overrides(self):
        assert calculate_airfare(2, 1000, 1, bag_cost=30.0, cost_per_mile=0.2) == 260.0

    def test_negative_inputs(self):
        with pytest.raises(ValueError, match="checked_bags must not be negative"):
            calculate_airfare(-1, 100, 1)
        with pytest.raises(ValueError, match="distance"):
            calculate_airfare(1, -100, 1)
        with pytest.raises(ValueError, match="travelers"):
            calculate_airfare(1, 100, -2)


class TestFormatAirfare:
    """Test cases for currency formatting."""

    def test_format(self):
        assert format_airfare(750.0) == "$750.00"
        assert format_airfare(1234.5) == "$1,234.50"
        assert format_airfare(0) == "$0.00"
        assert format_airfare(-12.3) == "-$12.30"

    def test_format_calculated(self):
        assert format_airfare(calculate_airfare(2, 2000, 3)) == "$750.00"
