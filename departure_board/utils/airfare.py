"""
Airfare calculation.

The fare of one ticket is the cost of the checked bags plus a per-mile
cost for the distance flown; the total is the ticket cost multiplied by
the number of travelers.
"""

# Cost of one checked bag in USD
BAG_COST = 25.0

# Cost of one mile in USD
COST_PER_MILE = 0.10


def calculate_airfare(checked_bags: int, distance: int, travelers: int,
                      bag_cost: float = BAG_COST, cost_per_mile: float = COST_PER_MILE) -> float:
    """
    Calculate the total airfare.

    Args:
        checked_bags: Number of checked bags per traveler
        distance: Distance in miles
        travelers: Number of travelers
        bag_cost: Override for the cost of one bag
        cost_per_mile: Override for the cost of one mile

    Returns:
        Total airfare in USD, e.g. 2 bags, 2000 miles, 3 travelers -> 750.0

    Raises:
        ValueError: If any count is negative
    """
    for name, value in (('checked_bags', checked_bags), ('distance', distance), ('travelers', travelers)):
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")

    ticket_cost = bag_cost * float(checked_bags) + cost_per_mile * float(distance)
    # round away binary noise from 0.10 per mile
    return round(ticket_cost * float(travelers), 2)


def format_airfare(amount: float) -> str:
    """Format amount as US currency, e.g. "$1,234.50"."""
    sign = '-' if amount < 0 else ''
    return f"{sign}${abs(amount):,.2f}"
