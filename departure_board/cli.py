#!/usr/bin/env python3

"""
Command line for the departure board.

Prints the departure listing and passenger alerts of a JSON scenario (or
the sample board), and can export the board or calculate an airfare.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from departure_board.display import print_departures
from departure_board.models import Airport, DepartureBoard, FlightStatus
from departure_board.sources import ScenarioError, load_scenario, sample_board, save_scenario
from departure_board.utils.airfare import calculate_airfare, format_airfare

logger = logging.getLogger(__name__)

# Environment variable overriding the current airport of the board
AIRPORT_ENV_VAR = 'DEPARTURE_BOARD_AIRPORT'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Airport departures display and passenger alerts')
    parser.add_argument('scenario', help='JSON scenario file (sample board if omitted)', nargs='?')
    parser.add_argument('--alerts', help='Print passenger alerts', action='store_true')
    parser.add_argument('--departures', help='Print the departure listing (default)', action='store_true')
    parser.add_argument('--status', help='Only include flights with this status (repeatable)',
                        action='append', default=[])
    parser.add_argument('--airport', help=f'Current airport city (default: ${AIRPORT_ENV_VAR})',
                        default=os.getenv(AIRPORT_ENV_VAR))
    parser.add_argument('--csv', help='Export departures to CSV file')
    parser.add_argument('--save', help='Save the board as a JSON scenario file')
    parser.add_argument('--airfare', help='Print airfare for checked bags, miles and travelers',
                        nargs=3, type=int, metavar=('BAGS', 'MILES', 'TRAVELERS'))
    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')
    return parser


def filter_board(board: DepartureBoard, statuses: List[str]) -> DepartureBoard:
    """Return a new board holding only the departures with the given statuses."""
    filtered = DepartureBoard(board.current_airport)
    filtered.add_flights(board.flights().by_status(*statuses))
    logger.debug(f"Status filter {statuses} kept {len(filtered)}/{len(board)} departures")
    return filtered


def run(args: argparse.Namespace) -> None:
    if args.scenario:
        board = load_scenario(args.scenario)
    else:
        logger.info("No scenario given, using sample board")
        board = sample_board()

    if args.airport:
        board.current_airport = Airport(args.airport)

    if args.status:
        # validate every label before filtering
        statuses = [FlightStatus.from_label(s) for s in args.status]
        board = filter_board(board, statuses)

    if args.departures or not args.alerts:
        print_departures(board)
    if args.alerts:
        board.alert_passengers()

    if args.csv:
        board.to_dataframe().to_csv(args.csv, index=False)
        logger.info(f"Exported {len(board)} departures to {args.csv}")
    if args.save:
        save_scenario(board, args.save)

    if args.airfare:
        bags, miles, travelers = args.airfare
        print(f"Airfare: {format_airfare(calculate_airfare(bags, miles, travelers))}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        run(args)
    except (ScenarioError, ValueError) as e:
        logger.error(f"Error: {e}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
