"""
Sources for departure boards.

Boards can be loaded from and saved to JSON scenario files.
"""

from .scenario import (
    ScenarioError,
    load_scenario,
    load_scenario_from_dict,
    save_scenario,
    sample_board,
)

__all__ = [
    'ScenarioError',
    'load_scenario',
    'load_scenario_from_dict',
    'save_scenario',
    'sample_board',
]
