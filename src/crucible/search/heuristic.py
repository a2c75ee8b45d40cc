"""
Heuristic Module - Lower-bound estimates of remaining cost.
"""

from .grid import CostGrid, Location


def manhattan(loc: Location, target: Location) -> int:
    """Grid distance between two locations on a 4-connected grid."""
    return abs(loc[0] - target[0]) + abs(loc[1] - target[1])


def scaled_manhattan(loc: Location, target: Location, step_cost: int) -> int:
    """
    Manhattan distance weighted by the cheapest possible step.

    Every remaining step costs at least step_cost, so the estimate never
    overstates the true remaining cost and is consistent.
    """
    return manhattan(loc, target) * step_cost


def min_step_cost(grid: CostGrid) -> int:
    """Cheapest step on the grid; 0 disables the heuristic."""
    return grid.min_cost
