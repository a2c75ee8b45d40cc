"""
A* Strategy - Frontier ordered by cost plus scaled Manhattan distance.
"""

import logging
from typing import Callable

from ..base import SearchStrategy
from ..context import SearchContext
from ..factory import register_strategy
from ..grid import Location
from ..heuristic import min_step_cost, scaled_manhattan

logger = logging.getLogger(__name__)


@register_strategy
class AStarStrategy(SearchStrategy):
    """
    A* search with Manhattan distance times the grid's cheapest cell.

    Scaling keeps the estimate admissible on grids whose cheapest cell
    costs more than 1, and collapses it to 0 (plain Dijkstra ordering)
    on grids containing zero-cost cells.
    """
    name = "astar"
    description = "A* (default) - Cost plus scaled Manhattan distance"

    def prepare_heuristic(self, context: SearchContext) -> Callable[[Location], int]:
        step_cost = min_step_cost(context.grid)
        target = context.target
        logger.debug(f"Manhattan heuristic scaled by {step_cost}")

        def estimate(loc: Location) -> int:
            return scaled_manhattan(loc, target, step_cost)

        return estimate
