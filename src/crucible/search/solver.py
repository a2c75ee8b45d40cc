"""
Solver Module - Convenience entry points over the strategy framework.
"""

import logging
import threading
from typing import Optional, Sequence

from .constraints import DEFAULT_SEED_DIRECTIONS, RunConstraints
from .context import SearchContext
from .direction import Direction
from .errors import SearchCancelledError
from .factory import create_strategy, get_default_strategy_name
from .grid import CostGrid, Location
from .solution import Solution

logger = logging.getLogger(__name__)


class Solver:
    """
    Runs searches over one grid with fixed constraints.

    The grid is never modified, so one Solver (or several sharing a grid)
    can be reused for any number of solves; each solve gets a fresh
    frontier and ledger.

    Attributes:
        grid: Cost grid to search
        constraints: Run-length limits and seed directions
        strategy: Strategy instance ordering the frontier
    """

    def __init__(self, grid: CostGrid, constraints: Optional[RunConstraints] = None,
                 strategy: Optional[str] = None):
        self.grid = grid
        self.constraints = constraints or RunConstraints()
        self.strategy = create_strategy(strategy or get_default_strategy_name())

    def solve(
        self,
        start: Optional[Location] = None,
        target: Optional[Location] = None,
        timeout_sec: Optional[float] = None,
        max_expansions: Optional[int] = None,
        cancel_flag: Optional[threading.Event] = None,
    ) -> Solution:
        """
        Find the cheapest constrained route between two cells.

        Args:
            start: Start location (default top-left)
            target: Target location (default bottom-right)
            timeout_sec: Optional wall-clock budget
            max_expansions: Optional budget of expanded states
            cancel_flag: Optional event another thread may set to stop

        Returns:
            Solution (check was_cancelled when a budget is given)

        Raises:
            ConfigError: If start or target lies off the grid
            NoPathError: If the target cannot be reached
        """
        context = SearchContext(
            grid=self.grid,
            constraints=self.constraints,
            start=start,
            target=target,
            timeout_sec=timeout_sec,
            max_expansions=max_expansions,
        )
        if cancel_flag is not None:
            context.cancel_flag = cancel_flag
        return self.strategy.solve(context)


def find_min_cost(
    grid: CostGrid,
    min_run: int,
    max_run: int,
    start: Optional[Location] = None,
    target: Optional[Location] = None,
    strategy: Optional[str] = None,
    seed_directions: Sequence[Direction] = DEFAULT_SEED_DIRECTIONS,
) -> int:
    """
    Minimum total cost from start to target under run constraints.

    Args:
        grid: Cost grid to search
        min_run: Moves required in a direction before turning (0 = none)
        max_run: Moves allowed in a direction before a turn is forced
        start: Start location (default top-left)
        target: Target location (default bottom-right)
        strategy: Strategy name (default "astar")
        seed_directions: Directions the first move may take

    Returns:
        Minimum cost

    Raises:
        ConfigError: If the constraints or endpoints are invalid
        NoPathError: If the target cannot be reached
    """
    constraints = RunConstraints.create(min_run, max_run, seed_directions)
    solution = Solver(grid, constraints, strategy).solve(start, target)
    if solution.was_cancelled:
        raise SearchCancelledError("Search cancelled before reaching the target")
    logger.info(f"Minimum cost {solution.cost} (runs {min_run}..{max_run})")
    return solution.cost
