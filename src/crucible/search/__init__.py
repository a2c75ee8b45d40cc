"""
Search Package - Limited-turn shortest path search over cost grids.

A walker crosses a grid of digit costs from a start cell to a target
cell, paying the cost of every cell it enters. It must travel at least
min_run cells in a direction before turning, may travel at most max_run
cells before a turn is forced, and may never reverse.

Public API:
    - CostGrid: Immutable cost matrix
    - Direction: Cardinal moves
    - RunConstraints: min_run / max_run / seed directions
    - SearchState, Candidate: Node identity and frontier entry
    - successors(): Legal moves from a state
    - Frontier, VisitedLedger: Search bookkeeping
    - SearchContext: Inputs, budgets and cancellation for one search
    - Solution, SolutionMetrics: Search results
    - SearchStrategy: Abstract base for strategies
    - Solver, find_min_cost(): Convenience entry points
    - create_strategy(), get_strategy_names()

Usage:
    from crucible.search import CostGrid, find_min_cost

    grid = CostGrid.from_file("input.txt")
    print(find_min_cost(grid, min_run=1, max_run=3))
    print(find_min_cost(grid, min_run=4, max_run=10))
"""

# Core data structures
from .errors import (
    CrucibleError,
    ParseError,
    ShapeError,
    ConfigError,
    NoPathError,
    SearchCancelledError,
)
from .grid import CostGrid
from .direction import Direction
from .constraints import RunConstraints, DEFAULT_SEED_DIRECTIONS
from .state import SearchState, Candidate
from .expansion import successors, legal_directions
from .heuristic import manhattan, scaled_manhattan
from .frontier import Frontier
from .ledger import VisitedLedger
from .context import SearchContext
from .solution import Solution, SolutionMetrics, run_lengths

# Strategy framework
from .base import SearchStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_default_strategy_name,
    register_strategy,
)

# Import strategies to register them
from . import strategies

from .solver import Solver, find_min_cost

__all__ = [
    # Errors
    "CrucibleError",
    "ParseError",
    "ShapeError",
    "ConfigError",
    "NoPathError",
    "SearchCancelledError",
    # Data structures
    "CostGrid",
    "Direction",
    "RunConstraints",
    "DEFAULT_SEED_DIRECTIONS",
    "SearchState",
    "Candidate",
    "successors",
    "legal_directions",
    "manhattan",
    "scaled_manhattan",
    "Frontier",
    "VisitedLedger",
    "SearchContext",
    "Solution",
    "SolutionMetrics",
    "run_lengths",
    # Strategy framework
    "SearchStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_default_strategy_name",
    "register_strategy",
    "Solver",
    "find_min_cost",
]
