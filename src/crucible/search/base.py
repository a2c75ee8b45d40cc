"""
Base Strategy Module - Best-first search loop shared by all strategies.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from .context import SearchContext
from .errors import NoPathError
from .expansion import successors
from .frontier import Frontier
from .grid import Location
from .ledger import VisitedLedger
from .solution import Solution, SolutionMetrics
from .state import SearchState

logger = logging.getLogger(__name__)

# Expansions between progress reports and cancellation log lines
PROGRESS_INTERVAL = 10000


class SearchStrategy(ABC):
    """
    Abstract base class for search strategies.

    Strategies differ only in how they order the frontier: subclasses
    supply a heuristic, and the shared loop in solve() does the rest.
    The heuristic must never overestimate the remaining cost, otherwise
    the first accepted goal is not guaranteed to be the cheapest.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description
    """
    name: str = "base"
    description: str = "Base strategy"

    @abstractmethod
    def prepare_heuristic(self, context: SearchContext) -> Callable[[Location], int]:
        """
        Build the remaining-cost estimate for one search.

        Args:
            context: Search context with grid and target

        Returns:
            Function mapping a location to a lower bound on remaining cost
        """
        pass

    def solve(self, context: SearchContext) -> Solution:
        """
        Run the search to the first acceptable goal state.

        The goal is accepted on pop, not on push, and only once the run
        that reaches it satisfies min_run.

        Args:
            context: Search context with grid, constraints and endpoints

        Returns:
            Solution with cost, path and metrics (was_cancelled=True and
            no cost if the context cancelled the search)

        Raises:
            NoPathError: If the frontier empties without an acceptable goal
        """
        start_time = time.perf_counter()

        grid = context.grid
        constraints = context.constraints
        target = context.target
        min_run, max_run = constraints.min_run, constraints.max_run
        estimate = self.prepare_heuristic(context)

        ledger = VisitedLedger()
        frontier = Frontier()
        expanded = 0
        stale = 0

        for direction in constraints.seed_directions:
            seed = SearchState(context.start, direction, 0)
            if ledger.relax(seed, 0):
                frontier.push(seed, 0, estimate(context.start))

        logger.debug(
            f"[{self.name}] searching {grid.rows}x{grid.cols} grid "
            f"{context.start} -> {target}, runs {min_run}..{max_run}"
        )

        while frontier:
            if context.is_cancelled(expanded):
                logger.info(f"[{self.name}] search cancelled after {expanded} expansions")
                return self._build_solution(
                    None, [], expanded, frontier.pushed, stale, start_time,
                    was_cancelled=True
                )

            candidate = frontier.pop()
            state = candidate.state

            if ledger.is_stale(state, candidate.cost):
                stale += 1
                continue

            if state.location == target and constraints.can_stop(state.run):
                chain = ledger.trace(state)
                solution = self._build_solution(
                    candidate.cost, chain, expanded, frontier.pushed, stale,
                    start_time, was_cancelled=False
                )
                logger.debug(
                    f"[{self.name}] cost {candidate.cost} in "
                    f"{solution.metrics.computation_time_ms:.1f}ms, "
                    f"{expanded} expanded, {len(ledger)} states seen"
                )
                return solution

            expanded += 1
            for nxt, step_cost in successors(state, grid, min_run, max_run):
                new_cost = candidate.cost + step_cost
                if ledger.relax(nxt, new_cost, parent=state):
                    frontier.push(nxt, new_cost, new_cost + estimate(nxt.location))

            if expanded % PROGRESS_INTERVAL == 0:
                context.report_progress(expanded, f"{len(frontier)} queued")

        logger.debug(f"[{self.name}] frontier exhausted after {expanded} expansions")
        raise NoPathError(context.start, target, min_run, max_run)

    def _build_solution(
        self,
        cost: Optional[int],
        chain: List[SearchState],
        expanded: int,
        pushed: int,
        stale: int,
        start_time: float,
        was_cancelled: bool
    ) -> Solution:
        """Build Solution object from search results."""
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        return Solution(
            cost=cost,
            path=[s.location for s in chain],
            moves=[s.direction for s in chain[1:]],
            was_cancelled=was_cancelled,
            metrics=SolutionMetrics(
                computation_time_ms=elapsed_ms,
                states_expanded=expanded,
                states_pushed=pushed,
                stale_pops=stale,
                strategy_name=self.name
            )
        )
