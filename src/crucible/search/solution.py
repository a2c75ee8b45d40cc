"""
Solution Module - Result of a search and its performance metrics.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .direction import Direction
from .grid import Location


@dataclass
class SolutionMetrics:
    """
    Performance metrics for one search.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_expanded: Frontier pops that were expanded
        states_pushed: Candidates added to the frontier
        stale_pops: Pops discarded because a cheaper route was known
        strategy_name: Name of strategy that ran the search
    """
    computation_time_ms: float = 0.0
    states_expanded: int = 0
    states_pushed: int = 0
    stale_pops: int = 0
    strategy_name: str = ""


@dataclass
class Solution:
    """
    Result of a search.

    Attributes:
        cost: Minimum total cost, or None if the search was cancelled
        path: Locations from start to target, inclusive
        moves: Direction of each step along path
        was_cancelled: True if stopped before reaching the target
        metrics: Performance statistics
    """
    cost: Optional[int] = None
    path: List[Location] = field(default_factory=list)
    moves: List[Direction] = field(default_factory=list)
    was_cancelled: bool = False
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def is_complete(self) -> bool:
        """True if the search reached the target."""
        return self.cost is not None and not self.was_cancelled

    @property
    def step_count(self) -> int:
        return len(self.moves)

    @property
    def runs(self) -> List[Tuple[Direction, int]]:
        """Moves grouped into (direction, length) straight runs."""
        return run_lengths(self.moves)


def run_lengths(moves: List[Direction]) -> List[Tuple[Direction, int]]:
    """
    Group consecutive identical moves.

    Args:
        moves: Sequence of single-step directions

    Returns:
        List of (direction, count) pairs in path order
    """
    runs: List[Tuple[Direction, int]] = []
    for move in moves:
        if runs and runs[-1][0] is move:
            runs[-1] = (move, runs[-1][1] + 1)
        else:
            runs.append((move, 1))
    return runs
