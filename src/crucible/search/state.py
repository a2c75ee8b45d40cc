"""
Search State Module - Node identity and frontier entries for the search.
"""

from dataclasses import dataclass, field

from .direction import Direction
from .grid import Location


@dataclass(frozen=True)
class SearchState:
    """
    One node of the augmented grid state space.

    The same cell splits into many states, one per (direction, run)
    combination, because the legal next moves depend on how the walker
    arrived.

    Attributes:
        location: Current (row, col)
        direction: Direction of the last move (seed direction for run 0)
        run: Consecutive moves made in direction; 0 before the first move
    """
    location: Location
    direction: Direction
    run: int

    @property
    def is_seed(self) -> bool:
        """True for a start state that has not moved yet."""
        return self.run == 0


@dataclass(frozen=True, order=True)
class Candidate:
    """
    Frontier entry: a state reached at some accumulated cost.

    Ordering uses (priority, seq) only, so equal priorities pop in
    insertion order.

    Attributes:
        priority: cost + heuristic estimate
        seq: Insertion counter assigned by the frontier
        cost: Accumulated cost from the start
        state: The state reached
    """
    priority: int
    seq: int
    cost: int = field(compare=False)
    state: SearchState = field(compare=False)
