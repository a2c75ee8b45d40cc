"""
Move Expansion Module - Legal successors of a search state.

The run gates:
    - run < min_run: only straight on is legal
    - run >= max_run: straight on is illegal
    - reversing is never legal
A seed state (run 0) moves only in its own seed direction.
"""

from typing import Iterator, Tuple

from .direction import Direction
from .grid import CostGrid
from .state import SearchState


def legal_directions(state: SearchState, min_run: int, max_run: int) -> Tuple[Direction, ...]:
    """
    Directions the walker may take from a state.

    Args:
        state: Current search state
        min_run: Minimum run before turning
        max_run: Maximum run before a forced turn

    Returns:
        Tuple of legal directions (at most three)
    """
    if state.is_seed:
        return (state.direction,)
    if state.run < min_run:
        return (state.direction,)

    reverse = state.direction.opposite()
    return tuple(
        d for d in Direction
        if d is not reverse and not (d is state.direction and state.run >= max_run)
    )


def successors(state: SearchState, grid: CostGrid,
               min_run: int, max_run: int) -> Iterator[Tuple[SearchState, int]]:
    """
    Generate legal successor states and the cost of entering each.

    Args:
        state: Current search state
        grid: Cost grid being searched
        min_run: Minimum run before turning
        max_run: Maximum run before a forced turn

    Yields:
        (successor state, incremental cost) pairs; off-grid moves are skipped
    """
    row, col = state.location
    for d in legal_directions(state, min_run, max_run):
        dr, dc = d.offset()
        next_loc = (row + dr, col + dc)
        cost = grid.cost_at(next_loc)
        if cost is None:
            continue
        run = state.run + 1 if d is state.direction else 1
        yield SearchState(next_loc, d, run), cost
