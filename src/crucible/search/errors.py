"""
Errors Module - Exception types raised by grid loading and search.
"""

from typing import Optional, Tuple


class CrucibleError(Exception):
    """Base class for all errors raised by the pathfinder."""


class ParseError(CrucibleError):
    """
    A grid symbol is not a valid cost digit.

    Attributes:
        row: Row index of the offending symbol
        col: Column index of the offending symbol
        symbol: The rejected symbol
    """

    def __init__(self, row: int, col: int, symbol: object):
        self.row = row
        self.col = col
        self.symbol = symbol
        super().__init__(f"Invalid cost {symbol!r} at row {row}, col {col}")


class ShapeError(CrucibleError):
    """Grid rows have inconsistent lengths, or the grid is empty."""


class ConfigError(CrucibleError):
    """Invalid run constraints, endpoints or strategy name."""


class NoPathError(CrucibleError):
    """
    The frontier was exhausted without reaching the target.

    Attributes:
        start: Start location of the search
        target: Target location of the search
        min_run: Minimum run length in effect
        max_run: Maximum run length in effect
    """

    def __init__(self, start: Tuple[int, int], target: Tuple[int, int],
                 min_run: Optional[int] = None, max_run: Optional[int] = None):
        self.start = start
        self.target = target
        self.min_run = min_run
        self.max_run = max_run
        super().__init__(
            f"No path from {start} to {target} "
            f"with min_run={min_run}, max_run={max_run}"
        )


class SearchCancelledError(CrucibleError):
    """Search stopped by cancellation, timeout or expansion budget."""
