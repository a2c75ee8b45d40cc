"""
Cost Grid Module - Immutable per-cell traversal costs for the pathfinder.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from .errors import ParseError, ShapeError

logger = logging.getLogger(__name__)

Location = Tuple[int, int]  # (row, col)

# Costs are single decimal digits
MIN_COST = 0
MAX_COST = 9


@dataclass(frozen=True, eq=False)
class CostGrid:
    """
    Immutable rectangular matrix of traversal costs.

    Entering a cell costs the value stored in that cell. The backing
    numpy array is marked read-only so a grid can be shared by any
    number of searches.

    Attributes:
        cells: 2D uint8 array of costs, indexed [row, col]
    """
    cells: np.ndarray

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "CostGrid":
        """
        Create a CostGrid from nested sequences of integer costs.

        Args:
            rows: One sequence of costs (0-9) per grid row

        Returns:
            CostGrid instance

        Raises:
            ShapeError: If the grid is empty or rows differ in length
            ParseError: If a value is not an integer in 0-9
        """
        rows = [list(row) for row in rows]
        _check_shape([len(row) for row in rows])

        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                    raise ParseError(r, c, value)
                if not MIN_COST <= value <= MAX_COST:
                    raise ParseError(r, c, value)

        cells = np.array(rows, dtype=np.uint8)
        cells.setflags(write=False)
        return cls(cells=cells)

    @classmethod
    def from_text(cls, text: str) -> "CostGrid":
        """
        Parse puzzle text, one row per line, one digit per cell.

        Leading and trailing blank lines and surrounding whitespace are
        ignored; a blank line inside the grid is an empty row.

        Args:
            text: Grid text

        Returns:
            CostGrid instance

        Raises:
            ShapeError: If no rows are present or rows differ in length
            ParseError: If a character is not a digit
        """
        lines = [line.strip() for line in text.splitlines()]
        while lines and not lines[-1]:
            lines.pop()
        while lines and not lines[0]:
            lines.pop(0)
        _check_shape([len(line) for line in lines])

        rows: List[List[int]] = []
        for r, line in enumerate(lines):
            row = []
            for c, ch in enumerate(line):
                if ch not in "0123456789":
                    raise ParseError(r, c, ch)
                row.append(ord(ch) - ord("0"))
            rows.append(row)

        grid = cls.from_rows(rows)
        logger.debug(f"Parsed {grid.rows}x{grid.cols} cost grid")
        return grid

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "CostGrid":
        """Read and parse a grid file (UTF-8 text)."""
        return cls.from_text(Path(path).read_text(encoding="utf-8"))

    @property
    def rows(self) -> int:
        """Number of grid rows."""
        return int(self.cells.shape[0])

    @property
    def cols(self) -> int:
        """Number of grid columns."""
        return int(self.cells.shape[1])

    @property
    def min_cost(self) -> int:
        """Cheapest cell cost anywhere on the grid."""
        return int(self.cells.min())

    @property
    def top_left(self) -> Location:
        return (0, 0)

    @property
    def bottom_right(self) -> Location:
        return (self.rows - 1, self.cols - 1)

    def dimensions(self) -> Tuple[int, int]:
        """Return (rows, cols)."""
        return (self.rows, self.cols)

    def in_bounds(self, loc: Location) -> bool:
        row, col = loc
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cost_at(self, loc: Location) -> Optional[int]:
        """
        Get the cost of entering a cell.

        Args:
            loc: (row, col) location

        Returns:
            Cell cost, or None if the location is off the grid
        """
        if not self.in_bounds(loc):
            return None
        return int(self.cells[loc[0], loc[1]])

    def path_cost(self, path: Iterable[Location]) -> int:
        """Sum of entry costs along a path, excluding its first cell."""
        locations = list(path)
        return sum(self.cost_at(loc) for loc in locations[1:])

    def to_list(self) -> List[List[int]]:
        """Convert to a mutable 2D list of ints."""
        return self.cells.tolist()

    def __hash__(self):
        return hash((self.cells.shape, self.cells.tobytes()))

    def __eq__(self, other):
        if not isinstance(other, CostGrid):
            return False
        return np.array_equal(self.cells, other.cells)


def _check_shape(lengths: List[int]) -> None:
    """Raise ShapeError unless lengths describe a non-empty rectangle."""
    if not lengths:
        raise ShapeError("Cost grid is empty")
    width = lengths[0]
    for r, length in enumerate(lengths):
        if length != width:
            raise ShapeError(
                f"Row {r} has {length} cells, expected {width}"
            )
    if width == 0:
        raise ShapeError("Cost grid has no columns")
