"""
Direction Module - The four cardinal moves on a grid.
"""

from enum import Enum
from typing import Tuple


class Direction(Enum):
    """
    Cardinal direction of a single grid move.

    Values are the unit (d_row, d_col) offsets, so rows grow southward
    and columns grow eastward.
    """
    NORTH = (-1, 0)
    SOUTH = (1, 0)
    EAST = (0, 1)
    WEST = (0, -1)

    def opposite(self) -> "Direction":
        """Direction pointing the other way (an involution)."""
        return _OPPOSITES[self]

    def offset(self) -> Tuple[int, int]:
        """Unit (d_row, d_col) vector for this direction."""
        return self.value

    @property
    def symbol(self) -> str:
        """Single-letter label used by settings and the CLI."""
        return self.name[0]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Direction":
        """
        Look up a direction by name or first letter (case-insensitive).

        Args:
            symbol: "N", "south", "E", ...

        Returns:
            Matching Direction

        Raises:
            ValueError: If the symbol names no direction
        """
        key = symbol.strip().upper()
        for direction in cls:
            if key in (direction.name, direction.symbol):
                return direction
        raise ValueError(f"Unknown direction: {symbol!r}")


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}
