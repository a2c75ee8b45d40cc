"""
Run Constraints Module - Turning limits and seed directions for a search.
"""

from dataclasses import dataclass
from typing import Any, Dict, Sequence, Tuple

from .direction import Direction
from .errors import ConfigError

DEFAULT_SEED_DIRECTIONS: Tuple[Direction, ...] = (Direction.EAST, Direction.SOUTH)


@dataclass(frozen=True)
class RunConstraints:
    """
    How far the walker must and may travel straight.

    Attributes:
        min_run: Moves required in a direction before turning (0 = none)
        max_run: Moves allowed in a direction before a turn is forced
        seed_directions: Directions the first move may take
    """
    min_run: int = 1
    max_run: int = 3
    seed_directions: Tuple[Direction, ...] = DEFAULT_SEED_DIRECTIONS

    def __post_init__(self):
        if self.max_run < 1:
            raise ConfigError(f"max_run must be at least 1, got {self.max_run}")
        if self.min_run < 0:
            raise ConfigError(f"min_run must not be negative, got {self.min_run}")
        if self.min_run > self.max_run:
            raise ConfigError(
                f"min_run ({self.min_run}) exceeds max_run ({self.max_run})"
            )
        if not self.seed_directions:
            raise ConfigError("At least one seed direction is required")
        # Accept any sequence but store a hashable tuple
        object.__setattr__(self, "seed_directions", tuple(self.seed_directions))

    @classmethod
    def create(cls, min_run: int, max_run: int,
               seed_directions: Sequence[Direction] = DEFAULT_SEED_DIRECTIONS
               ) -> "RunConstraints":
        """Build constraints from plain arguments."""
        return cls(min_run=min_run, max_run=max_run,
                   seed_directions=tuple(seed_directions))

    @classmethod
    def from_settings(cls, settings: Dict[str, Any]) -> "RunConstraints":
        """
        Build constraints from a settings dictionary.

        Args:
            settings: Dict with "min_run", "max_run" and optionally
                      "seed_directions" (list of direction symbols)

        Returns:
            RunConstraints instance

        Raises:
            ConfigError: If values are missing or invalid
        """
        try:
            min_run = int(settings["min_run"])
            max_run = int(settings["max_run"])
            symbols = settings.get("seed_directions") or []
            seeds = tuple(Direction.from_symbol(s) for s in symbols)
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigError(f"Invalid run constraint settings: {e}") from e
        return cls(min_run=min_run, max_run=max_run,
                   seed_directions=seeds or DEFAULT_SEED_DIRECTIONS)

    def can_stop(self, run: int) -> bool:
        """Whether a walker with this run length may end its path."""
        return run >= self.min_run
