"""
Search Context Module - Inputs and cancellation for one search.
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .constraints import RunConstraints
from .errors import ConfigError
from .grid import CostGrid, Location


@dataclass
class SearchContext:
    """
    Everything a strategy needs to run one search, plus cancellation
    and progress reporting.

    Attributes:
        grid: Cost grid to search
        constraints: Run-length limits and seed directions
        start: Start location (defaults to the top-left cell)
        target: Target location (defaults to the bottom-right cell)
        cancel_flag: Threading event for cancellation
        timeout_sec: Maximum computation time in seconds (None = unbounded)
        max_expansions: Maximum states to expand (None = unbounded)
        start_time: When computation started
        progress_callback: Optional callback for progress updates
    """
    grid: CostGrid
    constraints: RunConstraints = field(default_factory=RunConstraints)
    start: Optional[Location] = None
    target: Optional[Location] = None
    cancel_flag: threading.Event = field(default_factory=threading.Event)
    timeout_sec: Optional[float] = None
    max_expansions: Optional[int] = None
    start_time: float = field(default_factory=time.time)
    progress_callback: Optional[Callable[[int, str], None]] = None

    def __post_init__(self):
        if self.start is None:
            self.start = self.grid.top_left
        if self.target is None:
            self.target = self.grid.bottom_right
        self.start = tuple(self.start)
        self.target = tuple(self.target)
        for name, loc in (("start", self.start), ("target", self.target)):
            if len(loc) != 2:
                raise ConfigError(f"{name} {loc} is not a (row, col) pair")
            if not self.grid.in_bounds(loc):
                raise ConfigError(
                    f"{name} {loc} is outside the {self.grid.rows}x{self.grid.cols} grid"
                )

    def is_cancelled(self, expanded: int = 0) -> bool:
        """
        Check if cancellation requested or a budget is exhausted.

        Args:
            expanded: States expanded so far

        Returns:
            True if the search should stop
        """
        if self.cancel_flag.is_set():
            return True
        if self.timeout_sec is not None and self.elapsed_time() > self.timeout_sec:
            return True
        if self.max_expansions is not None and expanded >= self.max_expansions:
            return True
        return False

    def report_progress(self, expanded: int, message: str = "") -> None:
        """Report the number of expanded states to the callback, if any."""
        if self.progress_callback:
            self.progress_callback(expanded, message)

    def elapsed_time(self) -> float:
        """Seconds elapsed since the context was created."""
        return time.time() - self.start_time
