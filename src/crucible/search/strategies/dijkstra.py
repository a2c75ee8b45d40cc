"""
Dijkstra Strategy - Uniform-cost search with no heuristic.
"""

from typing import Callable

from ..base import SearchStrategy
from ..context import SearchContext
from ..factory import register_strategy
from ..grid import Location


@register_strategy
class DijkstraStrategy(SearchStrategy):
    """Orders the frontier by accumulated cost alone."""
    name = "dijkstra"
    description = "Dijkstra (uniform cost) - No heuristic"

    def prepare_heuristic(self, context: SearchContext) -> Callable[[Location], int]:
        return lambda loc: 0
