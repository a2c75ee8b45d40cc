"""
Frontier Module - Priority queue of candidates awaiting expansion.
"""

import heapq
from typing import List, Optional

from .state import Candidate, SearchState


class Frontier:
    """
    Min-heap of candidates ordered by priority, then insertion order.

    Superseded entries are not removed; callers discard them on pop by
    comparing against the visited ledger.
    """

    def __init__(self):
        self._heap: List[Candidate] = []
        self._seq = 0
        self.pushed = 0

    def push(self, state: SearchState, cost: int, priority: int) -> Candidate:
        """
        Add a candidate.

        Args:
            state: State reached
            cost: Accumulated cost to reach it
            priority: cost + heuristic

        Returns:
            The queued Candidate
        """
        candidate = Candidate(priority=priority, seq=self._seq, cost=cost, state=state)
        self._seq += 1
        self.pushed += 1
        heapq.heappush(self._heap, candidate)
        return candidate

    def pop(self) -> Optional[Candidate]:
        """Remove and return the best candidate, or None when empty."""
        if not self._heap:
            return None
        return heapq.heappop(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
