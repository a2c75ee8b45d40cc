"""
Visited Ledger Module - Best known cost per search state.
"""

from typing import Dict, Iterator, List, Optional

from .state import SearchState


class VisitedLedger:
    """
    Records the cheapest accumulated cost seen for each SearchState.

    Keys are the state's identity (location, direction, run) only, so a
    more expensive route to an already-seen state is pruned. The ledger
    also keeps the parent of each accepted state for path rebuilding.
    """

    def __init__(self):
        self._best: Dict[SearchState, int] = {}
        self._parent: Dict[SearchState, Optional[SearchState]] = {}

    def best_known(self, state: SearchState) -> Optional[int]:
        """Cheapest recorded cost for state, or None if never seen."""
        return self._best.get(state)

    def relax(self, state: SearchState, cost: int,
              parent: Optional[SearchState] = None) -> bool:
        """
        Record cost for state if it beats the current record.

        Args:
            state: State reached
            cost: Accumulated cost of the new route
            parent: State the new route came from

        Returns:
            True if cost was strictly lower (or first seen) and was recorded
        """
        best = self._best.get(state)
        if best is not None and cost >= best:
            return False
        self._best[state] = cost
        self._parent[state] = parent
        return True

    def is_stale(self, state: SearchState, cost: int) -> bool:
        """True if a cheaper route to state has been recorded since."""
        best = self._best.get(state)
        return best is not None and cost > best

    def trace(self, state: SearchState) -> List[SearchState]:
        """
        Follow parent links back to a seed.

        Args:
            state: Final state of a route

        Returns:
            States from the seed to state, inclusive
        """
        chain = [state]
        parent = self._parent.get(state)
        while parent is not None:
            chain.append(parent)
            parent = self._parent.get(parent)
        chain.reverse()
        return chain

    def __len__(self) -> int:
        return len(self._best)

    def __contains__(self, state: SearchState) -> bool:
        return state in self._best

    def __iter__(self) -> Iterator[SearchState]:
        return iter(self._best)
