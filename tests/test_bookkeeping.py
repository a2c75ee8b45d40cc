"""
Tests for the frontier, the visited ledger and the heuristic.
"""

from crucible.search import (
    CostGrid,
    Direction,
    Frontier,
    SearchState,
    VisitedLedger,
    manhattan,
    scaled_manhattan,
)
from crucible.search.heuristic import min_step_cost

E, S = Direction.EAST, Direction.SOUTH


def _state(row, col, direction=E, run=1):
    return SearchState((row, col), direction, run)


def test_frontier_pops_lowest_priority_first():
    frontier = Frontier()
    frontier.push(_state(0, 1), cost=5, priority=9)
    frontier.push(_state(0, 2), cost=2, priority=4)
    frontier.push(_state(0, 3), cost=7, priority=7)

    assert [frontier.pop().priority for _ in range(3)] == [4, 7, 9]
    assert frontier.pop() is None
    assert not frontier


def test_frontier_breaks_ties_by_insertion_order():
    frontier = Frontier()
    first = frontier.push(_state(1, 0), cost=3, priority=3)
    second = frontier.push(_state(0, 1), cost=1, priority=3)

    assert frontier.pop() == first
    assert frontier.pop() == second
    assert frontier.pushed == 2


def test_ledger_relax_only_on_strict_improvement():
    ledger = VisitedLedger()
    state = _state(2, 2)

    assert ledger.best_known(state) is None
    assert ledger.relax(state, 10)
    assert not ledger.relax(state, 10)
    assert not ledger.relax(state, 12)
    assert ledger.relax(state, 7)
    assert ledger.best_known(state) == 7


def test_ledger_key_is_state_identity_only():
    ledger = VisitedLedger()
    ledger.relax(_state(2, 2, E, 1), 5)

    # Same cell, different direction or run: separate records
    assert ledger.relax(_state(2, 2, S, 1), 9)
    assert ledger.relax(_state(2, 2, E, 2), 9)
    assert len(ledger) == 3


def test_ledger_staleness():
    ledger = VisitedLedger()
    state = _state(1, 1)
    ledger.relax(state, 8)
    ledger.relax(state, 6)
    assert ledger.is_stale(state, 8)
    assert not ledger.is_stale(state, 6)


def test_ledger_trace_follows_latest_parents():
    ledger = VisitedLedger()
    seed = SearchState((0, 0), E, 0)
    a = _state(0, 1, E, 1)
    b = _state(0, 2, E, 2)
    ledger.relax(seed, 0)
    ledger.relax(a, 4, parent=seed)
    ledger.relax(b, 6, parent=a)

    assert ledger.trace(b) == [seed, a, b]
    assert ledger.trace(seed) == [seed]


def test_manhattan_and_scaling():
    assert manhattan((0, 0), (3, 4)) == 7
    assert manhattan((3, 4), (0, 0)) == 7
    assert scaled_manhattan((0, 0), (3, 4), 2) == 14
    assert scaled_manhattan((0, 0), (3, 4), 0) == 0


def test_min_step_cost_tracks_cheapest_cell():
    assert min_step_cost(CostGrid.from_text("95\n37")) == 3
    assert min_step_cost(CostGrid.from_text("95\n07")) == 0
