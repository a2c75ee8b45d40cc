"""
Tests for directions, run constraints and successor generation.
"""

import pytest

from crucible.search import (
    ConfigError,
    CostGrid,
    Direction,
    RunConstraints,
    SearchState,
    legal_directions,
    successors,
)

N, S, E, W = Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST


def test_opposite_is_involution():
    for d in Direction:
        assert d.opposite() is not d
        assert d.opposite().opposite() is d


def test_offsets_are_unit_vectors():
    assert N.offset() == (-1, 0)
    assert S.offset() == (1, 0)
    assert E.offset() == (0, 1)
    assert W.offset() == (0, -1)
    for d in Direction:
        dr, dc = d.offset()
        assert abs(dr) + abs(dc) == 1


def test_from_symbol():
    assert Direction.from_symbol("e") is E
    assert Direction.from_symbol(" South ") is S
    with pytest.raises(ValueError):
        Direction.from_symbol("up")


def test_seed_moves_only_in_seed_direction():
    state = SearchState((1, 1), E, 0)
    assert legal_directions(state, 4, 10) == (E,)
    assert legal_directions(state, 0, 3) == (E,)


def test_below_min_run_must_go_straight():
    state = SearchState((5, 5), S, 2)
    assert legal_directions(state, 4, 10) == (S,)


def test_at_max_run_must_turn():
    state = SearchState((5, 5), E, 3)
    assert set(legal_directions(state, 1, 3)) == {N, S}


def test_between_limits_never_reverses():
    state = SearchState((5, 5), W, 2)
    assert set(legal_directions(state, 1, 3)) == {N, S, W}


def test_successors_update_run_and_cost():
    grid = CostGrid.from_text("123\n456\n789")
    state = SearchState((1, 1), E, 1)
    result = {s: cost for s, cost in successors(state, grid, 1, 3)}
    assert result == {
        SearchState((1, 2), E, 2): 6,
        SearchState((0, 1), N, 1): 2,
        SearchState((2, 1), S, 1): 8,
    }


def test_successors_skip_off_grid():
    grid = CostGrid.from_text("12\n34")
    state = SearchState((0, 1), E, 1)
    result = list(successors(state, grid, 1, 3))
    assert result == [(SearchState((1, 1), S, 1), 4)]


def test_successors_from_seed():
    grid = CostGrid.from_text("12\n34")
    assert list(successors(SearchState((0, 0), E, 0), grid, 4, 10)) == [
        (SearchState((0, 1), E, 1), 2)
    ]
    assert list(successors(SearchState((0, 0), N, 0), grid, 4, 10)) == []


def test_at_most_three_successors():
    grid = CostGrid.from_text("111\n111\n111")
    for d in Direction:
        for run in range(1, 4):
            state = SearchState((1, 1), d, run)
            assert len(list(successors(state, grid, 1, 3))) <= 3


def test_run_constraints_validation():
    assert RunConstraints.create(0, 3).min_run == 0
    with pytest.raises(ConfigError):
        RunConstraints.create(5, 4)
    with pytest.raises(ConfigError):
        RunConstraints.create(0, 0)
    with pytest.raises(ConfigError):
        RunConstraints.create(-1, 3)
    with pytest.raises(ConfigError):
        RunConstraints.create(1, 3, seed_directions=[])


def test_run_constraints_from_settings():
    constraints = RunConstraints.from_settings(
        {"min_run": "4", "max_run": 10, "seed_directions": ["N", "w"]}
    )
    assert constraints.min_run == 4
    assert constraints.max_run == 10
    assert constraints.seed_directions == (N, W)

    defaulted = RunConstraints.from_settings({"min_run": 1, "max_run": 3})
    assert defaulted.seed_directions == (E, S)

    with pytest.raises(ConfigError):
        RunConstraints.from_settings({"max_run": 3})
    with pytest.raises(ConfigError):
        RunConstraints.from_settings({"min_run": 1, "max_run": 3, "seed_directions": ["Q"]})
