import random

import pytest

from pathsandbox.entities.grid import Grid
from pathsandbox.utils.errors import OutOfBounds
from pathsandbox.utils.types import Position, Successor


def positions_of(successors):
    return [s.position.to_tuple() for s in successors]


def test_successor_order_with_diagonals():
    grid = Grid(3, 3, allow_diagonals=True)
    assert positions_of(grid.get_successors(Position(1, 1))) == [
        (0, 0), (1, 0), (2, 0),
        (0, 1), (2, 1),
        (0, 2), (1, 2), (2, 2),
    ]


def test_successor_order_without_diagonals():
    grid = Grid(3, 3)
    assert positions_of(grid.get_successors(Position(1, 1))) == [
        (1, 0), (0, 1), (2, 1), (1, 2),
    ]


def test_corner_cell_stays_inside_grid():
    grid = Grid(3, 3, allow_diagonals=True)
    assert positions_of(grid.get_successors(Position(0, 0))) == [(1, 0), (0, 1), (1, 1)]


def test_single_cell_grid_has_no_successors():
    assert Grid(1, 1, allow_diagonals=True).get_successors(Position(0, 0)) == []


def test_blocked_neighbours_are_skipped():
    grid = Grid(3, 3)
    grid.set_blocked(Position(1, 0), True)
    grid.set_blocked(Position(2, 1), True)
    assert positions_of(grid.get_successors(Position(1, 1))) == [(0, 1), (1, 2)]


def test_successor_cost_is_cost_of_entering_neighbour():
    grid = Grid(3, 1)
    grid.set_cost_value(Position(2, 0), 7)
    assert grid.get_successors(Position(1, 0)) == [
        Successor(Position(0, 0), 1),
        Successor(Position(2, 0), 7),
    ]


def test_unset_cost_is_traversed_as_one_but_reported_as_none():
    grid = Grid(2, 1, default_cost=None)
    assert grid.cost_at(Position(1, 0)) is None
    assert grid.traversal_cost(Position(1, 0)) == 1
    assert grid.get_successors(Position(0, 0)) == [Successor(Position(1, 0), 1)]
    assert grid.flat_costs() == [None, None]


def test_set_cost_is_floored_at_one():
    grid = Grid(2, 2)
    cell = Position(1, 1)
    assert grid.set_cost(cell, -1) == 1
    assert grid.set_cost(cell, 1) == 2
    assert grid.set_cost(cell, 1) == 3
    assert grid.set_cost(cell, -1) == 2
    assert grid.cost_at(cell) == 2


def test_set_cost_value_rejects_non_positive_cost():
    with pytest.raises(ValueError):
        Grid(2, 2).set_cost_value(Position(0, 0), 0)


@pytest.mark.parametrize("position", [(-1, 0), (0, -1), (4, 0), (0, 3), (10, 10)])
def test_out_of_bounds_mutation_raises(position):
    grid = Grid(4, 3)
    with pytest.raises(OutOfBounds):
        grid.set_blocked(Position(*position), True)
    with pytest.raises(OutOfBounds):
        grid.set_cost(Position(*position), 1)
    # nothing was touched
    assert not any(grid.flat_blocked())
    assert set(grid.flat_costs()) == {1}


def test_out_of_bounds_is_a_value_error():
    assert issubclass(OutOfBounds, ValueError)


def test_reset_restores_open_default_grid():
    grid = Grid(3, 3, default_cost=2)
    grid.set_blocked(Position(0, 0), True)
    grid.set_cost(Position(1, 1), 5)
    grid.reset(2)
    assert grid.flat_blocked() == [False] * 9
    assert grid.flat_costs() == [2] * 9
    grid.reset(None)
    assert grid.flat_costs() == [None] * 9


def test_flat_views_are_row_major():
    grid = Grid(3, 2)
    grid.set_blocked(Position(2, 0), True)
    grid.set_cost_value(Position(0, 1), 4)
    assert grid.flat_blocked() == [False, False, True, False, False, False]
    assert grid.flat_costs() == [1, 1, 1, 4, 1, 1]


def test_grid_must_have_at_least_one_cell():
    with pytest.raises(ValueError):
        Grid(0, 4)


@pytest.mark.parametrize("allow_diagonals", [False, True])
def test_successors_never_leave_grid_or_enter_blocked_cells(allow_diagonals):
    rng = random.Random(7)
    limit = 8 if allow_diagonals else 4
    for _ in range(20):
        grid = Grid(rng.randint(1, 7), rng.randint(1, 7), allow_diagonals=allow_diagonals)
        for position in grid.positions():
            if rng.random() < 0.3:
                grid.set_blocked(position, True)
        for position in grid.positions():
            successors = grid.get_successors(position)
            assert len(successors) <= limit
            for successor in successors:
                assert grid.in_bounds(successor.position)
                assert not grid.is_blocked(successor.position)
                assert successor.position != position
                if not allow_diagonals:
                    assert successor.position.distance(position) == 1


def test_position_is_an_ordered_immutable_key():
    a, b = Position(1, 5), Position(2, 0)
    assert a < b
    assert sorted([b, a, Position(1, 2)]) == [Position(1, 2), a, b]
    assert {Position(1, 5): "x"}[a] == "x"
    x, y = a
    assert (x, y) == (1, 5)
    with pytest.raises(AttributeError):
        a.x = 3
    assert a.distance(b) == 6
    assert a.chebyshev(b) == 5
