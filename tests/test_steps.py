import numpy as np
import pytest

from maze.maze_core import CELL_CODES, CellType, initialize_grid
from maze.steps import StepLog

WALL = CELL_CODES[CellType.WALL]
PATH = CELL_CODES[CellType.PATH]


@pytest.fixture
def recorded():
    grid = initialize_grid(3, 4)
    steps = StepLog(grid)
    steps.apply(grid, [(1, 1)], CellType.PATH)
    steps.apply(grid, [(1, 1), (1, 2)], CellType.PATH)
    return grid, steps


def test_apply_mutates_grid_and_records_only_changes(recorded):
    grid, steps = recorded

    assert grid[1, 2].type is CellType.PATH
    assert len(steps) == 2
    assert steps.deltas(0) == [(1, 1, CellType.WALL, CellType.PATH)]
    assert steps.deltas(1) == [(1, 2, CellType.WALL, CellType.PATH)]


def test_apply_returns_changed_count():
    grid = initialize_grid(3, 3)
    steps = StepLog(grid)
    assert steps.apply(grid, [(1, 1), (0, 0)], CellType.PATH) == 2
    assert steps.apply(grid, [(1, 1)], CellType.PATH) == 0
    assert len(steps) == 2


def test_snapshots_replay_deltas(recorded):
    grid, steps = recorded

    first = steps[0]
    assert first[1, 1] == PATH
    assert first[1, 2] == WALL
    assert np.array_equal(steps[-1], grid.to_array())
    assert np.array_equal(steps.final(), steps[1])


def test_iteration_is_restartable(recorded):
    _, steps = recorded

    first_pass = list(steps)
    first_pass[0][0, 0] = PATH  # caller may scribble on a yielded snapshot
    second_pass = list(steps)

    assert len(second_pass) == 2
    assert second_pass[0][0, 0] == WALL
    assert np.array_equal(second_pass[1], steps[1])


def test_index_out_of_range(recorded):
    _, steps = recorded
    with pytest.raises(IndexError):
        steps[2]
    with pytest.raises(IndexError):
        steps[-3]


def test_final_of_empty_log_is_base():
    grid = initialize_grid(2, 2)
    steps = StepLog(grid)
    assert len(steps) == 0
    assert np.array_equal(steps.final(), grid.to_array())
