import logging
import random

import numpy as np
import pytest

from maze.errors import InvalidDimensions
from maze.generator import (
    MazeAlgorithm, carved_components, gen_prim, gen_random, gen_recursive_backtracking,
    generate_maze, room_positions
)
from maze.maze_core import CELL_CODES, CellType, MazeGrid, initialize_grid, set_start_and_end

CARVERS = [gen_recursive_backtracking, gen_prim]
SIZES = [(4, 4), (5, 5), (7, 9), (10, 12), (21, 31)]


@pytest.mark.parametrize("algorithm", list(MazeAlgorithm))
@pytest.mark.parametrize("rows, cols", SIZES)
def test_generate_maze_places_one_start_and_end(algorithm, rows, cols):
    grid, _ = generate_maze(rows, cols, algorithm, seed=11)

    assert (grid.rows, grid.cols) == (rows, cols)
    assert [cell.pos for cell in grid.find(CellType.START)] == [(1, 1)]
    assert [cell.pos for cell in grid.find(CellType.END)] == [(rows - 2, cols - 2)]


@pytest.mark.parametrize("gen_func", CARVERS)
@pytest.mark.parametrize("rows, cols", SIZES)
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_carved_paths_form_one_component(gen_func, rows, cols, seed):
    grid, _ = gen_func(initialize_grid(rows, cols), rng=random.Random(seed))
    assert len(carved_components(grid)) == 1


@pytest.mark.parametrize("gen_func", CARVERS)
@pytest.mark.parametrize("rows, cols", [(5, 5), (11, 15), (21, 31)])
def test_odd_grids_become_spanning_trees(gen_func, rows, cols):
    grid, steps = gen_func(initialize_grid(rows, cols), rng=random.Random(42))
    rooms = room_positions(rows, cols)

    assert all(grid[pos].type is CellType.PATH for pos in rooms)
    # a tree over n rooms uses n - 1 connecting cells
    assert grid.count(CellType.PATH) == 2 * len(rooms) - 1
    # one step for the origin, then one per carved room
    assert len(steps) == len(rooms)


@pytest.mark.parametrize("gen_func", CARVERS)
def test_first_step_is_origin_carve(gen_func):
    _, steps = gen_func(initialize_grid(9, 9), rng=random.Random(3))
    first = steps[0]

    assert (first == CELL_CODES[CellType.PATH]).sum() == 1
    assert first[1, 1] == CELL_CODES[CellType.PATH]


@pytest.mark.parametrize("algorithm", [MazeAlgorithm.RECURSIVE_BACKTRACKING, MazeAlgorithm.PRIMS, MazeAlgorithm.RANDOM])
def test_last_step_matches_grid_before_placement(algorithm):
    grid, steps = generate_maze(11, 13, algorithm, seed=5)
    replayed = set_start_and_end(MazeGrid.from_array(steps[-1]))
    assert np.array_equal(replayed.to_array(), grid.to_array())


def test_carving_never_touches_input():
    empty = initialize_grid(9, 9)
    gen_recursive_backtracking(empty, rng=random.Random(1))
    gen_prim(empty, rng=random.Random(1))
    gen_random(empty, rng=random.Random(1))
    assert empty.count(CellType.WALL) == 81


def test_same_seed_same_maze():
    a, steps_a = generate_maze(15, 15, MazeAlgorithm.PRIMS, seed=99)
    b, steps_b = generate_maze(15, 15, MazeAlgorithm.PRIMS, seed=99)

    assert a == b
    assert [steps_a.deltas(i) for i in range(len(steps_a))] == [steps_b.deltas(i) for i in range(len(steps_b))]


def test_injected_rng_matches_seed():
    a, _ = generate_maze(13, 13, MazeAlgorithm.RECURSIVE_BACKTRACKING, rng=random.Random(8))
    b, _ = generate_maze(13, 13, MazeAlgorithm.RECURSIVE_BACKTRACKING, seed=8)
    assert a == b


def test_random_maze_single_step_with_wall_border():
    grid, steps = gen_random(initialize_grid(12, 10), rng=random.Random(4))

    assert len(steps) == 1
    for cell in grid:
        if cell.row in (0, 11) or cell.col in (0, 9):
            assert cell.type is CellType.WALL


def test_random_maze_wall_density():
    grid, _ = gen_random(initialize_grid(101, 101), rng=random.Random(0))
    interior = 99 * 99
    walls = grid.count(CellType.WALL) - (101 * 4 - 4)
    assert 0.25 < walls / interior < 0.35


@pytest.mark.parametrize("probability, expected_paths", [(0.0, 9), (1.0, 0)])
def test_random_maze_probability_extremes(probability, expected_paths):
    grid, _ = gen_random(initialize_grid(5, 5), rng=random.Random(0), wall_probability=probability)
    assert grid.count(CellType.PATH) == expected_paths


@pytest.mark.parametrize("selector", [MazeAlgorithm.KRUSKALS, "Kruskal's Algorithm", "no such maze"])
def test_unimplemented_selectors_fall_back_to_backtracking(selector, caplog):
    expected, expected_steps = generate_maze(11, 11, MazeAlgorithm.RECURSIVE_BACKTRACKING, seed=3)

    with caplog.at_level(logging.WARNING, logger="maze.generator"):
        grid, steps = generate_maze(11, 11, selector, seed=3)

    assert grid == expected
    assert len(steps) == len(expected_steps)
    assert "recursive backtracking" in caplog.text


def test_selector_by_display_name():
    a, _ = generate_maze(9, 9, "Prim's Algorithm", seed=2)
    b, _ = generate_maze(9, 9, MazeAlgorithm.PRIMS, seed=2)
    assert a == b


@pytest.mark.parametrize("rows, cols", [(2, 9), (9, 2), (3, 3)])
def test_generate_maze_rejects_small_grids(rows, cols):
    with pytest.raises(InvalidDimensions):
        generate_maze(rows, cols, MazeAlgorithm.RECURSIVE_BACKTRACKING, seed=0)
