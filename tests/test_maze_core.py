import numpy as np
import pytest

from maze.errors import InvalidDimensions
from maze.maze_core import (
    CELL_CODES, CellType, MazeGrid, initialize_grid, is_adjacent, midpoint,
    open_neighbors, set_start_and_end, stride_neighbors
)


def test_initialize_grid_all_walls():
    grid = initialize_grid(4, 6)

    assert (grid.rows, grid.cols) == (4, 6)
    assert grid.count(CellType.WALL) == 24
    assert grid[2, 5].pos == (2, 5)


@pytest.mark.parametrize("rows, cols", [(0, 5), (5, 0), (-1, 3)])
def test_initialize_grid_rejects_non_positive(rows, cols):
    with pytest.raises(InvalidDimensions):
        initialize_grid(rows, cols)


def test_invalid_dimensions_is_value_error():
    with pytest.raises(ValueError):
        initialize_grid(0, 0)


def test_set_start_and_end_places_fixed_corners():
    grid = initialize_grid(5, 7)
    placed = set_start_and_end(grid)

    assert placed[1, 1].type is CellType.START
    assert placed[3, 5].type is CellType.END
    assert placed.count(CellType.START) == 1
    assert placed.count(CellType.END) == 1
    # input untouched
    assert grid.count(CellType.WALL) == 35


def test_set_start_and_end_overwrites_path():
    grid = initialize_grid(5, 5)
    grid.set_type(1, 1, CellType.PATH)
    placed = set_start_and_end(grid)
    assert placed[1, 1].type is CellType.START


@pytest.mark.parametrize("rows, cols", [(2, 5), (5, 2), (1, 1), (3, 3)])
def test_set_start_and_end_rejects_degenerate_sizes(rows, cols):
    with pytest.raises(InvalidDimensions):
        set_start_and_end(initialize_grid(rows, cols))


def test_smallest_rectangular_placement():
    placed = set_start_and_end(initialize_grid(3, 4))
    assert placed[1, 1].type is CellType.START
    assert placed[1, 2].type is CellType.END


def test_clone_is_deep():
    grid = initialize_grid(3, 3)
    copy = grid.clone()
    copy.set_type(1, 1, CellType.PATH)
    copy[0, 0].parent = (1, 1)

    assert grid[1, 1].type is CellType.WALL
    assert grid[0, 0].parent is None
    assert grid != copy


def test_to_array_codes():
    grid = MazeGrid.from_strings(["###", "#S#", "#E#"])
    arr = grid.to_array()

    assert arr.dtype == np.int8
    assert arr[1, 1] == CELL_CODES[CellType.START]
    assert arr[2, 1] == CELL_CODES[CellType.END]
    assert MazeGrid.from_array(arr) == grid


def test_from_strings_rejects_ragged_rows():
    with pytest.raises(InvalidDimensions):
        MazeGrid.from_strings(["###", "##"])


def test_stride_neighbors_in_direction_order():
    grid = initialize_grid(7, 7)
    assert stride_neighbors(grid, 1, 1, CellType.WALL) == [(3, 1), (1, 3)]
    assert stride_neighbors(grid, 3, 3, CellType.WALL) == [(1, 3), (5, 3), (3, 1), (3, 5)]
    assert stride_neighbors(grid, 3, 3, CellType.PATH) == []


def test_midpoint():
    assert midpoint((1, 1), (1, 3)) == (1, 2)
    assert midpoint((5, 3), (3, 3)) == (4, 3)


def test_open_neighbors_skip_walls_and_visited():
    grid = MazeGrid.from_strings([
        "#####",
        "#S..#",
        "#.#.#",
        "#####",
    ])
    grid[1, 2].visited = True

    neighbors = open_neighbors(grid, grid[1, 1])
    assert [cell.pos for cell in neighbors] == [(2, 1)]


def test_is_adjacent():
    assert is_adjacent((1, 1), (1, 2))
    assert not is_adjacent((1, 1), (2, 2))
    assert not is_adjacent((1, 1), (1, 1))
