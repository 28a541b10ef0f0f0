"""
Core maze data model - cells, grid, start/end placement and neighbor helpers
"""

from enum import Enum

import numpy as np

from maze.errors import InvalidDimensions
from utils.constants import DIRS, ROOM_STRIDE, UNSET


class CellType(Enum):
    """Classification of a grid cell"""
    WALL = 'wall'
    PATH = 'path'
    START = 'start'
    END = 'end'
    VISITED = 'visited'
    PATH_SOLUTION = 'path-solution'


# Integer codes used for numpy snapshots (enum declaration order)
CELL_CODES = {cell_type: code for code, cell_type in enumerate(CellType)}
CODE_TO_CELL = {code: cell_type for cell_type, code in CELL_CODES.items()}


class Cell:
    """
    A single grid position with its type and transient search fields
    """
    __slots__ = ('row', 'col', 'type', 'visited', 'distance', 'parent', 'g_score', 'f_score')

    def __init__(self, row, col, cell_type=CellType.WALL):
        self.row = row
        self.col = col
        self.type = cell_type
        self.clear_search_data()

    @property
    def pos(self):
        return (self.row, self.col)

    def clear_search_data(self):
        """Reset transient pathfinding fields"""
        self.visited = False
        self.distance = UNSET
        self.parent = None  # (row, col) of the preceding cell
        self.g_score = UNSET
        self.f_score = UNSET

    def copy(self):
        other = Cell(self.row, self.col, self.type)
        other.visited = self.visited
        other.distance = self.distance
        other.parent = self.parent
        other.g_score = self.g_score
        other.f_score = self.f_score
        return other

    def is_wall(self):
        return self.type is CellType.WALL

    def _key(self):
        return (self.row, self.col, self.type, self.visited, self.distance,
                self.parent, self.g_score, self.f_score)

    def __eq__(self, other):
        if not isinstance(other, Cell):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash((self.row, self.col))

    def __repr__(self):
        return f"Cell({self.row}, {self.col}, {self.type.value})"


class MazeGrid:
    """
    Rectangular grid of cells, addressed row-major as (row, col).
    Dimensions are fixed at creation.
    """
    def __init__(self, rows, cols, cells=None):
        self.rows = rows
        self.cols = cols
        if cells is None:
            cells = [[Cell(r, c) for c in range(cols)] for r in range(rows)]
        self.cells = cells

    def in_bounds(self, row, col):
        """Check if coordinates are within grid bounds"""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell(self, row, col):
        return self.cells[row][col]

    def __getitem__(self, pos):
        row, col = pos
        return self.cells[row][col]

    def __iter__(self):
        """Iterate all cells in row-major order"""
        for row in self.cells:
            yield from row

    def clone(self):
        """Deep copy - snapshots never alias each other"""
        cells = [[cell.copy() for cell in row] for row in self.cells]
        return MazeGrid(self.rows, self.cols, cells)

    def set_type(self, row, col, cell_type):
        self.cells[row][col].type = cell_type

    def find(self, cell_type):
        """Return all cells of the given type in row-major order"""
        return [cell for cell in self if cell.type is cell_type]

    def count(self, cell_type):
        return sum(1 for cell in self if cell.type is cell_type)

    def to_array(self):
        """Type codes as a (rows, cols) int8 array"""
        arr = np.empty((self.rows, self.cols), dtype=np.int8)
        for cell in self:
            arr[cell.row, cell.col] = CELL_CODES[cell.type]
        return arr

    @classmethod
    def from_array(cls, arr):
        """Build a grid from a type-code array (search fields unset)"""
        rows, cols = arr.shape
        grid = cls(rows, cols)
        for cell in grid:
            cell.type = CODE_TO_CELL[int(arr[cell.row, cell.col])]
        return grid

    @classmethod
    def from_strings(cls, lines):
        """
        Build a grid from text rows, handy for fixtures.
        '#' wall, '.' path, 'S' start, 'E' end
        """
        symbols = {'#': CellType.WALL, '.': CellType.PATH, 'S': CellType.START, 'E': CellType.END}
        rows = len(lines)
        cols = len(lines[0])
        grid = cls(rows, cols)
        for r, line in enumerate(lines):
            if len(line) != cols:
                raise InvalidDimensions(rows, cols, f"row {r} has length {len(line)}")
            for c, ch in enumerate(line):
                grid.cells[r][c].type = symbols[ch]
        return grid

    def __eq__(self, other):
        if not isinstance(other, MazeGrid):
            return NotImplemented
        return self.rows == other.rows and self.cols == other.cols and self.cells == other.cells

    def __repr__(self):
        return f"MazeGrid(rows={self.rows}, cols={self.cols})"


def initialize_grid(rows, cols):
    """Create a rows x cols grid where every cell is a wall"""
    if rows < 1 or cols < 1:
        raise InvalidDimensions(rows, cols, "rows and cols must be at least 1")
    return MazeGrid(rows, cols)


def start_end_positions(rows, cols):
    """Fixed Start/End coordinates for a grid of the given size"""
    return (1, 1), (rows - 2, cols - 2)


def check_placement_dimensions(rows, cols):
    """Raise InvalidDimensions unless Start and End fit as distinct cells"""
    if rows < 3 or cols < 3:
        raise InvalidDimensions(rows, cols, "start/end placement needs at least 3x3")
    start, end = start_end_positions(rows, cols)
    if start == end:
        raise InvalidDimensions(rows, cols, "start and end would share the same cell")


def set_start_and_end(grid):
    """
    Place Start at (1, 1) and End at (rows - 2, cols - 2), overwriting
    whatever type those cells had. The carved structure is not consulted.

    Returns:
        New MazeGrid (the input is left untouched)
    """
    check_placement_dimensions(grid.rows, grid.cols)
    new_grid = grid.clone()
    start, end = start_end_positions(grid.rows, grid.cols)
    new_grid.set_type(*start, CellType.START)
    new_grid.set_type(*end, CellType.END)
    return new_grid


# ========== NEIGHBORS ==========

def stride_neighbors(grid, row, col, cell_type, stride=ROOM_STRIDE):
    """In-bounds cells `stride` steps away (up, down, left, right) with the given type"""
    res = []
    for dr, dc in DIRS:
        nr, nc = row + dr * stride, col + dc * stride
        if grid.in_bounds(nr, nc) and grid.cells[nr][nc].type is cell_type:
            res.append((nr, nc))
    return res


def midpoint(a, b):
    """Cell exactly between two stride-2 neighbors"""
    return ((a[0] + b[0]) // 2, (a[1] + b[1]) // 2)


def open_neighbors(grid, cell):
    """
    Orthogonal neighbors eligible for search: in bounds, not a wall,
    not yet visited in the current run
    """
    res = []
    for dr, dc in DIRS:
        nr, nc = cell.row + dr, cell.col + dc
        if not grid.in_bounds(nr, nc):
            continue
        neighbor = grid.cells[nr][nc]
        if neighbor.type is not CellType.WALL and not neighbor.visited:
            res.append(neighbor)
    return res


def is_adjacent(a, b):
    """Check if two (row, col) positions are orthogonally adjacent"""
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1
