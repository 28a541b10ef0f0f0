"""
Maze generation algorithms

Every generator takes an all-wall grid and returns (final_grid, steps)
where `steps` is a StepLog with one entry per carve. Rooms sit on odd
coordinates; the wall cell between two rooms is carved to join them.
"""

import logging
import random
from enum import Enum

from maze.maze_core import (
    CellType, initialize_grid, set_start_and_end, check_placement_dimensions,
    stride_neighbors, midpoint
)
from maze.steps import StepLog
from utils.constants import CARVE_ORIGIN, DIRS, ROOM_STRIDE, WALL_PROBABILITY

logger = logging.getLogger(__name__)


class MazeAlgorithm(Enum):
    """Selectable maze generators"""
    RECURSIVE_BACKTRACKING = 'Recursive Backtracking'
    PRIMS = "Prim's Algorithm"
    KRUSKALS = "Kruskal's Algorithm"
    RANDOM = 'Random Maze'


def _make_rng(rng=None, seed=None):
    """Use the injected random source, or a fresh one seeded with `seed`"""
    if rng is not None:
        return rng
    return random.Random(seed)


# ========== GENERATOR: RECURSIVE BACKTRACKING ==========

def gen_recursive_backtracking(grid, rng=None):
    """Depth-first carving with an explicit stack"""
    rng = _make_rng(rng)
    new_grid = grid.clone()
    steps = StepLog(grid)

    visited = {CARVE_ORIGIN}
    steps.apply(new_grid, [CARVE_ORIGIN], CellType.PATH)
    stack = [CARVE_ORIGIN]

    while stack:
        current = stack[-1]
        neighbors = stride_neighbors(new_grid, current[0], current[1], CellType.WALL)

        if not neighbors:
            stack.pop()
            continue

        nxt = rng.choice(neighbors)
        steps.apply(new_grid, [midpoint(current, nxt), nxt], CellType.PATH)
        visited.add(nxt)
        stack.append(nxt)

    logger.debug("Recursive backtracking carved %d rooms in %d steps", len(visited), len(steps))
    return new_grid, steps


# ========== GENERATOR: PRIM ==========

def gen_prim(grid, rng=None):
    """Randomized Prim's algorithm over stride-2 rooms"""
    rng = _make_rng(rng)
    new_grid = grid.clone()
    steps = StepLog(grid)

    steps.apply(new_grid, [CARVE_ORIGIN], CellType.PATH)
    # A cell may be queued more than once; entries are a list, not a set
    frontier = stride_neighbors(new_grid, CARVE_ORIGIN[0], CARVE_ORIGIN[1], CellType.WALL)

    while frontier:
        current = frontier.pop(rng.randrange(len(frontier)))
        if new_grid.cells[current[0]][current[1]].type is not CellType.WALL:
            # stale duplicate, already carved through another entry
            continue

        path_neighbors = stride_neighbors(new_grid, current[0], current[1], CellType.PATH)
        if not path_neighbors:
            continue

        neighbor = rng.choice(path_neighbors)
        steps.apply(new_grid, [midpoint(current, neighbor), current], CellType.PATH)
        frontier.extend(stride_neighbors(new_grid, current[0], current[1], CellType.WALL))

    logger.debug("Prim carved %d steps", len(steps))
    return new_grid, steps


# ========== GENERATOR: RANDOM PLACEMENT ==========

def gen_random(grid, rng=None, wall_probability=WALL_PROBABILITY):
    """
    Random wall placement. Border stays wall, each interior cell becomes a
    wall with `wall_probability`. No connectivity guarantee; recorded as a
    single step.
    """
    rng = _make_rng(rng)
    new_grid = grid.clone()
    steps = StepLog(grid)

    rows, cols = new_grid.rows, new_grid.cols
    open_cells = []
    for row in range(rows):
        for col in range(cols):
            if row == 0 or row == rows - 1 or col == 0 or col == cols - 1:
                continue
            if rng.random() >= wall_probability:
                open_cells.append((row, col))

    steps.apply(new_grid, open_cells, CellType.PATH)
    logger.debug("Random placement opened %d of %d cells", len(open_cells), rows * cols)
    return new_grid, steps


# ========== ALGORITHM LIST ==========

GEN_ALGOS = [
    (MazeAlgorithm.RECURSIVE_BACKTRACKING, gen_recursive_backtracking),
    (MazeAlgorithm.PRIMS, gen_prim),
    (MazeAlgorithm.RANDOM, gen_random),
]

_GEN_BY_ALGO = dict(GEN_ALGOS)


def resolve_generator(algorithm):
    """
    Map a selector (enum member or its display name) to a generator.
    Kruskal's and unknown selectors fall back to recursive backtracking.
    """
    try:
        algorithm = MazeAlgorithm(algorithm)
    except ValueError:
        logger.warning("Unknown maze algorithm %r, using recursive backtracking", algorithm)
        return gen_recursive_backtracking

    gen_func = _GEN_BY_ALGO.get(algorithm)
    if gen_func is None:
        logger.warning("%s has no generator, using recursive backtracking", algorithm.value)
        return gen_recursive_backtracking
    return gen_func


def generate_maze(rows, cols, algorithm, seed=None, rng=None):
    """
    Build a maze and place Start/End.

    Args:
        rows, cols: Grid size (at least 3x3, Start and End must differ)
        algorithm: MazeAlgorithm member or its display name
        seed: Seed for a fresh random source (ignored when `rng` is given)
        rng: Injected random.Random instance

    Returns:
        (grid, steps) - grid has Start/End placed, steps end at the carved
        grid before placement
    """
    check_placement_dimensions(rows, cols)
    gen_func = resolve_generator(algorithm)
    grid, steps = gen_func(initialize_grid(rows, cols), rng=_make_rng(rng, seed))
    return set_start_and_end(grid), steps


def carved_components(grid):
    """
    Group non-wall cells into orthogonally connected components

    Returns:
        List of sets of (row, col)
    """
    seen = set()
    components = []
    for cell in grid:
        if cell.is_wall() or cell.pos in seen:
            continue
        component = {cell.pos}
        stack = [cell.pos]
        while stack:
            r, c = stack.pop()
            for dr, dc in DIRS:
                nr, nc = r + dr, c + dc
                if (nr, nc) in component or not grid.in_bounds(nr, nc):
                    continue
                if grid.cells[nr][nc].is_wall():
                    continue
                component.add((nr, nc))
                stack.append((nr, nc))
        seen |= component
        components.append(component)
    return components


def room_positions(rows, cols):
    """All room cells (odd coordinates) reachable by stride-2 carving from the origin"""
    return [
        (r, c)
        for r in range(CARVE_ORIGIN[0], rows, ROOM_STRIDE)
        for c in range(CARVE_ORIGIN[1], cols, ROOM_STRIDE)
    ]
