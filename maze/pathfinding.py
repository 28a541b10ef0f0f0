"""
Pathfinding algorithms - Dijkstra, A*, BFS and DFS over a carved grid

Each finder works on a reset clone of the given grid and returns
(path, visited_in_order). `path` runs Start..End inclusive, or is empty
when End cannot be reached; that is a normal outcome, not an error.
"""

import heapq
import logging
from collections import deque
from enum import Enum
from itertools import count

from maze.errors import MissingEndpoint, PathReconstructionError
from maze.maze_core import CellType, open_neighbors
from utils.helpers import manhattan_distance

logger = logging.getLogger(__name__)


class PathfindingAlgorithm(Enum):
    """Selectable pathfinders"""
    DIJKSTRA = "Dijkstra's Algorithm"
    ASTAR = 'A* Algorithm'
    BFS = 'Breadth-First Search'
    DFS = 'Depth-First Search'


_KEEP_TYPES = (CellType.START, CellType.END)


# ========== STATE RESET ==========

def reset_pathfinding_data(grid):
    """
    Clear transient search fields and turn Visited / PathSolution cells
    back into Path. Wall, Start and End are preserved.

    Returns:
        New MazeGrid (the input is left untouched)
    """
    new_grid = grid.clone()
    for cell in new_grid:
        cell.clear_search_data()
        if cell.type in (CellType.VISITED, CellType.PATH_SOLUTION):
            cell.type = CellType.PATH
    return new_grid


# ========== HELPERS ==========

def find_start_and_end(grid):
    """Locate the single Start and End cells"""
    starts = grid.find(CellType.START)
    ends = grid.find(CellType.END)
    if len(starts) != 1 or len(ends) != 1:
        raise MissingEndpoint(
            f"Expected one start and one end, found {len(starts)} start(s) and {len(ends)} end(s)"
        )
    return starts[0], ends[0]


def _finalize(cell, visited_in_order):
    """Record a cell as visited by the search"""
    cell.visited = True
    if cell.type not in _KEEP_TYPES:
        cell.type = CellType.VISITED
    visited_in_order.append(cell)


def reconstruct_path(grid, start, end):
    """
    Walk parent links from End back to Start

    Raises:
        PathReconstructionError: if the chain loops or stops short of Start
    """
    path = []
    cur = end
    limit = grid.rows * grid.cols
    while cur is not None:
        path.append(cur)
        if len(path) > limit:
            raise PathReconstructionError("Parent links form a cycle")
        cur = grid[cur.parent] if cur.parent is not None else None

    if path[-1] is not start:
        raise PathReconstructionError(f"Parent chain ends at {path[-1]!r}, not at start")
    path.reverse()
    return path


def _result(grid, start, end, visited_in_order, name):
    path = reconstruct_path(grid, start, end) if end.visited else []
    logger.debug("%s visited %d cells, path length %d", name, len(visited_in_order), len(path))
    return path, visited_in_order


# ========== DIJKSTRA ==========

def dijkstra(grid):
    """Dijkstra with unit edge cost; ties go to the earliest discovered cell"""
    work = reset_pathfinding_data(grid)
    start, end = find_start_and_end(work)
    visited_in_order = []

    discovered = count()
    order = {start.pos: next(discovered)}
    start.distance = 0
    heap = [(0, order[start.pos], start.row, start.col)]

    while heap:
        dist, _, row, col = heapq.heappop(heap)
        current = work.cells[row][col]
        if current.visited or dist != current.distance:
            continue

        _finalize(current, visited_in_order)
        if current is end:
            break

        for neighbor in open_neighbors(work, current):
            alt = current.distance + 1
            if alt < neighbor.distance:
                neighbor.distance = alt
                neighbor.parent = current.pos
                if neighbor.pos not in order:
                    order[neighbor.pos] = next(discovered)
                heapq.heappush(heap, (alt, order[neighbor.pos], neighbor.row, neighbor.col))

    return _result(work, start, end, visited_in_order, "Dijkstra")


# ========== A* ==========

def astar(grid):
    """A* with the Manhattan heuristic (admissible on a 4-connected unit grid)"""
    work = reset_pathfinding_data(grid)
    start, end = find_start_and_end(work)
    visited_in_order = []

    def h(cell):
        return manhattan_distance(cell.row, cell.col, end.row, end.col)

    discovered = count()
    order = {start.pos: next(discovered)}
    start.g_score = 0
    start.f_score = h(start)
    heap = [(start.f_score, order[start.pos], start.row, start.col)]
    open_set = {start.pos}

    while heap:
        f, _, row, col = heapq.heappop(heap)
        current = work.cells[row][col]
        if current.pos not in open_set or f != current.f_score:
            continue

        open_set.discard(current.pos)
        _finalize(current, visited_in_order)
        if current is end:
            break

        for neighbor in open_neighbors(work, current):
            tentative = current.g_score + 1
            if tentative < neighbor.g_score:
                neighbor.parent = current.pos
                neighbor.g_score = tentative
                neighbor.f_score = tentative + h(neighbor)
                if neighbor.pos not in order:
                    order[neighbor.pos] = next(discovered)
                open_set.add(neighbor.pos)
                heapq.heappush(heap, (neighbor.f_score, order[neighbor.pos], neighbor.row, neighbor.col))

    return _result(work, start, end, visited_in_order, "A*")


# ========== BFS / DFS ==========

def breadth_first_search(grid):
    """FIFO search, cells are marked visited when enqueued"""
    work = reset_pathfinding_data(grid)
    start, end = find_start_and_end(work)
    visited_in_order = []

    start.visited = True
    queue = deque([start])
    while queue:
        current = queue.popleft()
        _finalize(current, visited_in_order)
        if current is end:
            break

        for neighbor in open_neighbors(work, current):
            neighbor.visited = True
            neighbor.parent = current.pos
            queue.append(neighbor)

    return _result(work, start, end, visited_in_order, "BFS")


def depth_first_search(grid):
    """LIFO search, cells are marked visited when pushed. Not shortest."""
    work = reset_pathfinding_data(grid)
    start, end = find_start_and_end(work)
    visited_in_order = []

    start.visited = True
    stack = [start]
    while stack:
        current = stack.pop()
        _finalize(current, visited_in_order)
        if current is end:
            break

        for neighbor in open_neighbors(work, current):
            neighbor.visited = True
            neighbor.parent = current.pos
            stack.append(neighbor)

    return _result(work, start, end, visited_in_order, "DFS")


# ========== DISPATCH ==========

PATH_ALGOS = [
    (PathfindingAlgorithm.DIJKSTRA, dijkstra),
    (PathfindingAlgorithm.ASTAR, astar),
    (PathfindingAlgorithm.BFS, breadth_first_search),
    (PathfindingAlgorithm.DFS, depth_first_search),
]

_FINDER_BY_ALGO = dict(PATH_ALGOS)


def find_path(grid, algorithm):
    """
    Run the selected pathfinder. Unknown selectors fall back to A*.

    Returns:
        (path, visited_in_order) as lists of Cell
    """
    try:
        algorithm = PathfindingAlgorithm(algorithm)
    except ValueError:
        logger.warning("Unknown pathfinding algorithm %r, using A*", algorithm)
        algorithm = PathfindingAlgorithm.ASTAR
    return _FINDER_BY_ALGO[algorithm](grid)


# ========== PLAYBACK ==========

def search_frames(path, visited_in_order):
    """
    Recoloring events for animating a finished search: every visited cell
    first, then the solution path. Start and End are never recolored.

    Yields:
        (row, col, CellType)
    """
    for cell in visited_in_order:
        if cell.type not in _KEEP_TYPES:
            yield cell.row, cell.col, CellType.VISITED
    for cell in path:
        if cell.type not in _KEEP_TYPES:
            yield cell.row, cell.col, CellType.PATH_SOLUTION


def mark_solution(grid, path):
    """Return a copy of `grid` with the path cells (except Start/End) marked as solution"""
    new_grid = grid.clone()
    for cell in path:
        target = new_grid.cells[cell.row][cell.col]
        if target.type not in _KEEP_TYPES:
            target.type = CellType.PATH_SOLUTION
    return new_grid
