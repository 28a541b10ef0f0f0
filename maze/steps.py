"""
Step log for animated maze generation.

Instead of copying the whole grid after every carve, each step stores only
the cells it changed as (row, col, old_type, new_type). Snapshots are
rebuilt on demand by replaying deltas over the base snapshot, so the
sequence seen by a renderer is identical to eager copying.
"""

from maze.maze_core import CELL_CODES


class StepLog:
    """
    Ordered, append-only list of generation steps
    """
    def __init__(self, base):
        """
        Args:
            base: MazeGrid the steps are recorded against (copied as an array)
        """
        self.rows = base.rows
        self.cols = base.cols
        self._base = base.to_array()
        self._steps = []

    def apply(self, grid, positions, cell_type):
        """
        Set `positions` on `grid` to `cell_type` and record it as one step

        Args:
            grid: MazeGrid being carved (mutated)
            positions: iterable of (row, col)
            cell_type: new CellType for every position

        Returns:
            Number of cells whose type actually changed
        """
        deltas = []
        for row, col in positions:
            cell = grid.cells[row][col]
            if cell.type is not cell_type:
                deltas.append((row, col, cell.type, cell_type))
                cell.type = cell_type
        self._steps.append(deltas)
        return len(deltas)

    def deltas(self, index):
        """Changes made by step `index`"""
        return list(self._steps[index])

    def __len__(self):
        return len(self._steps)

    def _normalize(self, index):
        if index < 0:
            index += len(self._steps)
        if not 0 <= index < len(self._steps):
            raise IndexError("step index out of range")
        return index

    def __getitem__(self, index):
        """Snapshot (type-code array) after step `index` was applied"""
        index = self._normalize(index)
        arr = self._base.copy()
        for deltas in self._steps[:index + 1]:
            self._replay(arr, deltas)
        return arr

    def __iter__(self):
        """Lazily yield every snapshot; each iteration starts from the base"""
        arr = self._base.copy()
        for deltas in self._steps:
            self._replay(arr, deltas)
            yield arr.copy()

    def final(self):
        """Last snapshot, or the base if nothing was recorded"""
        if not self._steps:
            return self._base.copy()
        return self[-1]

    @staticmethod
    def _replay(arr, deltas):
        for row, col, _, new_type in deltas:
            arr[row, col] = CELL_CODES[new_type]

    def __repr__(self):
        return f"StepLog(steps={len(self._steps)}, size={self.rows}x{self.cols})"
