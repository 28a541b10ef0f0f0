"""
Exceptions raised by the maze algorithms
"""


class MazeError(Exception):
    """Base class for all maze errors"""


class InvalidDimensions(MazeError, ValueError):
    """Grid too small (or non-positive) for the requested operation"""

    def __init__(self, rows, cols, reason):
        self.rows = rows
        self.cols = cols
        super().__init__(f"Invalid grid dimensions {rows}x{cols}: {reason}")


class MissingEndpoint(MazeError, LookupError):
    """Grid does not contain exactly one Start and one End cell"""


class PathReconstructionError(MazeError, RuntimeError):
    """Parent links do not lead back to Start"""
