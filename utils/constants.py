"""
Global constants for Maze Pathfinder
"""

# Screen settings
FPS = 60
PANEL_H = 110
MIN_CELL_SIZE = 6

# Orthogonal direction vectors as (d_row, d_col): up, down, left, right
DIRS = [
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
]

# Room cells sit on odd coordinates, two cells apart
ROOM_STRIDE = 2

# Starting room for the carving generators
CARVE_ORIGIN = (1, 1)

# Random placement generator
WALL_PROBABILITY = 0.3

# Unset value for distance / gScore / fScore
UNSET = float('inf')

# Animation speed slider (delay in ms = SPEED_MAX - speed)
SPEED_MIN = 1
SPEED_MAX = 100
DEFAULT_SPEED = 50
SPEED_STEP = 5
