"""
Color palette for Maze Pathfinder
"""

# Background colors
COLOR_BG = (236, 240, 241)         # Window background
COLOR_PANEL_BG = (44, 62, 80)      # Control panel background

# Text colors
COLOR_TEXT = (236, 240, 241)             # Normal text
COLOR_TEXT_HIGHLIGHT = (255, 230, 160)   # Selected option
COLOR_TEXT_DIM = (149, 165, 166)         # Hints

# Cell colors
COLOR_WALL = (44, 62, 80)
COLOR_PATH = (255, 255, 255)
COLOR_START = (46, 204, 113)
COLOR_END = (231, 76, 60)
COLOR_VISITED = (133, 193, 233)
COLOR_PATH_SOLUTION = (241, 196, 15)

# Cell type value -> color
CELL_COLORS = {
    'wall': COLOR_WALL,
    'path': COLOR_PATH,
    'start': COLOR_START,
    'end': COLOR_END,
    'visited': COLOR_VISITED,
    'path-solution': COLOR_PATH_SOLUTION,
}
