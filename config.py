"""
Configuration for Maze Pathfinder - window title, version and maze presets
"""

from maze.errors import InvalidDimensions
from maze.maze_core import check_placement_dimensions
from utils.constants import DEFAULT_SPEED, SPEED_MIN, SPEED_MAX
from utils.helpers import clamp

GAME_TITLE = "Maze Pathfinder"
GAME_VERSION = "1.0.0"


class MazeConfig:
    """Configuration for a maze visualizer session"""
    def __init__(self, **kwargs):
        # Maze dimensions
        self.rows = kwargs.get('rows', 25)
        self.cols = kwargs.get('cols', 45)

        # Drawing
        self.cell_size = kwargs.get('cell_size', 20)
        self.wall_thickness = kwargs.get('wall_thickness', 2)

        # Animation speed (1-100, higher is faster)
        self.animation_speed = clamp(kwargs.get('animation_speed', DEFAULT_SPEED), SPEED_MIN, SPEED_MAX)

        # Random seed (None = nondeterministic)
        self.seed = kwargs.get('seed', None)

    def validate(self):
        """Raise InvalidDimensions for sizes the generators cannot place Start/End on"""
        check_placement_dimensions(self.rows, self.cols)
        if self.cell_size < 1:
            raise InvalidDimensions(self.rows, self.cols, f"cell size {self.cell_size} must be positive")
        return self

    def to_dict(self):
        return {
            'rows': self.rows,
            'cols': self.cols,
            'cell_size': self.cell_size,
            'wall_thickness': self.wall_thickness,
            'animation_speed': self.animation_speed,
            'seed': self.seed,
        }

    def __repr__(self):
        return f"MazeConfig({self.rows}x{self.cols}, cell={self.cell_size}, speed={self.animation_speed})"


# ========== PRESETS ==========

PRESETS = {
    'small': dict(rows=15, cols=21, cell_size=32),
    'default': dict(rows=25, cols=45, cell_size=20),
    'large': dict(rows=41, cols=71, cell_size=12, wall_thickness=1),
}


def get_maze_config(name='default', **overrides):
    """
    Build a MazeConfig from a preset

    Args:
        name: Preset name ('small', 'default', 'large')
        **overrides: Values replacing preset fields (None values are ignored)

    Returns:
        Validated MazeConfig
    """
    if name not in PRESETS:
        raise KeyError(f"Unknown preset {name!r}, choose from {sorted(PRESETS)}")
    params = dict(PRESETS[name])
    params.update({key: value for key, value in overrides.items() if value is not None})
    return MazeConfig(**params).validate()
