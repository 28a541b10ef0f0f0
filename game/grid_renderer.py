"""
Grid Renderer - draws a cell-type snapshot using a NumPy frame buffer and surfarray
"""

import numpy as np
import pygame
import pygame.surfarray

from maze.maze_core import CODE_TO_CELL
from utils.colors import CELL_COLORS, COLOR_BG


def build_palette():
    """(num_types, 3) uint8 lookup table indexed by cell-type code"""
    palette = np.zeros((len(CODE_TO_CELL), 3), dtype=np.uint8)
    for code, cell_type in CODE_TO_CELL.items():
        palette[code] = CELL_COLORS[cell_type.value]
    return palette


def snapshot_to_pixels(codes, cell_size, line_width=0, line_color=COLOR_BG, palette=None):
    """
    Expand a (rows, cols) type-code array into an RGB frame buffer

    Args:
        codes: int array of cell-type codes
        cell_size: Pixel size of one cell
        line_width: Width of the grid line drawn at the right/bottom of each cell
        line_color: RGB color of grid lines
        palette: Optional lookup table from build_palette()

    Returns:
        uint8 array shaped (width, height, 3) as surfarray expects
    """
    if palette is None:
        palette = build_palette()
    rgb = palette[codes]  # (rows, cols, 3)
    pixels = np.repeat(np.repeat(rgb, cell_size, axis=0), cell_size, axis=1)

    line_width = min(line_width, cell_size - 1)
    if line_width > 0:
        offsets = np.arange(pixels.shape[0]) % cell_size >= cell_size - line_width
        pixels[offsets, :, :] = line_color
        offsets = np.arange(pixels.shape[1]) % cell_size >= cell_size - line_width
        pixels[:, offsets, :] = line_color

    return np.ascontiguousarray(pixels.transpose(1, 0, 2))


class GridRenderer:
    """
    Renders maze snapshots into a pygame surface
    """
    def __init__(self, rows, cols, cell_size, line_width=1):
        """
        Args:
            rows, cols: Grid dimensions
            cell_size: Pixel size of one cell
            line_width: Grid line width in pixels
        """
        self.rows = rows
        self.cols = cols
        self.cell_size = cell_size
        self.line_width = line_width
        self.palette = build_palette()
        self.surface = pygame.Surface((cols * cell_size, rows * cell_size))

    @property
    def size(self):
        return self.surface.get_size()

    def render(self, screen, codes, origin=(0, 0)):
        """
        Draw a snapshot

        Args:
            screen: Target pygame surface
            codes: (rows, cols) type-code array (MazeGrid.to_array() or a StepLog entry)
            origin: Top-left pixel position on screen
        """
        frame = snapshot_to_pixels(codes, self.cell_size, self.line_width, palette=self.palette)
        pygame.surfarray.blit_array(self.surface, frame)
        screen.blit(self.surface, origin)
