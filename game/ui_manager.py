"""
UI Manager - draws the control panel (algorithm selection, speed, stats)
"""

import pygame
from utils.colors import (
    COLOR_TEXT, COLOR_TEXT_HIGHLIGHT, COLOR_TEXT_DIM, COLOR_PANEL_BG, COLOR_VISITED
)
from utils.constants import SPEED_MIN, SPEED_MAX

KEY_HELP = "G generate  F find  C clear  R reset  M/P algorithm  +/- speed  SPACE skip  ESC quit"

STATUS_TEXT = {
    'IDLE': "Press G to generate a maze",
    'GENERATING': "Generating...",
    'READY': "Maze ready - press F to find a path",
    'SEARCHING': "Searching...",
    'SOLVED': "Path found",
    'NO_PATH': "No path - End is unreachable",
}


class UIManager:
    """
    Manages control panel rendering
    """
    def __init__(self):
        # Fonts
        self.font_small = None
        self.font_medium = None
        self._init_fonts()

    def _init_fonts(self):
        """Initialize fonts"""
        pygame.font.init()
        self.font_small = pygame.font.SysFont("consolas", 14)
        self.font_medium = pygame.font.SysFont("consolas", 18)

    def draw_panel(self, screen, panel_y, screen_w, panel_h, *, maze_algo, path_algo, speed, state, stats):
        """
        Draw the control panel

        Args:
            screen: Pygame screen
            panel_y: Y position of panel
            screen_w: Screen width
            panel_h: Panel height
            maze_algo: Selected MazeAlgorithm
            path_algo: Selected PathfindingAlgorithm
            speed: Animation speed (1-100)
            state: Current VisualizerState
            stats: RunStats
        """
        pygame.draw.rect(screen, COLOR_PANEL_BG, (0, panel_y, screen_w, panel_h))

        # Selected algorithms (top left)
        self._draw_label(screen, "Maze [M]", maze_algo.value, 10, panel_y + 8)
        self._draw_label(screen, "Path [P]", path_algo.value, 10, panel_y + 30)

        # Speed slider (below algorithms)
        self._draw_speed(screen, speed, 10, panel_y + 56, 200, 10)

        # Stats (right)
        self._draw_stats(screen, stats, screen_w - 200, panel_y + 8)

        # Status and key help (bottom)
        status = self.font_medium.render(STATUS_TEXT[state.name], True, COLOR_TEXT_HIGHLIGHT)
        screen.blit(status, (10, panel_y + panel_h - 42))
        help_text = self.font_small.render(KEY_HELP, True, COLOR_TEXT_DIM)
        screen.blit(help_text, (10, panel_y + panel_h - 18))

    def _draw_label(self, screen, label, value, x, y):
        """Draw 'label: value' with the value highlighted"""
        text = self.font_small.render(f"{label}:", True, COLOR_TEXT_DIM)
        screen.blit(text, (x, y + 2))
        text = self.font_medium.render(value, True, COLOR_TEXT)
        screen.blit(text, (x + 80, y))

    def _draw_speed(self, screen, speed, x, y, width, height):
        """Draw speed slider"""
        pygame.draw.rect(screen, COLOR_TEXT_DIM, (x, y, width, height), border_radius=3)

        fill_width = int(width * (speed - SPEED_MIN) / (SPEED_MAX - SPEED_MIN))
        if fill_width > 0:
            pygame.draw.rect(screen, COLOR_VISITED, (x, y, fill_width, height), border_radius=3)

        text = self.font_small.render(f"Speed: {speed}", True, COLOR_TEXT)
        screen.blit(text, (x + width + 10, y - 2))

    def _draw_stats(self, screen, stats, x, y):
        """Draw run statistics"""
        for i, (label, value) in enumerate(stats.lines()):
            text = self.font_small.render(f"{label}: {value}", True, COLOR_TEXT)
            screen.blit(text, (x, y + i * 18))
