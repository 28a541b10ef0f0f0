"""
Maze Pathfinder - visualize maze generation and shortest-path search
"""

import argparse
import logging
import random
import sys

import pygame

from config import GAME_TITLE, GAME_VERSION, PRESETS, get_maze_config
from game.game_state import StateManager, VisualizerState
from game.grid_renderer import GridRenderer
from game.playback import Playback
from game.stats import RunStats, Stopwatch
from game.ui_manager import UIManager
from maze.errors import MazeError
from maze.generator import MazeAlgorithm, generate_maze
from maze.maze_core import CELL_CODES, CellType, initialize_grid, set_start_and_end
from maze.pathfinding import (
    PathfindingAlgorithm, find_path, mark_solution, reset_pathfinding_data, search_frames
)
from utils.colors import COLOR_BG
from utils.constants import FPS, MIN_CELL_SIZE, PANEL_H, SPEED_MIN, SPEED_MAX, SPEED_STEP
from utils.helpers import clamp, cycle_index

logger = logging.getLogger(__name__)

MAZE_ALGOS = list(MazeAlgorithm)
PATH_ALGOS = list(PathfindingAlgorithm)


class MazePathfinderApp:
    """
    Main visualizer class - owns the grid, drives the algorithms and paces playback
    """
    def __init__(self, config):
        pygame.init()
        self.config = config
        self.rows = config.rows
        self.cols = config.cols
        self.cell_size = max(config.cell_size, MIN_CELL_SIZE)
        self.rng = random.Random(config.seed)

        # Screen
        self.screen_w = self.cols * self.cell_size
        self.screen_h = self.rows * self.cell_size + PANEL_H
        self.screen = pygame.display.set_mode((max(self.screen_w, 640), self.screen_h))
        pygame.display.set_caption(f"{GAME_TITLE} v{GAME_VERSION}")
        self.clock = pygame.time.Clock()
        self.running = True

        # Managers
        self.state_manager = StateManager()
        self.ui_manager = UIManager()
        self.renderer = GridRenderer(self.rows, self.cols, self.cell_size, config.wall_thickness)
        self.stats = RunStats()

        # Selection
        self.maze_index = 0
        self.path_index = PATH_ALGOS.index(PathfindingAlgorithm.ASTAR)
        self.speed = config.animation_speed

        # Maze data
        self.grid = None
        self.display = None
        self.steps = None
        self.playbacks = []
        self.search_path = []
        self.search_outcome = None
        self.reset()

    # -------------------- actions --------------------

    def reset(self):
        """Empty grid with only Start and End placed"""
        self.grid = set_start_and_end(initialize_grid(self.rows, self.cols))
        self.display = self.grid.to_array()
        self.steps = None
        self.playbacks = []
        self.stats.reset()
        self.state_manager.transition_to(VisualizerState.IDLE)

    def generate(self):
        """Build a maze and start playing its generation steps"""
        if self.state_manager.is_busy():
            return
        algorithm = MAZE_ALGOS[self.maze_index]
        with Stopwatch() as watch:
            self.grid, self.steps = generate_maze(self.rows, self.cols, algorithm, rng=self.rng)
        self.stats.record_generation(self.steps, watch.elapsed_ms)
        logger.info("Generated %s maze in %.1f ms (%d steps)", algorithm.value, watch.elapsed_ms, len(self.steps))

        self.display = initialize_grid(self.rows, self.cols).to_array()
        self.playbacks = [Playback(range(len(self.steps)), self.speed)]
        self.state_manager.transition_to(VisualizerState.GENERATING)

    def find(self):
        """Run the selected pathfinder and start playing visits, then the path"""
        if self.state_manager.is_busy():
            return
        algorithm = PATH_ALGOS[self.path_index]
        self.grid = reset_pathfinding_data(self.grid)
        self.display = self.grid.to_array()
        with Stopwatch() as watch:
            path, visited_in_order = find_path(self.grid, algorithm)
        self.stats.record_search(path, visited_in_order, watch.elapsed_ms)
        logger.info("%s: visited %d, path %d", algorithm.value, len(visited_in_order), len(path))

        frames = list(search_frames(path, visited_in_order))
        visit_frames = [frame for frame in frames if frame[2] is CellType.VISITED]
        path_frames = [frame for frame in frames if frame[2] is CellType.PATH_SOLUTION]
        self.playbacks = [
            Playback(visit_frames, self.speed, delay_factor=0.5),
            Playback(path_frames, self.speed),
        ]
        self.search_path = path
        self.search_outcome = VisualizerState.SOLVED if path else VisualizerState.NO_PATH
        self.state_manager.transition_to(VisualizerState.SEARCHING)

    def clear_path(self):
        if self.state_manager.is_busy():
            return
        self.grid = reset_pathfinding_data(self.grid)
        self.display = self.grid.to_array()
        self.stats.clear_search()
        if self.state_manager.current_state in (VisualizerState.SOLVED, VisualizerState.NO_PATH):
            self.state_manager.transition_to(VisualizerState.READY)

    def skip(self):
        """Finish the running animation immediately"""
        for playback in self.playbacks:
            self._apply_frames(playback.skip())
        self._on_playback_done()

    def change_speed(self, delta):
        self.speed = clamp(self.speed + delta, SPEED_MIN, SPEED_MAX)
        for playback in self.playbacks:
            playback.set_speed(self.speed)

    # -------------------- playback --------------------

    def _apply_frames(self, frames):
        state = self.state_manager.current_state
        for frame in frames:
            if state == VisualizerState.GENERATING:
                for row, col, _, new_type in self.steps.deltas(frame):
                    self.display[row, col] = CELL_CODES[new_type]
            else:
                row, col, new_type = frame
                self.display[row, col] = CELL_CODES[new_type]

    def _on_playback_done(self):
        state = self.state_manager.current_state
        self.playbacks = []
        if state == VisualizerState.GENERATING:
            self.display = self.grid.to_array()
            self.state_manager.transition_to(VisualizerState.READY)
        elif state == VisualizerState.SEARCHING:
            self.grid = mark_solution(self.grid, self.search_path)
            self.state_manager.transition_to(self.search_outcome)

    def update(self, dt_ms):
        if not self.playbacks:
            return
        playback = self.playbacks[0]
        self._apply_frames(playback.update(dt_ms))
        if playback.finished():
            self.playbacks.pop(0)
            if not self.playbacks:
                self._on_playback_done()

    # -------------------- loop --------------------

    def handle_events(self):
        """Handle input events"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return
            if event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key)

    def _handle_keydown(self, key):
        busy = self.state_manager.is_busy()
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_g:
            self.generate()
        elif key == pygame.K_f:
            self.find()
        elif key == pygame.K_c:
            self.clear_path()
        elif key == pygame.K_r and not busy:
            self.reset()
        elif key == pygame.K_m and not busy:
            self.maze_index = cycle_index(self.maze_index, len(MAZE_ALGOS))
        elif key == pygame.K_p and not busy:
            self.path_index = cycle_index(self.path_index, len(PATH_ALGOS))
        elif key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
            self.change_speed(SPEED_STEP)
        elif key in (pygame.K_MINUS, pygame.K_KP_MINUS):
            self.change_speed(-SPEED_STEP)
        elif key == pygame.K_SPACE and busy:
            self.skip()

    def render(self):
        self.screen.fill(COLOR_BG)
        self.renderer.render(self.screen, self.display)
        self.ui_manager.draw_panel(
            self.screen, self.rows * self.cell_size, self.screen.get_width(), PANEL_H,
            maze_algo=MAZE_ALGOS[self.maze_index],
            path_algo=PATH_ALGOS[self.path_index],
            speed=self.speed,
            state=self.state_manager.current_state,
            stats=self.stats,
        )
        pygame.display.flip()

    def run(self):
        while self.running:
            dt_ms = self.clock.tick(FPS)
            self.handle_events()
            self.update(dt_ms)
            self.render()
        pygame.quit()
        print("Maze Pathfinder closed.")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Visualize maze generation and pathfinding")
    parser.add_argument("--preset", choices=sorted(PRESETS), default="default")
    parser.add_argument("--rows", type=int)
    parser.add_argument("--cols", type=int)
    parser.add_argument("--cell-size", type=int)
    parser.add_argument("--speed", type=int, help="animation speed 1-100")
    parser.add_argument("--seed", type=int, help="seed for reproducible mazes")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    try:
        config = get_maze_config(
            args.preset, rows=args.rows, cols=args.cols,
            cell_size=args.cell_size, animation_speed=args.speed, seed=args.seed,
        )
    except MazeError as e:
        print(f"Invalid configuration: {e}")
        return 2

    MazePathfinderApp(config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
