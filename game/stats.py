"""
Run statistics shown in the control panel
"""

import time

from utils.helpers import format_ms


class RunStats:
    """Path length, visited count and timings of the latest runs"""
    def __init__(self):
        self.reset()

    def reset(self):
        self.path_length = 0
        self.visited_nodes = 0
        self.generate_ms = 0.0
        self.solve_ms = 0.0
        self.generation_steps = 0

    def clear_search(self):
        """Forget the last search, keep generation stats"""
        self.path_length = 0
        self.visited_nodes = 0
        self.solve_ms = 0.0

    def record_generation(self, steps, elapsed_ms):
        self.clear_search()
        self.generation_steps = len(steps)
        self.generate_ms = elapsed_ms

    def record_search(self, path, visited_in_order, elapsed_ms):
        self.path_length = len(path)
        self.visited_nodes = len(visited_in_order)
        self.solve_ms = elapsed_ms

    def lines(self):
        """Formatted (label, value) pairs"""
        return [
            ("Path length", str(self.path_length)),
            ("Visited", str(self.visited_nodes)),
            ("Generate", format_ms(self.generate_ms)),
            ("Solve", format_ms(self.solve_ms)),
        ]


class Stopwatch:
    """Context manager measuring elapsed wall time in ms"""
    def __enter__(self):
        self._start = time.perf_counter()
        self.elapsed_ms = 0.0
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000.0
        return False
