"""
Helper utility functions for Maze Pathfinder
"""


def clamp(value, min_value, max_value):
    """Clamp a value between min and max"""
    return max(min_value, min(value, max_value))


def manhattan_distance(r1, c1, r2, c2):
    """Calculate Manhattan distance between two grid positions"""
    return abs(r2 - r1) + abs(c2 - c1)


def format_ms(milliseconds):
    """Format a duration in ms, e.g. '12.3 ms' or '1.25 s'"""
    if milliseconds >= 1000:
        return f"{milliseconds / 1000:.2f} s"
    return f"{milliseconds:.1f} ms"


def cycle_index(index, length, step=1):
    """Move through a list of options with wrap-around"""
    return (index + step) % length
