"""
Playback - paces a finished sequence of frames for animation

The algorithms produce fully materialized results; the visualizer only
decides how fast to show them. Delay per frame is (SPEED_MAX - speed) ms,
scaled by an optional factor (search visits play at half the delay).
"""

from utils.constants import SPEED_MIN, SPEED_MAX
from utils.helpers import clamp


def frame_delay_ms(speed, factor=1.0):
    """Delay between frames for a speed setting of 1-100"""
    speed = clamp(speed, SPEED_MIN, SPEED_MAX)
    return (SPEED_MAX - speed) * factor


class Playback:
    """
    Timed cursor over a finite list of frames
    """
    def __init__(self, frames, speed, delay_factor=1.0):
        """
        Args:
            frames: Sequence of frames (any objects)
            speed: Animation speed 1-100
            delay_factor: Multiplier applied to the frame delay
        """
        self.frames = list(frames)
        self.speed = speed
        self.delay_factor = delay_factor
        self.position = 0
        self.accum_ms = 0.0

    @property
    def delay_ms(self):
        return frame_delay_ms(self.speed, self.delay_factor)

    def set_speed(self, speed):
        self.speed = clamp(speed, SPEED_MIN, SPEED_MAX)

    def update(self, dt_ms):
        """
        Advance the clock and release the frames that became due

        Args:
            dt_ms: Elapsed time in milliseconds

        Returns:
            List of frames to apply, in order
        """
        if self.finished():
            return []

        # The first frame shows immediately; a zero delay flushes everything
        delay = self.delay_ms
        if delay <= 0:
            return self.skip()

        self.accum_ms += dt_ms
        due = []
        if self.position == 0:
            due.append(self.frames[0])
            self.position = 1
        while self.position < len(self.frames) and self.accum_ms >= delay:
            self.accum_ms -= delay
            due.append(self.frames[self.position])
            self.position += 1
        return due

    def skip(self):
        """Release all remaining frames at once"""
        due = self.frames[self.position:]
        self.position = len(self.frames)
        self.accum_ms = 0.0
        return due

    def restart(self):
        self.position = 0
        self.accum_ms = 0.0

    def finished(self):
        return self.position >= len(self.frames)

    def progress(self):
        """Fraction of frames shown (1.0 for an empty sequence)"""
        if not self.frames:
            return 1.0
        return self.position / len(self.frames)

    def __len__(self):
        return len(self.frames)

    def __repr__(self):
        return f"Playback({self.position}/{len(self.frames)}, speed={self.speed})"
