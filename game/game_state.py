"""
Visualizer State Machine - tracks where the generate / search pipeline is
"""

from enum import Enum, auto


class VisualizerState(Enum):
    """Visualizer states"""
    IDLE = auto()         # empty grid with Start/End only
    GENERATING = auto()   # playing generation steps
    READY = auto()        # maze built, no search shown
    SEARCHING = auto()    # playing search frames
    SOLVED = auto()       # search finished with a path
    NO_PATH = auto()      # search finished, End unreachable


# Allowed transitions (reset to IDLE is always allowed)
TRANSITIONS = {
    VisualizerState.IDLE: {VisualizerState.GENERATING, VisualizerState.SEARCHING},
    VisualizerState.GENERATING: {VisualizerState.READY},
    VisualizerState.READY: {VisualizerState.GENERATING, VisualizerState.SEARCHING},
    VisualizerState.SEARCHING: {VisualizerState.SOLVED, VisualizerState.NO_PATH},
    VisualizerState.SOLVED: {VisualizerState.GENERATING, VisualizerState.SEARCHING, VisualizerState.READY},
    VisualizerState.NO_PATH: {VisualizerState.GENERATING, VisualizerState.SEARCHING, VisualizerState.READY},
}

BUSY_STATES = (VisualizerState.GENERATING, VisualizerState.SEARCHING)


class StateManager:
    """
    Manages visualizer state transitions
    """
    def __init__(self):
        self.current_state = VisualizerState.IDLE
        self.previous_state = None
        self.state_data = {}  # For passing data between states

    def can_transition(self, new_state):
        if new_state == VisualizerState.IDLE:
            return True
        return new_state in TRANSITIONS[self.current_state]

    def transition_to(self, new_state, **kwargs):
        """
        Transition to a new state

        Args:
            new_state: VisualizerState enum value
            **kwargs: Additional data to pass to new state

        Raises:
            ValueError: if the transition is not allowed
        """
        if not self.can_transition(new_state):
            raise ValueError(f"Cannot go from {self.current_state.name} to {new_state.name}")
        self.previous_state = self.current_state
        self.current_state = new_state
        self.state_data = kwargs

    def is_busy(self):
        """True while an animation is playing"""
        return self.current_state in BUSY_STATES

    def has_maze(self):
        return self.current_state not in (VisualizerState.IDLE, VisualizerState.GENERATING)

    def __repr__(self):
        return f"StateManager(current={self.current_state.name}, previous={self.previous_state})"
