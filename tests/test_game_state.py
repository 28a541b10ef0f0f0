import pytest

from game.game_state import StateManager, VisualizerState


def test_starts_idle():
    manager = StateManager()
    assert manager.current_state == VisualizerState.IDLE
    assert not manager.is_busy()
    assert not manager.has_maze()


def test_generate_then_search_flow():
    manager = StateManager()
    manager.transition_to(VisualizerState.GENERATING)
    assert manager.is_busy()

    manager.transition_to(VisualizerState.READY)
    assert manager.has_maze()

    manager.transition_to(VisualizerState.SEARCHING, algorithm="BFS")
    assert manager.state_data == {"algorithm": "BFS"}

    manager.transition_to(VisualizerState.NO_PATH)
    assert manager.previous_state == VisualizerState.SEARCHING
    assert not manager.is_busy()


@pytest.mark.parametrize("start, target", [
    (VisualizerState.IDLE, VisualizerState.READY),
    (VisualizerState.GENERATING, VisualizerState.SEARCHING),
    (VisualizerState.SEARCHING, VisualizerState.GENERATING),
])
def test_invalid_transitions_raise(start, target):
    manager = StateManager()
    manager.current_state = start
    with pytest.raises(ValueError):
        manager.transition_to(target)
    assert manager.current_state == start


@pytest.mark.parametrize("state", list(VisualizerState))
def test_reset_always_allowed(state):
    manager = StateManager()
    manager.current_state = state
    manager.transition_to(VisualizerState.IDLE)
    assert manager.current_state == VisualizerState.IDLE
