"""Exceptions raised by the game core."""


class SnakeGameError(Exception):
    """Base class for all game errors"""


class GridError(SnakeGameError, ValueError):
    """The requested grid (or a shape placed on it) has no room"""


class OutOfBoundsError(SnakeGameError, IndexError):
    """A coordinate lies outside the grid"""

    def __init__(self, coord, hcells: int, vcells: int):
        super().__init__(f"{coord} is outside a {hcells}x{vcells} grid")
        self.coord = coord


class InvalidTransitionError(SnakeGameError, RuntimeError):
    """The state machine has no entry for a (state, transition) pair"""

    def __init__(self, state, transition):
        super().__init__(f"Invalid transition {transition.name} in state {state.name}")
        self.state = state
        self.transition = transition
