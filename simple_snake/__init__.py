"""
Simple Snake: a grid snake game on pygame.

The simulation (grid, snake, food, round engine) is plain Python; the screen
state machine in `game` ties it to a display and an event source.
"""

from .engine import Round, TickOutcome
from .errors import GridError, InvalidTransitionError, OutOfBoundsError, SnakeGameError
from .game import Game, Session
from .grid import Coordinate, Grid, build_grid
from .snake import Direction, Snake
from .states import GameState, GameTransition, next_state

__version__ = "0.1.0"

__all__ = [
    'Coordinate', 'Grid', 'build_grid',
    'Direction', 'Snake',
    'Round', 'TickOutcome',
    'GameState', 'GameTransition', 'next_state',
    'Game', 'Session',
    'SnakeGameError', 'GridError', 'OutOfBoundsError', 'InvalidTransitionError',
]
