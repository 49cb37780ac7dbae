"""
Screen states and the transitions between them.

A game is always showing exactly one screen (a GameState). Each screen loop
ends by requesting a GameTransition; TRANSITIONS says where that leads. A
next state of None ends the session.
"""

from enum import Enum
from typing import Dict, Optional, Tuple

from .errors import InvalidTransitionError


class GameState(Enum):
    STARTING = "starting"
    PLAYING = "playing"
    PAUSED = "paused"
    GAMEOVER = "gameover"


class GameTransition(Enum):
    PLAY = "play"
    PAUSE = "pause"
    LOSE = "lose"
    EXIT = "exit"


TRANSITIONS: Dict[Tuple[GameState, GameTransition], Optional[GameState]] = {
    (GameState.STARTING, GameTransition.PLAY): GameState.PLAYING,
    (GameState.STARTING, GameTransition.EXIT): None,
    (GameState.PLAYING, GameTransition.PAUSE): GameState.PAUSED,
    (GameState.PLAYING, GameTransition.LOSE): GameState.GAMEOVER,
    (GameState.PLAYING, GameTransition.EXIT): None,
    (GameState.PAUSED, GameTransition.PLAY): GameState.PLAYING,
    (GameState.PAUSED, GameTransition.LOSE): GameState.GAMEOVER,
    (GameState.PAUSED, GameTransition.EXIT): None,
    (GameState.GAMEOVER, GameTransition.PLAY): GameState.STARTING,
    (GameState.GAMEOVER, GameTransition.EXIT): None,
}


def next_state(state: GameState, transition: GameTransition) -> Optional[GameState]:
    """Look up the state reached from `state`; raises on a missing entry"""
    try:
        return TRANSITIONS[(state, transition)]
    except KeyError:
        raise InvalidTransitionError(state, transition) from None
