"""
Keyboard mapping, one method per screen.

Each method turns an event into a Command for the screen that asked, or
None when that screen has no use for the event.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import pygame

from .events import Event, KeyDown, KeyUp, Quit, Tick
from .snake import Direction


class Action(Enum):
    MENU_TOGGLE = "menu_toggle"
    MENU_CONFIRM = "menu_confirm"
    TURN = "turn"
    SPEED_FAST = "speed_fast"
    SPEED_NORMAL = "speed_normal"
    TOGGLE_GRID = "toggle_grid"
    TICK = "tick"
    PAUSE = "pause"
    RESUME = "resume"
    CONTINUE = "continue"
    FORFEIT = "forfeit"
    EXIT = "exit"


@dataclass(frozen=True)
class Command:
    action: Action
    direction: Optional[Direction] = None


# Arrows or vi keys
DIRECTION_KEYS = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_h: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_l: Direction.RIGHT,
    pygame.K_UP: Direction.UP,
    pygame.K_k: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_j: Direction.DOWN,
}

MENU_KEYS = (pygame.K_UP, pygame.K_DOWN, pygame.K_j, pygame.K_k)
CONFIRM_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)
PAUSE_KEY = pygame.K_SPACE
FORFEIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)
GRID_KEY = pygame.K_g


class InputRouter:
    """Maps raw events to commands, scoped to the active screen"""

    def menu(self, event: Event) -> Optional[Command]:
        if isinstance(event, Quit):
            return Command(Action.EXIT)
        if isinstance(event, KeyDown):
            if event.key == pygame.K_ESCAPE:
                return Command(Action.EXIT)
            if event.key in MENU_KEYS:
                return Command(Action.MENU_TOGGLE)
            if event.key in CONFIRM_KEYS:
                return Command(Action.MENU_CONFIRM)
        return None

    def playing(self, event: Event) -> Optional[Command]:
        if isinstance(event, Tick):
            return Command(Action.TICK)
        if isinstance(event, Quit):
            return Command(Action.EXIT)
        if isinstance(event, KeyUp):
            if event.key in CONFIRM_KEYS:
                return Command(Action.SPEED_NORMAL)
            return None
        if isinstance(event, KeyDown):
            if event.key in FORFEIT_KEYS:
                return Command(Action.FORFEIT)
            if event.key == PAUSE_KEY:
                return Command(Action.PAUSE)
            if event.key in DIRECTION_KEYS:
                return Command(Action.TURN, DIRECTION_KEYS[event.key])
            if event.key in CONFIRM_KEYS:
                return Command(Action.SPEED_FAST)
            if event.key == GRID_KEY:
                return Command(Action.TOGGLE_GRID)
        return None

    def paused(self, event: Event) -> Optional[Command]:
        if isinstance(event, Quit):
            return Command(Action.EXIT)
        if isinstance(event, KeyDown):
            if event.key in FORFEIT_KEYS:
                return Command(Action.FORFEIT)
            if event.key == PAUSE_KEY:
                return Command(Action.RESUME)
            if event.key in CONFIRM_KEYS:
                return Command(Action.SPEED_FAST)
        if isinstance(event, KeyUp) and event.key in CONFIRM_KEYS:
            return Command(Action.SPEED_NORMAL)
        return None

    def game_over(self, event: Event) -> Optional[Command]:
        if isinstance(event, Quit):
            return Command(Action.EXIT)
        if isinstance(event, KeyDown):
            if event.key == pygame.K_ESCAPE:
                return Command(Action.EXIT)
            return Command(Action.CONTINUE)
        return None
