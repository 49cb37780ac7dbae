"""
Round engine: advances the simulation one tick at a time.

A tick resolves, in order, the wall check, the food check and the
self-collision check. Collisions are ordinary outcomes, not errors.
"""

import logging
import random
from enum import Enum
from typing import Optional

from .food import spawn_food
from .grid import Grid
from .snake import Direction, Snake

logger = logging.getLogger(__name__)


class TickOutcome(Enum):
    CONTINUE = "continue"
    WALL_COLLISION = "wall"
    SELF_COLLISION = "self"

    @property
    def ends_round(self) -> bool:
        return self is not TickOutcome.CONTINUE


class Round:
    """One play-through: a snake, a piece of food and the score"""

    def __init__(self, grid: Grid, rng: Optional[random.Random] = None, snake: Optional[Snake] = None):
        self.grid = grid
        self.rng = rng or random.Random()
        self.snake = snake or Snake.spawn(grid)
        self.food = spawn_food(grid, self.rng)
        self.score = 0
        self.ticks = 0

    def steer(self, direction: Direction) -> bool:
        accepted = self.snake.turn(direction)
        if not accepted:
            logger.debug("Ignored reversal to %s while heading %s", direction.name, self.snake.direction.name)
        return accepted

    def advance(self) -> TickOutcome:
        """Move the snake one cell and report whether the round goes on"""
        new_head = self.snake.next_head(self.grid)
        if new_head is None:
            logger.info("Hit the wall at %s after %d ticks", self.snake.head, self.ticks)
            return TickOutcome.WALL_COLLISION

        ate = new_head == self.food
        if ate:
            self.score += 1
            self.food = spawn_food(self.grid, self.rng)
            logger.debug("Ate food at %s, score %d, next food at %s", new_head, self.score, self.food)

        self.snake.move(new_head, grow=ate)
        self.ticks += 1

        if self.snake.bites_itself():
            logger.info("Snake bit itself at %s after %d ticks", new_head, self.ticks)
            return TickOutcome.SELF_COLLISION

        return TickOutcome.CONTINUE
