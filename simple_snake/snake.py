"""Snake body, heading and movement rules."""

from collections import deque
from enum import Enum
from typing import Iterable, Optional, Tuple

from .config import START_LENGTH
from .errors import GridError
from .grid import Coordinate, Grid


class Direction(Enum):
    """Heading of the snake, valued by its (dx, dy) step"""
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


class Snake:
    """
    Ordered body of cells, head first, moving along `direction`.

    `heading` is the direction of the last completed move. A turn is refused
    when it reverses either the requested direction or the heading, so two
    quick key presses inside one tick cannot fold the snake onto its neck.
    """

    def __init__(self, body: Iterable[Coordinate], direction: Direction = Direction.RIGHT):
        self.body: deque = deque(body)
        if not self.body:
            raise ValueError("A snake needs at least one cell")
        self.direction = direction
        self.heading = direction

    @classmethod
    def spawn(cls, grid: Grid, length: int = START_LENGTH) -> "Snake":
        """Horizontal snake centered on the grid, heading right, tail to the left"""
        head = grid.center
        if length < 1 or head.x - (length - 1) < 0:
            raise GridError(f"A {length}-cell snake does not fit a {grid.hcells}x{grid.vcells} grid")
        return cls((Coordinate(head.x - i, head.y) for i in range(length)), Direction.RIGHT)

    @property
    def head(self) -> Coordinate:
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def turn(self, direction: Direction) -> bool:
        """
        Request a new direction; reversals are rejected and return False.

        A reversal is checked against both the requested direction and the
        heading of the last move, so UP then LEFT on a right-moving snake is
        refused until the snake has actually moved up.
        """
        if direction in (self.direction.opposite, self.heading.opposite):
            return False
        self.direction = direction
        return True

    def next_head(self, grid: Grid) -> Optional[Coordinate]:
        """Cell the head moves into next, or None if that leaves the grid"""
        new_head = self.head.shifted(*self.direction.delta)
        if not grid.contains(new_head):
            return None
        return new_head

    def move(self, new_head: Coordinate, grow: bool = False):
        """Step onto new_head, keeping the tail when growing"""
        if not grow:
            self.body.pop()
        self.body.appendleft(new_head)
        self.heading = self.direction

    def bites_itself(self) -> bool:
        head = self.body[0]
        return any(cell == head for cell in list(self.body)[1:])
