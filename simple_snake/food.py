"""Food placement."""

import random

from .grid import Coordinate, Grid


def spawn_food(grid: Grid, rng: random.Random) -> Coordinate:
    """Pick any cell uniformly at random; the snake's own cells are not excluded"""
    return Coordinate(rng.randrange(grid.hcells), rng.randrange(grid.vcells))
