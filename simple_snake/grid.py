"""
The play area: a grid of cells laid out inside the window margin.

Cell (x, y) sits at column x, row y. Every cell is precomputed as a
pygame.Rect when the grid is built, row by row.
"""

import logging
from dataclasses import dataclass, field
from typing import Tuple

import pygame

from .errors import GridError, OutOfBoundsError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Coordinate:
    """A cell address on the grid"""
    x: int
    y: int

    def shifted(self, dx: int, dy: int) -> "Coordinate":
        return Coordinate(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Grid:
    """Cell space of hcells columns by vcells rows"""
    hcells: int
    vcells: int
    spacing: int
    cell_size: int
    area: pygame.Rect = field(compare=False)
    cells: Tuple[pygame.Rect, ...] = field(default=(), compare=False, repr=False)

    def contains(self, coord: Coordinate) -> bool:
        return 0 <= coord.x < self.hcells and 0 <= coord.y < self.vcells

    def cell_rect(self, coord: Coordinate) -> pygame.Rect:
        """Pixel rectangle of a cell; raises OutOfBoundsError off the grid"""
        if not self.contains(coord):
            raise OutOfBoundsError(coord, self.hcells, self.vcells)
        return self.cells[coord.y * self.hcells + coord.x].copy()

    @property
    def center(self) -> Coordinate:
        return Coordinate(self.hcells // 2, self.vcells // 2)


def _cell_rect(spacing: int, cell_size: int, x: int, y: int) -> pygame.Rect:
    return pygame.Rect(spacing + x * cell_size, spacing + y * cell_size, cell_size, cell_size)


def build_grid(width_px: int, height_px: int, spacing_px: int, cell_px: int) -> Grid:
    """Lay out as many whole cells as fit inside the window minus its margin"""
    if cell_px <= 0:
        raise GridError(f"Cell size must be positive, got {cell_px}")

    inner_width = width_px - 2 * spacing_px
    inner_height = height_px - 2 * spacing_px
    hcells = inner_width // cell_px
    vcells = inner_height // cell_px
    if hcells <= 0 or vcells <= 0:
        raise GridError(
            f"A {width_px}x{height_px} window with {spacing_px}px spacing "
            f"has no room for {cell_px}px cells"
        )

    cells = tuple(
        _cell_rect(spacing_px, cell_px, x, y)
        for y in range(vcells)
        for x in range(hcells)
    )
    area = pygame.Rect(spacing_px, spacing_px, inner_width, inner_height)
    logger.debug("Built %dx%d grid in %s", hcells, vcells, area)
    return Grid(hcells, vcells, spacing_px, cell_px, area, cells)
