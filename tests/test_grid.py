"""Tests for the cell grid."""

import pygame
import pytest

from simple_snake.errors import GridError, OutOfBoundsError
from simple_snake.grid import Coordinate, build_grid


class TestBuildGrid:
    """Tests for build_grid()."""

    def test_default_window_has_38_by_28_cells(self, grid):
        """An 800x600 window with 20px spacing and cells fits 38x28 cells."""
        assert grid.hcells == 38
        assert grid.vcells == 28
        assert len(grid.cells) == 38 * 28

    def test_game_area_is_inset_by_spacing(self, grid):
        """The game area leaves the spacing margin on every side."""
        assert grid.area == pygame.Rect(20, 20, 760, 560)

    def test_cells_are_row_major(self, grid):
        """Cells are laid out row by row, starting inside the margin."""
        assert grid.cells[0] == pygame.Rect(20, 20, 20, 20)
        assert grid.cells[1] == pygame.Rect(40, 20, 20, 20)
        assert grid.cells[38] == pygame.Rect(20, 40, 20, 20)
        assert grid.cells[-1] == pygame.Rect(760, 560, 20, 20)

    def test_cell_size_independent_of_spacing(self):
        """Cell counts are derived from the cell size, not the margin."""
        grid = build_grid(400, 300, 10, 20)
        assert (grid.hcells, grid.vcells) == (19, 14)
        assert grid.cells[0] == pygame.Rect(10, 10, 20, 20)

    @pytest.mark.parametrize("width,height", [(40, 600), (800, 40), (50, 50)])
    def test_no_room_for_cells_raises(self, width, height):
        """A window too small for a single cell is rejected."""
        with pytest.raises(GridError):
            build_grid(width, height, 20, 20)

    def test_non_positive_cell_size_raises(self):
        """Zero-sized cells are rejected."""
        with pytest.raises(GridError):
            build_grid(800, 600, 20, 0)


class TestCellRect:
    """Tests for Grid.cell_rect() and Grid.contains()."""

    def test_cell_rect_matches_precomputed_cell(self, grid):
        """cell_rect() returns the rectangle of the addressed cell."""
        assert grid.cell_rect(Coordinate(3, 2)) == pygame.Rect(80, 60, 20, 20)

    def test_last_cell_is_valid(self, grid):
        """The bottom right cell is inside the grid."""
        assert grid.cell_rect(Coordinate(37, 27)) == pygame.Rect(760, 560, 20, 20)

    @pytest.mark.parametrize("coord", [Coordinate(38, 0), Coordinate(0, 28), Coordinate(-1, 0), Coordinate(38, 28)])
    def test_outside_grid_raises(self, grid, coord):
        """The first column and row past the edge are already out of bounds."""
        assert not grid.contains(coord)
        with pytest.raises(OutOfBoundsError):
            grid.cell_rect(coord)

    def test_out_of_bounds_is_an_index_error(self, grid):
        """OutOfBoundsError can be caught as IndexError."""
        with pytest.raises(IndexError):
            grid.cell_rect(Coordinate(100, 100))

    def test_returned_rect_is_a_copy(self, grid):
        """Mutating a returned rectangle leaves the grid untouched."""
        rect = grid.cell_rect(Coordinate(0, 0))
        rect.move_ip(5, 5)
        assert grid.cells[0] == pygame.Rect(20, 20, 20, 20)

    def test_center(self, grid):
        assert grid.center == Coordinate(19, 14)
