"""
Unit tests for the PixelGrid model.
"""

import numpy as np
import pytest

from pixel_editor.models.color import SENTINEL, TRANSPARENT, finish_pixel
from pixel_editor.models.errors import OutOfBoundsError
from pixel_editor.models.grid import PixelGrid


class TestCreate:
    """Tests for PixelGrid.create."""

    @pytest.mark.parametrize("width,height", [(1, 1), (8, 8), (5, 3), (3, 5)])
    def test_all_cells_blank(self, width, height):
        grid = PixelGrid.create(width, height)

        assert grid.width == width
        assert grid.height == height
        assert all(grid.get(r, c) == SENTINEL for r in range(height) for c in range(width))

    @pytest.mark.parametrize("width,height", [(0, 4), (4, 0), (-1, 2)])
    def test_rejects_non_positive_size(self, width, height):
        with pytest.raises(ValueError):
            PixelGrid.create(width, height)


class TestSetCell:
    """Tests for set_cell and get."""

    def test_changes_only_target_cell(self, blank_grid):
        red = (255, 0, 0, 100)
        updated = blank_grid.set_cell(1, 2, red)

        assert updated.get(1, 2) == red
        for r in range(blank_grid.height):
            for c in range(blank_grid.width):
                if (r, c) != (1, 2):
                    assert updated.get(r, c) == blank_grid.get(r, c)

    def test_does_not_mutate_previous_snapshot(self, blank_grid):
        blank_grid.set_cell(0, 0, (1, 2, 3, 4))

        assert blank_grid.get(0, 0) == SENTINEL

    def test_buffer_is_read_only(self, blank_grid):
        with pytest.raises(ValueError):
            blank_grid.pixels[0, 0] = (1, 2, 3, 4)

    @pytest.mark.parametrize("row,col", [(3, 0), (0, 4), (-1, 0), (0, -1)])
    def test_out_of_bounds(self, blank_grid, row, col):
        with pytest.raises(OutOfBoundsError):
            blank_grid.set_cell(row, col, SENTINEL)
        with pytest.raises(OutOfBoundsError):
            blank_grid.get(row, col)

    def test_get_returns_python_ints(self, blank_grid):
        color = blank_grid.get(0, 0)

        assert all(type(channel) is int for channel in color)


class TestMapCellsAndFinish:
    """Tests for map_cells and finished."""

    def test_map_cells_applies_transform(self, blank_grid):
        inverted = blank_grid.map_cells(lambda c: (255 - c[0], 255 - c[1], 255 - c[2], c[3]))

        assert inverted.get(2, 3) == (155, 155, 155, 100)

    def test_finished_replaces_only_sentinel(self, blank_grid):
        painted = blank_grid.set_cell(0, 1, (100, 100, 100, 99)).set_cell(2, 2, (9, 9, 9, 100))
        result = painted.finished()

        assert result.get(0, 0) == TRANSPARENT
        assert result.get(0, 1) == (100, 100, 100, 99)
        assert result.get(2, 2) == (9, 9, 9, 100)

    def test_finished_matches_map_cells(self, blank_grid):
        painted = blank_grid.set_cell(1, 1, (1, 2, 3, 100))

        assert painted.finished() == painted.map_cells(finish_pixel)


class TestConversions:
    """Tests for from_rows, to_rows and equality."""

    def test_rows_round_trip(self):
        rows = [[[1, 2, 3, 4], [5, 6, 7, 8]], [[9, 10, 11, 12], [13, 14, 15, 16]]]
        grid = PixelGrid.from_rows(rows)

        assert grid.width == 2
        assert grid.height == 2
        assert grid.to_rows() == rows

    def test_from_rows_rejects_ragged_or_empty(self):
        with pytest.raises(ValueError):
            PixelGrid.from_rows([])
        with pytest.raises(ValueError):
            PixelGrid.from_rows([[(1, 2, 3)]])

    def test_equality_by_content(self, blank_grid):
        assert blank_grid == PixelGrid.create(4, 3)
        assert blank_grid != PixelGrid.create(3, 4)
        assert blank_grid != blank_grid.set_cell(0, 0, TRANSPARENT)

    def test_pixels_shape(self, blank_grid):
        assert blank_grid.pixels.shape == (3, 4, 4)
        assert blank_grid.pixels.dtype == np.int16
