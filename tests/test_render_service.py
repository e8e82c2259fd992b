"""
Unit tests for rendering the grid into a PIL image.
"""

import pytest

from pixel_editor.models.color import SENTINEL
from pixel_editor.models.grid import PixelGrid
from pixel_editor.services.render_service import RenderService


@pytest.fixture
def renderer():
    return RenderService()


class TestGridToRgba:
    """Tests for the alpha percentage mapping."""

    def test_alpha_percent_to_byte(self, renderer):
        grid = PixelGrid.from_rows([[(10, 20, 30, 100), (0, 0, 0, 0), (255, 255, 255, 50)]])

        arr = renderer.grid_to_rgba_np(grid)

        assert arr.shape == (1, 3, 4)
        assert arr[0, 0].tolist() == [10, 20, 30, 255]
        assert arr[0, 1, 3] == 0
        assert arr[0, 2, 3] == 128


class TestGridToImage:
    """Tests for grid_to_image."""

    def test_size_scales_with_cell(self, renderer, blank_grid):
        image = renderer.grid_to_image(blank_grid, cell_size=5)

        assert image.size == (20, 15)
        assert image.mode == "RGBA"

    def test_opaque_cell_color(self, renderer, blank_grid):
        grid = blank_grid.set_cell(1, 2, (200, 10, 10, 100))

        image = renderer.grid_to_image(grid, cell_size=3)

        assert image.getpixel((2 * 3 + 1, 1 * 3 + 1)) == (200, 10, 10, 255)
        assert image.getpixel((0, 0)) == (*SENTINEL[:3], 255)

    def test_transparent_cell_shows_background(self, renderer):
        grid = PixelGrid.from_rows([[(0, 0, 0, 0)]])

        image = renderer.grid_to_image(grid, cell_size=1, background=(1, 2, 3))

        assert image.getpixel((0, 0)) == (1, 2, 3, 255)


class TestFitCellSize:
    """Tests for fit_cell_size."""

    def test_fits_smaller_dimension(self, renderer):
        grid = PixelGrid.create(16, 8)

        assert renderer.fit_cell_size(grid, 320, 400, max_cell=100) == 20

    def test_capped_by_max_cell(self, renderer):
        assert renderer.fit_cell_size(PixelGrid.create(2, 2), 1000, 1000, max_cell=32) == 32

    def test_never_below_one(self, renderer):
        assert renderer.fit_cell_size(PixelGrid.create(64, 64), 10, 10) == 1
        assert renderer.fit_cell_size(PixelGrid.create(8, 8), 0, 0) == 1
