"""Отрисовка сетки в изображение PIL для холста."""
from __future__ import annotations

from typing import Tuple

import numpy as np
from PIL import Image

from pixel_editor.models.grid import PixelGrid


class RenderService:
    def grid_to_rgba_np(self, grid: PixelGrid) -> np.ndarray:
        """
        Массив uint8 (H, W, 4): альфа из процентов переводится в 0..255.
        """
        pixels = grid.pixels.astype(np.float32)
        alpha = np.rint(pixels[..., 3] / 100.0 * 255.0)
        out = np.empty(pixels.shape, dtype=np.uint8)
        out[..., :3] = np.clip(pixels[..., :3], 0, 255).astype(np.uint8)
        out[..., 3] = np.clip(alpha, 0, 255).astype(np.uint8)
        return out

    def grid_to_image(
        self,
        grid: PixelGrid,
        cell_size: int = 1,
        background: Tuple[int, int, int] = (31, 31, 31),
    ) -> Image.Image:
        """
        Отрисовка сетки: каждая клетка рисуется квадратом cell_size x cell_size,
        полупрозрачные клетки накладываются на фон холста.
        """
        cell_size = max(1, int(cell_size))
        image = Image.fromarray(self.grid_to_rgba_np(grid))
        if cell_size > 1:
            image = image.resize((grid.width * cell_size, grid.height * cell_size), Image.Resampling.NEAREST)
        base = Image.new("RGBA", image.size, (*background, 255))
        return Image.alpha_composite(base, image)

    def fit_cell_size(self, grid: PixelGrid, area_w: int, area_h: int, max_cell: int = 32) -> int:
        """
        Наибольший целый размер клетки, при котором сетка целиком помещается в область.
        """
        if area_w <= 0 or area_h <= 0:
            return 1
        size = min(area_w // grid.width, area_h // grid.height, max_cell)
        return max(1, size)
