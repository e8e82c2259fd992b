"""Модель сетки пикселей.

Принципы:
- SRP: только хранение клеток и элементарные операции над ними.
- Чистый код: неизменяемость (`frozen=True`, буфер numpy только для чтения);
  каждая мутация возвращает новую сетку, старые снимки не меняются.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Sequence

import numpy as np

from pixel_editor.models.color import SENTINEL, TRANSPARENT, Color
from pixel_editor.models.errors import OutOfBoundsError


def _frozen(pixels: np.ndarray) -> np.ndarray:
    pixels.setflags(write=False)
    return pixels


@dataclass(frozen=True, eq=False)
class PixelGrid:
    """Неизменяемая сетка цветов, адресуемая как (row, col).

    Fields:
        pixels: Массив numpy формы (height, width, 4), каналы r, g, b, a.
    """
    pixels: np.ndarray

    @classmethod
    def create(cls, width: int, height: int) -> "PixelGrid":
        """Создаёт сетку width x height, все клетки пустые (`SENTINEL`)."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Размеры сетки должны быть положительными: {width}x{height}")
        pixels = np.empty((height, width, 4), dtype=np.int16)
        pixels[:, :] = SENTINEL
        return cls(_frozen(pixels))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Color]]) -> "PixelGrid":
        """Строит сетку из прямоугольного списка строк цветов."""
        pixels = np.array(rows, dtype=np.int16)
        if pixels.ndim != 3 or pixels.shape[2] != 4 or pixels.shape[0] == 0 or pixels.shape[1] == 0:
            raise ValueError("Ожидался непустой прямоугольный массив цветов (r, g, b, a)")
        return cls(_frozen(pixels))

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def get(self, row: int, col: int) -> Color:
        self._check_bounds(row, col)
        r, g, b, a = (int(v) for v in self.pixels[row, col])
        return r, g, b, a

    def set_cell(self, row: int, col: int, color: Color) -> "PixelGrid":
        """Возвращает копию сетки, в которой заменена одна клетка."""
        self._check_bounds(row, col)
        pixels = self.pixels.copy()
        pixels[row, col] = color
        return PixelGrid(_frozen(pixels))

    def map_cells(self, transform: Callable[[Color], Color]) -> "PixelGrid":
        """Применяет чистое преобразование к каждой клетке."""
        rows = [[transform(self.get(r, c)) for c in range(self.width)] for r in range(self.height)]
        return PixelGrid.from_rows(rows)

    def finished(self) -> "PixelGrid":
        """Итоговая сетка для экспорта: пустые клетки становятся прозрачными.

        То же, что `map_cells(finish_pixel)`, но векторизовано.
        """
        blank = np.all(self.pixels == np.array(SENTINEL, dtype=np.int16), axis=-1)
        pixels = np.where(blank[..., None], np.array(TRANSPARENT, dtype=np.int16), self.pixels)
        return PixelGrid(_frozen(pixels.astype(np.int16)))

    def to_rows(self) -> List[List[List[int]]]:
        """Вложенные списки int для сериализации в JSON."""
        return self.pixels.astype(int).tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return bool(np.array_equal(self.pixels, other.pixels))

    __hash__ = None  # type: ignore[assignment]

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.contains(row, col):
            raise OutOfBoundsError(row, col, self.width, self.height)
