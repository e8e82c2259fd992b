"""Исключения модели редактора."""
from __future__ import annotations


class GridParseError(ValueError):
    """Текст импорта не является корректным вложенным массивом пикселей."""


class OutOfBoundsError(IndexError):
    """Координата клетки вне текущих размеров сетки."""

    def __init__(self, row: int, col: int, width: int, height: int) -> None:
        super().__init__(f"Клетка ({row}, {col}) вне сетки {width}x{height}")
        self.row = row
        self.col = col


class HistoryIndexError(IndexError):
    """Индекс недавнего цвета вне истории."""
