"""Машина состояний инструментов: выбор инструмента и клик по клетке.

Принципы:
- SRP: превращает события указателя и клавиатуры в мутацию сетки или взятие цвета.
- Чистый код: методы принимают и возвращают состояние явно, ничего не хранят.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Tuple

from pixel_editor.models.color import SENTINEL, Color
from pixel_editor.models.grid import PixelGrid
from pixel_editor.models.tools import HOTKEYS, Tool, ToolState

logger = logging.getLogger(__name__)


class ToolService:
    def select(self, state: ToolState, tool: Tool) -> ToolState:
        """Переключает инструмент.

        - Ластик запоминает текущий цвет (если ещё не запомнен) и рисует пустой клеткой.
        - Кисть восстанавливает запомненный цвет, если он есть.
        - Пипетка и прямоугольник только меняют инструмент.
        """
        if tool is Tool.ERASER:
            if state.tool is Tool.ERASER:
                return state
            saved = state.saved_color if state.saved_color is not None else state.current_color
            return ToolState(tool=Tool.ERASER, current_color=SENTINEL, saved_color=saved)
        if tool is Tool.BRUSH and state.saved_color is not None:
            return ToolState(tool=Tool.BRUSH, current_color=state.saved_color, saved_color=None)
        return replace(state, tool=tool)

    def hotkey(self, state: ToolState, key: str) -> ToolState:
        """Горячая клавиша -> инструмент; прочие клавиши состояние не меняют."""
        tool = HOTKEYS.get(key)
        if tool is None:
            return state
        return self.select(state, tool)

    def set_color(self, state: ToolState, color: Color) -> ToolState:
        """Явный выбор цвета (палитра, недавний цвет).

        При активном ластике выбор заменяет и запомненный цвет, чтобы кисть
        вернулась к нему; иначе устаревший запомненный цвет сбрасывается.
        """
        if state.tool is Tool.ERASER:
            return replace(state, current_color=color, saved_color=color)
        return replace(state, current_color=color, saved_color=None)

    def click(self, state: ToolState, grid: PixelGrid, row: int, col: int) -> Tuple[ToolState, PixelGrid]:
        """Применяет активный инструмент к клетке (row, col).

        Returns:
            Новое состояние инструмента и новую сетку (для пипетки ту же самую).

        Raises:
            OutOfBoundsError: если клетка вне сетки.
        """
        if state.tool is Tool.ERASER:
            return state, grid.set_cell(row, col, SENTINEL)
        if state.tool is Tool.EYEDROPPER:
            picked = grid.get(row, col)
            logger.debug("Пипетка: %s из клетки (%d, %d)", picked, row, col)
            return ToolState(tool=Tool.BRUSH, current_color=picked, saved_color=None), grid
        # Прямоугольник пока рисует одну клетку, как кисть
        return state, grid.set_cell(row, col, state.current_color)
