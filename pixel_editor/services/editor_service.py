"""Операции сеанса редактирования, которые вызывает контроллер.

Принципы:
- SRP: единственный владелец `EditorSession`; на каждое действие пользователя
  ровно один метод, который выполняется целиком и синхронно.
- DIP: инструменты, история и сериализация приходят как сервисы.
Clean Code:
- Ошибки ввода пользователя (импорт, размеры) поднимаются до контроллера,
  состояние сеанса при этом не меняется.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from pixel_editor.models.color import Color, parse_hex
from pixel_editor.models.grid import PixelGrid
from pixel_editor.models.session import EditorSession
from pixel_editor.models.tools import Tool
from pixel_editor.services.history_service import ColorHistory
from pixel_editor.services.serializer_service import GridSerializer
from pixel_editor.services.tool_service import ToolService

logger = logging.getLogger(__name__)

SIZE_PRESETS = ((8, 8), (16, 16), (32, 32), (64, 64))


class EditorService:
    def __init__(
        self,
        history: ColorHistory,
        width: int = 16,
        height: int = 16,
        max_size: int = 256,
        tool_service: Optional[ToolService] = None,
        serializer: Optional[GridSerializer] = None,
    ) -> None:
        self._history = history
        self._max_size = max_size
        self._tools = tool_service or ToolService()
        self._serializer = serializer or GridSerializer()
        self._session = EditorSession(grid=PixelGrid.create(*self._checked_size(width, height)))

    @property
    def session(self) -> EditorSession:
        return self._session

    @property
    def grid(self) -> PixelGrid:
        return self._session.grid

    @property
    def recent_colors(self) -> List[Color]:
        return self._history.colors

    # ---- Grid ----
    def start(self, width: int, height: int) -> PixelGrid:
        """Пересоздаёт сетку заданного размера; прежний рисунок теряется.

        Raises:
            ValueError: если размеры вне 1..max_size.
        """
        width, height = self._checked_size(width, height)
        self._session.grid = PixelGrid.create(width, height)
        self._session.hovered = None
        logger.info("Новая сетка %dx%d", width, height)
        return self._session.grid

    def click(self, row: int, col: int) -> None:
        state, grid = self._tools.click(self._session.tool_state, self._session.grid, row, col)
        self._session.tool_state = state
        self._session.grid = grid

    def hover(self, row: Optional[int], col: Optional[int]) -> None:
        self._session.hovered = None if row is None or col is None else (row, col)

    # ---- Tools and colors ----
    def select_tool(self, tool: Tool) -> None:
        self._session.tool_state = self._tools.select(self._session.tool_state, tool)
        logger.debug("Инструмент: %s", self._session.tool_state.tool.value)

    def handle_hotkey(self, key: str) -> bool:
        """Возвращает True, если клавиша переключила инструмент."""
        before = self._session.tool_state
        self._session.tool_state = self._tools.hotkey(before, key)
        return self._session.tool_state is not before

    def pick_hex(self, text: str) -> Color:
        color = parse_hex(text)
        self.set_color(color)
        return color

    def set_color(self, color: Color) -> None:
        self._session.tool_state = self._tools.set_color(self._session.tool_state, color)

    def save_current_color(self) -> List[Color]:
        return self._history.record(self._session.tool_state.current_color)

    def clear_last_color(self) -> List[Color]:
        return self._history.remove_most_recent()

    def select_recent(self, index: int) -> Color:
        color = self._history.select(index)
        self.set_color(color)
        return color

    # ---- Import / export ----
    def finish(self, project_name: Optional[str] = None) -> str:
        if project_name is not None:
            self._session.project_name = project_name
        text = self._serializer.format(self._session.grid, self._session.project_name)
        self._session.formatted_text = text
        logger.info("Экспорт %dx%d как %sIcon", self._session.width, self._session.height, self._session.project_name)
        return text

    def load_array(self, text: str) -> PixelGrid:
        """Импортирует массив с сохранением не меньших текущих размеров.

        Raises:
            GridParseError: текст не разобран; сетка остаётся прежней.
        """
        grid = self._serializer.load(text, self._session.grid)
        self._session.grid = grid
        logger.info("Импорт массива, сетка %dx%d", grid.width, grid.height)
        return grid

    # ---- Helpers ----
    def _checked_size(self, width: int, height: int) -> Tuple[int, int]:
        if not (1 <= width <= self._max_size and 1 <= height <= self._max_size):
            raise ValueError(f"Размер сетки должен быть от 1 до {self._max_size}: {width}x{height}")
        return width, height
