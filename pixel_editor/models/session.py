"""Состояние сеанса редактирования."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from pixel_editor.models.grid import PixelGrid
from pixel_editor.models.tools import ToolState


@dataclass
class EditorSession:
    """Единственный изменяемый объект сеанса; владеет им `EditorService`.

    Fields:
        grid: Текущая сетка; её размеры и есть размеры холста.
        tool_state: Активный инструмент и цвета.
        hovered: Последняя клетка под курсором (только для отображения).
        project_name: Имя проекта для экспорта.
        formatted_text: Последний результат экспорта.
    """
    grid: PixelGrid
    tool_state: ToolState = field(default_factory=ToolState)
    hovered: Optional[Tuple[int, int]] = None
    project_name: str = ""
    formatted_text: str = ""

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height
