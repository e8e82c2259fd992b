"""Инструменты редактора и состояние их переключения.

Принципы:
- Чистый код: состояние является неизменяемым значением; инвариант «у ластика всегда
  есть сохранённый цвет» проверяется при создании, а не порядком вызовов.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from pixel_editor.models.color import DEFAULT_COLOR, Color


class Tool(Enum):
    BRUSH = "brush"
    ERASER = "eraser"
    EYEDROPPER = "eyedropper"
    RECTANGLE = "rectangle"


# Глобальные горячие клавиши без модификаторов
HOTKEYS: Dict[str, Tool] = {
    "e": Tool.ERASER,
    "b": Tool.BRUSH,
    "i": Tool.EYEDROPPER,
    "r": Tool.RECTANGLE,
}

TOOL_LABELS: Dict[Tool, str] = {
    Tool.BRUSH: "Кисть",
    Tool.ERASER: "Ластик",
    Tool.EYEDROPPER: "Пипетка",
    Tool.RECTANGLE: "Прямоугольник",
}


@dataclass(frozen=True)
class ToolState:
    """Активный инструмент и цвет, которым он рисует.

    Fields:
        tool: Активный инструмент.
        current_color: Цвет кисти (и цель пипетки).
        saved_color: Цвет до включения ластика; восстанавливается кистью.
    """
    tool: Tool = Tool.BRUSH
    current_color: Color = DEFAULT_COLOR
    saved_color: Optional[Color] = None

    def __post_init__(self) -> None:
        if self.tool is Tool.ERASER and self.saved_color is None:
            raise ValueError("Ластик требует сохранённый цвет для восстановления")
