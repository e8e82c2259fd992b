"""Импорт и экспорт сетки в текстовый формат вложенного массива.

Принципы:
- SRP: только текст <-> сетка; сеанс и UI сюда не попадают.
- Чистый код: экспорт и импорт применяют обратные, но не тождественные
  соглашения о прозрачности (пустая клетка <-> `[0,0,0,0]`).
"""
from __future__ import annotations

import json
import logging
import re
from typing import Any, List, Optional

from pixel_editor.models.color import SENTINEL, Color, to_color
from pixel_editor.models.errors import GridParseError
from pixel_editor.models.grid import PixelGrid

logger = logging.getLogger(__name__)

# Полный блок экспорта: const <Name>Icon = [...]; export default <Name>Icon;
_EXPORT_BLOCK = re.compile(r"^\s*const\s+.+?\s*=\s*(?P<literal>\[.*\])\s*;\s*export\s+default\s+.+?;?\s*$", re.S)


class GridSerializer:
    def format(self, grid: PixelGrid, name: str) -> str:
        """Экспортирует сетку как именованную константу `<name>Icon`.

        Пустые клетки заменяются на `[0,0,0,0]`; имя подставляется как есть.
        """
        identifier = f"{name}Icon"
        if not identifier.isidentifier():
            logger.warning("Имя экспорта %r не является корректным идентификатором", identifier)
        literal = json.dumps(grid.finished().to_rows(), separators=(",", ":"))
        return f"const {identifier} = {literal};\n\nexport default {identifier};"

    def parse(self, text: str) -> List[Any]:
        """Разбирает вложенный массив (или целый блок экспорта) в список строк.

        Raises:
            GridParseError: если текст не является массивом строк с цветами.
        """
        match = _EXPORT_BLOCK.match(text)
        literal = match.group("literal") if match else text
        try:
            raw = json.loads(literal)
        except json.JSONDecodeError as exc:
            raise GridParseError(f"Некорректный формат массива: {exc.msg}") from exc
        except RecursionError as exc:
            raise GridParseError("Некорректный формат массива: слишком глубокая вложенность") from exc
        if not isinstance(raw, list):
            raise GridParseError("Ожидался массив строк пикселей")
        for r, row in enumerate(raw):
            if row is None:
                continue
            if not isinstance(row, list):
                raise GridParseError(f"Строка {r} не является массивом")
            for c, cell in enumerate(row):
                if cell is None:
                    continue
                try:
                    to_color(cell)
                except ValueError as exc:
                    raise GridParseError(f"Пиксель [{r}][{c}]: {exc}") from exc
        return raw

    def reconcile(self, raw: List[Any], width: int, height: int) -> PixelGrid:
        """Сливает импортированный массив с текущими размерами; сетка не уменьшается.

        Ширина берётся из первой строки источника. Пиксель с альфой 0 и
        отсутствующие в источнике клетки становятся пустыми (`SENTINEL`).
        """
        if not raw or not isinstance(raw[0], list):
            raise GridParseError("Массив пуст: нет первой строки пикселей")
        new_width = max(len(raw[0]), width)
        new_height = max(len(raw), height)
        rows = [[self._source_cell(raw, r, c) for c in range(new_width)] for r in range(new_height)]
        return PixelGrid.from_rows(rows)

    def load(self, text: str, grid: PixelGrid) -> PixelGrid:
        """Разбор и слияние с текущей сеткой за один шаг."""
        return self.reconcile(self.parse(text), grid.width, grid.height)

    # ---- Helpers ----
    def _source_cell(self, raw: List[Any], row: int, col: int) -> Color:
        source_row: Optional[List[Any]] = raw[row] if row < len(raw) else None
        if source_row is None or col >= len(source_row) or source_row[col] is None:
            return SENTINEL
        color = to_color(source_row[col])
        return SENTINEL if color[3] == 0 else color
