"""История недавних цветов со сквозной записью в хранилище.

Принципы:
- SRP: порядок и вытеснение вынесены в чистые функции; класс лишь связывает их с хранилищем.
- DIP: хранилище внедряется через `KeyValueStore`.
"""
from __future__ import annotations

import json
import logging
from typing import List, Sequence

from pixel_editor.models.color import Color, to_color
from pixel_editor.models.errors import HistoryIndexError
from pixel_editor.services.storage_service import KeyValueStore

logger = logging.getLogger(__name__)

HISTORY_KEY = "recentColors"
HISTORY_CAPACITY = 10


def push_color(colors: Sequence[Color], color: Color, capacity: int = HISTORY_CAPACITY) -> List[Color]:
    """Добавляет цвет в начало и обрезает до ёмкости. Дубликаты допустимы."""
    return [color, *colors][:capacity]


def drop_most_recent(colors: Sequence[Color]) -> List[Color]:
    """Убирает самый свежий цвет; пустая история не меняется."""
    return list(colors[1:])


class ColorHistory:
    def __init__(self, store: KeyValueStore, key: str = HISTORY_KEY, capacity: int = HISTORY_CAPACITY) -> None:
        self._store = store
        self._key = key
        self._capacity = capacity
        self._colors: List[Color] = []

    @property
    def colors(self) -> List[Color]:
        return list(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def load(self) -> List[Color]:
        """Читает историю из хранилища один раз при старте сеанса.

        Отсутствующая или повреждённая запись даёт пустую историю.
        """
        self._colors = self._decode(self._store.get(self._key))
        logger.debug("Загружено недавних цветов: %d", len(self._colors))
        return self.colors

    def record(self, color: Color) -> List[Color]:
        """Добавляет цвет в историю.

        Память меняется только после успешной записи: ошибка хранилища
        (`OSError`) оставляет историю прежней.
        """
        colors = push_color(self._colors, color, self._capacity)
        self._save(colors)
        self._colors = colors
        return self.colors

    def remove_most_recent(self) -> List[Color]:
        if not self._colors:
            return self.colors
        colors = drop_most_recent(self._colors)
        self._save(colors)
        self._colors = colors
        return self.colors

    def select(self, index: int) -> Color:
        if not 0 <= index < len(self._colors):
            raise HistoryIndexError(f"Нет недавнего цвета с индексом {index}")
        return self._colors[index]

    # ---- Helpers ----
    def _save(self, colors: Sequence[Color]) -> None:
        self._store.set(self._key, json.dumps([list(c) for c in colors]))

    def _decode(self, payload: str | None) -> List[Color]:
        if payload is None:
            return []
        try:
            raw = json.loads(payload)
            if not isinstance(raw, list):
                raise ValueError("история должна быть списком")
            colors = [to_color(item) for item in raw]
        except (ValueError, RecursionError) as exc:
            # json.JSONDecodeError тоже ValueError
            logger.warning("Повреждённая история цветов, начинаем с пустой: %s", exc)
            return []
        return colors[: self._capacity]
