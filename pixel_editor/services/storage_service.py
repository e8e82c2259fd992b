"""Постоянное хранилище «ключ -> строка» для настроек сеанса (история цветов).

Принципы:
- DIP: `ColorHistory` зависит от протокола `KeyValueStore`, а не от файла.
- OCP: другое хранилище (реестр, облако) добавляется новой реализацией протокола.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryStore:
    """Хранилище в памяти (тесты, запуск без диска)."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """Хранит пары ключ-значение в одном JSON-файле.

    Повреждённый или нечитаемый файл считается пустым; запись перезаписывает
    файл целиком.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser()

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")

    def _read_all(self) -> Dict[str, object]:
        if not self.path.is_file():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            # ValueError: и JSONDecodeError, и UnicodeDecodeError
            logger.warning("Хранилище %s не прочитано: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Хранилище %s повреждено: ожидался объект JSON", self.path)
            return {}
        return data
