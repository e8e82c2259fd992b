"""Модель цвета пикселя и преобразования во внешние текстовые формы.

Принципы:
- SRP: только представление цвета и чистые функции конвертации.
- Чистый код: цвет хранится неизменяемым кортежем `(r, g, b, a)`, где альфа в процентах.
"""
from __future__ import annotations

from typing import Sequence, Tuple

Color = Tuple[int, int, int, int]

# «Пустая» клетка редактора, отличается от настоящей прозрачности
SENTINEL: Color = (100, 100, 100, 100)
TRANSPARENT: Color = (0, 0, 0, 0)
DEFAULT_COLOR: Color = (0, 0, 0, 100)

_HEX_DIGITS = set("0123456789abcdefABCDEF")


def parse_hex(text: str) -> Color:
    """Разбирает строку `#RRGGBB` из нативного выбора цвета.

    Любая другая форма (неверная длина, нет ведущего `#`, не-hex символы)
    даёт `TRANSPARENT` вместо исключения. Альфа всегда 100: hex не кодирует
    частичную прозрачность.
    """
    if len(text) != 7 or text[0] != "#":
        return TRANSPARENT
    digits = text[1:]
    if not set(digits) <= _HEX_DIGITS:
        return TRANSPARENT
    value = int(digits, 16)
    return (value >> 16) & 255, (value >> 8) & 255, value & 255, 100


def to_hex(color: Color) -> str:
    """Преобразует цвет в HEX (без альфа)."""
    r, g, b, _a = color
    return f"#{r:02X}{g:02X}{b:02X}"


def to_display(color: Color) -> Tuple[int, int, int, float]:
    """Переводит альфу из процентов в непрозрачность 0..1 для отрисовки."""
    r, g, b, a = color
    return r, g, b, a / 100


def to_color(value: Sequence[int]) -> Color:
    """Проверяет и нормализует внешнее значение цвета (список из JSON и т.п.).

    Raises:
        ValueError: если это не 4 целых числа в допустимых диапазонах.
    """
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence) or len(value) != 4:
        raise ValueError(f"Ожидался цвет из 4 каналов: {value!r}")
    for channel in value:
        if isinstance(channel, bool) or not isinstance(channel, int):
            raise ValueError(f"Каналы цвета должны быть целыми: {value!r}")
    r, g, b, a = value
    if not all(0 <= c <= 255 for c in (r, g, b)) or not 0 <= a <= 100:
        raise ValueError(f"Канал цвета вне диапазона: {value!r}")
    return int(r), int(g), int(b), int(a)


def finish_pixel(color: Color) -> Color:
    """Пустую клетку превращает в настоящую прозрачность, остальное не трогает."""
    return TRANSPARENT if tuple(color) == SENTINEL else color
