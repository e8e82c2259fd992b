"""Настройки приложения из переменных окружения (префикс `PIXEL_EDITOR_`)."""
from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: str = "info"

    # Оформление customtkinter
    appearance_mode: str = "system"
    color_theme: str = "blue"

    # Файл с историей цветов
    storage_path: Path = Path.home() / ".pixel_editor" / "storage.json"

    default_width: int = 16
    default_height: int = 16
    max_grid_size: int = 256
    history_capacity: int = 10
    cell_size_max: int = 32

    model_config = {"env_prefix": "PIXEL_EDITOR_", "env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
