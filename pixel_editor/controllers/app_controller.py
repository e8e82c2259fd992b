"""Контроллер приложения: оркестрация UI и сервиса редактора.

SOLID:
- SRP: класс управляет связями между UI и `EditorService` (без логики редактора).
- DIP: зависит от сервиса как от абстрактной роли; сеанс инкапсулирован в нём.
Clean Code:
- Обработчики компактны; на каждое событие один вызов сервиса и синхронизация UI.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from tkinter import TclError, colorchooser, messagebox
import tkinter as tk

import customtkinter as ctk

from pixel_editor.models.errors import GridParseError
from pixel_editor.models.tools import Tool
from pixel_editor.services.editor_service import EditorService
from pixel_editor.ui.bottom_bar import BottomBar
from pixel_editor.ui.pixel_canvas import PixelCanvas
from pixel_editor.ui.sidebar import Sidebar

logger = logging.getLogger(__name__)


@dataclass
class AppController:
    """Связывает элементы UI с сеансом редактирования.

    Ответственности:
    - Инициализация и бинд событий (UI -> контроллер), глобальные горячие клавиши.
    - Передача кликов и наведения по клеткам в `EditorService`.
    - Импорт/экспорт массива, буфер обмена, история цветов.
    - Синхронизация виджетов с состоянием сеанса.
    """
    canvas: PixelCanvas
    sidebar: Sidebar
    bottom: BottomBar
    window: ctk.CTk
    editor: EditorService

    def bind_events(self) -> None:
        """Регистрирует обработчики событий между UI-компонентами.

        Сохраняет слабую связность: компоненты UI ничего не знают друг о друге,
        общаются через контроллер.
        """
        self.canvas.on_cell_click = self._handle_cell_click
        self.canvas.on_cell_hover = self._handle_cell_hover

        self.sidebar.on_start = self._handle_start
        self.sidebar.on_finish = self._handle_finish
        self.sidebar.on_size_preset = self._handle_size_preset
        self.sidebar.on_apply_size = self._handle_apply_size
        self.sidebar.on_tool_change = self._handle_tool_change
        self.sidebar.on_pick_color = self._handle_pick_color
        self.sidebar.on_save_color = self._handle_save_color
        self.sidebar.on_clear_color = self._handle_clear_color
        self.sidebar.on_recent_color = self._handle_recent_color

        self.bottom.on_load_array = self._handle_load_array
        self.bottom.on_copy = self._handle_copy

        self.window.bind("<KeyPress>", self._handle_key)

        self._sync_all()

    # ---- Handlers ----
    def _handle_cell_click(self, row: int, col: int) -> None:
        self.editor.click(row, col)
        self.canvas.set_grid(self.editor.grid)
        # пипетка меняет цвет и возвращает кисть
        self._sync_tool()

    def _handle_cell_hover(self, row: int | None, col: int | None) -> None:
        self.editor.hover(row, col)
        self.bottom.set_hovered(self.editor.session.hovered)

    def _handle_key(self, event: tk.Event) -> None:
        # в полях ввода буквы остаются текстом
        if isinstance(event.widget, (tk.Entry, tk.Text)):
            return
        if self.editor.handle_hotkey(event.char):
            self._sync_tool()

    def _handle_start(self) -> None:
        self._handle_apply_size()

    def _handle_size_preset(self, width: int, height: int) -> None:
        self._resize(width, height)

    def _handle_apply_size(self) -> None:
        try:
            width, height = self.sidebar.get_size_values()
        except ValueError:
            messagebox.showerror("Размер сетки", "Ширина и высота должны быть целыми числами.")
            return
        self._resize(width, height)

    def _handle_finish(self) -> None:
        text = self.editor.finish(self.sidebar.get_project_name())
        self.bottom.set_result(text)

    def _handle_copy(self) -> None:
        text = self.editor.session.formatted_text
        if not text:
            return
        self.window.clipboard_clear()
        self.window.clipboard_append(text)
        logger.debug("Скопировано в буфер обмена: %d символов", len(text))

    def _handle_load_array(self) -> None:
        try:
            grid = self.editor.load_array(self.bottom.get_input_array())
        except GridParseError as exc:
            logger.info("Импорт отклонён: %s", exc)
            messagebox.showerror("Импорт", f"Неверный формат массива. Введите корректный JSON-массив.\n\n{exc}")
            return
        self.sidebar.set_size(grid.width, grid.height)
        self.canvas.set_grid(grid)

    def _handle_tool_change(self, tool: Tool) -> None:
        self.editor.select_tool(tool)
        self._sync_tool()

    def _handle_pick_color(self) -> None:
        try:
            _rgb, hex_color = colorchooser.askcolor(title="Выберите цвет", parent=self.window)
        except TclError:
            # Silent fail if dialog cannot open
            return
        if not hex_color:
            return
        self.editor.pick_hex(hex_color)
        self._sync_tool()

    def _handle_save_color(self) -> None:
        try:
            colors = self.editor.save_current_color()
        except OSError as exc:
            self._report_storage_error(exc)
            return
        self.sidebar.set_recent_colors(colors)

    def _handle_clear_color(self) -> None:
        try:
            colors = self.editor.clear_last_color()
        except OSError as exc:
            self._report_storage_error(exc)
            return
        self.sidebar.set_recent_colors(colors)

    def _handle_recent_color(self, index: int) -> None:
        self.editor.select_recent(index)
        self._sync_tool()

    # ---- Helpers ----
    def _report_storage_error(self, exc: OSError) -> None:
        logger.error("Не удалось сохранить недавние цвета: %s", exc)
        messagebox.showerror("Недавние цвета", f"Не удалось сохранить историю цветов.\n\n{exc}")

    def _resize(self, width: int, height: int) -> None:
        try:
            grid = self.editor.start(width, height)
        except ValueError as exc:
            messagebox.showerror("Размер сетки", str(exc))
            return
        self.sidebar.set_size(grid.width, grid.height)
        self.bottom.set_hovered(None)
        self.canvas.set_grid(grid)

    def _sync_tool(self) -> None:
        state = self.editor.session.tool_state
        self.sidebar.set_tool(state.tool)
        self.sidebar.set_current_color(state.current_color)

    def _sync_all(self) -> None:
        session = self.editor.session
        self.sidebar.set_size(session.width, session.height)
        self.sidebar.set_recent_colors(self.editor.recent_colors)
        self.bottom.set_hovered(session.hovered)
        self.bottom.set_result(session.formatted_text)
        self.canvas.set_grid(session.grid)
        self._sync_tool()
