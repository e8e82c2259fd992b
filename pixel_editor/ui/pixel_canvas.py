"""Холст с сеткой пикселей: отрисовка и перевод координат указателя в клетки.

Принципы:
- SRP: отвечает только за представление сетки и события указателя.
- Чистый код: чёткое разделение публичного API и внутренних обработчиков событий.
"""
from __future__ import annotations

from typing import Callable, Optional, Tuple

import customtkinter as ctk
import tkinter as tk
from PIL import ImageTk

from pixel_editor.models.grid import PixelGrid
from pixel_editor.services.render_service import RenderService


class PixelCanvas(ctk.CTkFrame):
    """Канва, на которой сетка отрисована целыми клетками по центру."""
    def __init__(self, master: ctk.CTk | tk.Misc, max_cell: int = 32, **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)

        self._canvas = tk.Canvas(self, highlightthickness=0, bg=self._get_canvas_bg())
        self._canvas.grid(row=0, column=0, sticky="nsew")

        self._render_service = RenderService()
        self._max_cell = max_cell
        self._pixel_grid: Optional[PixelGrid] = None
        self._tk_image: Optional[ImageTk.PhotoImage] = None
        self._cell_size: int = 1
        self._top_left: Tuple[int, int] = (0, 0)

        self.on_cell_click: Optional[Callable[[int, int], None]] = None
        self.on_cell_hover: Optional[Callable[[Optional[int], Optional[int]], None]] = None

        self._canvas.bind("<Configure>", self._on_canvas_resize)
        self._canvas.bind("<Motion>", self._on_mouse_move)
        self._canvas.bind("<ButtonPress-1>", self._on_click)

    # ---- Public API ----
    def set_grid(self, pixel_grid: PixelGrid) -> None:
        """Устанавливает сетку и перерисовывает холст."""
        self._pixel_grid = pixel_grid
        self._render()

    # ---- Internals ----
    def _on_canvas_resize(self, _event: tk.Event) -> None:
        self._render()

    def _render(self) -> None:
        self._canvas.delete("all")
        if self._pixel_grid is None:
            return

        canvas_w = int(self._canvas.winfo_width())
        canvas_h = int(self._canvas.winfo_height())
        self._cell_size = self._render_service.fit_cell_size(self._pixel_grid, canvas_w, canvas_h, self._max_cell)

        image = self._render_service.grid_to_image(self._pixel_grid, self._cell_size, self._get_bg_rgb())
        img_w, img_h = image.size
        x = max(0, (canvas_w - img_w) // 2)
        y = max(0, (canvas_h - img_h) // 2)
        self._top_left = (x, y)

        self._tk_image = ImageTk.PhotoImage(image)
        self._canvas.create_image(x, y, image=self._tk_image, anchor="nw")

    def _canvas_to_cell(self, cx: int, cy: int) -> Tuple[Optional[int], Optional[int]]:
        if self._pixel_grid is None:
            return None, None
        ox, oy = self._top_left
        dx = cx - ox
        dy = cy - oy
        if dx < 0 or dy < 0:
            return None, None
        row = dy // self._cell_size
        col = dx // self._cell_size
        if not self._pixel_grid.contains(row, col):
            return None, None
        return row, col

    def _on_click(self, event: tk.Event) -> None:
        self._canvas.focus_set()
        row, col = self._canvas_to_cell(event.x, event.y)
        # клики мимо сетки в модель не попадают
        if row is None or col is None or self.on_cell_click is None:
            return
        self.on_cell_click(row, col)

    def _on_mouse_move(self, event: tk.Event) -> None:
        if self.on_cell_hover is None:
            return
        row, col = self._canvas_to_cell(event.x, event.y)
        if row is None or col is None:
            return
        self.on_cell_hover(row, col)

    def _get_canvas_bg(self) -> str:
        return "#1f1f1f" if ctk.get_appearance_mode().lower() == "dark" else "#f2f2f2"

    def _get_bg_rgb(self) -> Tuple[int, int, int]:
        bg = self._get_canvas_bg()
        return int(bg[1:3], 16), int(bg[3:5], 16), int(bg[5:7], 16)
