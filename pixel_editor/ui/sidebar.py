"""Боковая панель: проект, размер сетки, инструменты, цвет и недавние цвета.

Принципы:
- SRP: управляет только UI параметров, не содержит логики редактора.
- ISP: выдаёт параметры через компактные методы `get_*`, события через `on_*`.
"""
from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple

import customtkinter as ctk

from pixel_editor.models.color import Color, to_hex
from pixel_editor.models.tools import TOOL_LABELS, Tool
from pixel_editor.services.editor_service import SIZE_PRESETS


def _preset_label(width: int, height: int) -> str:
    return f"{width}х{height}"


class Sidebar(ctk.CTkFrame):
    """Панель инструментов с блоками: проект, размер, инструмент, цвет."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, width=280, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # Callbacks
        self.on_start: Optional[Callable[[], None]] = None
        self.on_finish: Optional[Callable[[], None]] = None
        self.on_size_preset: Optional[Callable[[int, int], None]] = None
        self.on_apply_size: Optional[Callable[[], None]] = None
        self.on_tool_change: Optional[Callable[[Tool], None]] = None
        self.on_pick_color: Optional[Callable[[], None]] = None
        self.on_save_color: Optional[Callable[[], None]] = None
        self.on_clear_color: Optional[Callable[[], None]] = None
        self.on_recent_color: Optional[Callable[[int], None]] = None

        # Project section
        self._project_title = ctk.CTkLabel(self, text="Проект", font=ctk.CTkFont(size=16, weight="bold"))
        self._project_title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._name_val = ctk.StringVar(value="")
        self._name_entry = ctk.CTkEntry(self, textvariable=self._name_val, placeholder_text="Имя проекта")
        self._name_entry.grid(row=1, column=0, padx=8, pady=(0, 6), sticky="ew")

        project_row = ctk.CTkFrame(self, fg_color="transparent")
        project_row.grid(row=2, column=0, padx=8, pady=(0, 10), sticky="ew")
        project_row.grid_columnconfigure((0, 1), weight=1)
        self._start_btn = ctk.CTkButton(project_row, text="Начать!", command=self._emit_start)
        self._finish_btn = ctk.CTkButton(project_row, text="Завершить", command=self._emit_finish)
        self._start_btn.grid(row=0, column=0, padx=(0, 4), sticky="ew")
        self._finish_btn.grid(row=0, column=1, padx=(4, 0), sticky="ew")

        # Size section
        self._size_title = ctk.CTkLabel(self, text="Размер сетки", font=ctk.CTkFont(size=16, weight="bold"))
        self._size_title.grid(row=3, column=0, padx=8, pady=(8, 4), sticky="w")

        self._preset_buttons = ctk.CTkSegmentedButton(
            self,
            values=[_preset_label(w, h) for w, h in SIZE_PRESETS],
            command=self._on_preset_click,
        )
        self._preset_buttons.grid(row=4, column=0, padx=8, pady=(0, 6), sticky="ew")

        size_row = ctk.CTkFrame(self, fg_color="transparent")
        size_row.grid(row=5, column=0, padx=8, pady=(0, 10), sticky="ew")
        size_row.grid_columnconfigure((0, 1), weight=1)
        self._width_val = ctk.StringVar(value="16")
        self._height_val = ctk.StringVar(value="16")
        self._width_entry = ctk.CTkEntry(size_row, textvariable=self._width_val, width=64, placeholder_text="Ширина")
        self._height_entry = ctk.CTkEntry(size_row, textvariable=self._height_val, width=64, placeholder_text="Высота")
        self._apply_size_btn = ctk.CTkButton(size_row, text="Задать размеры", command=self._emit_apply_size)
        self._width_entry.grid(row=0, column=0, padx=(0, 4), sticky="ew")
        self._height_entry.grid(row=0, column=1, padx=4, sticky="ew")
        self._apply_size_btn.grid(row=0, column=2, padx=(4, 0), sticky="e")
        self._width_entry.bind("<Return>", lambda _e: self._emit_apply_size())
        self._height_entry.bind("<Return>", lambda _e: self._emit_apply_size())

        # Tool section
        self._tool_title = ctk.CTkLabel(self, text="Инструмент", font=ctk.CTkFont(size=16, weight="bold"))
        self._tool_title.grid(row=6, column=0, padx=8, pady=(8, 4), sticky="w")

        self._tool_buttons = ctk.CTkSegmentedButton(
            self, values=[TOOL_LABELS[t] for t in Tool], command=self._on_tool_click
        )
        self._tool_buttons.set(TOOL_LABELS[Tool.BRUSH])
        self._tool_buttons.grid(row=7, column=0, padx=8, pady=(0, 4), sticky="ew")
        self._hotkeys_hint = ctk.CTkLabel(self, text="b — кисть, e — ластик, i — пипетка, r — прямоугольник")
        self._hotkeys_hint.grid(row=8, column=0, padx=8, pady=(0, 10), sticky="w")

        # Color section
        self._color_title = ctk.CTkLabel(self, text="Цвет", font=ctk.CTkFont(size=16, weight="bold"))
        self._color_title.grid(row=9, column=0, padx=8, pady=(8, 4), sticky="w")

        color_row = ctk.CTkFrame(self, fg_color="transparent")
        color_row.grid(row=10, column=0, padx=8, pady=(0, 6), sticky="ew")
        color_row.grid_columnconfigure(1, weight=1)
        self._swatch = ctk.CTkFrame(color_row, width=28, height=28, corner_radius=4)
        self._swatch.grid(row=0, column=0, padx=(0, 8))
        self._color_val = ctk.StringVar(value="—")
        self._color_label = ctk.CTkLabel(color_row, textvariable=self._color_val, anchor="w")
        self._color_label.grid(row=0, column=1, sticky="ew")

        self._pick_btn = ctk.CTkButton(self, text="Выбрать цвет…", command=self._emit_pick_color)
        self._pick_btn.grid(row=11, column=0, padx=8, pady=(0, 6), sticky="ew")

        history_row = ctk.CTkFrame(self, fg_color="transparent")
        history_row.grid(row=12, column=0, padx=8, pady=(0, 6), sticky="ew")
        history_row.grid_columnconfigure((0, 1), weight=1)
        self._save_color_btn = ctk.CTkButton(history_row, text="Сохранить цвет", command=self._emit_save_color)
        self._clear_color_btn = ctk.CTkButton(history_row, text="Очистить", command=self._emit_clear_color)
        self._save_color_btn.grid(row=0, column=0, padx=(0, 4), sticky="ew")
        self._clear_color_btn.grid(row=0, column=1, padx=(4, 0), sticky="ew")

        # Recent colors
        self._recent_title = ctk.CTkLabel(self, text="Недавние цвета", font=ctk.CTkFont(size=16, weight="bold"))
        self._recent_title.grid(row=13, column=0, padx=8, pady=(8, 4), sticky="w")
        self._recent_frame = ctk.CTkScrollableFrame(self, height=180)
        self._recent_frame.grid(row=14, column=0, padx=8, pady=(0, 8), sticky="nsew")
        self._recent_frame.grid_columnconfigure(0, weight=1)
        self._recent_buttons: List[ctk.CTkButton] = []
        self.grid_rowconfigure(14, weight=1)

        self.set_recent_colors([])

    # public API (sync from controller)
    def get_project_name(self) -> str:
        return self._name_val.get()

    def get_size_values(self) -> Tuple[int, int]:
        """Ширина и высота из полей ввода.

        Raises:
            ValueError: если поля не содержат целых чисел.
        """
        return int(self._width_val.get().strip()), int(self._height_val.get().strip())

    def set_size(self, width: int, height: int) -> None:
        self._width_val.set(str(width))
        self._height_val.set(str(height))
        if (width, height) in SIZE_PRESETS:
            self._preset_buttons.set(_preset_label(width, height))
        else:
            self._preset_buttons.set("")

    def set_tool(self, tool: Tool) -> None:
        self._tool_buttons.set(TOOL_LABELS[tool])

    def set_current_color(self, color: Color) -> None:
        r, g, b, a = color
        self._swatch.configure(fg_color=to_hex(color))
        self._color_val.set(f"{to_hex(color)}  [{r}, {g}, {b}, {a}]")

    def set_recent_colors(self, colors: Sequence[Color]) -> None:
        for button in self._recent_buttons:
            button.destroy()
        self._recent_buttons = []
        for index, color in enumerate(colors):
            r, g, b, _a = color
            button = ctk.CTkButton(
                self._recent_frame,
                text=f"[{r}, {g}, {b}]",
                fg_color=to_hex(color),
                text_color="#FFFFFF" if (r + g + b) < 384 else "#000000",
                command=lambda i=index: self._emit_recent_color(i),
            )
            button.grid(row=index, column=0, padx=4, pady=2, sticky="ew")
            self._recent_buttons.append(button)
        self._clear_color_btn.configure(state="normal" if colors else "disabled")

    # events
    def _emit_start(self) -> None:
        if self.on_start:
            self.on_start()

    def _emit_finish(self) -> None:
        if self.on_finish:
            self.on_finish()

    def _on_preset_click(self, value: str) -> None:
        for width, height in SIZE_PRESETS:
            if value == _preset_label(width, height):
                if self.on_size_preset:
                    self.on_size_preset(width, height)
                return

    def _emit_apply_size(self) -> None:
        if self.on_apply_size:
            self.on_apply_size()

    def _on_tool_click(self, value: str) -> None:
        for tool, label in TOOL_LABELS.items():
            if value == label:
                if self.on_tool_change:
                    self.on_tool_change(tool)
                return

    def _emit_pick_color(self) -> None:
        if self.on_pick_color:
            self.on_pick_color()

    def _emit_save_color(self) -> None:
        if self.on_save_color:
            self.on_save_color()

    def _emit_clear_color(self) -> None:
        if self.on_clear_color:
            self.on_clear_color()

    def _emit_recent_color(self, index: int) -> None:
        if self.on_recent_color:
            self.on_recent_color(index)
