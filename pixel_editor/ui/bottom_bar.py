from __future__ import annotations

from typing import Callable, Optional, Tuple

import customtkinter as ctk


class BottomBar(ctk.CTkFrame):
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, **kwargs)

        # callbacks
        self.on_load_array: Optional[Callable[[], None]] = None
        self.on_copy: Optional[Callable[[], None]] = None

        # layout
        self.grid_columnconfigure(0, weight=1)

        # Import
        self._input_val = ctk.StringVar(value="")
        self._input_entry = ctk.CTkEntry(self, textvariable=self._input_val, placeholder_text="Введите массив пикселей")
        self._input_entry.grid(row=0, column=0, padx=(10, 6), pady=8, sticky="ew")
        self._input_entry.bind("<Return>", lambda _e: self._emit_load_array())
        self._load_btn = ctk.CTkButton(self, text="Загрузить", width=110, command=self._emit_load_array)
        self._load_btn.grid(row=0, column=1, padx=6, pady=8, sticky="e")

        # Cursor coordinates (1-based, as shown to the user)
        self._coords_val = ctk.StringVar(value="")
        self._coords_label = ctk.CTkLabel(self, textvariable=self._coords_val, width=160, anchor="w")
        self._coords_label.grid(row=0, column=2, padx=(6, 12), pady=8, sticky="w")

        # Export result (hidden until the first export)
        self._result_box = ctk.CTkTextbox(self, height=90, wrap="char")
        self._copy_btn = ctk.CTkButton(self, text="Скопировать", width=110, command=self._emit_copy)
        self._toggle_result(visible=False)

    # public API (sync from controller)
    def get_input_array(self) -> str:
        return self._input_val.get()

    def set_hovered(self, hovered: Optional[Tuple[int, int]]) -> None:
        if hovered is None:
            self._coords_val.set("")
            return
        row, col = hovered
        self._coords_val.set(f"Координаты: [{row + 1}, {col + 1}]")

    def set_result(self, text: str) -> None:
        self._result_box.configure(state="normal")
        self._result_box.delete("1.0", "end")
        self._result_box.insert("1.0", text)
        self._result_box.configure(state="disabled")
        self._toggle_result(visible=bool(text))

    # events
    def _emit_load_array(self) -> None:
        if self.on_load_array:
            self.on_load_array()

    def _emit_copy(self) -> None:
        if self.on_copy:
            self.on_copy()

    # helpers
    def _toggle_result(self, visible: bool) -> None:
        if visible:
            self._result_box.grid(row=1, column=0, columnspan=2, padx=(10, 6), pady=(0, 8), sticky="ew")
            self._copy_btn.grid(row=1, column=2, padx=(6, 12), pady=(0, 8), sticky="nw")
        else:
            self._result_box.grid_remove()
            self._copy_btn.grid_remove()
