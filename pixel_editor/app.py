import customtkinter as ctk

from pixel_editor.config import Settings
from pixel_editor.controllers.app_controller import AppController
from pixel_editor.services.editor_service import EditorService
from pixel_editor.services.history_service import ColorHistory
from pixel_editor.services.storage_service import JsonFileStore
from pixel_editor.ui.bottom_bar import BottomBar
from pixel_editor.ui.pixel_canvas import PixelCanvas
from pixel_editor.ui.sidebar import Sidebar


class PixelEditorApp(ctk.CTk):
    def __init__(self, settings: Settings) -> None:
        super().__init__()
        ctk.set_appearance_mode(settings.appearance_mode)
        ctk.set_default_color_theme(settings.color_theme)

        self.title("Pixel Editor")
        self.minsize(960, 640)

        # root layout: left canvas, right sidebar, import/export below
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=0)

        self._canvas = PixelCanvas(self, max_cell=settings.cell_size_max)
        self._canvas.grid(row=0, column=0, sticky="nsew", padx=(12, 6), pady=(12, 6))

        self._sidebar = Sidebar(self)
        self._sidebar.grid(row=0, column=1, sticky="ns", padx=(6, 12), pady=(12, 6))

        self._bottom = BottomBar(self)
        self._bottom.grid(row=1, column=0, columnspan=2, sticky="ew", padx=12, pady=(0, 12))

        history = ColorHistory(JsonFileStore(settings.storage_path), capacity=settings.history_capacity)
        history.load()
        editor = EditorService(
            history,
            width=settings.default_width,
            height=settings.default_height,
            max_size=settings.max_grid_size,
        )

        self._controller = AppController(
            canvas=self._canvas, sidebar=self._sidebar, bottom=self._bottom, window=self, editor=editor
        )
        self._controller.bind_events()
