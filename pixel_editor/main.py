"""Точка входа в приложение."""
import logging

from pixel_editor.app import PixelEditorApp
from pixel_editor.config import settings


def main() -> None:
    """Настраивает логирование, создаёт и запускает главное окно приложения."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = PixelEditorApp(settings)
    app.mainloop()


if __name__ == "__main__":
    main()
