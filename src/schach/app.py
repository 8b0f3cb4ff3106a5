"""Application entry point."""

from __future__ import annotations

import logging
import sys

from schach.ui.settings import AppSettings

_LOGGER = logging.getLogger(__name__)


def run_application(
    argv: list[str] | None = None, settings: AppSettings | None = None
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from schach.ui.main_window import MainWindow
    from schach.ui.styles.theme import APP_STYLE

    settings = settings if settings is not None else AppSettings()
    logging.basicConfig(
        level=settings.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv if argv is None else argv)
    app.setApplicationName("Schach")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)

    window = MainWindow(settings)
    window.show()
    _LOGGER.debug("Main window shown")

    return app.exec()


def main() -> None:
    """Launch the Schach application."""
    sys.exit(run_application())


if __name__ == "__main__":
    main()
