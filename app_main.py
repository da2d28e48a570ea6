"""Application entry point for the flag quiz."""

from __future__ import annotations

from pathlib import Path
import sys

from PySide6.QtWidgets import QApplication

from flag_quiz.constants.quiz_constants import DEFAULT_CATALOG_PATH
from flag_quiz.constants.ui_constants import LOAD_ERROR_TITLE
from flag_quiz.core.country_catalog import load_catalog
from flag_quiz.core.errors import LoadError
from flag_quiz.core.quiz_manager import QuizManager
from flag_quiz.ui.dialog_helpers import show_error
from flag_quiz.ui.qt_scheduler import QtScheduler
from flag_quiz.ui.quiz_main_window import FlagQuizMainWindow
from flag_quiz.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, load the countries, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting Flag Quiz…")

    app = QApplication(sys.argv)
    catalog_path = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_CATALOG_PATH

    try:
        catalog = load_catalog(catalog_path)
    except LoadError as exc:
        logger.error("Error loading country listing: %s", exc)
        show_error(None, LOAD_ERROR_TITLE, str(exc))
        sys.exit(1)

    quiz_manager = QuizManager(catalog, QtScheduler(app))
    window = FlagQuizMainWindow(quiz_manager=quiz_manager)
    window.show()
    window.start_quiz()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
