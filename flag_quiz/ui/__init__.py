"""Qt UI components for the flag quiz."""

from .dialog_helpers import show_error, show_info, show_results
from .qt_scheduler import QtScheduler
from .quiz_main_window import FlagQuizMainWindow

__all__ = [
    "FlagQuizMainWindow",
    "QtScheduler",
    "show_error",
    "show_info",
    "show_results",
]
