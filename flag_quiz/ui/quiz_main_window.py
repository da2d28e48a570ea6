"""Qt main window showing the flag, the choices and the answer feedback."""

from __future__ import annotations

import logging

from PySide6.QtCore import QSize, Qt
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from flag_quiz.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from flag_quiz.constants.quiz_constants import CHOICES_PER_ROUND, FLAGS_IN_QUIZ
from flag_quiz.constants.ui_constants import (
    CHOICE_GRID_COLUMNS,
    CONFIG_ERROR_TITLE,
    DEFAULT_FONT_SIZE,
    FLAG_IMAGE_MAX_HEIGHT,
    FLAG_IMAGE_MAX_WIDTH,
    INCORRECT_ANSWER_MESSAGE,
    QUESTION_NUMBER_TEMPLATE,
    TOOLBAR_ABOUT,
    TOOLBAR_HELP,
    TOOLBAR_NEW_QUIZ,
    TOOLBAR_SETTINGS,
    WINDOW_TITLE,
)
from flag_quiz.core.errors import InsufficientCatalogError
from flag_quiz.core.models import GuessOutcome
from flag_quiz.core.quiz_manager import QuizManager
from flag_quiz.styling.color_palette import Theme
from flag_quiz.styling.styles import Styles
from flag_quiz.ui.dialog_helpers import show_error, show_info, show_results
from flag_quiz.ui.flag_renderer import load_flag_pixmap
from flag_quiz.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class FlagQuizMainWindow(QMainWindow):
    """Single-screen view driven entirely by ``QuizManager`` state."""

    def __init__(self, quiz_manager: QuizManager) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.quiz_manager = quiz_manager
        self.quiz_manager.set_round_started_callback(self._display_round)

        self._flags_in_quiz: int = min(FLAGS_IN_QUIZ, len(quiz_manager.catalog))
        self._choices_per_round: int = CHOICES_PER_ROUND
        self._font_size: int = DEFAULT_FONT_SIZE
        self._theme = Theme.LIGHT
        self.choice_buttons: list[QPushButton] = []

        self._build_ui()
        self._apply_styles()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_toolbar(root_layout)

        self.question_number_label = QLabel("", self)
        self.question_number_label.setAlignment(Qt.AlignCenter)
        root_layout.addWidget(self.question_number_label)

        self.flag_label = QLabel(self)
        self.flag_label.setAlignment(Qt.AlignCenter)
        self.flag_label.setMinimumSize(FLAG_IMAGE_MAX_WIDTH // 2, FLAG_IMAGE_MAX_HEIGHT // 2)
        root_layout.addWidget(self.flag_label, stretch=1)

        self.choice_grid = QGridLayout()
        root_layout.addLayout(self.choice_grid)

        self.answer_label = QLabel("", self)
        self.answer_label.setAlignment(Qt.AlignCenter)
        root_layout.addWidget(self.answer_label)

    def _build_toolbar(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()

        self.new_quiz_button = QPushButton(TOOLBAR_NEW_QUIZ, self)
        self.new_quiz_button.clicked.connect(self.start_quiz)
        button_row.addWidget(self.new_quiz_button)

        button_row.addStretch()

        self.settings_button = QPushButton(TOOLBAR_SETTINGS, self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        self.help_button = QPushButton(TOOLBAR_HELP, self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.about_button = QPushButton(TOOLBAR_ABOUT, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        layout.addLayout(button_row)

    def _rebuild_choice_buttons(self, count: int) -> None:
        if len(self.choice_buttons) == count:
            return

        while self.choice_grid.count():
            item = self.choice_grid.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

        self.choice_buttons = []
        for index in range(count):
            button = QPushButton("", self)
            button.clicked.connect(lambda _checked=False, i=index: self._handle_guess(i))
            row, column = divmod(index, CHOICE_GRID_COLUMNS)
            self.choice_grid.addWidget(button, row, column)
            self.choice_buttons.append(button)
        self._apply_choice_font()

    # --- Quiz flow ---

    def start_quiz(self) -> bool:
        """Start a fresh quiz with the current settings."""
        try:
            self.quiz_manager.reset_session(self._flags_in_quiz, self._choices_per_round)
        except (InsufficientCatalogError, ValueError) as exc:
            logger.error("Cannot start quiz: %s", exc)
            show_error(self, CONFIG_ERROR_TITLE, str(exc))
            return False
        return True

    def _display_round(self) -> None:
        self.answer_label.setText("")
        self.question_number_label.setText(
            QUESTION_NUMBER_TEMPLATE.format(
                number=self.quiz_manager.current_question_index(),
                total=self.quiz_manager.total_rounds(),
            )
        )
        self._display_flag()
        self._refresh_choices()

    def _display_flag(self) -> None:
        self.flag_label.clear()
        flag_ref = self.quiz_manager.current_flag_asset_ref()
        if flag_ref is None:
            return
        pixmap = load_flag_pixmap(
            self.quiz_manager.catalog.resolve_asset_path(flag_ref),
            QSize(FLAG_IMAGE_MAX_WIDTH, FLAG_IMAGE_MAX_HEIGHT),
        )
        if pixmap is not None:
            self.flag_label.setPixmap(pixmap)

    def _refresh_choices(self) -> None:
        choices = self.quiz_manager.current_choice_set()
        self._rebuild_choice_buttons(len(choices))
        for button, choice in zip(self.choice_buttons, choices):
            button.setText(choice.name)
            button.setEnabled(choice.enabled)

    def _handle_guess(self, choice_index: int) -> None:
        outcome = self.quiz_manager.submit_guess(choice_index)
        if outcome is None:
            return
        self._refresh_choices()
        self._show_feedback(outcome)
        if outcome.is_session_complete:
            show_results(self, self.quiz_manager.results_message(), font_point_size=self._font_size)
            self.start_quiz()

    def _show_feedback(self, outcome: GuessOutcome) -> None:
        if outcome.is_correct:
            self.answer_label.setText(self.quiz_manager.current_correct_name() or "")
        else:
            self.answer_label.setText(INCORRECT_ANSWER_MESSAGE)
        self.answer_label.setStyleSheet(
            Styles.get_answer_label_style(outcome.is_correct, self._font_size, self._theme)
        )

    # --- Toolbar actions ---

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}\n\n"
            f"{len(self.quiz_manager.catalog)} countries available."
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self._flags_in_quiz,
            self._choices_per_round,
            len(self.quiz_manager.catalog),
            self._font_size,
            self._theme == Theme.DARK,
        )
        if dialog.exec():
            self._flags_in_quiz = dialog.get_flags_in_quiz()
            self._choices_per_round = dialog.get_choices_per_round()
            self._font_size = dialog.get_font_size()
            self._theme = Theme.DARK if dialog.get_dark_theme() else Theme.LIGHT

            self._apply_styles()
            self.start_quiz()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style(self._theme))
        self.flag_label.setStyleSheet(Styles.get_flag_frame_style(self._theme))
        self.question_number_label.setStyleSheet(Styles.get_large_label_style(self._font_size))

        toolbar_style = f"font-size: {max(10, self._font_size - 4)}pt;"
        for button in (self.new_quiz_button, self.settings_button, self.help_button, self.about_button):
            button.setStyleSheet(toolbar_style)
        self._apply_choice_font()

    def _apply_choice_font(self) -> None:
        choice_style = f"font-size: {self._font_size}pt; padding: 10px;"
        for button in self.choice_buttons:
            button.setStyleSheet(choice_style)
