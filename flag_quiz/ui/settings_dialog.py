"""Settings dialog for configuring the quiz."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from flag_quiz.core.services.choice_generator import max_choice_count


class SettingsDialog(QDialog):
    """Dialog for choosing quiz length, choice count and appearance."""

    def __init__(
        self,
        parent=None,
        flags_in_quiz: int = 10,
        choices_per_round: int = 4,
        catalog_size: int = 10,
        font_size: int = 14,
        dark_theme: bool = False,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._max_flags = max(1, catalog_size)
        self._max_choices = max_choice_count(catalog_size)
        self._min_choices = min(2, self._max_choices)
        self._flags_in_quiz = max(1, min(self._max_flags, flags_in_quiz))
        self._choices_per_round = max(self._min_choices, min(self._max_choices, choices_per_round))
        self._font_size = font_size
        self._dark_theme = dark_theme

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        quiz_group = QGroupBox("Quiz")
        quiz_layout = QVBoxLayout()
        quiz_group.setLayout(quiz_layout)

        flags_row = QHBoxLayout()
        flags_label = QLabel("Flags per quiz:")
        flags_label.setToolTip("Number of different flags drawn for each quiz.")
        self.flags_spinbox = QSpinBox()
        self.flags_spinbox.setRange(1, self._max_flags)
        self.flags_spinbox.setValue(self._flags_in_quiz)
        flags_row.addWidget(flags_label)
        flags_row.addStretch()
        flags_row.addWidget(self.flags_spinbox)
        quiz_layout.addLayout(flags_row)

        choices_row = QHBoxLayout()
        choices_label = QLabel("Choices per flag:")
        choices_label.setToolTip("Number of country names offered under each flag.")
        self.choices_spinbox = QSpinBox()
        self.choices_spinbox.setRange(self._min_choices, self._max_choices)
        self.choices_spinbox.setValue(self._choices_per_round)
        # Fewer than two choices would leave nothing to guess between.
        self.choices_spinbox.setEnabled(self._max_choices >= 2)
        choices_row.addWidget(choices_label)
        choices_row.addStretch()
        choices_row.addWidget(self.choices_spinbox)
        quiz_layout.addLayout(choices_row)

        restart_note = QLabel("Applying settings starts a new quiz.")
        restart_note.setWordWrap(True)
        quiz_layout.addWidget(restart_note)

        layout.addWidget(quiz_group)

        display_group = QGroupBox("Display")
        display_layout = QVBoxLayout()
        display_group.setLayout(display_layout)

        font_row = QHBoxLayout()
        font_label = QLabel("Font size:")
        self.font_spinbox = QSpinBox()
        self.font_spinbox.setRange(10, 32)
        self.font_spinbox.setValue(self._font_size)
        self.font_spinbox.setSuffix(" pt")
        font_row.addWidget(font_label)
        font_row.addStretch()
        font_row.addWidget(self.font_spinbox)
        display_layout.addLayout(font_row)

        self.dark_theme_checkbox = QCheckBox("Dark theme")
        self.dark_theme_checkbox.setChecked(self._dark_theme)
        display_layout.addWidget(self.dark_theme_checkbox)

        layout.addWidget(display_group)

        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def get_flags_in_quiz(self) -> int:
        return self.flags_spinbox.value()

    def get_choices_per_round(self) -> int:
        return self.choices_spinbox.value()

    def get_font_size(self) -> int:
        """Get the selected font size."""
        return self.font_spinbox.value()

    def get_dark_theme(self) -> bool:
        return self.dark_theme_checkbox.isChecked()
