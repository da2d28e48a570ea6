"""Centralized stylesheets for the application."""

from .color_palette import ColorPalette, Theme

class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QDialog {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_BG.get(theme)};
                color: {ColorPalette.BUTTON_TEXT.get(theme)};
                border: 1px solid {ColorPalette.BUTTON_BG.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:disabled {{
                background-color: {ColorPalette.BUTTON_DISABLED_BG.get(theme)};
                color: {ColorPalette.TEXT_DISABLED.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
            }}
            QSpinBox {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 4px;
            }}
            QGroupBox {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                margin-top: 6px;
                padding-top: 10px;
            }}
        """

    @staticmethod
    def get_flag_frame_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"background-color: {ColorPalette.FLAG_FRAME_BG.get(theme)};"
            f" border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};"
            " border-radius: 6px; padding: 8px;"
        )

    @staticmethod
    def get_answer_label_style(correct: bool, font_size: int, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.CORRECT_ANSWER if correct else ColorPalette.INCORRECT_ANSWER
        return f"font-size: {font_size + 4}pt; font-weight: bold; color: {color.get(theme)};"

    @staticmethod
    def get_large_label_style(font_size: int) -> str:
        return f"font-size: {font_size + 2}pt; font-weight: bold;"
