"""Color palette for the flag quiz supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(
        light="#1B1B1B",
        dark="#F5F5F5"
    )

    TEXT_DISABLED = ThemeColors(
        light="#A0A0A0",
        dark="#6A6A6A"
    )

    BACKGROUND_PRIMARY = ThemeColors(
        light="#FFFFFF",
        dark="#1E1E1E"
    )

    FLAG_FRAME_BG = ThemeColors(
        light="#F5F5F5",      # WhiteSmoke
        dark="#2D2D2D"
    )

    # Answer feedback
    CORRECT_ANSWER = ThemeColors(
        light="#107C10",      # Green
        dark="#6FCF6F"
    )

    INCORRECT_ANSWER = ThemeColors(
        light="#D13438",      # Red
        dark="#FF6B6B"
    )

    BORDER_PRIMARY = ThemeColors(
        light="#D1D1D1",
        dark="#555555"
    )

    BUTTON_BG = ThemeColors(
        light="#0078D4",      # Blue
        dark="#4A9EFF"
    )

    BUTTON_TEXT = ThemeColors(
        light="#FFFFFF",
        dark="#000000"
    )

    BUTTON_HOVER_BG = ThemeColors(
        light="#106EBE",
        dark="#76B6FF"
    )

    BUTTON_DISABLED_BG = ThemeColors(
        light="#E8E8E8",
        dark="#3A3A3A"
    )
