"""Styling module for the flag quiz."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
