"""Loading flag images for display."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QSize, Qt
from PySide6.QtGui import QPixmap

logger = logging.getLogger(__name__)


def load_flag_pixmap(image_path: Path, max_size: QSize) -> QPixmap | None:
    """Load a flag image scaled to fit ``max_size``.

    Returns ``None`` (after logging) when the file is missing or cannot be
    decoded; the quiz keeps running without the picture.
    """
    if not image_path.exists():
        logger.error("Flag image not found: %s", image_path)
        return None

    pixmap = QPixmap(str(image_path))
    if pixmap.isNull():
        logger.error("Error loading image: %s", image_path)
        return None
    return pixmap.scaled(max_size, Qt.KeepAspectRatio, Qt.SmoothTransformation)
