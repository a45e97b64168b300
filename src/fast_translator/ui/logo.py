"""Logo loading with a generic icon fallback."""

from pathlib import Path
from typing import Optional

from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import QApplication, QStyle

DEFAULT_LOGO_PATH = Path(__file__).resolve().parent.parent / "assets" / "logo.svg"


def load_logo_pixmap(size: int, path: Optional[Path] = None) -> QPixmap:
    """Load the bundled logo scaled to ``size``; fall back to a standard icon glyph."""
    logo_path = Path(path) if path else DEFAULT_LOGO_PATH

    if logo_path.exists():
        pixmap = QPixmap(str(logo_path))
        if not pixmap.isNull():
            return pixmap.scaled(size, size)

    icon = QApplication.style().standardIcon(QStyle.StandardPixmap.SP_FileDialogInfoView)
    return icon.pixmap(size, size)
