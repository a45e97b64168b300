"""App footer - Logo glyph and copyright line shown under both screens."""

from datetime import date
from pathlib import Path
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QWidget

from .logo import load_logo_pixmap


class AppFooter(QWidget):

    def __init__(self, logo_path: Optional[Path] = None, parent=None):
        super().__init__(parent)
        self.setObjectName("appFooter")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 24, 0, 16)
        layout.addStretch()

        self.logo_label = QLabel()
        self.logo_label.setPixmap(load_logo_pixmap(20, logo_path))
        layout.addWidget(self.logo_label)

        self.text_label = QLabel(f"© {date.today().year} Fast Translator App. All rights reserved.")
        self.text_label.setObjectName("footerText")
        self.text_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.text_label)

        layout.addStretch()
