"""Introduction screen - Landing page with logo and entry into the translator."""

from pathlib import Path
from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from .app_footer import AppFooter
from .logo import load_logo_pixmap


class IntroductionScreen(QWidget):
    """Landing page.

    Signals:
        start_clicked: Emitted when the user asks to open the translator.
    """

    start_clicked = Signal()

    def __init__(self, logo_path: Optional[Path] = None, parent=None):
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 0)
        layout.addStretch()

        self.logo_label = QLabel()
        self.logo_label.setAlignment(Qt.AlignCenter)
        self.logo_label.setPixmap(load_logo_pixmap(200, logo_path))
        layout.addWidget(self.logo_label)
        layout.addSpacing(30)

        self.title_label = QLabel("Fast Translator App")
        self.title_label.setObjectName("headline")
        self.title_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.title_label)
        layout.addSpacing(15)

        self.tagline_label = QLabel("Your free go-to translation tool for seamless language conversions.")
        self.tagline_label.setObjectName("tagline")
        self.tagline_label.setAlignment(Qt.AlignCenter)
        self.tagline_label.setWordWrap(True)
        layout.addWidget(self.tagline_label)
        layout.addSpacing(40)

        self.start_button = QPushButton("Lets Translate")
        self.start_button.setObjectName("primaryButton")
        self.start_button.clicked.connect(self.start_clicked.emit)
        layout.addWidget(self.start_button, 0, Qt.AlignCenter)

        layout.addStretch()
        layout.addWidget(AppFooter(logo_path))
