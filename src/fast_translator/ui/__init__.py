"""UI layer - PySide6 presentation components."""

from .app_footer import AppFooter
from .introduction_screen import IntroductionScreen
from .logo import load_logo_pixmap
from .main_window import MainWindow
from .theme import apply_theme, stylesheet_for
from .translation_screen import TranslationScreen

__all__ = [
    "AppFooter",
    "IntroductionScreen",
    "MainWindow",
    "TranslationScreen",
    "apply_theme",
    "load_logo_pixmap",
    "stylesheet_for",
]
