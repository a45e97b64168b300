"""Light and dark Qt style sheets."""

from PySide6.QtWidgets import QApplication

from fast_translator.core import ThemeMode

LIGHT_STYLESHEET = """
QMainWindow, QWidget { background-color: #C5E8E4; color: #000000; }
QToolBar { background-color: #2F8BF5; border: none; spacing: 6px; }
QToolBar QToolButton { color: #000000; }
QLabel#headline { font-size: 24px; font-weight: bold; font-style: italic; }
QLabel#tagline { font-size: 16px; font-style: italic; }
QLabel#sectionTitle { font-weight: bold; }
QLabel#footerText { color: rgba(0, 0, 0, 150); }
QLabel#languageStatus { color: #B00020; }
QPlainTextEdit, QComboBox { background-color: #EEEEEE; border: 1px solid #EC407A; border-radius: 8px; padding: 6px; }
QPlainTextEdit:focus { border: 2px solid #E91E63; }
QPushButton#primaryButton { background-color: #F44336; color: #FFFFFF; font-size: 16px; font-weight: 600; border-radius: 8px; padding: 10px 24px; }
QPushButton#primaryButton:disabled { background-color: #E57373; }
QPushButton#clearButton { background: transparent; color: #FF6E40; border: none; }
"""

DARK_STYLESHEET = """
QMainWindow, QWidget { background-color: #212121; color: #FFFFFF; }
QToolBar { background-color: #000000; border: none; spacing: 6px; }
QToolBar QToolButton { color: #FFFFFF; }
QLabel#headline { color: #4CAF50; font-size: 24px; font-weight: bold; font-style: italic; }
QLabel#tagline { color: #FF9800; font-size: 16px; font-style: italic; }
QLabel#sectionTitle { color: #4CAF50; font-weight: 600; }
QLabel#footerText { color: rgba(255, 255, 255, 180); }
QLabel#languageStatus { color: #EF9A9A; }
QPlainTextEdit, QComboBox { background-color: #424242; color: #FF9800; border: 1px solid #616161; border-radius: 8px; padding: 6px; }
QPlainTextEdit:focus { border: 2px solid #4CAF50; }
QPushButton#primaryButton { background-color: #F44336; color: #FFFFFF; font-size: 16px; font-weight: 600; border-radius: 8px; padding: 10px 24px; }
QPushButton#primaryButton:disabled { background-color: #7F2A24; }
QPushButton#clearButton { background: transparent; color: #8BC34A; border: none; }
"""


def stylesheet_for(mode: ThemeMode) -> str:
    return LIGHT_STYLESHEET if mode is ThemeMode.LIGHT else DARK_STYLESHEET


def apply_theme(app: QApplication, mode: ThemeMode) -> None:
    app.setStyleSheet(stylesheet_for(mode))
