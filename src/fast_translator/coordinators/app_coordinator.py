"""App Coordinator - Navigation between screens and theme switching."""

import logging
from typing import Optional

from PySide6.QtCore import QObject, Slot
from PySide6.QtWidgets import QApplication

from fast_translator.core import ThemeMode
from fast_translator.services import ThemePreferenceStore
from fast_translator.ui import IntroductionScreen, MainWindow, TranslationScreen, apply_theme

from .translation_coordinator import TranslationCoordinator

logger = logging.getLogger(__name__)


class AppCoordinator(QObject):
    """Top-level flow of the application.

    Responsibilities:
    - Apply the persisted theme on start and show the introduction screen
    - Mount/unmount the translation workflow when navigating
    - Toggle the theme, re-rendering the active screen
    """

    def __init__(
        self,
        main_window: MainWindow,
        introduction_screen: IntroductionScreen,
        translation_screen: TranslationScreen,
        translation_coordinator: TranslationCoordinator,
        theme_store: ThemePreferenceStore,
        application: Optional[QApplication] = None,
    ):
        super().__init__()

        if main_window is None:
            raise ValueError("MainWindow must not be None")
        if translation_coordinator is None:
            raise ValueError("TranslationCoordinator must not be None")
        if theme_store is None:
            raise ValueError("ThemePreferenceStore must not be None")

        self.main_window = main_window
        self.introduction_screen = introduction_screen
        self.translation_screen = translation_screen
        self.translation_coordinator = translation_coordinator
        self.theme_store = theme_store
        self.application = application

        self.main_window.add_screen(self.introduction_screen)
        self.main_window.add_screen(self.translation_screen)

        self.introduction_screen.start_clicked.connect(self.show_translation)
        self.main_window.back_requested.connect(self.show_introduction)
        self.main_window.theme_toggle_requested.connect(self.handle_toggle_theme)

    def start(self) -> None:
        mode = self.theme_store.load_theme_mode()
        self._apply_theme(mode)
        self.show_introduction()

    @Slot()
    def show_translation(self) -> None:
        self.main_window.display_screen(self.translation_screen, "Translate", can_go_back=True)
        self.translation_coordinator.activate()

    @Slot()
    def show_introduction(self) -> None:
        if self.translation_coordinator.is_active:
            self.translation_coordinator.deactivate()
        self.main_window.display_screen(self.introduction_screen, "Fast Translator", can_go_back=False)

    @Slot()
    def handle_toggle_theme(self) -> None:
        """Flip the theme immediately; persistence happens in the background."""
        mode = self.theme_store.toggle_theme()
        logger.debug("Theme toggled to %s", mode.value)
        self._apply_theme(mode)
        if self.translation_coordinator.is_active:
            self.translation_coordinator.refresh_languages()

    def _apply_theme(self, mode: ThemeMode) -> None:
        app = self.application or QApplication.instance()
        if app is not None:
            apply_theme(app, mode)
        self.main_window.set_theme_mode(mode)
