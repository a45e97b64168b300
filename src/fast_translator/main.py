"""Main entry point for the Fast Translator application."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from fast_translator.coordinators import AppCoordinator, TranslationCoordinator
from fast_translator.services import (
    LanguageCatalogService,
    SettingsManager,
    ThemePreferenceStore,
    build_translation_service,
)
from fast_translator.services.theme_preferences import APPLICATION_NAME, ORGANIZATION_NAME
from fast_translator.ui import IntroductionScreen, MainWindow, TranslationScreen


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName(APPLICATION_NAME)
    app.setOrganizationName(ORGANIZATION_NAME)

    # 2. Configuration and logging
    settings_manager = SettingsManager()
    logging.basicConfig(
        level=settings_manager.get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 3. Initialize Services (catalog is preloaded before any screen exists)
    catalog_service = LanguageCatalogService(settings_manager.get_language_catalog_path())
    catalog_service.load_once()
    theme_store = ThemePreferenceStore()
    translation_service = build_translation_service(
        settings_manager,
        language_name=catalog_service.get_language_name,
    )

    # 4. Construct UI
    main_window = MainWindow()
    introduction_screen = IntroductionScreen()
    translation_screen = TranslationScreen()

    # 5. Instantiate Coordinators (Dependency Injection)
    translation_coordinator = TranslationCoordinator(
        translation_screen=translation_screen,
        main_window=main_window,
        catalog_service=catalog_service,
        translation_service=translation_service,
    )
    app_coordinator = AppCoordinator(
        main_window=main_window,
        introduction_screen=introduction_screen,
        translation_screen=translation_screen,
        translation_coordinator=translation_coordinator,
        theme_store=theme_store,
        application=app,
    )

    # 6. Show UI and start event loop
    app_coordinator.start()
    main_window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
