"""Services layer - business logic and external integrations."""

from fast_translator.services.settings_manager import SettingsManager
from fast_translator.services.language_catalog import (
    FALLBACK_SUPPORTED_LANGUAGES,
    FALLBACK_TARGET_LANGUAGES,
    LanguageCatalogService,
)

# Translation services
from fast_translator.services.translation import (
    GeminiTranslationService,
    GoogleTranslationService,
    TranslationError,
    TranslationResult,
    TranslationService,
    build_translation_service,
)

# Background workers and preferences
from fast_translator.services.api_workers import ThemeSaveWorker, TranslationWorker, WorkerSignals, WriteGate
from fast_translator.services.theme_preferences import THEME_MODE_KEY, ThemePreferenceStore

__all__ = [
    "SettingsManager",
    "LanguageCatalogService",
    "FALLBACK_SUPPORTED_LANGUAGES",
    "FALLBACK_TARGET_LANGUAGES",
    "TranslationService",
    "TranslationResult",
    "TranslationError",
    "GoogleTranslationService",
    "GeminiTranslationService",
    "build_translation_service",
    "TranslationWorker",
    "ThemeSaveWorker",
    "WorkerSignals",
    "WriteGate",
    "ThemePreferenceStore",
    "THEME_MODE_KEY",
]
