"""Translation services - provider interface and Google/Gemini implementations."""

from fast_translator.services.translation.translation_service import (
    TranslationError,
    TranslationResult,
    TranslationService,
)
from fast_translator.services.translation.google_translation_service import GoogleTranslationService
from fast_translator.services.translation.gemini_translation_service import GeminiTranslationService
from fast_translator.services.translation.provider_factory import build_translation_service

__all__ = [
    "TranslationError",
    "TranslationResult",
    "TranslationService",
    "GoogleTranslationService",
    "GeminiTranslationService",
    "build_translation_service",
]
