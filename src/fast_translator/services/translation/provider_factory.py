"""Builds the configured translation provider."""

from typing import Callable, Optional

from fast_translator.services.settings_manager import SettingsManager
from fast_translator.services.translation.gemini_translation_service import GeminiTranslationService
from fast_translator.services.translation.google_translation_service import GoogleTranslationService
from fast_translator.services.translation.translation_service import TranslationService


def build_translation_service(
    settings_manager: SettingsManager,
    language_name: Optional[Callable[[str], str]] = None,
) -> TranslationService:
    """
    Return the provider named by the TRANSLATION_PROVIDER setting.

    Raises:
        ValueError: If the provider name is unknown.
    """
    provider = settings_manager.get_translation_provider()

    if provider == GoogleTranslationService.PROVIDER_NAME:
        return GoogleTranslationService()
    if provider == GeminiTranslationService.PROVIDER_NAME:
        return GeminiTranslationService(
            api_key=settings_manager.get_gemini_api_key(),
            model_name=settings_manager.get_gemini_model(),
            language_name=language_name,
        )

    raise ValueError(f"Unknown translation provider: {provider!r}")
