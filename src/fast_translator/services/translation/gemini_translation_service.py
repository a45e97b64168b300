"""Gemini Translation Service - Implements translation via Google Gemini API."""

import logging
from typing import Callable, Optional

import google.genai as genai
from google.genai import types

from fast_translator.core import AUTO_DETECT_CODE
from fast_translator.services.translation.translation_service import (
    TranslationError,
    TranslationResult,
    TranslationService,
)

logger = logging.getLogger(__name__)


class GeminiTranslationService(TranslationService):
    """
    Translation service using Google Gemini API.

    Optimized for speed and consistency with lower temperature settings.
    Language codes are resolved to display names through ``language_name``
    so the prompt reads naturally.
    """

    PROVIDER_NAME = "gemini"
    DEFAULT_MODEL_NAME = "gemini-2.0-flash"

    TRANSLATION_PROMPT = """Translate the following {source} text to natural, idiomatic {target}.
Preserve the tone and nuance of the original.
Only output the translation, nothing else.

Text:
{text}"""

    def __init__(
        self,
        api_key: Optional[str],
        model_name: str = DEFAULT_MODEL_NAME,
        language_name: Optional[Callable[[str], str]] = None,
    ):
        self.api_key = api_key
        self.model_name = model_name
        self._language_name = language_name or (lambda code: code)

    def translate(self, text: str, source_language: str, target_language: str) -> TranslationResult:
        """
        Translate text using Gemini API.

        Raises:
            TranslationError: If no API key is configured or the call fails.
        """
        if not self.api_key:
            raise TranslationError("API key not configured. Add GEMINI_API_KEY to .env file.")

        if source_language == AUTO_DETECT_CODE:
            source = "source-language (detect it)"
        else:
            source = self._language_name(source_language)

        prompt = self.TRANSLATION_PROMPT.format(
            source=source,
            target=self._language_name(target_language),
            text=text,
        )
        logger.debug("Gemini request: model=%s, %d chars", self.model_name, len(text))

        try:
            client = genai.Client(api_key=self.api_key)
            response = client.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=types.GenerateContentConfig(
                    temperature=0.3,
                    top_p=0.95,
                    top_k=40,
                    max_output_tokens=1024,
                ),
            )
        except Exception as e:
            raise TranslationError(f"Translation failed: {e}") from e

        if not response.text:
            raise TranslationError("Empty response from API")

        return TranslationResult(text=response.text.strip(), provider=self.PROVIDER_NAME)
