"""Google Translation Service - Implements translation via the googletrans client."""

import asyncio
import logging

from googletrans import Translator

from fast_translator.services.translation.translation_service import (
    TranslationError,
    TranslationResult,
    TranslationService,
)

logger = logging.getLogger(__name__)


class GoogleTranslationService(TranslationService):
    """
    Translation service using the public Google Translate endpoint.

    googletrans exposes a coroutine API; each call runs it to completion on a
    private event loop, so this method must be called from a worker thread,
    never from a thread that already runs an asyncio loop.
    """

    PROVIDER_NAME = "google"

    def translate(self, text: str, source_language: str, target_language: str) -> TranslationResult:
        logger.debug(
            "Google translate request: %s -> %s, %d chars", source_language, target_language, len(text)
        )
        try:
            translated = asyncio.run(self._translate_async(text, source_language, target_language))
        except Exception as e:
            raise TranslationError(str(e) or type(e).__name__) from e

        if translated is None:
            raise TranslationError("Empty response from Google Translate")

        return TranslationResult(text=translated, provider=self.PROVIDER_NAME)

    @staticmethod
    async def _translate_async(text: str, source_language: str, target_language: str):
        async with Translator() as translator:
            result = await translator.translate(text, src=source_language, dest=target_language)
        return result.text
