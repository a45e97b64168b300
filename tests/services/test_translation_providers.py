"""Unit tests for translation providers and provider selection."""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from fast_translator.services import (
    GeminiTranslationService,
    GoogleTranslationService,
    TranslationError,
    build_translation_service,
)

GOOGLE_TRANSLATOR = "fast_translator.services.translation.google_translation_service.Translator"
GEMINI_CLIENT = "fast_translator.services.translation.gemini_translation_service.genai.Client"


class FakeTranslator:
    """Async stand-in for googletrans.Translator."""

    calls = []

    def __init__(self, *args, **kwargs):
        pass

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False

    async def translate(self, text, src="auto", dest="en"):
        FakeTranslator.calls.append((text, src, dest))
        return SimpleNamespace(text=f"[{dest}] {text}")


class FailingTranslator(FakeTranslator):

    async def translate(self, text, src="auto", dest="en"):
        raise ValueError("invalid destination language")


class TestGoogleTranslationService:

    def test_returns_provider_text(self):
        FakeTranslator.calls = []
        with patch(GOOGLE_TRANSLATOR, FakeTranslator):
            result = GoogleTranslationService().translate("hello", "auto", "es")

        assert result.text == "[es] hello"
        assert result.provider == "google"
        assert FakeTranslator.calls == [("hello", "auto", "es")]

    def test_failure_raises_translation_error(self):
        with patch(GOOGLE_TRANSLATOR, FailingTranslator):
            with pytest.raises(TranslationError, match="invalid destination language"):
                GoogleTranslationService().translate("hello", "auto", "zz")


class TestGeminiTranslationService:

    def test_missing_api_key_raises(self):
        service = GeminiTranslationService(api_key=None)
        with pytest.raises(TranslationError, match="API key not configured"):
            service.translate("hello", "en", "es")

    def test_prompt_uses_language_names(self):
        names = {"en": "English", "es": "Spanish"}
        service = GeminiTranslationService(api_key="key", language_name=names.get)

        with patch(GEMINI_CLIENT) as client_cls:
            client_cls.return_value.models.generate_content.return_value = MagicMock(text=" Hola \n")
            result = service.translate("Hello", "en", "es")

        assert result.text == "Hola"
        assert result.provider == "gemini"
        client_cls.assert_called_once_with(api_key="key")
        prompt = client_cls.return_value.models.generate_content.call_args.kwargs["contents"]
        assert "English text to natural, idiomatic Spanish" in prompt
        assert prompt.endswith("Hello")

    def test_auto_source_asks_model_to_detect(self):
        service = GeminiTranslationService(api_key="key")
        with patch(GEMINI_CLIENT) as client_cls:
            client_cls.return_value.models.generate_content.return_value = MagicMock(text="Hi")
            service.translate("Hola", "auto", "en")

        prompt = client_cls.return_value.models.generate_content.call_args.kwargs["contents"]
        assert "detect it" in prompt

    def test_api_failure_raises_translation_error(self):
        service = GeminiTranslationService(api_key="key")
        with patch(GEMINI_CLIENT) as client_cls:
            client_cls.return_value.models.generate_content.side_effect = RuntimeError("429 quota")
            with pytest.raises(TranslationError, match="429 quota"):
                service.translate("Hola", "es", "en")

    def test_empty_response_raises(self):
        service = GeminiTranslationService(api_key="key")
        with patch(GEMINI_CLIENT) as client_cls:
            client_cls.return_value.models.generate_content.return_value = MagicMock(text="")
            with pytest.raises(TranslationError, match="Empty response"):
                service.translate("Hola", "es", "en")


class TestBuildTranslationService:

    def _settings(self, provider):
        settings = MagicMock()
        settings.get_translation_provider.return_value = provider
        settings.get_gemini_api_key.return_value = "key"
        settings.get_gemini_model.return_value = "gemini-test"
        return settings

    def test_google_provider(self):
        assert isinstance(build_translation_service(self._settings("google")), GoogleTranslationService)

    def test_gemini_provider(self):
        service = build_translation_service(self._settings("gemini"))
        assert isinstance(service, GeminiTranslationService)
        assert service.api_key == "key"
        assert service.model_name == "gemini-test"

    def test_unknown_provider_raises(self):
        with pytest.raises(ValueError, match="Unknown translation provider"):
            build_translation_service(self._settings("babelfish"))
