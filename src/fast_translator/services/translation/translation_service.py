"""Translation Service - Provider interface for text translation."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class TranslationError(Exception):
    """Raised when a provider cannot translate the text, whatever the cause."""


@dataclass
class TranslationResult:
    """Result of a successful translation request."""

    text: str
    provider: str


class TranslationService(ABC):
    """
    Abstract service for translating text between two languages.

    Implementations (e.g., GoogleTranslationService) handle the network calls.
    Callers make exactly one call per translation; implementations do not retry.
    """

    @abstractmethod
    def translate(self, text: str, source_language: str, target_language: str) -> TranslationResult:
        """
        Translate text.

        Args:
            text: Text to translate, already trimmed.
            source_language: Source language code, or "auto" to let the provider detect it.
            target_language: Concrete target language code.

        Returns:
            TranslationResult with the translated text.

        Raises:
            TranslationError: On network, provider or language-pair failures.
        """
        pass
