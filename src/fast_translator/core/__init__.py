"""Domain layer - Plain values shared by services, coordinators and UI."""

from .language import AUTO_DETECT_CODE, DEFAULT_TARGET_CODE, Language
from .theme_mode import ThemeMode
from .translation_state import TranslationPhase, TranslationRequestState

__all__ = [
    "AUTO_DETECT_CODE",
    "DEFAULT_TARGET_CODE",
    "Language",
    "ThemeMode",
    "TranslationPhase",
    "TranslationRequestState",
]
