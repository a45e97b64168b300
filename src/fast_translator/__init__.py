"""
Fast Translator - A desktop front-end for quick text translation.

This package provides a two-screen desktop application with:
- A bundled, cached language catalog
- Pluggable translation providers (Google Translate, Gemini)
- A persisted light/dark theme preference
"""

__version__ = "0.1.0"

from fast_translator.core import Language, ThemeMode, TranslationPhase, TranslationRequestState

__all__ = [
    "Language",
    "ThemeMode",
    "TranslationPhase",
    "TranslationRequestState",
]
