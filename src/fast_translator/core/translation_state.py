"""Translation request state held by the translation screen while mounted."""

from dataclasses import dataclass
from enum import Enum

from .language import AUTO_DETECT_CODE, DEFAULT_TARGET_CODE


class TranslationPhase(Enum):
    """Where the translation screen is in its request cycle."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class TranslationRequestState:
    """Mutable per-screen state for the translate workflow.

    While ``is_loading`` is True, ``translated_text`` is either empty or the
    previous result; it is never a partially written value.
    """

    source_language_code: str = AUTO_DETECT_CODE
    target_language_code: str = DEFAULT_TARGET_CODE
    input_text: str = ""
    translated_text: str = ""
    is_loading: bool = False
    phase: TranslationPhase = TranslationPhase.IDLE
