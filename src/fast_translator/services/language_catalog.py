"""Language Catalog Service - Loads and caches the bundled language list."""

import json
import logging
from pathlib import Path
from typing import List, Optional

from fast_translator.core import AUTO_DETECT_CODE, Language

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "assets" / "lang.json"

FALLBACK_SUPPORTED_LANGUAGES = (
    Language(code="auto", name="Auto Detect (Error)"),
    Language(code="en", name="English (Error)"),
)
FALLBACK_TARGET_LANGUAGES = (
    Language(code="en", name="English (Error)"),
)


class LanguageCatalogService:
    """
    Loads the language catalog once and serves two views of it.

    - supported: every entry in resource order, including the "auto" sentinel.
    - targets: supported minus the "auto" entry, order preserved.

    A missing or malformed resource never raises; a fixed fallback catalog is
    used instead so the dropdowns always have something to render. Both lists
    are assigned together, so callers never observe a half-loaded catalog.
    """

    def __init__(self, catalog_path: Optional[Path] = None):
        self.catalog_path = Path(catalog_path) if catalog_path else DEFAULT_CATALOG_PATH
        self._supported: Optional[List[Language]] = None
        self._targets: Optional[List[Language]] = None

    @property
    def loaded(self) -> bool:
        return self._supported is not None and self._targets is not None

    def load_once(self) -> None:
        """Load the catalog on first call; later calls are no-ops."""
        if self.loaded:
            return

        try:
            supported = self._parse_catalog(self._read_catalog())
        except (OSError, ValueError, TypeError, RecursionError) as e:
            # json.JSONDecodeError is a ValueError
            logger.warning("Error loading language catalog from %s: %s", self.catalog_path, e)
            self._supported = list(FALLBACK_SUPPORTED_LANGUAGES)
            self._targets = list(FALLBACK_TARGET_LANGUAGES)
            return

        targets = [lang for lang in supported if lang.code != AUTO_DETECT_CODE]
        self._supported, self._targets = supported, targets
        logger.debug("Languages loaded successfully: %d languages.", len(supported))

    def get_supported_languages(self) -> List[Language]:
        """All languages, including the auto-detect sentinel."""
        if self._supported is None:
            self.load_once()
        return list(self._supported or [])

    def get_target_languages(self) -> List[Language]:
        """Languages usable as a translation target (no auto-detect)."""
        if self._targets is None:
            self.load_once()
        return list(self._targets or [])

    def get_language_name(self, code: str) -> str:
        """Display name for a code, or the code itself when unknown."""
        for language in self.get_supported_languages():
            if language.code == code:
                return language.name
        return code

    def _read_catalog(self) -> str:
        return self.catalog_path.read_text(encoding="utf-8")

    @staticmethod
    def _parse_catalog(raw: str) -> List[Language]:
        data = json.loads(raw)
        if not isinstance(data, list):
            raise ValueError(f"Language catalog must be a JSON array, got {type(data).__name__}")
        return [Language.from_dict(item) for item in data]
