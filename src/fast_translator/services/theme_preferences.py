"""Theme Preference Store - Persists the light/dark choice across restarts."""

import logging
from typing import Callable, Optional

from PySide6.QtCore import QSettings, QThreadPool

from fast_translator.core import ThemeMode
from fast_translator.services.api_workers import ThemeSaveWorker, WriteGate

logger = logging.getLogger(__name__)

THEME_MODE_KEY = "theme_mode"
ORGANIZATION_NAME = "FastTranslator"
APPLICATION_NAME = "Fast Translator"


def default_settings_factory() -> QSettings:
    return QSettings(ORGANIZATION_NAME, APPLICATION_NAME)


class ThemePreferenceStore:
    """
    Holds the active theme mode and persists it in a QSettings key-value store.

    Reads are synchronous. Writes are handed to a private single-thread pool
    and never awaited, so the visible mode flips before the write lands. A
    superseded write is skipped, so the stored value matches the last toggle
    even on a pool that runs writes concurrently.
    """

    DEFAULT_MODE = ThemeMode.DARK

    def __init__(
        self,
        settings_factory: Optional[Callable[[], QSettings]] = None,
        thread_pool: Optional[QThreadPool] = None,
    ):
        self.settings_factory = settings_factory or default_settings_factory
        self.thread_pool = thread_pool or self._create_write_pool()
        self._write_gate = WriteGate()
        self._current_mode = self.DEFAULT_MODE

    @property
    def current_mode(self) -> ThemeMode:
        return self._current_mode

    def load_theme_mode(self) -> ThemeMode:
        """Read the persisted mode; only the literal "light" means light."""
        value = self.settings_factory().value(THEME_MODE_KEY)
        self._current_mode = ThemeMode.LIGHT if value == ThemeMode.LIGHT.value else ThemeMode.DARK
        logger.debug("Loaded theme mode %s (stored value %r)", self._current_mode.value, value)
        return self._current_mode

    def toggle_theme(self) -> ThemeMode:
        """Flip the active mode now and persist it in the background."""
        self._current_mode = self._current_mode.toggled()
        self.save_theme_mode(self._current_mode)
        return self._current_mode

    def save_theme_mode(self, mode: ThemeMode) -> None:
        worker = ThemeSaveWorker(
            self.settings_factory,
            THEME_MODE_KEY,
            mode.value,
            gate=self._write_gate,
            ticket=self._write_gate.issue(),
        )
        self.thread_pool.start(worker)

    @staticmethod
    def _create_write_pool() -> QThreadPool:
        # One thread: writes land in the order they were issued
        pool = QThreadPool()
        pool.setMaxThreadCount(1)
        return pool
