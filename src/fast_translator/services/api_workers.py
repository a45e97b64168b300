"""Async workers for non-blocking provider calls and preference writes using Qt threading."""

import logging
from typing import Callable

from PySide6.QtCore import QMutex, QMutexLocker, QObject, QRunnable, QSettings, Signal, Slot

from fast_translator.services.translation import TranslationService

logger = logging.getLogger(__name__)


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(str)
    translation_result = Signal(object)  # TranslationResult


class TranslationWorker(QRunnable):
    """
    Worker that runs a single translation provider call in a background thread.

    Emits ``translation_result`` or ``error``, then always ``finished``.
    """

    def __init__(
        self,
        translation_service: TranslationService,
        text: str,
        source_language: str,
        target_language: str,
    ):
        super().__init__()
        self.translation_service = translation_service
        self.text = text
        self.source_language = source_language
        self.target_language = target_language
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the translation call in background thread."""
        try:
            result = self.translation_service.translate(
                text=self.text,
                source_language=self.source_language,
                target_language=self.target_language,
            )
            self.signals.translation_result.emit(result)
        except Exception as e:
            # Every provider failure is reported the same way
            self.signals.error.emit(str(e) or type(e).__name__)
        finally:
            self.signals.finished.emit()


class WriteGate:
    """
    Orders background writes to one preference.

    Each write takes a ticket when it is issued. Writes run one at a time
    and a write whose ticket has been superseded is skipped, so the stored
    value always ends up as the most recently issued one.
    """

    def __init__(self):
        self.mutex = QMutex()
        self._latest_ticket = 0

    def issue(self) -> int:
        with QMutexLocker(self.mutex):
            self._latest_ticket += 1
            return self._latest_ticket

    def is_latest(self, ticket: int) -> bool:
        return ticket == self._latest_ticket


class ThemeSaveWorker(QRunnable):
    """
    Writes one string preference in the background.

    Fire-and-forget: nobody waits for it and no completion is reported.
    Last write wins, enforced through the shared WriteGate.
    """

    def __init__(
        self,
        settings_factory: Callable[[], QSettings],
        key: str,
        value: str,
        gate: WriteGate,
        ticket: int,
    ):
        super().__init__()
        self.settings_factory = settings_factory
        self.key = key
        self.value = value
        self.gate = gate
        self.ticket = ticket
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        with QMutexLocker(self.gate.mutex):
            if not self.gate.is_latest(self.ticket):
                logger.debug("Skipping superseded write %s=%s", self.key, self.value)
                return

            settings = self.settings_factory()
            settings.setValue(self.key, self.value)
            settings.sync()
            if settings.status() != QSettings.Status.NoError:
                logger.warning("Could not persist %s=%s (status %s)", self.key, self.value, settings.status())
