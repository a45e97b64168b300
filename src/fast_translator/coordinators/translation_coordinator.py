"""Translation Coordinator - Runs the translate workflow behind the translation screen."""

import logging
from typing import Dict, List, Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from fast_translator.core import (
    AUTO_DETECT_CODE,
    DEFAULT_TARGET_CODE,
    Language,
    TranslationPhase,
    TranslationRequestState,
)
from fast_translator.services import LanguageCatalogService, TranslationService
from fast_translator.services.api_workers import TranslationWorker
from fast_translator.ui import MainWindow, TranslationScreen

logger = logging.getLogger(__name__)

TRANSLATION_ERROR_MESSAGE = (
    "Error: Could not translate text. Please check your internet connection or language pair."
)
LANGUAGES_UNAVAILABLE_MESSAGE = "Could not load language data. Please try again."
ERROR_DETAIL_LIMIT = 100


def truncate_error_detail(message: str, limit: int = ERROR_DETAIL_LIMIT) -> str:
    """Keep the first ``limit`` characters, adding an ellipsis when something was cut."""
    if len(message) > limit:
        return message[:limit] + "..."
    return message


class _TranslationRequest(QObject):
    """Helper that tags worker signals with the request id they belong to."""

    def __init__(self, request_id: int, parent: "TranslationCoordinator"):
        super().__init__()
        self.request_id = request_id
        self.parent_ref = parent

    @Slot(object)
    def on_translation_result(self, result):
        self.parent_ref._handle_translation_result(result, self.request_id)

    @Slot(str)
    def on_translation_error(self, error: str):
        self.parent_ref._handle_translation_error(error, self.request_id)

    @Slot()
    def on_finished(self):
        self.parent_ref._handle_translation_finished(self.request_id)


class TranslationCoordinator(QObject):
    """
    Owns the TranslationRequestState of the translation screen.

    Responsibilities:
    - Populate the language pickers from the catalog, correcting stale selections.
    - Track text and language edits.
    - Run one provider call per translate request on the thread pool.
    - Reflect Loading / Success / Failed into the screen and clear loading last.

    Every non-empty request gets a fresh id. Completions whose id is no longer
    the active one (a newer request started, or the screen was closed) are
    dropped, so the latest request always owns the final state.
    """

    phase_changed = Signal(object)  # TranslationPhase
    loading_changed = Signal(bool)
    translation_completed = Signal(str)
    translation_failed = Signal(str)

    def __init__(
        self,
        translation_screen: TranslationScreen,
        main_window: MainWindow,
        catalog_service: LanguageCatalogService,
        translation_service: TranslationService,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()

        if translation_screen is None:
            raise ValueError("TranslationScreen must not be None")
        if main_window is None:
            raise ValueError("MainWindow must not be None")
        if catalog_service is None:
            raise ValueError("LanguageCatalogService must not be None")
        if translation_service is None:
            raise ValueError("TranslationService must not be None")

        self.translation_screen = translation_screen
        self.main_window = main_window
        self.catalog_service = catalog_service
        self.translation_service = translation_service
        self.thread_pool = thread_pool or QThreadPool.globalInstance()

        self.state = TranslationRequestState()
        self._is_active = False
        self._request_counter = 0
        self._active_request_id: Optional[int] = None
        # Helpers must outlive their workers or queued signals lose their receiver
        self._request_helpers: Dict[int, _TranslationRequest] = {}

        self.translation_screen.source_language_changed.connect(self.handle_source_changed)
        self.translation_screen.target_language_changed.connect(self.handle_target_changed)
        self.translation_screen.text_changed.connect(self.handle_text_changed)
        self.translation_screen.translate_clicked.connect(self.request_translation)
        self.translation_screen.clear_clicked.connect(self.handle_clear)

    @property
    def is_active(self) -> bool:
        return self._is_active

    def activate(self) -> None:
        """Screen mounted: start from a fresh state and load the pickers."""
        self.state = TranslationRequestState()
        self._active_request_id = None
        self._is_active = True
        self.translation_screen.reset()
        self.refresh_languages()

    def deactivate(self) -> None:
        """Screen unmounted: any in-flight completion will be discarded."""
        self._is_active = False
        self._active_request_id = None

    def refresh_languages(self) -> None:
        """Push the catalog into the pickers, fixing selections it no longer contains."""
        supported = self.catalog_service.get_supported_languages()
        targets = self.catalog_service.get_target_languages()
        self.correct_language_selection(supported, targets)

        if not supported or not targets:
            self.translation_screen.show_languages_unavailable(LANGUAGES_UNAVAILABLE_MESSAGE)
            return

        self.translation_screen.set_languages(
            supported,
            targets,
            self.state.source_language_code,
            self.state.target_language_code,
        )

    def correct_language_selection(self, supported: List[Language], targets: List[Language]) -> None:
        """Replace selected codes that are absent from the given lists."""
        if not any(lang.code == self.state.source_language_code for lang in supported):
            self.state.source_language_code = supported[0].code if supported else AUTO_DETECT_CODE
        if not any(lang.code == self.state.target_language_code for lang in targets):
            self.state.target_language_code = targets[0].code if targets else DEFAULT_TARGET_CODE

    @Slot(str)
    def handle_source_changed(self, code: str) -> None:
        self.state.source_language_code = code

    @Slot(str)
    def handle_target_changed(self, code: str) -> None:
        self.state.target_language_code = code

    @Slot(str)
    def handle_text_changed(self, text: str) -> None:
        self.state.input_text = text

    @Slot()
    def handle_clear(self) -> None:
        """Clear both the input and the previous result."""
        self.state.input_text = ""
        self.translation_screen.set_input_text("")
        self._set_translated_text("")
        self._set_phase(TranslationPhase.IDLE)

    @Slot()
    def request_translation(self) -> None:
        """Translate the current input with the current language pair."""
        self.translate(
            self.state.input_text,
            self.state.source_language_code,
            self.state.target_language_code,
        )

    def translate(self, input_text: str, source_code: str, target_code: str) -> None:
        """
        Start one translation.

        Empty input (after trimming) clears the previous result and never
        reaches the provider. Otherwise the request enters Loading and the
        provider runs on the thread pool; the outcome arrives through
        ``_handle_translation_result`` / ``_handle_translation_error`` and
        loading is cleared by ``_handle_translation_finished``.
        """
        if not self._is_active:
            return

        text = input_text.strip()
        if not text:
            # Supersedes anything still in flight
            self._active_request_id = None
            try:
                self._set_translated_text("")
                self._set_phase(TranslationPhase.IDLE)
            finally:
                self._set_loading(False)
            return

        self._request_counter += 1
        request_id = self._request_counter
        self._active_request_id = request_id

        self._set_translated_text("")
        self._set_loading(True)
        self._set_phase(TranslationPhase.LOADING)

        worker = TranslationWorker(
            translation_service=self.translation_service,
            text=text,
            source_language=source_code,
            target_language=target_code,
        )

        request_helper = _TranslationRequest(request_id, self)
        self._request_helpers[request_id] = request_helper

        worker.signals.translation_result.connect(request_helper.on_translation_result)
        worker.signals.error.connect(request_helper.on_translation_error)
        worker.signals.finished.connect(request_helper.on_finished)

        self.thread_pool.start(worker)

    def _is_current(self, request_id: int) -> bool:
        return self._is_active and request_id == self._active_request_id

    def _handle_translation_result(self, result, request_id: int) -> None:
        if not self._is_current(request_id):
            logger.debug("Ignoring stale translation result (request %s, current %s)",
                         request_id, self._active_request_id)
            return

        self._set_translated_text(result.text)
        self._set_phase(TranslationPhase.SUCCESS)
        self.translation_completed.emit(result.text)

    def _handle_translation_error(self, error: str, request_id: int) -> None:
        if not self._is_current(request_id):
            logger.debug("Ignoring stale translation error (request %s, current %s)",
                         request_id, self._active_request_id)
            return

        logger.warning("Translation error: %s", error)
        self._set_translated_text(TRANSLATION_ERROR_MESSAGE)
        self._set_phase(TranslationPhase.FAILED)
        self.main_window.show_notification(f"Translation Error: {truncate_error_detail(error)}")
        self.translation_failed.emit(error)

    def _handle_translation_finished(self, request_id: int) -> None:
        self._request_helpers.pop(request_id, None)
        if not self._is_current(request_id):
            return
        self._set_loading(False)

    def _set_translated_text(self, text: str) -> None:
        self.state.translated_text = text
        self.translation_screen.set_translated_text(text)

    def _set_loading(self, loading: bool) -> None:
        self.state.is_loading = loading
        self.translation_screen.set_loading(loading)
        self.loading_changed.emit(loading)

    def _set_phase(self, phase: TranslationPhase) -> None:
        self.state.phase = phase
        self.phase_changed.emit(phase)
