"""Translator Coordinator - Manages translator screen state and the translate workflow."""

import logging
import weakref
from typing import Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from pocket_translator.core import Language, TranslationRequest
from pocket_translator.services import TranslationService
from pocket_translator.services.api_workers import TranslationWorker

logger = logging.getLogger(__name__)

MAX_INPUT_LENGTH = 5000
EMPTY_INPUT_MESSAGE = "Please enter some text to translate"
INPUT_TOO_LONG_MESSAGE = "Text is too long. Please keep it under 5000 characters."


class _PendingTranslation(QObject):
    """Helper class to hold translation request context and handle results safely."""

    def __init__(self, worker_id: int, parent: "TranslatorCoordinator"):
        super().__init__()
        self.worker_id = worker_id
        self.parent_ref = weakref.ref(parent)

    @Slot(object)
    def on_translation_result(self, result):
        """Handle translation result safely."""
        coordinator = self.parent_ref()
        if coordinator is not None:
            try:
                coordinator._handle_translation_result(result, self.worker_id)
            except RuntimeError:
                # Underlying Qt object already deleted
                pass

    @Slot(str)
    def on_translation_error(self, error: str):
        """Handle translation error safely."""
        coordinator = self.parent_ref()
        if coordinator is not None:
            try:
                coordinator._handle_translation_error(error, self.worker_id)
            except RuntimeError:
                pass


class TranslatorCoordinator(QObject):
    """
    Orchestrates the translator screen workflow.

    Responsibilities:
    - Hold input text, translated text and the language pair.
    - Validate input before anything reaches the translation service.
    - Run translations off the UI thread and drop stale completions.
    - Report outcomes through signals for whatever view is attached.
    """

    translation_started = Signal()
    translation_completed = Signal(str)
    translation_failed = Signal(str)
    languages_changed = Signal(object, object)  # source Language, target Language

    def __init__(
        self,
        translation_service: TranslationService,
        source_lang: Language = Language.ENGLISH,
        target_lang: Language = Language.RUSSIAN,
    ):
        super().__init__()

        self.translation_service = translation_service
        self.source_lang = source_lang
        self.target_lang = target_lang

        self.input_text = ""
        self.translated_text = ""

        # Thread pool for async API calls
        self.thread_pool = QThreadPool.globalInstance()

        # Each worker gets a unique ID; results from any other ID are stale
        self._active_translation_worker_id: Optional[int] = None
        self._worker_counter = 0

        # Keep a reference so the helper isn't garbage collected while the worker runs
        self._translation_request_helper: Optional[_PendingTranslation] = None

    def set_input_text(self, text: str) -> None:
        self.input_text = text

    def is_busy(self) -> bool:
        """True while a translation is in flight."""
        return self._active_translation_worker_id is not None

    def request_translation(self) -> None:
        """Validate the current input and start a translation."""
        trimmed = self.input_text.strip()
        if not trimmed:
            self.translation_failed.emit(EMPTY_INPUT_MESSAGE)
            return

        if len(trimmed) > MAX_INPUT_LENGTH:
            self.translation_failed.emit(INPUT_TOO_LONG_MESSAGE)
            return

        # Clear previous translation immediately
        self.translated_text = ""
        self.translation_started.emit()

        request = TranslationRequest(
            text=trimmed,
            source_lang=self.source_lang,
            target_lang=self.target_lang,
        )

        self._worker_counter += 1
        worker_id = self._worker_counter
        self._active_translation_worker_id = worker_id

        worker = TranslationWorker(
            translation_service=self.translation_service,
            request=request,
        )

        request_helper = _PendingTranslation(worker_id, self)
        self._translation_request_helper = request_helper

        worker.signals.translation_result.connect(request_helper.on_translation_result)
        worker.signals.error.connect(request_helper.on_translation_error)

        self.thread_pool.start(worker)

    def swap_languages(self) -> None:
        """Exchange source and target; clears input and result."""
        self.source_lang, self.target_lang = self.target_lang, self.source_lang
        self.input_text = ""
        self.translated_text = ""
        self._active_translation_worker_id = None
        self.languages_changed.emit(self.source_lang, self.target_lang)

    def clear(self) -> None:
        """Reset input and result, dropping any pending translation."""
        self.input_text = ""
        self.translated_text = ""
        self._active_translation_worker_id = None

    def _handle_translation_result(self, result, worker_id: int) -> None:
        """
        Handle translation result from worker thread (runs in main thread).

        Args:
            result: TranslationResult from the service
            worker_id: ID of the worker that produced this result
        """
        if worker_id != self._active_translation_worker_id:
            logger.debug(
                "Ignoring stale translation result (worker %d, current %s)",
                worker_id,
                self._active_translation_worker_id,
            )
            return

        self._active_translation_worker_id = None

        if result.is_error:
            logger.error("Translation failed: %s", result.error)
            self.translated_text = ""
            self.translation_failed.emit(result.error or "Translation failed")
            return

        self.translated_text = result.text
        self.translation_completed.emit(result.text)

    def _handle_translation_error(self, error: str, worker_id: int) -> None:
        """
        Handle unexpected worker error.

        Args:
            error: Error message
            worker_id: ID of the worker that produced this error
        """
        if worker_id != self._active_translation_worker_id:
            logger.debug("Ignoring stale translation error (worker %d)", worker_id)
            return

        self._active_translation_worker_id = None
        self.translated_text = ""
        self.translation_failed.emit(error)
