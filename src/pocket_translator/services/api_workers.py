"""Async workers for non-blocking API calls using Qt threading."""

import asyncio

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from pocket_translator.core import TranslationRequest
from pocket_translator.services.translation import TranslationService


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
    Worker that runs the translation pipeline in a background thread.

    Each worker drives its own asyncio event loop, so overlapping
    requests never share state.
    """

    def __init__(
        self,
        translation_service: TranslationService,
        request: TranslationRequest,
    ):
        super().__init__()
        self.translation_service = translation_service
        self.request = request
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the translation in background thread."""
        try:
            result = asyncio.run(self.translation_service.translate(self.request))
            self.signals.translation_result.emit(result)
        except Exception as e:
            # Catch any unexpected exceptions not handled by service
            self.signals.error.emit(f"Unexpected translation error: {str(e)}")
        finally:
            self.signals.finished.emit()
