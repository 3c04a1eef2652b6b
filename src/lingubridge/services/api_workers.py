"""Async workers for non-blocking API calls using Qt threading."""

from typing import Optional

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from lingubridge.core import Language
from lingubridge.services.translation import TranslationService


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
    Worker that runs translation API call in a background thread.

    Uses Qt's thread pool for efficient thread management.
    Emits signals when translation completes or fails.
    """

    def __init__(
        self,
        translation_service: TranslationService,
        text: str,
        source: Language,
        target: Language,
        api_key: Optional[str],
    ):
        super().__init__()
        self.translation_service = translation_service
        self.text = text
        self.source = source
        self.target = target
        self.api_key = api_key
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the translation API call in background thread."""
        try:
            result = self.translation_service.translate(
                text=self.text,
                source=self.source,
                target=self.target,
                api_key=self.api_key,
            )
            self.signals.translation_result.emit(result)
        except Exception as e:
            # Catch any unexpected exceptions not handled by service
            self.signals.error.emit(f"Unexpected translation error: {e}")
        finally:
            self.signals.finished.emit()
