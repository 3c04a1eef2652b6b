"""Translation Coordinator - Owns the translator state and its debounce-and-translate cycle."""

import logging
from dataclasses import replace
from typing import Callable, Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot
from PySide6.QtGui import QGuiApplication

from lingubridge.core import Language, TranslationState
from lingubridge.services import (
    DocumentExporter,
    QtScheduledTask,
    ScheduledTask,
    TranslationResult,
    TranslationService,
    TranslationWorker,
)

logger = logging.getLogger(__name__)


def _write_system_clipboard(text: str) -> None:
    QGuiApplication.clipboard().setText(text)


class _TranslationRequest(QObject):
    """Helper class to hold translation request context and handle results safely."""

    def __init__(self, request_id: int, parent: "TranslationCoordinator"):
        super().__init__()
        self.request_id = request_id
        self.parent_ref = parent

    @Slot(object)
    def on_translation_result(self, result):
        """Handle translation result safely."""
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_translation_result(result, self.request_id)
            except RuntimeError:
                # Coordinator might be destroyed, ignore
                pass

    @Slot(str)
    def on_translation_error(self, error: str):
        """Handle translation error safely."""
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_translation_error(error, self.request_id)
            except RuntimeError:
                pass


class TranslationCoordinator(QObject):
    """
    Orchestrates the live translation workflow.

    Responsibilities:
    - Hold the TranslationState shown by the panel.
    - Debounce input and language changes into a single translate call.
    - Run API calls off the UI thread and apply only the latest result.
    - Copy and export the translated text.
    """

    DEBOUNCE_MS = 1000
    COPIED_RESET_MS = 2000
    PDF_FILENAME = "translation.pdf"
    ERROR_MESSAGE = "Error occurred during translation. Please check your connection or API key."

    input_text_changed = Signal(str)
    output_text_changed = Signal(str)
    translating_changed = Signal(bool)
    languages_changed = Signal(object, object)  # source Language, target Language
    copied_changed = Signal(bool)
    document_saved = Signal(str)
    export_failed = Signal(str)

    def __init__(
        self,
        translation_service: TranslationService,
        exporter: DocumentExporter,
        api_key: Optional[str],
        clipboard_writer: Optional[Callable[[str], None]] = None,
        task_factory: Optional[Callable[[], ScheduledTask]] = None,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()

        self.translation_service = translation_service
        self.exporter = exporter
        self.api_key = api_key
        self.clipboard_writer = clipboard_writer or _write_system_clipboard

        if task_factory is None:
            task_factory = lambda: QtScheduledTask(self)
        self._debounce_task = task_factory()
        self._copied_reset_task = task_factory()

        self.thread_pool = thread_pool or QThreadPool.globalInstance()

        self.state = TranslationState()

        # Only the most recently dispatched request may write the output.
        # Edits, language changes, swap and clear all invalidate it.
        self._active_request_id: Optional[int] = None
        self._request_counter = 0

        # Keep a reference so the helper isn't garbage collected while the worker runs
        self._request_helper: Optional[_TranslationRequest] = None

    # State accessors

    @property
    def input_text(self) -> str:
        return self.state.input_text

    @property
    def output_text(self) -> str:
        return self.state.output_text

    @property
    def is_translating(self) -> bool:
        return self.state.is_translating

    @property
    def source_language(self) -> Language:
        return self.state.source_language

    @property
    def target_language(self) -> Language:
        return self.state.target_language

    @property
    def is_copied(self) -> bool:
        return self.state.is_copied

    @property
    def has_pending_translation(self) -> bool:
        """True while the debounce timer is armed."""
        return self._debounce_task.is_armed

    # User actions

    def set_input_text(self, text: str) -> None:
        """Record new input and restart the debounce window."""
        if text == self.state.input_text:
            return
        self._invalidate_active_request()
        self._set_state(replace(self.state, input_text=text))
        self._reschedule(clear_output_when_empty=True)

    def set_source_language(self, language: Language) -> None:
        if language == self.state.source_language:
            return
        self._invalidate_active_request()
        self._set_state(replace(self.state, source_language=language))
        self._reschedule()

    def set_target_language(self, language: Language) -> None:
        if language == self.state.target_language:
            return
        self._invalidate_active_request()
        self._set_state(replace(self.state, target_language=language))
        self._reschedule()

    def swap_languages(self) -> None:
        """Exchange languages and texts, then translate the new input."""
        self._invalidate_active_request()
        self._set_state(self.state.swapped())
        self._reschedule()

    def clear_all(self) -> None:
        """Empty both panes; any pending translation is dropped."""
        self._invalidate_active_request()
        self._set_state(self.state.cleared())
        self._reschedule()

    def translate(self, text: str) -> None:
        """
        Dispatch a translation of text with the current languages.

        Empty or whitespace-only text clears the output without an API call.
        The result is applied asynchronously through the thread pool.
        """
        if not text.strip():
            self._set_state(replace(self.state, output_text="", is_translating=False))
            return

        self._request_counter += 1
        request_id = self._request_counter
        self._active_request_id = request_id

        self._set_state(replace(self.state, is_translating=True))

        worker = TranslationWorker(
            translation_service=self.translation_service,
            text=text,
            source=self.state.source_language,
            target=self.state.target_language,
            api_key=self.api_key,
        )

        request_helper = _TranslationRequest(request_id, self)
        self._request_helper = request_helper

        worker.signals.translation_result.connect(request_helper.on_translation_result)
        worker.signals.error.connect(request_helper.on_translation_error)

        logger.debug(
            "Dispatching translation request %d (%s -> %s)",
            request_id, self.state.source_language.value, self.state.target_language.value,
        )
        self.thread_pool.start(worker)

    def copy_output(self) -> None:
        """Copy the translation to the clipboard and flag it as copied for a moment."""
        if not self.state.output_text:
            return
        self.clipboard_writer(self.state.output_text)
        self._set_state(replace(self.state, is_copied=True))
        self._copied_reset_task.arm(self.COPIED_RESET_MS, self._reset_copied)

    def download_pdf(self) -> None:
        """Export the translation as a PDF into the download directory."""
        if not self.state.output_text:
            return
        try:
            blob = self.exporter.generate_pdf(self.state.output_text, self.PDF_FILENAME)
            path = self.exporter.download(blob, self.PDF_FILENAME)
        except OSError as e:
            logger.exception("PDF export failed")
            self.export_failed.emit(f"Could not save {self.PDF_FILENAME}: {e}")
            return
        self.document_saved.emit(str(path))

    def shutdown(self) -> None:
        """Stop timers and ignore any request still in flight."""
        self._debounce_task.cancel()
        self._copied_reset_task.cancel()
        self._active_request_id = None

    # Result handling (runs in main thread)

    def _handle_translation_result(self, result: TranslationResult, request_id: int) -> None:
        if request_id != self._active_request_id:
            logger.debug(
                "Ignoring stale translation result (request %d, current %s)",
                request_id, self._active_request_id,
            )
            return

        output = self.ERROR_MESSAGE
        try:
            if result.is_error:
                logger.error("Translation Error: %s", result.error)
            else:
                output = result.text
        finally:
            self._active_request_id = None
            self._set_state(replace(self.state, output_text=output, is_translating=False))

    def _handle_translation_error(self, error: str, request_id: int) -> None:
        if request_id != self._active_request_id:
            logger.debug(
                "Ignoring stale translation error (request %d, current %s)",
                request_id, self._active_request_id,
            )
            return

        logger.error("Translation Error: %s", error)
        self._active_request_id = None
        self._set_state(replace(self.state, output_text=self.ERROR_MESSAGE, is_translating=False))

    # Internals

    def _reschedule(self, clear_output_when_empty: bool = False) -> None:
        self._debounce_task.cancel()

        text = self.state.input_text
        if not text.strip():
            if clear_output_when_empty:
                self._set_state(replace(self.state, output_text=""))
            return

        self._debounce_task.arm(self.DEBOUNCE_MS, lambda: self.translate(text))

    def _invalidate_active_request(self) -> None:
        if self._active_request_id is None:
            return
        logger.debug("Superseding translation request %d", self._active_request_id)
        self._active_request_id = None
        self._set_state(replace(self.state, is_translating=False))

    def _reset_copied(self) -> None:
        self._set_state(replace(self.state, is_copied=False))

    def _set_state(self, new_state: TranslationState) -> None:
        old_state, self.state = self.state, new_state

        if new_state.input_text != old_state.input_text:
            self.input_text_changed.emit(new_state.input_text)
        if new_state.output_text != old_state.output_text:
            self.output_text_changed.emit(new_state.output_text)
        if new_state.is_translating != old_state.is_translating:
            self.translating_changed.emit(new_state.is_translating)
        if (
            new_state.source_language != old_state.source_language
            or new_state.target_language != old_state.target_language
        ):
            self.languages_changed.emit(new_state.source_language, new_state.target_language)
        if new_state.is_copied != old_state.is_copied:
            self.copied_changed.emit(new_state.is_copied)
