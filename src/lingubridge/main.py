"""Main entry point for the LinguBridge application."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from lingubridge.coordinators import TranslationCoordinator
from lingubridge.services import DocumentExporter, GeminiTranslationService, SettingsManager
from lingubridge.ui import MainWindow, TranslatorPanel

logger = logging.getLogger(__name__)


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Configuration and logging
    settings_manager = SettingsManager()
    logging.basicConfig(
        level=settings_manager.get_log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # 2. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("LinguBridge")
    app.setOrganizationName("LinguBridge")

    api_key = settings_manager.get_gemini_api_key()
    if not api_key:
        logger.warning("No GEMINI_API_KEY configured; translations will fail")

    # 3. Initialize Services
    model_name = settings_manager.get_model_name()
    translation_service = GeminiTranslationService(model_name=model_name)
    exporter = DocumentExporter(download_dir=settings_manager.get_download_dir())

    # 4. Construct UI
    panel = TranslatorPanel()
    main_window = MainWindow()
    main_window.set_panel(panel)
    main_window.set_model_name(model_name)

    # 5. Instantiate Coordinator (Dependency Injection)
    coordinator = TranslationCoordinator(
        translation_service=translation_service,
        exporter=exporter,
        api_key=api_key,
    )

    # 6. Signal Wiring (UI -> Coordinator)
    panel.input_changed.connect(coordinator.set_input_text)
    panel.source_language_selected.connect(coordinator.set_source_language)
    panel.target_language_selected.connect(coordinator.set_target_language)
    panel.swap_clicked.connect(coordinator.swap_languages)
    panel.clear_clicked.connect(coordinator.clear_all)
    panel.copy_clicked.connect(coordinator.copy_output)
    panel.download_clicked.connect(coordinator.download_pdf)
    main_window.swap_requested.connect(coordinator.swap_languages)
    main_window.clear_requested.connect(coordinator.clear_all)
    main_window.copy_requested.connect(coordinator.copy_output)
    main_window.export_requested.connect(coordinator.download_pdf)

    # Coordinator -> UI
    coordinator.input_text_changed.connect(panel.set_input_text)
    coordinator.output_text_changed.connect(panel.set_output_text)
    coordinator.translating_changed.connect(panel.set_translating)
    coordinator.languages_changed.connect(panel.set_languages)
    coordinator.copied_changed.connect(panel.set_copied)
    coordinator.document_saved.connect(
        lambda path: main_window.show_info("Export Complete", f"Saved translation to:\n{path}")
    )
    coordinator.export_failed.connect(
        lambda message: main_window.show_error("Export Failed", message)
    )
    app.aboutToQuit.connect(coordinator.shutdown)

    panel.set_languages(coordinator.source_language, coordinator.target_language)

    # 7. Show UI and start event loop
    main_window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
