"""Services layer - business logic and external integrations."""

from lingubridge.services.settings_manager import SettingsManager

# Translation services
from lingubridge.services.translation import TranslationService, TranslationResult, GeminiTranslationService

# Background execution and scheduling
from lingubridge.services.api_workers import TranslationWorker, WorkerSignals
from lingubridge.services.scheduling import ManualClock, ManualScheduledTask, QtScheduledTask, ScheduledTask

# Export
from lingubridge.services.document_export import DocumentExporter

__all__ = [
    "SettingsManager",
    "TranslationService",
    "TranslationResult",
    "GeminiTranslationService",
    "TranslationWorker",
    "WorkerSignals",
    "ScheduledTask",
    "QtScheduledTask",
    "ManualClock",
    "ManualScheduledTask",
    "DocumentExporter",
]
