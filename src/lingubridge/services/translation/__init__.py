"""Translation services - abstract interface and Gemini implementation."""

from lingubridge.services.translation.translation_service import TranslationService, TranslationResult
from lingubridge.services.translation.gemini_translation_service import GeminiTranslationService

__all__ = [
    "TranslationService",
    "TranslationResult",
    "GeminiTranslationService",
]
