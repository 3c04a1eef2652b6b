"""Gemini Translation Service - Implements translation via Google Gemini API."""

import logging
from typing import Optional

import google.genai as genai

from lingubridge.core import Language
from lingubridge.services.translation.translation_service import TranslationResult, TranslationService

logger = logging.getLogger(__name__)


class GeminiTranslationService(TranslationService):
    """
    Translation service using Google Gemini API.

    One request per call, no retries. The response text is returned as-is.
    """

    DEFAULT_MODEL = "gemini-3-flash-preview"

    TRANSLATION_PROMPT = """Translate the following text from {source} to {target}.
Return ONLY the translated text without any explanations.
Text to translate: {text}"""

    def __init__(self, model_name: str = DEFAULT_MODEL):
        self.model_name = model_name

    def build_prompt(self, text: str, source: Language, target: Language) -> str:
        """Build the instruction sent to the model."""
        return self.TRANSLATION_PROMPT.format(
            source=source.value,
            target=target.value,
            text=text,
        )

    def translate(
        self,
        text: str,
        source: Language,
        target: Language,
        api_key: Optional[str],
    ) -> TranslationResult:
        """
        Translate text using Gemini API.

        Args:
            text: Text to translate.
            source: Language the text is written in.
            target: Language to translate into.
            api_key: Gemini API key for authentication.

        Returns:
            TranslationResult with translated text or error message.
        """
        if not api_key:
            return TranslationResult(
                text="",
                model=self.model_name,
                error="API key not configured",
            )

        logger.debug(
            "Requesting %s -> %s translation of %d chars from %s",
            source.value, target.value, len(text), self.model_name,
        )

        try:
            client = genai.Client(api_key=api_key)

            response = client.models.generate_content(
                model=self.model_name,
                contents=self.build_prompt(text, source, target),
            )

            return TranslationResult(
                text=response.text or "",
                model=self.model_name,
            )

        except Exception as e:
            error_msg = str(e).lower()

            if "api_key" in error_msg or "api key" in error_msg or "authentication" in error_msg or "permission" in error_msg:
                error = f"Invalid API key or request: {e}"
            elif "429" in error_msg or "quota" in error_msg or "resource_exhausted" in error_msg or "rate_limit" in error_msg:
                error = "API quota exceeded. Please try again later."
            elif "deadline" in error_msg or "timeout" in error_msg:
                error = "Request timed out. Please check your connection."
            else:
                error = f"Translation failed: {e}"

            return TranslationResult(
                text="",
                model=self.model_name,
                error=error,
            )
