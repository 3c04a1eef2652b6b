"""Translation Service - interface for text translation between two languages."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from lingubridge.core import Language


@dataclass
class TranslationResult:
    """Result of a translation request."""

    text: str
    model: str
    error: Optional[str] = None

    @property
    def is_error(self) -> bool:
        """True if translation failed."""
        return self.error is not None


class TranslationService(ABC):
    """
    Abstract service for translating text from one language to another.

    Implementations (e.g., GeminiTranslationService) handle API calls and
    report failures through TranslationResult.error instead of raising.
    """

    @abstractmethod
    def translate(
        self,
        text: str,
        source: Language,
        target: Language,
        api_key: Optional[str],
    ) -> TranslationResult:
        """
        Translate text from source to target.

        Args:
            text: Text to translate, sent verbatim.
            source: Language the text is written in.
            target: Language to translate into.
            api_key: Model provider API key for authentication.

        Returns:
            TranslationResult with text or error message.
        """
        pass
