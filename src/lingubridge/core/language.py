"""Language entity - the closed set of languages the translator supports."""

from enum import Enum


class Language(Enum):
    """Supported languages. Values are the names sent to the model."""

    MALAYALAM = "Malayalam"
    ENGLISH = "English"
    HINDI = "Hindi"
    TAMIL = "Tamil"

    def __str__(self) -> str:
        return self.value


_PLACEHOLDERS = {
    Language.MALAYALAM: "ഇവിടെ ടൈപ്പ് ചെയ്യുക...",
}

DEFAULT_PLACEHOLDER = "Enter your text..."


def placeholder_for(language: Language) -> str:
    """Return the input box placeholder for the given source language."""
    return _PLACEHOLDERS.get(language, DEFAULT_PLACEHOLDER)
