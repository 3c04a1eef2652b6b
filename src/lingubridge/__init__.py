"""
LinguBridge - A live translation desktop widget.

Text typed into the source pane is translated by Google Gemini once typing
pauses, with copy and PDF export for the result.
"""

__version__ = "0.1.0"

from lingubridge.core import Language, TranslationState

__all__ = [
    "Language",
    "TranslationState",
]
