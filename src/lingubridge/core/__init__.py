"""Domain layer - languages and the widget's translation state."""

from .language import Language, placeholder_for
from .translation_state import TranslationState

__all__ = ["Language", "TranslationState", "placeholder_for"]
