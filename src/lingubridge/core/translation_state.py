"""Translation State entity - everything the widget shows, in one value."""

from dataclasses import dataclass, replace

from .language import Language


@dataclass(frozen=True)
class TranslationState:
    """Snapshot of the translator widget.

    Mutations produce a new snapshot; the coordinator owns the current one.
    """

    input_text: str = ""
    output_text: str = ""
    is_translating: bool = False
    source_language: Language = Language.MALAYALAM
    target_language: Language = Language.ENGLISH
    is_copied: bool = False

    @property
    def has_input(self) -> bool:
        """True if the input contains anything besides whitespace."""
        return bool(self.input_text.strip())

    def swapped(self) -> "TranslationState":
        """Exchange languages and move the output into the input box."""
        return replace(
            self,
            source_language=self.target_language,
            target_language=self.source_language,
            input_text=self.output_text,
            output_text=self.input_text,
        )

    def cleared(self) -> "TranslationState":
        """Empty both text panes."""
        return replace(self, input_text="", output_text="")
