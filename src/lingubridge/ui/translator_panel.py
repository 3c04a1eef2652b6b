"""Translator Panel - input/output panes, language controls and output actions."""

from PySide6.QtCore import Signal
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QPlainTextEdit,
    QPushButton,
    QSizePolicy,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from lingubridge.core import Language, placeholder_for


class TranslatorPanel(QWidget):
    """
    Side-by-side source and translation panes.

    Pure view: user actions are re-emitted as signals and state is pushed in
    through the set_* methods, which never emit user signals themselves.
    """

    input_changed = Signal(str)
    source_language_selected = Signal(object)  # Language
    target_language_selected = Signal(object)  # Language
    swap_clicked = Signal()
    clear_clicked = Signal()
    copy_clicked = Signal()
    download_clicked = Signal()

    MALAYALAM_POINT_SIZE = 18
    DEFAULT_POINT_SIZE = 15

    def __init__(self):
        super().__init__()

        self._languages = list(Language)

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(12, 12, 12, 12)
        main_layout.setSpacing(8)

        # Language bar
        language_layout = QHBoxLayout()

        source_caption = QLabel("Source")
        source_caption.setStyleSheet("font-weight: bold; color: gray;")
        language_layout.addWidget(source_caption)
        self.source_combo = self._create_language_combo()
        self.source_combo.currentIndexChanged.connect(self._on_source_index_changed)
        language_layout.addWidget(self.source_combo)

        self.swap_button = QPushButton("⇄ Swap")
        self.swap_button.clicked.connect(self.swap_clicked.emit)
        language_layout.addWidget(self.swap_button)

        target_caption = QLabel("Target")
        target_caption.setStyleSheet("font-weight: bold; color: gray;")
        language_layout.addWidget(target_caption)
        self.target_combo = self._create_language_combo()
        self.target_combo.currentIndexChanged.connect(self._on_target_index_changed)
        language_layout.addWidget(self.target_combo)

        language_layout.addStretch()

        self.clear_button = QPushButton("Clear")
        self.clear_button.clicked.connect(self.clear_clicked.emit)
        language_layout.addWidget(self.clear_button)

        main_layout.addLayout(language_layout)

        # Panes
        panes_layout = QHBoxLayout()

        input_layout = QVBoxLayout()
        self.input_edit = QPlainTextEdit()
        self.input_edit.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.input_edit.textChanged.connect(self._on_input_text_changed)
        input_layout.addWidget(self.input_edit, 1)

        self.char_count_label = QLabel()
        self.char_count_label.setStyleSheet("color: gray;")
        input_layout.addWidget(self.char_count_label)
        panes_layout.addLayout(input_layout, 1)

        output_layout = QVBoxLayout()
        self.processing_label = QLabel("Processing")
        self.processing_label.setStyleSheet("color: #4f46e5; font-weight: bold;")
        self.processing_label.hide()
        output_layout.addWidget(self.processing_label)

        self.output_edit = QTextEdit()
        self.output_edit.setReadOnly(True)
        self.output_edit.setPlaceholderText("Your translation will appear here")
        self.output_edit.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        output_layout.addWidget(self.output_edit, 1)

        actions_layout = QHBoxLayout()
        self.download_button = QPushButton("Export PDF")
        self.download_button.setToolTip("Export to PDF")
        self.download_button.clicked.connect(self.download_clicked.emit)
        actions_layout.addWidget(self.download_button)
        actions_layout.addStretch()
        self.copy_button = QPushButton("Copy")
        self.copy_button.clicked.connect(self.copy_clicked.emit)
        actions_layout.addWidget(self.copy_button)
        output_layout.addLayout(actions_layout)

        panes_layout.addLayout(output_layout, 1)
        main_layout.addLayout(panes_layout, 1)

        self._update_char_count()
        self.set_output_text("")
        self.set_languages(Language.MALAYALAM, Language.ENGLISH)

    def set_input_text(self, text: str) -> None:
        if self.input_edit.toPlainText() == text:
            return
        self.input_edit.blockSignals(True)
        self.input_edit.setPlainText(text)
        self.input_edit.blockSignals(False)
        self._update_char_count()

    def set_output_text(self, text: str) -> None:
        self.output_edit.setPlainText(text)
        has_output = bool(text)
        self.download_button.setEnabled(has_output)
        self.copy_button.setEnabled(has_output)

    def set_translating(self, translating: bool) -> None:
        self.processing_label.setVisible(translating)

    def set_copied(self, copied: bool) -> None:
        self.copy_button.setText("Copied" if copied else "Copy")

    def set_languages(self, source: Language, target: Language) -> None:
        """Show the given language pair and adapt placeholder and fonts."""
        for combo, language in ((self.source_combo, source), (self.target_combo, target)):
            combo.blockSignals(True)
            combo.setCurrentIndex(self._languages.index(language))
            combo.blockSignals(False)

        self.input_edit.setPlaceholderText(placeholder_for(source))
        self.input_edit.setFont(self._font_for(source))
        self.output_edit.setFont(self._font_for(target))

    def _create_language_combo(self) -> QComboBox:
        combo = QComboBox()
        for language in self._languages:
            combo.addItem(language.value)
        return combo

    def _font_for(self, language: Language) -> QFont:
        font = QFont(self.font())
        if language == Language.MALAYALAM:
            font.setPointSize(self.MALAYALAM_POINT_SIZE)
        else:
            font.setPointSize(self.DEFAULT_POINT_SIZE)
        return font

    def _on_input_text_changed(self) -> None:
        self._update_char_count()
        self.input_changed.emit(self.input_edit.toPlainText())

    def _on_source_index_changed(self, index: int) -> None:
        self.source_language_selected.emit(self._languages[index])

    def _on_target_index_changed(self, index: int) -> None:
        self.target_language_selected.emit(self._languages[index])

    def _update_char_count(self) -> None:
        self.char_count_label.setText(f"{len(self.input_edit.toPlainText())} Characters")
