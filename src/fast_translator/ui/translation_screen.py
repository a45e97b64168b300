"""Translation screen - Language pickers, input box and translation output."""

from pathlib import Path
from typing import List, Optional

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QComboBox,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QPlainTextEdit,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from fast_translator.core import Language

from .app_footer import AppFooter

OUTPUT_PLACEHOLDER = "Your translation will appear here."
PROCESSING_PLACEHOLDER = "Processing..."


class TranslationScreen(QWidget):
    """Presents the translation form. Holds no workflow state of its own.

    Signals:
        source_language_changed: Emitted with the newly selected source code.
        target_language_changed: Emitted with the newly selected target code.
        text_changed: Emitted with the full input text on every edit.
        translate_clicked: Emitted when the Translate button is pressed.
        clear_clicked: Emitted when the Clear button is pressed.
    """

    source_language_changed = Signal(str)
    target_language_changed = Signal(str)
    text_changed = Signal(str)
    translate_clicked = Signal()
    clear_clicked = Signal()

    def __init__(self, logo_path: Optional[Path] = None, parent=None):
        super().__init__(parent)
        self._loading = False
        self._setup_ui(logo_path)

    def _setup_ui(self, logo_path: Optional[Path]):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 0)
        layout.setSpacing(8)

        # Language pickers
        pickers = QHBoxLayout()
        from_form = QFormLayout()
        self.source_combo = QComboBox()
        self.source_combo.currentIndexChanged.connect(self._on_source_index_changed)
        from_form.addRow("From", self.source_combo)
        pickers.addLayout(from_form, 1)

        swap_label = QLabel("⇄")
        swap_label.setObjectName("swapGlyph")
        pickers.addWidget(swap_label)

        to_form = QFormLayout()
        self.target_combo = QComboBox()
        self.target_combo.currentIndexChanged.connect(self._on_target_index_changed)
        to_form.addRow("To", self.target_combo)
        pickers.addLayout(to_form, 1)
        layout.addLayout(pickers)

        self.language_status_label = QLabel("")
        self.language_status_label.setObjectName("languageStatus")
        self.language_status_label.hide()
        layout.addWidget(self.language_status_label)
        layout.addSpacing(12)

        # Input
        self.input_edit = QPlainTextEdit()
        self.input_edit.setPlaceholderText("Enter text to translate")
        self.input_edit.setFixedHeight(110)
        self.input_edit.textChanged.connect(self._on_text_changed)
        layout.addWidget(self.input_edit)

        clear_row = QHBoxLayout()
        clear_row.addStretch()
        self.clear_button = QPushButton("✕ Clear")
        self.clear_button.setObjectName("clearButton")
        self.clear_button.clicked.connect(self.clear_clicked.emit)
        clear_row.addWidget(self.clear_button)
        layout.addLayout(clear_row)

        self.translate_button = QPushButton("Translate")
        self.translate_button.setObjectName("primaryButton")
        self.translate_button.clicked.connect(self.translate_clicked.emit)
        layout.addWidget(self.translate_button)
        layout.addSpacing(12)

        # Output
        self.translation_label = QLabel("Translation:")
        self.translation_label.setObjectName("sectionTitle")
        layout.addWidget(self.translation_label)

        self.output_edit = QPlainTextEdit()
        self.output_edit.setReadOnly(True)
        self.output_edit.setPlaceholderText(OUTPUT_PLACEHOLDER)
        self.output_edit.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        layout.addWidget(self.output_edit, 1)

        layout.addWidget(AppFooter(logo_path))

    def set_languages(
        self,
        source_languages: List[Language],
        target_languages: List[Language],
        source_code: str,
        target_code: str,
    ) -> None:
        """Repopulate both pickers without echoing selection signals."""
        self.language_status_label.hide()
        self._fill_combo(self.source_combo, source_languages, source_code)
        self._fill_combo(self.target_combo, target_languages, target_code)
        self.source_combo.setEnabled(True)
        self.target_combo.setEnabled(True)

    def show_languages_unavailable(self, message: str) -> None:
        self.source_combo.clear()
        self.target_combo.clear()
        self.source_combo.setEnabled(False)
        self.target_combo.setEnabled(False)
        self.language_status_label.setText(message)
        self.language_status_label.show()

    def selected_source_code(self) -> Optional[str]:
        return self.source_combo.currentData()

    def selected_target_code(self) -> Optional[str]:
        return self.target_combo.currentData()

    def input_text(self) -> str:
        return self.input_edit.toPlainText()

    def set_input_text(self, text: str) -> None:
        if text != self.input_edit.toPlainText():
            self.input_edit.setPlainText(text)

    def set_translated_text(self, text: str) -> None:
        self.output_edit.setPlainText(text)

    def translated_text(self) -> str:
        return self.output_edit.toPlainText()

    def set_loading(self, loading: bool) -> None:
        """Disable the Translate button and swap the output placeholder while loading."""
        self._loading = loading
        self.translate_button.setEnabled(not loading)
        self.translate_button.setText("Translating..." if loading else "Translate")
        self.output_edit.setPlaceholderText(PROCESSING_PLACEHOLDER if loading else OUTPUT_PLACEHOLDER)

    def is_loading(self) -> bool:
        return self._loading

    def reset(self) -> None:
        self.set_input_text("")
        self.set_translated_text("")
        self.set_loading(False)

    def _fill_combo(self, combo: QComboBox, languages: List[Language], selected_code: str) -> None:
        combo.blockSignals(True)
        try:
            combo.clear()
            for language in languages:
                combo.addItem(language.name, language.code)
            combo.setCurrentIndex(combo.findData(selected_code))
        finally:
            combo.blockSignals(False)

    def _on_source_index_changed(self, index: int):
        code = self.source_combo.itemData(index)
        if code is not None:
            self.source_language_changed.emit(code)

    def _on_target_index_changed(self, index: int):
        code = self.target_combo.itemData(index)
        if code is not None:
            self.target_language_changed.emit(code)

    def _on_text_changed(self):
        self.text_changed.emit(self.input_edit.toPlainText())
