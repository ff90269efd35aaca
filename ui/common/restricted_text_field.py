import html

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLineEdit, QLabel
from PyQt5.QtCore import Qt, pyqtSignal

from config.constants import VIOLATION_MESSAGE_TEMPLATE
from config.settings import ACCENT_COLOR, ERROR_COLOR
from restriction.presets import whitespace_and_symbols
from ui.common.input_validators import apply_restriction_filter
from utils.formatters import format_violation_message


class RestrictedTextField(QWidget):
    """
    Line edit that refuses a set of characters.

    Disallowed characters are stripped as they are typed and the label under
    the field says which ones were removed.
    """

    # Emitted with the corrected value after every edit
    value_changed = pyqtSignal(str)
    # Emitted with the stripped characters ("" when the error clears)
    error_changed = pyqtSignal(str)

    def __init__(self, hint="", characters=None, value="", label="Input",
                 message_template=VIOLATION_MESSAGE_TEMPLATE, parent=None):
        super().__init__(parent)
        self.label = label
        self.message_template = message_template
        self._value = ""

        self.setup_ui(hint)

        if characters is None:
            characters = whitespace_and_symbols()
        self.binding = apply_restriction_filter(self.line_edit, characters, self._on_violation)
        self.line_edit.textChanged.connect(self._on_text_changed)

        if value:
            self.set_value(value)

    def setup_ui(self, hint):
        """Setup field UI"""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        self.line_edit = QLineEdit()
        self.line_edit.setPlaceholderText(hint)
        self.line_edit.setMinimumHeight(35)
        layout.addWidget(self.line_edit)

        self.error_label = QLabel("")
        self.error_label.setTextFormat(Qt.RichText)
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet("color: #cccccc; font-size: 12px;")
        self.error_label.hide()
        layout.addWidget(self.error_label)

        self.apply_style(has_error=False)

    def apply_style(self, has_error):
        """Tint the field red while an error is shown"""
        if has_error:
            background, border = "rgba(229, 72, 77, 0.3)", ERROR_COLOR
        else:
            background, border = "rgba(128, 128, 128, 0.2)", "#555555"
        self.line_edit.setStyleSheet(f"""
            QLineEdit {{
                background-color: {background};
                border: 1px solid {border};
                padding: 8px 15px;
                border-radius: 12px;
                color: #ffffff;
            }}
            QLineEdit:focus {{
                border: 2px solid {ERROR_COLOR if has_error else ACCENT_COLOR};
            }}
        """)

    @property
    def restriction(self):
        return self.binding.restriction

    def characters(self):
        return self.binding.restriction.characters

    def set_characters(self, characters):
        """Swap the disallowed set and filter the current value again"""
        had_error = bool(self.binding.message)
        self.binding.detach()
        self.binding.deleteLater()
        if had_error:
            self._on_violation("")
        # Filter slot must stay ahead of the value slot
        self.line_edit.textChanged.disconnect(self._on_text_changed)
        self.binding = apply_restriction_filter(self.line_edit, characters, self._on_violation)
        self.line_edit.textChanged.connect(self._on_text_changed)
        self.binding.refilter()
        self._on_text_changed(self.line_edit.text())

    def value(self):
        return self.line_edit.text()

    def set_value(self, value):
        self.line_edit.setText(value)

    def error_message(self):
        """Stripped characters of the last violating edit, "" when clean"""
        return self.binding.message

    def display_message(self):
        return self.error_label.text()

    def _on_text_changed(self, _text):
        # The filter slot runs first, so the widget already holds the corrected text
        value = self.line_edit.text()
        if value != self._value:
            self._value = value
            self.value_changed.emit(value)

    def _on_violation(self, chars):
        # Label renders rich text, so < and & must reach it escaped
        message = format_violation_message(self.message_template, html.escape(self.label),
                                           html.escape(chars))
        self.error_label.setText(message)
        self.error_label.setVisible(bool(message))
        self.apply_style(has_error=bool(chars))
        self.error_changed.emit(chars)
