from PyQt5.QtCore import QObject, pyqtSignal
from PyQt5.QtWidgets import QLineEdit, QTextEdit

from restriction.filter import RestrictionFilter


def _utf16_length(text):
    return sum(2 if ord(ch) > 0xFFFF else 1 for ch in text)


def _index_from_utf16(text, offset):
    """Map a Qt cursor offset (UTF-16 units) to an index into *text*"""
    units = 0
    for index, ch in enumerate(text):
        if units >= offset:
            return index
        units += 2 if ord(ch) > 0xFFFF else 1
    return len(text)


def _adjusted_cursor(incoming, cursor_pos, restriction):
    """Cursor offset after stripping, in UTF-16 units"""
    before = incoming[:_index_from_utf16(incoming, cursor_pos)]
    return _utf16_length(restriction.strip(before))


class RestrictionBinding(QObject):
    """
    Attach a RestrictionFilter to a QLineEdit or QTextEdit.

    Disallowed characters are removed whenever the user types or pastes
    them, and message_changed fires whenever the violation text changes.
    """

    message_changed = pyqtSignal(str)

    def __init__(self, widget, disallowed, parent=None):
        if not isinstance(widget, (QLineEdit, QTextEdit)):
            raise TypeError(f"Restriction filter needs a QLineEdit or QTextEdit, got {type(widget).__name__}")
        super().__init__(parent if parent is not None else widget)

        self.widget = widget
        self.restriction = RestrictionFilter(disallowed)
        self.previous = self._read_text()
        self.message = ""
        self.attached = True

        widget.textChanged.connect(self._on_text_changed)

    def _read_text(self):
        if isinstance(self.widget, QLineEdit):
            return self.widget.text()
        return self.widget.toPlainText()

    def _cursor_position(self):
        if isinstance(self.widget, QLineEdit):
            return self.widget.cursorPosition()
        return self.widget.textCursor().position()

    def _write_text(self, text, cursor_pos):
        self.widget.blockSignals(True)
        if isinstance(self.widget, QLineEdit):
            self.widget.setText(text)
        else:
            self.widget.setPlainText(text)
        self.widget.blockSignals(False)

        cursor_pos = min(cursor_pos, _utf16_length(text))
        if isinstance(self.widget, QLineEdit):
            self.widget.setCursorPosition(cursor_pos)
        else:
            cursor = self.widget.textCursor()
            cursor.setPosition(cursor_pos)
            self.widget.setTextCursor(cursor)

    def _on_text_changed(self, *args):
        incoming = self._read_text()
        result = self.restriction.handle_edit(self.previous, incoming)

        if result.changed:
            cursor_pos = _adjusted_cursor(incoming, self._cursor_position(), self.restriction)
            self._write_text(result.corrected, cursor_pos)
            # Settle pass: the field just went from dirty to clean
            result = self.restriction.handle_edit(incoming, result.corrected)

        self.previous = result.corrected
        self._update_message(result.error_message)

    def _update_message(self, message):
        if message != self.message:
            self.message = message
            self.message_changed.emit(message)

    def refilter(self):
        """Run the current text through the filter again"""
        self._on_text_changed()

    def detach(self):
        """Stop filtering the widget"""
        if self.attached:
            self.widget.textChanged.disconnect(self._on_text_changed)
            self.attached = False


def apply_restriction_filter(widget, disallowed, on_violation=None):
    """
    Strip disallowed characters from a QLineEdit or QTextEdit.

    Args:
        widget: Text input to restrict
        disallowed: CodePointSet or anything CodePointSet.coerce accepts
        on_violation: Optional callable receiving the violation text
            ("" once it clears)

    Returns:
        The RestrictionBinding; its restriction attribute holds the filter.
    """
    binding = RestrictionBinding(widget, disallowed)
    if on_violation is not None:
        binding.message_changed.connect(on_violation)
    return binding

