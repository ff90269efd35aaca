"""Tests for attaching restriction filters to Qt text inputs."""

from unittest.mock import MagicMock

import pytest
from PyQt5.QtWidgets import QLabel, QLineEdit, QTextEdit

from restriction.code_point_set import CodePointSet
from ui.common.input_validators import apply_restriction_filter


def test_line_edit_strips_and_reports(qapp):
    line_edit = QLineEdit()
    on_violation = MagicMock()
    binding = apply_restriction_filter(line_edit, "!@", on_violation)

    line_edit.setText("ab!c")
    assert line_edit.text() == "abc"
    assert binding.message == "!"
    on_violation.assert_called_once_with("!")


def test_message_survives_settle_and_clears_on_next_clean_edit(qapp):
    line_edit = QLineEdit()
    on_violation = MagicMock()
    binding = apply_restriction_filter(line_edit, "!", on_violation)

    line_edit.setText("ab!")
    assert binding.restriction.error_message == "!"

    line_edit.setText("abc")
    assert binding.message == ""
    assert on_violation.call_args_list[-1].args == ("",)


def test_cursor_stays_in_place(qapp):
    line_edit = QLineEdit()
    apply_restriction_filter(line_edit, "!")
    line_edit.setText("abcd")
    line_edit.setCursorPosition(2)

    line_edit.insert("!")
    assert line_edit.text() == "abcd"
    assert line_edit.cursorPosition() == 2


def test_cursor_counts_utf16_units(qapp):
    line_edit = QLineEdit()
    apply_restriction_filter(line_edit, CodePointSet.from_range(0x1F600, 0x1F64F))
    line_edit.setText("hi")
    line_edit.setCursorPosition(2)

    line_edit.insert("\U0001F600")
    assert line_edit.text() == "hi"
    assert line_edit.cursorPosition() == 2


def test_text_edit(qapp):
    text_edit = QTextEdit()
    binding = apply_restriction_filter(text_edit, "#")

    text_edit.setPlainText("a#b\nc#")
    assert text_edit.toPlainText() == "ab\nc"
    assert binding.message == "##"


def test_detach(qapp):
    line_edit = QLineEdit()
    binding = apply_restriction_filter(line_edit, "!")
    binding.detach()
    binding.detach()

    line_edit.setText("a!")
    assert line_edit.text() == "a!"


def test_unsupported_widget(qapp):
    with pytest.raises(TypeError):
        apply_restriction_filter(QLabel(), "!")
