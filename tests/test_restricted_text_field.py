"""Tests for the RestrictedTextField widget."""

from unittest.mock import MagicMock

from PyQt5.QtGui import QTextDocument

from restriction import presets
from ui.common.restricted_text_field import RestrictedTextField


def test_strips_and_shows_message(qapp):
    field = RestrictedTextField(hint="i_neko", label="Username")
    errors = MagicMock()
    values = MagicMock()
    field.error_changed.connect(errors)
    field.value_changed.connect(values)

    field.set_value("neko cat!")
    assert field.value() == "nekocat"
    assert field.error_message() == " !"
    errors.assert_called_once_with(" !")
    values.assert_called_once_with("nekocat")
    assert "Username cannot contain" in field.display_message()
    assert not field.error_label.isHidden()


def test_error_clears_on_clean_edit(qapp):
    field = RestrictedTextField(label="Username")
    field.set_value("neko!")
    field.set_value("nekos")

    assert field.error_message() == ""
    assert field.display_message() == ""
    assert field.error_label.isHidden()


def test_initial_value_is_filtered(qapp):
    field = RestrictedTextField(value="a b")
    assert field.value() == "ab"


def test_set_characters_refilters(qapp):
    field = RestrictedTextField(characters=presets.custom("x"))
    field.set_value("abc")
    assert field.error_message() == ""

    field.set_characters(presets.custom("b"))
    assert field.value() == "ac"
    assert field.error_message() == "b"
    assert field.characters() == presets.custom("b")


def test_custom_message_template(qapp):
    field = RestrictedTextField(characters="abc", message_template="Disallowed characters found: {chars}")
    field.set_value("xabcy")
    assert field.value() == "xy"
    assert field.display_message() == "Disallowed characters found: abc"


def test_value_signal_after_swapping_characters(qapp):
    field = RestrictedTextField(characters="x")
    field.set_characters("b")
    values = MagicMock()
    field.value_changed.connect(values)

    field.set_value("acdb")
    values.assert_called_once_with("acd")


def test_markup_characters_are_shown_escaped(qapp):
    field = RestrictedTextField(characters=presets.special_characters(), label="Username")
    field.line_edit.setText("ab<c&")
    assert field.error_message() == "<&"

    document = QTextDocument()
    document.setHtml(field.display_message())
    assert document.toPlainText() == "Username cannot contain <& character !!!"
