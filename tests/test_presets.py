"""Tests for restriction presets."""

import pytest

from restriction import presets
from restriction.filter import process
from restriction.presets import PRESETS, get_preset


def test_letters_and_underscore():
    banned = presets.letters_and_underscore()
    assert "1" in banned
    assert "!" in banned
    assert " " in banned
    assert "a" not in banned
    assert "_" not in banned
    assert "あ" not in banned
    assert process("", "i_neko99", banned).corrected == "i_neko"


def test_digits_only():
    banned = presets.digits_only()
    assert "a" in banned
    assert "5" not in banned
    assert "٣" not in banned


def test_ascii_digits_only():
    banned = presets.ascii_digits_only()
    assert "٣" in banned
    assert process("1", "1a2", banned).corrected == "12"


def test_whitespace_and_symbols():
    banned = presets.whitespace_and_symbols()
    for ch in " !@#$":
        assert ch in banned
    assert "a" not in banned
    assert "_" not in banned
    assert "%" in presets.whitespace_and_symbols("%")


def test_katakana():
    banned = presets.katakana()
    assert "ア" in banned
    assert "ヶ" in banned
    assert "ｱ" in banned
    assert "あ" not in banned


def test_emoji_blocks():
    banned = presets.emoji_blocks()
    for ch in "\U0001F600\U0001F680\u2600\u2702\U0001F30D":
        assert ch in banned
    assert "a" not in banned


def test_name_field():
    banned = presets.name_field()
    for ch in "!+ $":
        assert ch in banned
    assert "a" not in banned
    assert "1" not in banned


def test_special_characters_and_custom():
    assert "\\" in presets.special_characters()
    assert "a" not in presets.special_characters()
    assert process("", "xabcy", presets.custom("abc")).corrected == "xy"


def test_registry():
    assert set(PRESETS) >= {"letters_underscore", "digits_only", "whitespace_symbols",
                            "katakana", "emoji"}
    preset = get_preset("whitespace_symbols")
    assert preset.build() == presets.whitespace_and_symbols()
    assert preset.label


def test_unknown_preset():
    with pytest.raises(KeyError, match="known presets"):
        get_preset("nope")
