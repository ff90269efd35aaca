#!/usr/bin/env python3
"""
Restriction Presets

Ready-made disallowed sets for common field policies.
"""

from dataclasses import dataclass
from typing import Callable, Dict

from config.constants import (PRESET_LABELS, SPECIAL_CHARACTERS, USERNAME_SYMBOLS,
                              FULLWIDTH_KATAKANA, HALFWIDTH_KATAKANA)

from . import code_point_set
from .code_point_set import CodePointSet


def letters_and_underscore() -> CodePointSet:
    """Refuse everything except letters and underscore"""
    return code_point_set.letters().inverted().removing("_")


def digits_only() -> CodePointSet:
    """Refuse everything except decimal digits (any script)"""
    return code_point_set.decimal_digits().inverted()


def ascii_digits_only() -> CodePointSet:
    """Refuse everything except 0-9"""
    return CodePointSet.from_range("0", "9").inverted()


def whitespace_and_symbols(symbols: str = USERNAME_SYMBOLS) -> CodePointSet:
    """Refuse whitespace plus the given symbols"""
    return code_point_set.whitespaces().union(symbols)


def katakana() -> CodePointSet:
    """Refuse full-width and half-width katakana"""
    return CodePointSet([FULLWIDTH_KATAKANA, HALFWIDTH_KATAKANA])


def emoji_blocks() -> CodePointSet:
    return code_point_set.emoji()


def name_field() -> CodePointSet:
    """Refuse anything that is not alphanumeric, and symbols"""
    return code_point_set.alphanumerics().inverted().union(code_point_set.symbols())


def special_characters() -> CodePointSet:
    return CodePointSet.from_characters(SPECIAL_CHARACTERS)


def custom(characters: str) -> CodePointSet:
    """Refuse exactly *characters*"""
    return CodePointSet.from_characters(characters)


@dataclass(frozen=True)
class Preset:
    key: str
    label: str
    factory: Callable[[], CodePointSet]

    def build(self) -> CodePointSet:
        return self.factory()


PRESETS: Dict[str, Preset] = {
    key: Preset(key, PRESET_LABELS[key], factory)
    for key, factory in (
        ('letters_underscore', letters_and_underscore),
        ('digits_only', digits_only),
        ('whitespace_symbols', whitespace_and_symbols),
        ('katakana', katakana),
        ('emoji', emoji_blocks),
        ('name_field', name_field),
        ('ascii_digits_only', ascii_digits_only),
        ('special_characters', special_characters),
    )
}


def get_preset(key: str) -> Preset:
    try:
        return PRESETS[key]
    except KeyError:
        raise KeyError(f"Unknown preset {key!r}; known presets: {', '.join(PRESETS)}") from None
