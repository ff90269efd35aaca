"""Tests for display formatters."""

from utils.formatters import (format_code_point, format_code_points,
                              format_violation_message, format_current_input)


def test_format_code_point():
    assert format_code_point("!") == "U+0021"
    assert format_code_point(0x1F600) == "U+1F600"
    assert format_code_points("!@") == "U+0021 U+0040"


def test_format_violation_message():
    template = "{label} cannot contain {chars} character !!!"
    assert format_violation_message(template, "Username", "!") == "Username cannot contain ! character !!!"
    assert format_violation_message(template, "Username", "") == ""
    assert format_violation_message("Digits only", "Age", "a") == "Digits only"


def test_format_current_input():
    assert format_current_input("neko") == "Current input: neko"
    assert format_current_input("") == "Current input: N/A"
