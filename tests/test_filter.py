"""Tests for the restriction filter."""

from restriction.code_point_set import CodePointSet
from restriction.filter import (RestrictionFilter, ViolationReport, EMPTY_REPORT,
                                process, find_violations, contains_violation)


SAMPLES = ["", "abc", "a!b@c!", "hi😀 there", "é", "!!!", "a\ud800b"]


def test_hysteresis_keeps_previous_violation():
    result = process("ab!", "ab", {"!"})
    assert result.corrected == "ab"
    assert result.report
    assert result.report.display == "!"
    assert not result.changed


def test_clean_input():
    result = process("ab", "abc", {"!", "@"})
    assert result.corrected == "abc"
    assert result.report.display == ""
    assert not result.report


def test_digits_only_policy():
    digits_only = CodePointSet.from_range("0", "9").inverted()
    result = process("1", "1a2", digits_only)
    assert result.corrected == "12"
    assert "a" in result.report.code_points
    assert result.changed


def test_emoji_by_range_policy():
    emoticons = CodePointSet.from_range(0x1F600, 0x1F64F)
    result = process("hi", "hi😀", emoticons)
    assert result.corrected == "hi"
    assert "😀" in result.report.code_points


def test_report_is_ordered_and_keeps_duplicates():
    result = process("", "a!b@c!", "!@")
    assert result.corrected == "abc"
    assert result.report.code_points == ("!", "@", "!")
    assert result.report.unique() == ("!", "@")
    assert result.error_message == "!@!"


def test_result_unpacks():
    corrected, report, changed = process("", "x#", "#")
    assert corrected == "x"
    assert report == ViolationReport(("#",))
    assert changed


def test_no_residue_and_idempotence():
    disallowed = CodePointSet.from_characters("!@ ") | CodePointSet.from_range(0x1F600, 0x1F64F)
    for sample in SAMPLES:
        corrected = process("", sample, disallowed).corrected
        assert not any(ch in disallowed for ch in corrected)
        again = process("whatever", corrected, disallowed)
        assert again.corrected == corrected
        assert not again.changed


def test_order_preserved_and_report_accurate():
    disallowed = CodePointSet.from_characters("!@ ")
    for sample in SAMPLES:
        result = process("", sample, disallowed)
        assert result.corrected == "".join(ch for ch in sample if ch not in disallowed)
        assert list(result.report) == [ch for ch in sample if ch in disallowed]


def test_last_report_is_retained_on_dirty_previous():
    kept = ViolationReport(("#",))
    result = process("ab!", "ab", "!", last_report=kept)
    assert result.report is kept


def test_clean_previous_clears_last_report():
    result = process("ab", "abc", "!", last_report=ViolationReport(("!",)))
    assert result.report == EMPTY_REPORT


def test_lone_surrogate_is_an_ordinary_code_point():
    result = process("", "a\ud800b", CodePointSet.from_code_points([0xD800]))
    assert result.corrected == "ab"
    assert result.report.code_points == ("\ud800",)


def test_filtering_is_per_code_point_not_per_grapheme():
    result = process("", "e\u0301", CodePointSet.from_code_points([0x0301]))
    assert result.corrected == "e"

    family = "\U0001F468\u200d\U0001F469"
    result = process("", family, CodePointSet.from_code_points([0x200D]))
    assert result.corrected == "\U0001F468\U0001F469"


def test_helpers():
    assert contains_violation("a!", "!")
    assert not contains_violation("a", "!")
    assert find_violations("a!b!", "!").display == "!!"
    assert ViolationReport(("!", "@")).describe() == "U+0021 U+0040"
    assert str(ViolationReport(("!",))) == "!"


def test_restriction_filter_sequence():
    restriction = RestrictionFilter("!")

    result = restriction.handle_edit("", "ab!")
    assert result.corrected == "ab"
    assert restriction.error_message == "!"

    # Surface settles from the dirty value to the corrected one
    result = restriction.handle_edit("ab!", "ab")
    assert result.corrected == "ab"
    assert restriction.error_message == "!"

    result = restriction.handle_edit("ab", "abc")
    assert result.corrected == "abc"
    assert restriction.error_message == ""


def test_restriction_filter_helpers():
    restriction = RestrictionFilter({" ", "$"})
    assert restriction.strip("a b$c") == "abc"
    assert restriction.violations("a b$").display == " $"
    assert restriction.contains_violation("$")
    restriction.handle_edit("", "$")
    restriction.reset()
    assert restriction.report == EMPTY_REPORT
    assert restriction.characters == CodePointSet.from_characters(" $")


def test_explicit_empty_last_report_is_kept():
    result = process("ab!", "ab", "!", last_report=EMPTY_REPORT)
    assert result.report == EMPTY_REPORT

    restriction = RestrictionFilter("!")
    restriction.handle_edit("ab!", "ab")
    assert restriction.error_message == ""
