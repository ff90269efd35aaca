#!/usr/bin/env python3
"""
Restriction Filter

Strips disallowed code points from an edited value and keeps the violation
report a text field shows next to it.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, NamedTuple, Optional, Tuple

from utils.formatters import format_code_points

from .code_point_set import CodePointSet


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViolationReport:
    """Code points stripped by the most recent violating edit, in input order"""
    code_points: Tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.code_points)

    def __len__(self) -> int:
        return len(self.code_points)

    def __iter__(self) -> Iterator[str]:
        return iter(self.code_points)

    def __str__(self) -> str:
        return self.display

    @property
    def display(self) -> str:
        """Stripped code points joined for display"""
        return "".join(self.code_points)

    def unique(self) -> Tuple[str, ...]:
        """Distinct code points, first occurrence order"""
        return tuple(dict.fromkeys(self.code_points))

    def describe(self) -> str:
        """U+XXXX notation, for logs"""
        return format_code_points(self.code_points)


EMPTY_REPORT = ViolationReport()


class FilterResult(NamedTuple):
    corrected: str
    report: ViolationReport
    changed: bool = False

    @property
    def error_message(self) -> str:
        return self.report.display


def _partition(text: str, characters: CodePointSet) -> Tuple[List[str], List[str]]:
    kept: List[str] = []
    stripped: List[str] = []
    for ch in text:
        if ch in characters:
            stripped.append(ch)
        else:
            kept.append(ch)
    return kept, stripped


def find_violations(text: str, disallowed) -> ViolationReport:
    """Report every disallowed code point of *text* without changing it"""
    characters = CodePointSet.coerce(disallowed)
    return ViolationReport(tuple(ch for ch in text if ch in characters))


def contains_violation(text: str, disallowed) -> bool:
    characters = CodePointSet.coerce(disallowed)
    return any(ch in characters for ch in text)


def process(previous: str, incoming: str, disallowed,
            last_report: Optional[ViolationReport] = None) -> FilterResult:
    """
    Filter one edit of a restricted field.

    Args:
        previous: Value before the edit
        incoming: Value proposed by the input surface
        disallowed: CodePointSet or anything CodePointSet.coerce accepts
        last_report: Report currently shown for the field, if any

    Returns:
        FilterResult with the corrected value and the report to display.
        A clean edit only clears the report when *previous* was clean too;
        otherwise *last_report* is kept (or, when not given, the violations
        still present in *previous*). An explicit empty *last_report* is kept
        as well: a field that starts with a dirty value and no report stays
        without one on a clean edit.
    """
    characters = CodePointSet.coerce(disallowed)
    kept, stripped = _partition(incoming, characters)

    if stripped:
        report = ViolationReport(tuple(stripped))
        logger.debug("Stripped %d disallowed code point(s): %s", len(stripped), report.describe())
        return FilterResult("".join(kept), report, True)

    if not contains_violation(previous, characters):
        return FilterResult(incoming, EMPTY_REPORT)

    if last_report is None:
        last_report = find_violations(previous, characters)
    return FilterResult(incoming, last_report)


class RestrictionFilter:
    """
    Restriction state for one text field.

    Holds the disallowed set and the report currently displayed, and feeds
    both through process() on every edit.
    """

    def __init__(self, disallowed, logger: Optional[logging.Logger] = None):
        self._characters = CodePointSet.coerce(disallowed)
        self.report = EMPTY_REPORT
        self.logger = logger or logging.getLogger(__name__)

    @property
    def characters(self) -> CodePointSet:
        return self._characters

    @property
    def error_message(self) -> str:
        return self.report.display

    def handle_edit(self, previous: str, incoming: str) -> FilterResult:
        """Filter an edit and remember the resulting report"""
        result = process(previous, incoming, self._characters, self.report)
        if result.report != self.report:
            if result.report:
                self.logger.debug(f"Violation report set to {result.report.describe()}")
            else:
                self.logger.debug("Violation report cleared")
        self.report = result.report
        return result

    def reset(self):
        self.report = EMPTY_REPORT

    def contains_violation(self, text: str) -> bool:
        return contains_violation(text, self._characters)

    def violations(self, text: str) -> ViolationReport:
        return find_violations(text, self._characters)

    def strip(self, text: str) -> str:
        kept, _ = _partition(text, self._characters)
        return "".join(kept)
