#!/usr/bin/env python3
"""
Code Point Sets

Immutable sets of Unicode code points used to describe which characters a
restricted text field refuses. A set is stored as a sorted tuple of disjoint
inclusive ranges, so "everything except digits" costs a handful of ranges
instead of a million members.
"""

import unicodedata
from bisect import bisect_right
from functools import lru_cache
from typing import Callable, Dict, Iterable, Iterator, List, Tuple, Union

from config.constants import EMOJI_BLOCKS
from utils.formatters import format_code_point


MAX_CODE_POINT = 0x10FFFF

CodePointLike = Union[int, str]
Range = Tuple[int, int]


def _to_code_point(value: CodePointLike) -> int:
    """Convert an int or one-character string to a validated code point"""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"Expected a single character, got {value!r}")
        return ord(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected an int or a single character, got {type(value).__name__}")
    if not 0 <= value <= MAX_CODE_POINT:
        raise ValueError(f"Code point {value:#x} is outside 0..{MAX_CODE_POINT:#x}")
    return value


def _normalize(ranges: Iterable[Range]) -> Tuple[Range, ...]:
    """Sort ranges and merge the overlapping or adjacent ones"""
    merged: List[List[int]] = []
    for first, last in sorted(ranges):
        if merged and first <= merged[-1][1] + 1:
            if last > merged[-1][1]:
                merged[-1][1] = last
        else:
            merged.append([first, last])
    return tuple((first, last) for first, last in merged)


class CodePointSet:
    """
    Immutable set of Unicode code points.

    Supports membership tests with ints or one-character strings, plus union,
    intersection, difference and inversion. Every operation returns a new set.
    """

    __slots__ = ('_ranges', '_starts')

    def __init__(self, ranges: Iterable[Tuple[CodePointLike, CodePointLike]] = ()):
        pairs = []
        for first, last in ranges:
            lo, hi = _to_code_point(first), _to_code_point(last)
            if lo > hi:
                raise ValueError(f"Range start {format_code_point(lo)} is after end {format_code_point(hi)}")
            pairs.append((lo, hi))
        self._set_ranges(_normalize(pairs))

    def _set_ranges(self, ranges: Tuple[Range, ...]):
        object.__setattr__(self, '_ranges', ranges)
        object.__setattr__(self, '_starts', tuple(first for first, _ in ranges))

    def __setattr__(self, name, value):
        raise AttributeError("CodePointSet is immutable")

    @classmethod
    def _from_normalized(cls, ranges: Tuple[Range, ...]) -> 'CodePointSet':
        instance = cls.__new__(cls)
        instance._set_ranges(ranges)
        return instance

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_characters(cls, text: str) -> 'CodePointSet':
        """Set containing every code point of *text*"""
        return cls._from_normalized(_normalize((ord(ch), ord(ch)) for ch in text))

    @classmethod
    def from_range(cls, first: CodePointLike, last: CodePointLike) -> 'CodePointSet':
        """Inclusive range, bounds given as ints or single characters"""
        return cls([(first, last)])

    @classmethod
    def from_ranges(cls, ranges: Iterable[Tuple[CodePointLike, CodePointLike]]) -> 'CodePointSet':
        return cls(ranges)

    @classmethod
    def from_code_points(cls, code_points: Iterable[int]) -> 'CodePointSet':
        return cls((cp, cp) for cp in code_points)

    @classmethod
    def from_predicate(cls, predicate: Callable[[int], bool]) -> 'CodePointSet':
        """Evaluate *predicate* once for every code point and keep the matches"""
        ranges = []
        start = None
        for code_point in range(MAX_CODE_POINT + 1):
            if predicate(code_point):
                if start is None:
                    start = code_point
            elif start is not None:
                ranges.append((start, code_point - 1))
                start = None
        if start is not None:
            ranges.append((start, MAX_CODE_POINT))
        return cls._from_normalized(tuple(ranges))

    @classmethod
    def from_categories(cls, *prefixes: str) -> 'CodePointSet':
        """Code points whose Unicode general category starts with any of *prefixes*"""
        if not prefixes:
            return cls()
        wanted = tuple(prefixes)
        ranges = [pair
                  for category, pairs in _category_ranges().items()
                  if category.startswith(wanted)
                  for pair in pairs]
        return cls._from_normalized(_normalize(ranges))

    @classmethod
    def coerce(cls, value) -> 'CodePointSet':
        """
        Normalize the accepted ways of describing a disallowed set.

        Accepts a CodePointSet, a string of characters, a predicate taking a
        code point int, or an iterable of characters / strings / ints.
        """
        if isinstance(value, CodePointSet):
            return value
        if isinstance(value, str):
            return cls.from_characters(value)
        if callable(value):
            return cls.from_predicate(value)
        if isinstance(value, (set, frozenset, list, tuple)):
            code_points = []
            for item in value:
                if isinstance(item, str):
                    code_points.extend(ord(ch) for ch in item)
                else:
                    code_points.append(_to_code_point(item))
            return cls.from_code_points(code_points)
        raise TypeError(f"Cannot build a CodePointSet from {type(value).__name__}")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def ranges(self) -> Tuple[Range, ...]:
        return self._ranges

    def contains(self, code_point) -> bool:
        """Membership test; anything that is not a code point is not a member"""
        if isinstance(code_point, str):
            if len(code_point) != 1:
                return False
            code_point = ord(code_point)
        elif isinstance(code_point, bool) or not isinstance(code_point, int):
            return False
        index = bisect_right(self._starts, code_point) - 1
        return index >= 0 and code_point <= self._ranges[index][1]

    __contains__ = contains

    def iter_code_points(self) -> Iterator[int]:
        for first, last in self._ranges:
            yield from range(first, last + 1)

    def __len__(self) -> int:
        return sum(last - first + 1 for first, last in self._ranges)

    def __bool__(self) -> bool:
        return bool(self._ranges)

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def union(self, other) -> 'CodePointSet':
        other = CodePointSet.coerce(other)
        return CodePointSet._from_normalized(_normalize(self._ranges + other._ranges))

    def inverted(self) -> 'CodePointSet':
        """Complement within 0..MAX_CODE_POINT"""
        gaps = []
        start = 0
        for first, last in self._ranges:
            if first > start:
                gaps.append((start, first - 1))
            start = last + 1
        if start <= MAX_CODE_POINT:
            gaps.append((start, MAX_CODE_POINT))
        return CodePointSet._from_normalized(tuple(gaps))

    def intersection(self, other) -> 'CodePointSet':
        other = CodePointSet.coerce(other)
        result = []
        i = j = 0
        left, right = self._ranges, other._ranges
        while i < len(left) and j < len(right):
            lo = max(left[i][0], right[j][0])
            hi = min(left[i][1], right[j][1])
            if lo <= hi:
                result.append((lo, hi))
            if left[i][1] < right[j][1]:
                i += 1
            else:
                j += 1
        return CodePointSet._from_normalized(tuple(result))

    def difference(self, other) -> 'CodePointSet':
        return self.intersection(CodePointSet.coerce(other).inverted())

    def removing(self, characters) -> 'CodePointSet':
        """Same set without *characters*"""
        return self.difference(characters)

    __or__ = union
    __and__ = intersection
    __sub__ = difference

    def __invert__(self) -> 'CodePointSet':
        return self.inverted()

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if not isinstance(other, CodePointSet):
            return NotImplemented
        return self._ranges == other._ranges

    def __hash__(self) -> int:
        return hash(self._ranges)

    def __repr__(self) -> str:
        parts = []
        for first, last in self._ranges[:8]:
            if first == last:
                parts.append(format_code_point(first))
            else:
                parts.append(f"{format_code_point(first)}-{format_code_point(last)}")
        if len(self._ranges) > 8:
            parts.append(f"... {len(self._ranges) - 8} more")
        return f"CodePointSet([{', '.join(parts)}])"


# Named sets, built from the Unicode database on first use

@lru_cache(maxsize=None)
def _category_ranges() -> Dict[str, Tuple[Range, ...]]:
    """Runs of code points per Unicode general category, from one pass over the database"""
    table: Dict[str, List[Range]] = {}
    start = 0
    current = unicodedata.category(chr(0))
    for code_point in range(1, MAX_CODE_POINT + 1):
        category = unicodedata.category(chr(code_point))
        if category != current:
            table.setdefault(current, []).append((start, code_point - 1))
            start, current = code_point, category
    table.setdefault(current, []).append((start, MAX_CODE_POINT))
    return {category: tuple(pairs) for category, pairs in table.items()}


@lru_cache(maxsize=None)
def letters() -> CodePointSet:
    """Letters and marks (categories L* and M*)"""
    return CodePointSet.from_categories('L', 'M')


@lru_cache(maxsize=None)
def decimal_digits() -> CodePointSet:
    return CodePointSet.from_categories('Nd')


@lru_cache(maxsize=None)
def whitespaces() -> CodePointSet:
    """Space separators plus horizontal tab"""
    return CodePointSet.from_categories('Zs').union('\t')


@lru_cache(maxsize=None)
def alphanumerics() -> CodePointSet:
    return CodePointSet.from_categories('L', 'M', 'N')


@lru_cache(maxsize=None)
def symbols() -> CodePointSet:
    return CodePointSet.from_categories('S')


@lru_cache(maxsize=None)
def punctuation() -> CodePointSet:
    return CodePointSet.from_categories('P')


@lru_cache(maxsize=None)
def emoji() -> CodePointSet:
    """Union of the common emoji blocks"""
    return CodePointSet(EMOJI_BLOCKS.values())
