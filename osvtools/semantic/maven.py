"""Maven version ordering, following Maven's ComparableVersion rules."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from itertools import zip_longest

from osvtools.semantic.version import Version, parse_int

_NON_DIGIT_THEN_DIGIT = re.compile(r"[^0-9][0-9]")
_DIGIT_THEN_NON_DIGIT = re.compile(r"[0-9][^0-9]")

_KEYWORD_ORDER = ("alpha", "beta", "milestone", "rc", "snapshot", "", "sp")
_SHORT_QUALIFIERS = {"a": "alpha", "b": "beta", "m": "milestone"}
_NULL_VALUES = frozenset({"0", "", "final", "ga"})


def _keyword_index(keyword: str) -> int:
    try:
        return _KEYWORD_ORDER.index(keyword)
    except ValueError:
        return len(_KEYWORD_ORDER)


@dataclass(frozen=True)
class _Token:
    prefix: str
    value: str
    is_null: bool = field(default=False, compare=False)

    @property
    def is_number(self) -> bool:
        return parse_int(self.value) is not None

    def qualifier_order(self) -> int:
        # ".qualifier" < "-qualifier" < "-number" < ".number"
        if self.is_number:
            if self.prefix == "-":
                return 2
            if self.prefix == ".":
                return 3
        if self.prefix == "-":
            return 1
        if self.prefix == ".":
            return 0
        raise ValueError(f"unknown prefix '{self.prefix}'")

    def should_trim(self) -> bool:
        return self.value in _NULL_VALUES

    def less_than(self, other: _Token) -> bool:
        if self.prefix != other.prefix:
            return self.qualifier_order() < other.qualifier_order()

        left = parse_int(self.value)
        right = parse_int(other.value)

        if left is not None and right is not None:
            return left < right

        # numerics sort after qualifiers, unless they are padding
        if left is not None and not self.is_null:
            return False
        if right is not None and not other.is_null:
            return True

        left_index = _keyword_index(self.value)
        right_index = _keyword_index(other.value)

        if left_index == len(_KEYWORD_ORDER) and right_index == len(_KEYWORD_ORDER):
            return self.value < other.value

        return left_index < right_index


def _null_token(token: _Token) -> _Token:
    """Padding that stands opposite ``token`` in the shorter version."""
    if token.prefix == ".":
        # "sp" is the only qualifier ordered after an empty value
        return _Token(".", "" if token.value == "sp" else "0", True)
    if token.prefix == "-":
        return _Token("-", "", True)
    raise ValueError(f"unknown prefix '{token.prefix}' (value: '{token.value}')")


def _find_transitions(token: str) -> list[int]:
    """Offsets where the token switches between digits and non-digits."""
    points = [m.start() + 1 for m in _NON_DIGIT_THEN_DIGIT.finditer(token)]
    points += [m.start() + 1 for m in _DIGIT_THEN_NON_DIGIT.finditer(token)]
    return sorted(points)


def _split_keeping_delimiters(text: str) -> list[str]:
    return re.split(r"([-.])", text)


def _normalize(current: str, followed_by_more: bool) -> str:
    current = current.lower() or "0"

    if current == "cr":
        current = "rc"
    if current in ("ga", "final", "release"):
        current = ""
    if followed_by_more:
        current = _SHORT_QUALIFIERS.get(current, current)

    number = parse_int(current)
    if number is not None:
        current = str(number)

    return current


def _tokenize(text: str) -> list[_Token]:
    raw = _split_keeping_delimiters(text)
    tokens: list[_Token] = []

    for position in range(0, len(raw), 2):
        part = raw[position]
        prefix = raw[position - 1] if position else ""

        start = 0
        ends = [*_find_transitions(part), len(part)]
        for count, end in enumerate(ends):
            if count:
                prefix = "-"
            tokens.append(_Token(prefix, _normalize(part[start:end], end != len(part))))
            start = end

    return tokens


def _trim(tokens: list[_Token]) -> list[_Token]:
    """Drop trailing null values, repeating at each hyphen from the end."""
    i = len(tokens) - 1
    while i > 0:
        if tokens[i].should_trim():
            del tokens[i]
            i -= 1
            continue
        while i >= 0 and tokens[i].prefix != "-":
            i -= 1
        i -= 1
    return tokens


@dataclass(frozen=True)
class MavenVersion(Version):
    """A Maven version as a sequence of prefixed tokens."""

    tokens: tuple[_Token, ...]

    def _less_than(self, other: MavenVersion) -> bool:
        for left, right in zip_longest(self.tokens, other.tokens):
            if left is None:
                left = _null_token(right)
            if right is None:
                right = _null_token(left)
            if left == right:
                continue
            return left.less_than(right)
        return False

    def compare(self, other: MavenVersion) -> int:
        if self.tokens == other.tokens:
            return 0
        return -1 if self._less_than(other) else 1

    def compare_str(self, text: str) -> int:
        return self.compare(parse_maven_version(text))


def parse_maven_version(text: str) -> MavenVersion:
    """Parse ``text`` as a Maven version."""
    return MavenVersion(tuple(_trim(_tokenize(text))))