"""Packagist (Composer) version ordering, modelled on PHP's version_compare."""

from __future__ import annotations

import re
from dataclasses import dataclass

from osvtools.semantic.version import Version, parse_int

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_SEPARATORS = re.compile(r"[-_+]")
_LETTER_THEN_DIGIT = re.compile(r"([^0-9.])([0-9])")
_DIGIT_THEN_LETTER = re.compile(r"([0-9])([^0-9.])")

_SPECIALS = ("dev", "a", "b", "rc", "#", "p")


def canonicalize_packagist_version(text: str) -> str:
    """Normalize separators and split letters from digits with dots."""
    if text.startswith("v"):
        text = text[1:]
    if text.startswith("V"):
        text = text[1:]

    text = _SEPARATORS.sub(".", text)
    text = _LETTER_THEN_DIGIT.sub(r"\1.\2", text)
    text = _DIGIT_THEN_LETTER.sub(r"\1.\2", text)
    return text


def _fits_machine_int(text: str) -> bool:
    number = parse_int(text)
    return number is not None and _INT64_MIN <= number <= _INT64_MAX


def _weigh(text: str) -> int:
    if text.startswith("RC"):
        return 3
    for weight, special in enumerate(_SPECIALS):
        if text.startswith(special):
            return weight
    return 0


def _compare_special(a: str, b: str) -> int:
    left, right = _weigh(a), _weigh(b)
    return (left > right) - (left < right)


def _compare_components(a: list[str], b: list[str]) -> int:
    for left, right in zip(a, b):
        left_num = parse_int(left)
        right_num = parse_int(right)

        if left_num is not None and right_num is not None:
            result = (left_num > right_num) - (left_num < right_num)
        elif left_num is None and right_num is None:
            result = _compare_special(left, right)
        elif left_num is not None:
            result = _compare_special("#", right)
        else:
            result = _compare_special(left, "#")

        if result != 0:
            return result

    if len(a) > len(b):
        if _fits_machine_int(a[len(b)]):
            return 1
        return _compare_components(a[len(b):], ["#"])

    if len(a) < len(b):
        if _fits_machine_int(b[len(a)]):
            return -1
        return _compare_components(["#"], b[len(a):])

    return 0


@dataclass(frozen=True)
class PackagistVersion(Version):
    """A Packagist version split into dot-separated components."""

    original: str
    components: tuple[str, ...]

    def compare(self, other: PackagistVersion) -> int:
        return _compare_components(list(self.components), list(other.components))

    def compare_str(self, text: str) -> int:
        return self.compare(parse_packagist_version(text))


def parse_packagist_version(text: str) -> PackagistVersion:
    """Parse ``text`` as a Packagist version."""
    return PackagistVersion(
        text, tuple(canonicalize_packagist_version(text).split("."))
    )