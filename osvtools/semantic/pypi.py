"""PyPI version ordering per PEP 440, with a fallback for legacy versions."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from osvtools.semantic.version import Version, compare_components, parse_int

_WS = r"[\t\n\f\r ]*"

_PEP440 = re.compile(
    r"^" + _WS + r"v?(?:(?:(?P<epoch>[0-9]+)!)?(?P<release>[0-9]+(?:\.[0-9]+)*)"
    r"(?P<pre>[-_\.]?(?P<pre_l>(a|b|c|rc|alpha|beta|pre|preview))[-_\.]?(?P<pre_n>[0-9]+)?)?"
    r"(?P<post>(?:-(?P<post_n1>[0-9]+))|(?:[-_\.]?(?P<post_l>post|rev|r)[-_\.]?(?P<post_n2>[0-9]+)?))?"
    r"(?P<dev>[-_\.]?(?P<dev_l>dev)[-_\.]?(?P<dev_n>[0-9]+)?)?)"
    r"(?:\+(?P<local>[a-z0-9]+(?:[-_\.][a-z0-9]+)*))?" + _WS + r"\Z"
)

_LOCAL_SEPARATORS = re.compile(r"[._-]")
_LEGACY_PARTS = re.compile(r"([0-9]+|[a-z]+|\.|-)")

_LETTER_ALIASES = {
    "alpha": "a",
    "beta": "b",
    "c": "rc",
    "pre": "rc",
    "preview": "rc",
    "rev": "post",
    "r": "post",
}

_LEGACY_ALIASES = {
    "pre": "c",
    "preview": "c",
    "-": "final-",
    "rc": "c",
    "dev": "@",
}

_PRE_ORDER = ("a", "b", "rc")


def _sign(a, b) -> int:
    return (a > b) - (a < b)


@dataclass(frozen=True)
class _LetterNumber:
    letter: str = ""
    number: int | None = None


def _parse_letter_version(letter: str, number: str) -> _LetterNumber:
    if letter:
        # a pre-release without a numeral has an implicit 0
        letter = letter.lower()
        return _LetterNumber(_LETTER_ALIASES.get(letter, letter), int(number or "0"))

    if number:
        # a bare number is the implicit post release syntax (e.g. 1.0-1)
        return _LetterNumber("post", int(number))

    return _LetterNumber()


def _parse_local_version(local: str) -> tuple[str, ...]:
    return tuple(part.lower() for part in _LOCAL_SEPARATORS.split(local))


def _normalize_legacy_part(part: str) -> str:
    part = _LEGACY_ALIASES.get(part, part)
    if "0" <= part[:1] <= "9" and part[:1] != "":
        # pad for numeric comparison
        return part.rjust(8, "0")
    return "*" + part


def _parse_legacy_parts(text: str) -> tuple[str, ...]:
    parts: list[str] = []
    splits = [m.group(0) for m in _LEGACY_PARTS.finditer(text)]
    splits.append("final")

    for raw in splits:
        if raw in ("", "."):
            continue

        part = _normalize_legacy_part(raw)

        if part.startswith("*"):
            if part < "*final":
                while parts and parts[-1] == "*final-":
                    parts.pop()
            while parts and parts[-1] == "00000000":
                parts.pop()

        parts.append(part)

    return tuple(parts)


@dataclass(frozen=True)
class PyPIVersion(Version):
    """A PEP 440 version, or a legacy version when ``legacy`` is non-empty."""

    epoch: int = 0
    release: tuple[int, ...] = ()
    pre: _LetterNumber = _LetterNumber()
    post: _LetterNumber = _LetterNumber()
    dev: _LetterNumber = _LetterNumber()
    local: tuple[str, ...] = ()
    legacy: tuple[str, ...] = ()

    def _compare_legacy(self, other: PyPIVersion) -> int:
        # legacy versions always sort before PEP 440 versions
        if not self.legacy and not other.legacy:
            return 0
        if not self.legacy:
            return 1
        if not other.legacy:
            return -1
        return _sign("".join(self.legacy), "".join(other.legacy))

    def _compare_epoch(self, other: PyPIVersion) -> int:
        return _sign(self.epoch, other.epoch)

    def _compare_release(self, other: PyPIVersion) -> int:
        return compare_components(self.release, other.release)

    def _pre_index(self) -> int:
        try:
            return _PRE_ORDER.index(self.pre.letter)
        except ValueError:
            raise ValueError(f"unknown prefix {self.pre.letter}") from None

    def _applies_pre_trick(self) -> bool:
        # ensures e.g. 1.0.dev0 sorts before 1.0a0
        return (
            self.pre.number is None
            and self.post.number is None
            and self.dev.number is not None
        )

    def _compare_pre(self, other: PyPIVersion) -> int:
        mine, theirs = self._applies_pre_trick(), other._applies_pre_trick()
        if mine and theirs:
            return 0
        if mine:
            return -1
        if theirs:
            return 1
        if self.pre.number is None and other.pre.number is None:
            return 0
        if self.pre.number is None:
            return 1
        if other.pre.number is None:
            return -1

        left, right = self._pre_index(), other._pre_index()
        if left == right:
            return _sign(self.pre.number, other.pre.number)
        return _sign(left, right)

    def _compare_post(self, other: PyPIVersion) -> int:
        if self.post.number is None and other.post.number is None:
            return 0
        if self.post.number is None:
            return -1
        if other.post.number is None:
            return 1
        return _sign(self.post.number, other.post.number)

    def _compare_dev(self, other: PyPIVersion) -> int:
        if self.dev.number is None and other.dev.number is None:
            return 0
        if self.dev.number is None:
            return 1
        if other.dev.number is None:
            return -1
        return _sign(self.dev.number, other.dev.number)

    def _compare_local(self, other: PyPIVersion) -> int:
        for left, right in zip(self.local, other.local):
            left_num = parse_int(left)
            right_num = parse_int(right)

            if left_num is not None and right_num is not None:
                result = _sign(left_num, right_num)
            elif left_num is None and right_num is None:
                result = _sign(left, right)
            elif left_num is not None:
                # numeric segments sort after lexicographic ones
                result = 1
            else:
                result = -1

            if result != 0:
                return result

        return _sign(len(self.local), len(other.local))

    def compare(self, other: PyPIVersion) -> int:
        steps: tuple[Callable[[PyPIVersion], int], ...] = (
            self._compare_legacy,
            self._compare_epoch,
            self._compare_release,
            self._compare_pre,
            self._compare_post,
            self._compare_dev,
            self._compare_local,
        )
        for step in steps:
            diff = step(other)
            if diff != 0:
                return diff
        return 0

    def compare_str(self, text: str) -> int:
        return self.compare(parse_pypi_version(text))


def parse_pypi_version(text: str) -> PyPIVersion:
    """Parse ``text`` as a PEP 440 version, falling back to legacy parsing."""
    text = text.lower()
    match = _PEP440.match(text)

    if match is None:
        return PyPIVersion(epoch=-1, legacy=_parse_legacy_parts(text))

    def group(name: str) -> str:
        return match.group(name) or ""

    return PyPIVersion(
        epoch=int(group("epoch") or "0"),
        release=tuple(int(r) for r in group("release").split(".")),
        pre=_parse_letter_version(group("pre_l"), group("pre_n")),
        post=_parse_letter_version(
            group("post_l"), group("post_n1") or group("post_n2")
        ),
        dev=_parse_letter_version(group("dev_l"), group("dev_n")),
        local=_parse_local_version(group("local")),
    )